"""Interactive mode: pick a model, name the copy, confirm each step."""

from rich.console import Console

from ollama_rename.cli.output import format_model, print_banner
from ollama_rename.daemon.client import OllamaClient
from ollama_rename.daemon.operations import ModelOperations
from ollama_rename.errors import (
    DestinationExistsError,
    NoModelsError,
    SourceLoadedError,
)
from ollama_rename.models.naming import suggest_name
from ollama_rename.models.registry import list_models, sort_for_selection
from ollama_rename.workflow.prompts import Prompter
from ollama_rename.workflow.rename import RenameOutcome, RenameRequest, rename_model


def run_interactive(
    client: OllamaClient,
    operations: ModelOperations,
    prompter: Prompter,
    console: Console,
) -> RenameOutcome | None:
    """Walk the user through one rename.

    Declining to overwrite the destination or to delete a loaded model
    ends the run cleanly rather than as an error.

    Returns:
        The rename outcome, or None if the user aborted.

    Raises:
        NoModelsError: If the daemon has no models installed.
    """
    print_banner(console, client.base_url, client.version())

    models = sort_for_selection(list_models(client))
    if not models:
        raise NoModelsError()

    index = prompter.choose_one(
        "Select a model to rename (copy)", [format_model(m) for m in models]
    )
    chosen = models[index]
    console.print(f"Selected: [green]{chosen.name}[/green]")

    new_name = prompter.ask_name("New model name", suggest_name(chosen.name))
    request = RenameRequest(source=chosen.name, destination=new_name)

    try:
        outcome = rename_model(
            request,
            client=client,
            operations=operations,
            prompter=prompter,
            console=console,
        )
    except DestinationExistsError:
        console.print("[yellow]Aborted (destination exists).[/yellow]")
        return None
    except SourceLoadedError:
        console.print("[yellow]Skipped delete.[/yellow]")
        return None

    if not outcome.original_deleted:
        console.print("[yellow]Kept original (alias copy).[/yellow]")
    console.print(
        "\n[bold]Done.[/bold]  You can now use: "
        f"[bold green]{outcome.destination}[/bold green]"
    )
    return outcome
