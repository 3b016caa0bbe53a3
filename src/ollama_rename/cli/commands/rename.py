"""Non-interactive rename command."""

import click
from rich.console import Console

from ollama_rename.cli.context import require_daemon
from ollama_rename.workflow.prompts import NonInteractivePrompter
from ollama_rename.workflow.rename import RenameRequest, rename_model


@click.command("rename")
@click.option(
    "--from",
    "source",
    required=True,
    help='Source model as shown by `ollama list`, e.g. "qwen3-coder:latest".',
)
@click.option(
    "--to",
    "destination",
    required=True,
    help='Destination name, e.g. "NextCoder" or "myspace/nextcoder:latest".',
)
@click.option(
    "--delete-original",
    is_flag=True,
    help="Delete the original after the copy succeeds (acts like move).",
)
@click.option(
    "--force",
    is_flag=True,
    help="Delete even if the model appears loaded (not recommended).",
)
@click.option("--dry-run", is_flag=True, help="Show what would happen.")
@click.option(
    "--overwrite",
    is_flag=True,
    help="Replace the destination if it already exists (delete then copy).",
)
@click.pass_context
def rename(
    ctx: click.Context,
    source: str,
    destination: str,
    delete_original: bool,
    force: bool,
    dry_run: bool,
    overwrite: bool,
) -> None:
    """Rename a model without prompting (copy + optional delete)."""
    require_daemon(ctx)
    console: Console = ctx.obj["console"]
    request = RenameRequest(
        source=source,
        destination=destination,
        delete_original=delete_original,
        force=force,
        dry_run=dry_run,
        overwrite=overwrite,
    )
    rename_model(
        request,
        client=ctx.obj["client"],
        operations=ctx.obj["operations"],
        prompter=NonInteractivePrompter(),
        console=console,
    )
