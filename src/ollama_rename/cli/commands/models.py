"""Model listing command."""

import click
from rich.console import Console

from ollama_rename.cli.context import require_daemon
from ollama_rename.cli.output import create_models_table
from ollama_rename.errors import DaemonHTTPError, DaemonUnreachableError
from ollama_rename.models.registry import (
    ModelRecord,
    list_models,
    loaded_models,
    sort_for_selection,
)


@click.command("list")
@click.pass_context
def list_command(ctx: click.Context) -> None:
    """List installed models, newest first."""
    require_daemon(ctx)
    client = ctx.obj["client"]
    fallback = ctx.obj.get("fallback")
    console: Console = ctx.obj["console"]

    try:
        models = sort_for_selection(list_models(client))
    except (DaemonHTTPError, DaemonUnreachableError) as e:
        if fallback is None:
            raise
        console.print(f"[yellow]API list failed ({e}). Falling back to CLI...[/yellow]")
        models = [ModelRecord(name=name) for name in fallback.list_models()]

    if not models:
        console.print("[yellow]No models found.[/yellow]")
        return

    console.print(create_models_table(models, loaded_models(client)))
