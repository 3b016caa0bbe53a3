"""CLI entry point: bootstrap the daemon, then rename interactively or by flags."""

import logging
import os

import click
from rich.console import Console
from rich.logging import RichHandler

from ollama_rename import __version__
from ollama_rename.cli.commands.models import list_command
from ollama_rename.cli.commands.rename import rename
from ollama_rename.cli.context import require_daemon
from ollama_rename.cli.interactive import run_interactive
from ollama_rename.cli.prompts import TerminalPrompter
from ollama_rename.config import DaemonEndpoint, RenamerConfig
from ollama_rename.daemon.client import OllamaClient
from ollama_rename.daemon.fallback import CliFallback
from ollama_rename.daemon.operations import ModelOperations
from ollama_rename.errors import RenameError

console = Console()
err_console = Console(stderr=True)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _pause_if_detached() -> None:
    """Wait for Enter when the tool was likely started outside a terminal.

    Keeps the console window open long enough to read the error when the
    executable was double-clicked.
    """
    if "TERM" not in os.environ and "PROMPT" not in os.environ:
        click.pause("\nPress Enter to exit...")


class RenamerGroup(click.Group):
    """Group that reports RenameError as a one-line message and exit 1."""

    def invoke(self, ctx: click.Context) -> object:
        try:
            return super().invoke(ctx)
        except RenameError as e:
            err_console.print(f"\n[bold red]Error:[/bold red] {e}")
            _pause_if_detached()
            ctx.exit(1)


@click.group(cls=RenamerGroup, invoke_without_command=True)
@click.version_option(version=__version__, prog_name="ollama-rename")
@click.option(
    "--host",
    default=None,
    help="Ollama base URL (e.g. http://127.0.0.1:11434). "
    "Falls back to OLLAMA_HOST, then http://127.0.0.1:11434.",
)
@click.option(
    "--use-cli-fallback",
    is_flag=True,
    help="Run `ollama cp`/`ollama rm` if the API calls fail.",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(
    ctx: click.Context, host: str | None, use_cli_fallback: bool, verbose: bool
) -> None:
    """Interactive, safe model renamer for Ollama.

    Without a subcommand, picks a model and a new name interactively.
    """
    _configure_logging(verbose)

    config = RenamerConfig(
        endpoint=DaemonEndpoint.resolve(host),
        use_cli_fallback=use_cli_fallback,
    )
    client = OllamaClient(config.endpoint, config.timeouts)
    ctx.call_on_close(client.close)
    fallback = CliFallback(config.binary)
    enabled_fallback = fallback if config.use_cli_fallback else None
    operations = ModelOperations(client, enabled_fallback, err_console)

    ctx.ensure_object(dict)
    ctx.obj["config"] = config
    ctx.obj["client"] = client
    ctx.obj["operations"] = operations
    ctx.obj["fallback"] = enabled_fallback
    ctx.obj["binary"] = fallback
    ctx.obj["console"] = console

    # Default action: interactive rename
    if ctx.invoked_subcommand is None:
        require_daemon(ctx)
        run_interactive(client, operations, TerminalPrompter(console), console)


cli.add_command(rename)
cli.add_command(list_command)


def main() -> None:
    """Console script entry point."""
    cli()
