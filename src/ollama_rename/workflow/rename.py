"""Safe rename: validate, guard, copy, then optionally delete the original.

Both entry points run the same procedure. Guards are granted either by a
request flag or by the prompter, so the interactive mode asks where the
flag-driven mode would fail.
"""

import logging

from pydantic import BaseModel, field_validator
from rich.console import Console

from ollama_rename.daemon.client import OllamaClient
from ollama_rename.daemon.operations import ModelOperations
from ollama_rename.errors import (
    DestinationExistsError,
    PartialRenameError,
    RenameError,
    SameNameError,
    SourceLoadedError,
)
from ollama_rename.models.naming import validate_model_name
from ollama_rename.models.registry import exists, is_running
from ollama_rename.workflow.prompts import Guard, Prompter

logger = logging.getLogger(__name__)


class RenameRequest(BaseModel):
    """A single rename, built from flags or from interactive answers."""

    source: str
    destination: str
    delete_original: bool = False
    force: bool = False
    dry_run: bool = False
    overwrite: bool = False

    @field_validator("source", "destination")
    @classmethod
    def _strip(cls, value: str) -> str:
        return value.strip()


class RenameOutcome(BaseModel):
    """What a rename actually did."""

    source: str
    destination: str
    dry_run: bool = False
    destination_replaced: bool = False
    copied: bool = False
    original_deleted: bool = False


def rename_model(
    request: RenameRequest,
    *,
    client: OllamaClient,
    operations: ModelOperations,
    prompter: Prompter,
    console: Console,
) -> RenameOutcome:
    """Copy a model to a new name and optionally delete the original.

    Args:
        request: What to rename and which guards are pre-granted.
        client: Daemon client used for existence and loaded checks.
        operations: Copy/delete with optional CLI fallback.
        prompter: Asked for any guard the request does not grant.
        console: Rich console for progress output.

    Returns:
        The outcome of the rename.

    Raises:
        InvalidNameError: Destination fails the naming grammar.
        SameNameError: Destination equals source, outside a dry run.
        DestinationExistsError: Destination exists and overwrite not granted.
        SourceLoadedError: Source is loaded and delete not forced. The copy
            has already been made.
        PartialRenameError: Copy succeeded but deleting the original failed.
    """
    source, destination = request.source, request.destination
    validate_model_name(destination)
    outcome = RenameOutcome(source=source, destination=destination)

    if request.dry_run:
        if request.overwrite:
            console.print(f"[dry-run] Would replace '{destination}' if it exists")
        console.print(f"[dry-run] Would copy '{source}' -> '{destination}'")
        if request.delete_original:
            console.print(f"[dry-run] Would delete original '{source}'")
        outcome.dry_run = True
        return outcome

    if source == destination:
        raise SameNameError(source)

    if exists(client, destination):
        granted = request.overwrite or prompter.confirm(
            Guard.OVERWRITE_DESTINATION,
            f"'{destination}' already exists. Overwrite (delete it first)?",
        )
        if not granted:
            raise DestinationExistsError(destination)
        logger.info("Replacing existing destination %s", destination)
        operations.delete(destination)
        outcome.destination_replaced = True

    console.print(
        f"[bold cyan]Copying[/bold cyan] [yellow]{source}[/yellow] -> "
        f"[yellow]{destination}[/yellow]"
    )
    operations.copy(source, destination)
    outcome.copied = True
    console.print("[green]Copy OK.[/green]")

    delete = request.delete_original or prompter.confirm(
        Guard.DELETE_ORIGINAL, f"Delete original '{source}' (i.e., move)?"
    )
    if not delete:
        return outcome

    if not request.force and is_running(client, source):
        proceed = prompter.confirm(
            Guard.DELETE_LOADED,
            "Model seems loaded (`ollama ps`). Stop it first. "
            "Proceed with delete anyway?",
        )
        if not proceed:
            raise SourceLoadedError(source)

    try:
        operations.delete(source)
    except RenameError as e:
        raise PartialRenameError(source, destination, e) from e
    outcome.original_deleted = True
    console.print("[green]Deleted original.[/green]")
    return outcome
