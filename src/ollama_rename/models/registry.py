"""Installed and loaded models as reported by the daemon.

Nothing is cached: every call re-fetches so results reflect the server at
call time.
"""

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError

from ollama_rename.daemon.client import OllamaClient
from ollama_rename.errors import MalformedResponseError, RenameError

logger = logging.getLogger(__name__)


class ModelRecord(BaseModel):
    """One entry of the /api/tags listing."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str
    size: Any = None
    modified_at: str | None = None


class _TagsResponse(BaseModel):
    models: list[ModelRecord]


class _RunningModel(BaseModel):
    name: str | None = None


class _PsResponse(BaseModel):
    models: list[_RunningModel] | None = None


def list_models(client: OllamaClient) -> list[ModelRecord]:
    """Fetch all installed models.

    Raises:
        DaemonHTTPError: On a non-success status.
        DaemonUnreachableError: On a transport failure.
        MalformedResponseError: If the listing does not decode.
    """
    payload = client.list_tags()
    try:
        return _TagsResponse.model_validate(payload).models
    except ValidationError as e:
        raise MalformedResponseError(action="GET /api/tags", detail=str(e)) from e


def loaded_models(client: OllamaClient) -> set[str]:
    """Return the names of models currently loaded by the daemon.

    Fails open: any error while asking the daemon yields an empty set, so
    an unavailable /api/ps never blocks a rename on its own.
    """
    try:
        payload = client.list_running()
        ps = _PsResponse.model_validate(payload)
    except (RenameError, ValidationError) as e:
        logger.warning("Could not determine loaded models, assuming none: %s", e)
        return set()
    return {m.name for m in ps.models or [] if m.name}


def is_running(client: OllamaClient, name: str) -> bool:
    """Check whether a model is loaded, by exact name."""
    return name in loaded_models(client)


def exists(client: OllamaClient, name: str) -> bool:
    """Return True if a model with exactly this name is installed."""
    return any(m.name == name for m in list_models(client))


def sort_for_selection(records: list[ModelRecord]) -> list[ModelRecord]:
    """Order models newest first, ties broken by name.

    Models without a modification time sort last.
    """
    by_name = sorted(records, key=lambda m: m.name)
    return sorted(
        by_name,
        key=lambda m: (m.modified_at is not None, m.modified_at or ""),
        reverse=True,
    )
