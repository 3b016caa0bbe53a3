"""Copy and delete with API-first, native-binary-second policy."""

import logging

from rich.console import Console

from ollama_rename.daemon.client import OllamaClient
from ollama_rename.daemon.fallback import CliFallback
from ollama_rename.errors import (
    DaemonHTTPError,
    DaemonUnreachableError,
    DeleteFailedError,
)

logger = logging.getLogger(__name__)


class ModelOperations:
    """Model mutations routed through the API, falling back to the CLI.

    Args:
        client: Daemon HTTP client.
        fallback: Native binary wrapper, or None to disable the fallback.
        console: Console used to announce fallbacks.
    """

    def __init__(
        self,
        client: OllamaClient,
        fallback: CliFallback | None = None,
        console: Console | None = None,
    ) -> None:
        self.client = client
        self.fallback = fallback
        self.console = console or Console(stderr=True)

    def copy(self, source: str, destination: str) -> None:
        """Copy source to destination.

        Raises:
            DaemonHTTPError: API rejected the copy and fallback is disabled.
            DaemonUnreachableError: API unreachable and fallback is disabled.
            CliFallbackError: The fallback binary failed.
        """
        try:
            self.client.copy(source, destination)
        except (DaemonHTTPError, DaemonUnreachableError) as e:
            if self.fallback is None:
                raise
            self._announce("copy", e)
            self.fallback.copy(source, destination)

    def delete(self, name: str) -> None:
        """Delete a model.

        Raises:
            DeleteFailedError: All API attempts failed and fallback is disabled.
            CliFallbackError: The fallback binary failed.
        """
        try:
            self.client.delete(name)
        except DeleteFailedError as e:
            if self.fallback is None:
                raise
            self._announce("delete", e)
            self.fallback.remove(name)

    def _announce(self, operation: str, error: Exception) -> None:
        logger.warning("API %s failed (%s). Falling back to CLI.", operation, error)
        self.console.print(
            f"[yellow]API {operation} failed ({error}). Falling back to CLI...[/yellow]"
        )
