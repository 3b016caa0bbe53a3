"""Daemon endpoint and runtime configuration models."""

import os

from pydantic import BaseModel, ConfigDict

DEFAULT_HOST = "127.0.0.1:11434"
HOST_ENV_VAR = "OLLAMA_HOST"


def resolve_base_url(host: str | None = None) -> str:
    """Resolve the daemon base URL.

    Priority is the explicit host, then the OLLAMA_HOST environment
    variable, then the default local address. A scheme is prepended when
    the value has none.

    Args:
        host: Explicit host override (e.g. from --host).

    Returns:
        Base URL without a trailing slash.
    """
    value = host or os.environ.get(HOST_ENV_VAR) or DEFAULT_HOST
    value = value.strip()
    if not value.startswith(("http://", "https://")):
        value = f"http://{value}"
    return value.rstrip("/")


class DaemonEndpoint(BaseModel):
    """Resolved address of the Ollama HTTP API."""

    model_config = ConfigDict(frozen=True)

    base_url: str

    @classmethod
    def resolve(cls, host: str | None = None) -> "DaemonEndpoint":
        """Build an endpoint from an optional explicit host."""
        return cls(base_url=resolve_base_url(host))

    def api_url(self, path: str) -> str:
        """Join the base URL and an API path with a single slash."""
        return f"{self.base_url.rstrip('/')}/{path.lstrip('/')}"


class Timeouts(BaseModel):
    """Per-call HTTP timeouts in seconds."""

    request: float = 10.0
    probe: float = 3.0
    delete: float = 60.0
    transfer: float = 3600.0


class RenamerConfig(BaseModel):
    """Settings for one renamer invocation.

    Args:
        endpoint: Daemon API endpoint.
        use_cli_fallback: Run the native binary when an API call fails.
        binary: Name or path of the native Ollama executable.
        timeouts: HTTP timeouts.
    """

    endpoint: DaemonEndpoint
    use_cli_fallback: bool = False
    binary: str = "ollama"
    timeouts: Timeouts = Timeouts()
