"""In-memory Ollama daemon for exercising the client without a server."""

import json
from typing import Any
from unittest.mock import MagicMock

import httpx

from ollama_rename.config import DaemonEndpoint
from ollama_rename.daemon.client import OllamaClient

TEST_BASE_URL = "http://ollama.test:11434"


class FakeDaemon:
    """Stateful stand-in for the daemon API, served via httpx.MockTransport.

    Args:
        models: Names of installed models.
        loaded: Names of models reported by /api/ps.
        fail: Map of "METHOD /path" to an HTTP status returned instead of
            the normal response.
        ps_status: Status returned by /api/ps (non-200 means missing).
    """

    def __init__(
        self,
        models: list[str] | None = None,
        loaded: list[str] | None = None,
        fail: dict[str, int] | None = None,
        ps_status: int = 200,
    ) -> None:
        self.models = list(models or [])
        self.loaded = list(loaded or [])
        self.fail = dict(fail or {})
        self.ps_status = ps_status
        self.requests: list[tuple[str, str, dict[str, Any] | None]] = []

    @property
    def calls(self) -> list[str]:
        """Requests received so far, as "METHOD /path" strings."""
        return [f"{method} {path}" for method, path, _ in self.requests]

    def handler(self, request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content) if request.content else None
        key = f"{request.method} {request.url.path}"
        self.requests.append((request.method, request.url.path, body))

        if key in self.fail:
            return httpx.Response(self.fail[key], text=f"{key} rejected")

        if key == "GET /api/version":
            return httpx.Response(200, json={"version": "0.6.0"})
        if key == "GET /api/tags":
            return httpx.Response(
                200,
                json={
                    "models": [
                        {"name": n, "size": 1024, "modified_at": "2025-01-01T00:00:00Z"}
                        for n in self.models
                    ]
                },
            )
        if key == "GET /api/ps":
            if self.ps_status != 200:
                return httpx.Response(self.ps_status)
            running = [{"name": n} for n in self.loaded]
            return httpx.Response(200, json={"models": running})
        if key == "POST /api/copy":
            if body["source"] not in self.models:
                return httpx.Response(404, json={"error": "model not found"})
            self.models.append(body["destination"])
            return httpx.Response(200)
        if key in ("DELETE /api/delete", "POST /api/delete"):
            if body["model"] not in self.models:
                return httpx.Response(404, json={"error": "model not found"})
            self.models.remove(body["model"])
            return httpx.Response(200)
        return httpx.Response(404)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


def create_fake_client(daemon: FakeDaemon) -> OllamaClient:
    """Create an OllamaClient wired to a FakeDaemon."""
    return OllamaClient(
        DaemonEndpoint(base_url=TEST_BASE_URL), transport=daemon.transport()
    )


def create_mock_fallback(available: bool = True) -> MagicMock:
    """Create a mock CliFallback.

    Args:
        available: Return value for available().

    Returns:
        MagicMock with CliFallback interface.
    """
    mock = MagicMock()
    mock.binary = "ollama"
    mock.available.return_value = available
    mock.version.return_value = "ollama version is 0.6.0"
    mock.list_models.return_value = []
    return mock
