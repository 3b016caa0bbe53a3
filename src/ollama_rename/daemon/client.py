"""HTTP client for the Ollama daemon API.

Only the endpoints needed to list, copy and delete models are covered.
Errors are mapped onto the renamer exception hierarchy so callers never
see raw httpx exceptions.
"""

import logging
from typing import Any

import httpx

from ollama_rename.config import DaemonEndpoint, Timeouts
from ollama_rename.errors import (
    DaemonHTTPError,
    DaemonUnreachableError,
    DeleteFailedError,
    MalformedResponseError,
)

logger = logging.getLogger(__name__)

# Older daemons delete with DELETE, newer ones also accept POST.
DELETE_METHODS = ("DELETE", "POST")


class OllamaClient:
    """Synchronous client for the Ollama HTTP API.

    Args:
        endpoint: Resolved daemon endpoint.
        timeouts: Per-call timeouts.
        transport: Optional httpx transport, used by tests.
    """

    def __init__(
        self,
        endpoint: DaemonEndpoint,
        timeouts: Timeouts | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.endpoint = endpoint
        self.timeouts = timeouts or Timeouts()
        self.client = httpx.Client(timeout=self.timeouts.request, transport=transport)

    @property
    def base_url(self) -> str:
        return self.endpoint.base_url

    def probe(self) -> bool:
        """Check whether the API answers at all.

        Any HTTP status counts as alive; only transport failures do not.

        Returns:
            True if /api/version produced a response.
        """
        try:
            self.client.get(
                self.endpoint.api_url("/api/version"), timeout=self.timeouts.probe
            )
        except httpx.HTTPError as e:
            logger.debug("Liveness probe failed: %s", e)
            return False
        return True

    def version(self) -> str | None:
        """Return the daemon version string, or None if unavailable."""
        try:
            resp = self.client.get(
                self.endpoint.api_url("/api/version"), timeout=self.timeouts.probe
            )
            resp.raise_for_status()
            data = resp.json()
        except (httpx.HTTPError, ValueError):
            return None
        if isinstance(data, dict) and isinstance(data.get("version"), str):
            return data["version"]
        return None

    def list_tags(self) -> dict[str, Any]:
        """Fetch installed models from /api/tags.

        Returns:
            Decoded JSON object.

        Raises:
            DaemonHTTPError: On a non-success status.
            DaemonUnreachableError: On a transport failure.
            MalformedResponseError: If the body is not a JSON object.
        """
        action = "GET /api/tags"
        resp = self._send("GET", "/api/tags", action=action)
        if not resp.is_success:
            raise DaemonHTTPError(
                action=action, status_code=resp.status_code, detail=resp.text
            )
        return self._decode(resp, action)

    def list_running(self) -> dict[str, Any]:
        """Fetch loaded models from /api/ps.

        A non-success status means the endpoint is missing and is reported
        as nothing loaded.

        Raises:
            DaemonUnreachableError: On a transport failure.
            MalformedResponseError: If the body is not a JSON object.
        """
        action = "GET /api/ps"
        resp = self._send("GET", "/api/ps", action=action)
        if not resp.is_success:
            logger.debug("%s -> HTTP %s, treating as empty", action, resp.status_code)
            return {"models": []}
        return self._decode(resp, action)

    def copy(self, source: str, destination: str) -> None:
        """Copy a model under a new name via POST /api/copy.

        Raises:
            DaemonHTTPError: On a non-success status.
            DaemonUnreachableError: On a transport failure.
        """
        action = "POST /api/copy"
        resp = self._send(
            "POST",
            "/api/copy",
            action=action,
            json={"source": source, "destination": destination},
            timeout=self.timeouts.transfer,
        )
        if not resp.is_success:
            raise DaemonHTTPError(
                action=action, status_code=resp.status_code, detail=resp.text
            )
        logger.info("Copied %s -> %s via API", source, destination)

    def delete(self, name: str) -> None:
        """Delete a model, trying each request shape in DELETE_METHODS.

        Raises:
            DeleteFailedError: If no request shape succeeded.
        """
        attempts: list[str] = []
        for method in DELETE_METHODS:
            try:
                resp = self.client.request(
                    method,
                    self.endpoint.api_url("/api/delete"),
                    json={"model": name},
                    timeout=self.timeouts.delete,
                )
            except httpx.HTTPError as e:
                attempts.append(f"{method} -> {e}")
                continue
            if resp.is_success:
                logger.info("Deleted %s via %s /api/delete", name, method)
                return
            attempts.append(f"{method} -> HTTP {resp.status_code}")
        raise DeleteFailedError(name, attempts)

    def _send(
        self,
        method: str,
        path: str,
        *,
        action: str,
        json: dict[str, Any] | None = None,
        timeout: float | None = None,
    ) -> httpx.Response:
        kwargs: dict[str, Any] = {}
        if json is not None:
            kwargs["json"] = json
        if timeout is not None:
            kwargs["timeout"] = timeout
        try:
            return self.client.request(method, self.endpoint.api_url(path), **kwargs)
        except httpx.HTTPError as e:
            raise DaemonUnreachableError(action=action, detail=str(e)) from e

    @staticmethod
    def _decode(resp: httpx.Response, action: str) -> dict[str, Any]:
        try:
            data = resp.json()
        except ValueError as e:
            raise MalformedResponseError(action=action, detail=str(e)) from e
        if not isinstance(data, dict):
            raise MalformedResponseError(action=action, detail="expected a JSON object")
        return data

    def close(self) -> None:
        """Close the HTTP client."""
        self.client.close()

    def __enter__(self) -> "OllamaClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()
