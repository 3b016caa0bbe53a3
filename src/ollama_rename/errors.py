"""Exception hierarchy for the renamer.

Every error raised for an expected failure derives from RenameError so the
CLI can report it as a one-line message and exit with status 1.
"""


class RenameError(RuntimeError):
    """Base class for all renamer failures."""


class DaemonHTTPError(RenameError):
    """HTTP status error returned by the daemon."""

    def __init__(self, *, action: str, status_code: int, detail: str) -> None:
        super().__init__(f"{action} failed with HTTP {status_code}: {detail}")
        self.action = action
        self.status_code = status_code
        self.detail = detail


class DaemonUnreachableError(RenameError):
    """Transport-level failure talking to the daemon."""

    def __init__(self, *, action: str, detail: str) -> None:
        super().__init__(f"{action} failed: {detail}")
        self.action = action
        self.detail = detail


class MalformedResponseError(RenameError):
    """Daemon response body did not have the expected shape."""

    def __init__(self, *, action: str, detail: str) -> None:
        super().__init__(f"{action} returned a malformed response: {detail}")
        self.action = action
        self.detail = detail


class DeleteFailedError(RenameError):
    """Every delete request shape was rejected by the daemon.

    Args:
        name: Model that could not be deleted.
        attempts: One description per attempted request, e.g. "DELETE -> 404".
    """

    def __init__(self, name: str, attempts: list[str]) -> None:
        super().__init__(f"Delete of '{name}' failed: {' / '.join(attempts)}")
        self.name = name
        self.attempts = attempts


class CliFallbackError(RenameError):
    """The native binary could not be run or exited non-zero."""

    def __init__(
        self, command: list[str], returncode: int | None, detail: str = ""
    ) -> None:
        shown = " ".join(command)
        if returncode is None:
            message = f"Failed to invoke `{shown}`: {detail}"
        else:
            message = f"`{shown}` returned non-zero status {returncode}"
        super().__init__(message)
        self.command = command
        self.returncode = returncode


class BootstrapError(RenameError):
    """Daemon is not reachable and could not be started."""


class InvalidNameError(RenameError, ValueError):
    """Model name does not match the naming grammar."""

    def __init__(self, name: str) -> None:
        super().__init__(
            f"Invalid name '{name}'. Use letters, numbers, . _ - / and optional :tag"
        )
        self.name = name


class SameNameError(RenameError):
    """Destination name equals the source name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Destination name equals source '{name}'; nothing to do.")
        self.name = name


class DestinationExistsError(RenameError):
    """Destination already exists and overwriting was not granted."""

    def __init__(self, name: str) -> None:
        super().__init__(
            f"Destination '{name}' already exists. Use --overwrite to replace it."
        )
        self.name = name


class SourceLoadedError(RenameError):
    """Source model is loaded and deleting it was not forced."""

    def __init__(self, name: str) -> None:
        super().__init__(
            f"Model '{name}' appears loaded (via /api/ps). Use --force to attempt "
            "delete anyway, or stop it first."
        )
        self.name = name


class PartialRenameError(RenameError):
    """Copy succeeded but deleting the original failed.

    Both models now exist; nothing is rolled back.
    """

    def __init__(self, source: str, destination: str, cause: Exception) -> None:
        super().__init__(
            f"Copied '{source}' -> '{destination}', but deleting the original "
            f"failed: {cause}. Both models now exist."
        )
        self.source = source
        self.destination = destination
        self.cause = cause


class NoModelsError(RenameError):
    """The daemon reports no installed models."""

    def __init__(self) -> None:
        super().__init__("No models found. Use `ollama pull ...` first.")
