"""Native `ollama` binary invoked as a fallback for API operations."""

import logging
import shutil
import subprocess

from ollama_rename.errors import CliFallbackError

logger = logging.getLogger(__name__)


class CliFallback:
    """Runs subcommands of the native Ollama executable.

    Args:
        binary: Executable name or path.
    """

    def __init__(self, binary: str = "ollama") -> None:
        self.binary = binary

    def available(self) -> bool:
        """Return True if the executable is on the PATH."""
        return shutil.which(self.binary) is not None

    def version(self) -> str | None:
        """Return the output of `<binary> --version`, or None on failure."""
        try:
            result = subprocess.run(
                [self.binary, "--version"],
                capture_output=True,
                text=True,
                timeout=10,
            )
        except (OSError, subprocess.TimeoutExpired) as e:
            logger.debug("%s --version failed: %s", self.binary, e)
            return None
        if result.returncode != 0:
            return None
        return result.stdout.strip() or None

    def copy(self, source: str, destination: str) -> None:
        """Copy a model with `<binary> cp`."""
        self._run([self.binary, "cp", source, destination])

    def remove(self, name: str) -> None:
        """Delete a model with `<binary> rm`."""
        self._run([self.binary, "rm", name])

    def list_models(self) -> list[str]:
        """Return model names from `<binary> list`.

        Raises:
            CliFallbackError: If the binary cannot be run or fails.
        """
        command = [self.binary, "list"]
        try:
            result = subprocess.run(command, capture_output=True, text=True)
        except OSError as e:
            raise CliFallbackError(command, None, str(e)) from e
        if result.returncode != 0:
            raise CliFallbackError(command, result.returncode)

        names = []
        for line in result.stdout.splitlines()[1:]:
            fields = line.split()
            if fields:
                names.append(fields[0])
        return names

    def serve(self) -> None:
        """Start `<binary> serve` in the background without waiting."""
        command = [self.binary, "serve"]
        try:
            subprocess.Popen(
                command,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                start_new_session=True,
            )
        except OSError as e:
            raise CliFallbackError(command, None, str(e)) from e
        logger.info("Spawned `%s`", " ".join(command))

    def _run(self, command: list[str]) -> None:
        logger.info("Running `%s`", " ".join(command))
        try:
            result = subprocess.run(command)
        except OSError as e:
            raise CliFallbackError(command, None, str(e)) from e
        if result.returncode != 0:
            raise CliFallbackError(command, result.returncode)
