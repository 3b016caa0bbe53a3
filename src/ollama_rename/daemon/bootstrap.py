"""Detect a stopped daemon and start it before any other call is made."""

import logging
import platform as platform_mod
import subprocess
import time

from rich.console import Console

from ollama_rename.daemon.client import OllamaClient
from ollama_rename.daemon.fallback import CliFallback
from ollama_rename.errors import BootstrapError, CliFallbackError

logger = logging.getLogger(__name__)

WINDOWS_SERVICE_NAME = "Ollama"
START_ATTEMPTS = 30
START_INTERVAL = 1.0


def detect_platform() -> str:
    """Detect how the daemon is started on this machine.

    Returns:
        'windows' when running on Windows, 'posix' otherwise.
    """
    if platform_mod.system() == "Windows":
        return "windows"
    return "posix"


def start_daemon(fallback: CliFallback) -> None:
    """Start the daemon without waiting for it to become ready.

    On Windows the registered service is tried first, then `ollama serve`
    in a new console window. Elsewhere `ollama serve` is spawned directly.

    Args:
        fallback: Native binary wrapper.

    Raises:
        BootstrapError: If the process could not be spawned.
    """
    if detect_platform() == "windows":
        try:
            result = subprocess.run(
                ["sc", "start", WINDOWS_SERVICE_NAME],
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
            )
            if result.returncode == 0:
                logger.info("Started Windows service %s", WINDOWS_SERVICE_NAME)
                return
        except OSError as e:
            logger.debug("sc start %s failed: %s", WINDOWS_SERVICE_NAME, e)

        try:
            subprocess.Popen(
                ["cmd", "/C", "start", fallback.binary, "serve"],
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
            )
        except OSError as e:
            raise BootstrapError(f"Failed to start Ollama on Windows: {e}") from e
        return

    try:
        fallback.serve()
    except CliFallbackError as e:
        raise BootstrapError(f"Failed to start Ollama: {e}") from e


def ensure_running(
    client: OllamaClient,
    fallback: CliFallback,
    console: Console,
    attempts: int = START_ATTEMPTS,
    interval: float = START_INTERVAL,
) -> None:
    """Make sure the daemon API answers, starting it if needed.

    Args:
        client: Daemon HTTP client.
        fallback: Native binary wrapper, used to locate and start the daemon.
        console: Rich console for progress output.
        attempts: Number of probes after starting the daemon.
        interval: Seconds to wait between probes.

    Raises:
        BootstrapError: If the binary is missing, fails to start, or the
            API does not come up within the allotted attempts.
    """
    if client.probe():
        return

    console.print("[yellow]Ollama API not responsive. Checking CLI...[/yellow]")
    if not fallback.available():
        raise BootstrapError(
            "Ollama CLI not found. Please install Ollama and ensure it's in your PATH."
        )
    logger.debug("Found %s (%s)", fallback.binary, fallback.version())

    console.print("[green]Ollama CLI found. Attempting to start the service...[/green]")
    start_daemon(fallback)

    console.print("Waiting for Ollama to start...")
    for _ in range(attempts):
        if client.probe():
            console.print("[green]Ollama started successfully.[/green]")
            return
        time.sleep(interval)
    raise BootstrapError(
        f"Failed to start Ollama service (timeout after {attempts} attempts "
        f"against {client.base_url})."
    )
