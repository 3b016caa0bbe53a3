"""Access to the Ollama daemon: HTTP API, native binary and bootstrap."""

from ollama_rename.daemon.bootstrap import ensure_running, start_daemon
from ollama_rename.daemon.client import OllamaClient
from ollama_rename.daemon.fallback import CliFallback
from ollama_rename.daemon.operations import ModelOperations

__all__ = [
    "CliFallback",
    "ModelOperations",
    "OllamaClient",
    "ensure_running",
    "start_daemon",
]
