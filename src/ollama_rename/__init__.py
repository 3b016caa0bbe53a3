"""Interactive, safe model renamer for Ollama."""

__version__ = "0.1.0"
