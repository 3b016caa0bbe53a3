"""Confirmation interface consulted by the rename workflow."""

from enum import Enum
from typing import Protocol, runtime_checkable


class Guard(str, Enum):
    """Decisions the workflow may need from the user."""

    OVERWRITE_DESTINATION = "overwrite_destination"
    DELETE_ORIGINAL = "delete_original"
    DELETE_LOADED = "delete_loaded"


@runtime_checkable
class Prompter(Protocol):
    """Source of user decisions.

    The terminal implementation asks the user; the non-interactive one
    declines everything so only explicit flags can grant a guard.
    """

    def confirm(self, guard: Guard, question: str) -> bool:
        """Answer a yes/no question, defaulting to no."""
        ...

    def choose_one(self, prompt: str, items: list[str]) -> int:
        """Pick one entry of items and return its index."""
        ...

    def ask_name(self, prompt: str, default: str) -> str:
        """Ask for a valid model name, pre-filled with default."""
        ...


class NonInteractivePrompter:
    """Prompter for flag-driven runs: every guard is declined."""

    def confirm(self, guard: Guard, question: str) -> bool:
        return False

    def choose_one(self, prompt: str, items: list[str]) -> int:
        raise RuntimeError(f"Cannot prompt in non-interactive mode: {prompt}")

    def ask_name(self, prompt: str, default: str) -> str:
        raise RuntimeError(f"Cannot prompt in non-interactive mode: {prompt}")
