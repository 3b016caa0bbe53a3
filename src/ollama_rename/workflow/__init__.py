"""Rename workflow shared by the interactive and flag-driven modes."""

from ollama_rename.workflow.prompts import Guard, NonInteractivePrompter, Prompter
from ollama_rename.workflow.rename import RenameOutcome, RenameRequest, rename_model

__all__ = [
    "Guard",
    "NonInteractivePrompter",
    "Prompter",
    "RenameOutcome",
    "RenameRequest",
    "rename_model",
]
