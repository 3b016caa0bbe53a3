"""Terminal-backed prompter built on rich prompts."""

from rich.console import Console
from rich.prompt import Confirm, InvalidResponse, Prompt

from ollama_rename.errors import InvalidNameError
from ollama_rename.models.naming import is_valid_model_name, validate_model_name
from ollama_rename.workflow.prompts import Guard


class ModelNamePrompt(Prompt):
    """Prompt that re-asks until the answer is a valid model name."""

    def process_response(self, value: str) -> str:
        value = value.strip()
        try:
            validate_model_name(value)
        except InvalidNameError as e:
            raise InvalidResponse(f"[prompt.invalid]{e}") from e
        return value


class TerminalPrompter:
    """Asks the user on the terminal.

    Args:
        console: Rich console used for prompts.
    """

    def __init__(self, console: Console) -> None:
        self.console = console

    def confirm(self, guard: Guard, question: str) -> bool:
        return Confirm.ask(question, default=False, console=self.console)

    def choose_one(self, prompt: str, items: list[str]) -> int:
        """Show a numbered list and return the chosen index.

        Typing text instead of a number narrows the list to entries
        containing it (case-insensitive). An empty answer picks the first
        shown entry.
        """
        shown = list(range(len(items)))
        while True:
            for position, index in enumerate(shown, start=1):
                self.console.print(f"  [cyan]{position:>3}[/cyan]  {items[index]}")
            answer = Prompt.ask(
                f"{prompt} [dim](number or filter text)[/dim]",
                default="1",
                console=self.console,
            ).strip()

            if answer.isdigit():
                position = int(answer)
                if 1 <= position <= len(shown):
                    return shown[position - 1]
                self.console.print(
                    f"[prompt.invalid]Pick a number between 1 and {len(shown)}"
                )
                continue

            needle = answer.lower()
            matches = [i for i in range(len(items)) if needle in items[i].lower()]
            if matches:
                shown = matches
            else:
                self.console.print(f"[prompt.invalid]No models match '{answer}'")
                shown = list(range(len(items)))

    def ask_name(self, prompt: str, default: str) -> str:
        # An empty answer returns the default unvalidated, so only offer a valid one.
        if is_valid_model_name(default):
            return ModelNamePrompt.ask(prompt, default=default, console=self.console)
        return ModelNamePrompt.ask(prompt, console=self.console)
