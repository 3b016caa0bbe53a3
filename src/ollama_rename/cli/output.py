"""Rich output formatting helpers."""

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ollama_rename.models.registry import ModelRecord

KB = 1024
MB = KB * 1024
GB = MB * 1024


def format_size(num_bytes: int) -> str:
    """Format a byte count with binary units.

    Args:
        num_bytes: Non-negative byte count.

    Returns:
        e.g. "512 B", "1.00 KB", "3.25 GB".
    """
    if num_bytes >= GB:
        return f"{num_bytes / GB:.2f} GB"
    if num_bytes >= MB:
        return f"{num_bytes / MB:.2f} MB"
    if num_bytes >= KB:
        return f"{num_bytes / KB:.2f} KB"
    return f"{num_bytes} B"


def format_size_value(value: object) -> str | None:
    """Format a size as reported by the daemon.

    Integers are formatted, strings are shown as given, anything else
    (floats, negatives, missing) is omitted.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return format_size(value) if value >= 0 else None
    if isinstance(value, str):
        return value
    return None


def format_model(record: ModelRecord) -> str:
    """One-line label for a model in the selection list."""
    label = record.name
    size = format_size_value(record.size)
    if size is not None:
        label += f"  ({size})"
    if record.modified_at:
        label += f"  • {record.modified_at}"
    return label


def print_banner(console: Console, base_url: str, version: str | None) -> None:
    """Print the interactive mode banner.

    Args:
        console: Rich console for output.
        base_url: Daemon base URL in use.
        version: Daemon version, if known.
    """
    subtitle = f"Ollama {version} at {base_url}" if version else base_url
    console.print(
        Panel(
            "[bold cyan]Ollama model renamer[/bold cyan] "
            "(safe copy → optional delete)",
            subtitle=subtitle,
            border_style="cyan",
        )
    )


def create_models_table(records: list[ModelRecord], loaded: set[str]) -> Table:
    """Create the table shown by the list command.

    Args:
        records: Models to show, already ordered.
        loaded: Names of models currently loaded by the daemon.

    Returns:
        Configured Rich Table.
    """
    table = Table(title="Installed Models")
    table.add_column("Model", style="cyan")
    table.add_column("Size", style="magenta", justify="right")
    table.add_column("Modified")
    table.add_column("Loaded", style="bold")
    for record in records:
        table.add_row(
            record.name,
            format_size_value(record.size) or "",
            record.modified_at or "",
            "[green]yes[/green]" if record.name in loaded else "",
        )
    return table
