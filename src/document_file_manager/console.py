"""Rich console output for the docfm CLI."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from document_file_manager.types import DocumentEntry


def _format_size(size: int | None) -> str:
    """Format a byte count for display."""
    if size is None:
        return "-"
    if size < 1024:
        return f"{size} B"
    value = float(size)
    for unit in ("KB", "MB"):
        value /= 1024
        if value < 1024:
            return f"{value:.1f} {unit}"
    return f"{value / 1024:.1f} GB"


class TUI:
    """Text User Interface for docfm (non-interactive output)."""

    def __init__(self) -> None:
        """Initialize TUI."""
        self.console = Console()

    def show_names(self, names: list[str]) -> None:
        """Print one entry name per line.

        Args:
            names: Entry names.
        """
        for name in names:
            self.console.print(escape(name), highlight=False)

    def show_paths(self, paths: list[Path]) -> None:
        """Print one absolute path per line.

        Args:
            paths: Entry paths.
        """
        for path in paths:
            self.console.print(escape(str(path)), highlight=False, soft_wrap=True)

    def show_entries(self, entries: list[DocumentEntry], title: str) -> None:
        """Display entries table.

        Args:
            entries: Listed entries.
            title: Table title (usually the listed directory).
        """
        if not entries:
            self.console.print(f"[yellow]{escape(title)} is empty[/yellow]")
            return

        table = Table(title=escape(title))
        table.add_column("Name", style="cyan")
        table.add_column("Type")
        table.add_column("Size", justify="right")

        for entry in entries:
            table.add_row(
                escape(entry.name),
                "folder" if entry.is_dir else "file",
                _format_size(entry.size),
            )

        self.console.print(table)

    def show_json(self, data: object) -> None:
        """Print data as JSON.

        Args:
            data: JSON-serializable data.
        """
        self.console.print_json(data=data)

    def show_success(self, message: str) -> None:
        """Show success message.

        Args:
            message: Success message.
        """
        self.console.print(f"[green]✓[/green] {escape(message)}")

    def show_error(self, message: str) -> None:
        """Show error message.

        Args:
            message: Error message.
        """
        self.console.print(f"[red]✗[/red] {escape(message)}")

    def show_info(self, message: str) -> None:
        """Show info message.

        Args:
            message: Info message.
        """
        self.console.print(f"[blue]i[/blue] {escape(message)}")
