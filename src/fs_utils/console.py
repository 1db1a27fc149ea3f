"""Console output for CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm
from rich.table import Table

if TYPE_CHECKING:
    from fs_utils.config import Settings


class ConsoleOutput:
    """Formats command results for the terminal."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize output.

        Args:
            console: Rich console to print to. Defaults to stdout.
        """
        self.console = console or Console()

    def confirm(self, message: str, default: bool = False) -> bool:
        """Show confirmation prompt.

        Args:
            message: Confirmation message.
            default: Default response.

        Returns:
            User's response.
        """
        return Confirm.ask(escape(message), default=default, console=self.console)

    def show_text(self, text: str) -> None:
        """Print file content verbatim, without markup or highlighting."""
        self.console.out(text, highlight=False)

    def show_settings(self, settings: Settings, location: str) -> None:
        """Display settings table.

        Args:
            settings: Current settings.
            location: Where the settings are stored.
        """
        table = Table(title="Configuration")
        table.add_column("Key", style="cyan")
        table.add_column("Value")

        table.add_row("head-limit", str(settings.head_limit))
        table.add_row("truncation-message", repr(settings.truncation_message))
        table.add_row("follow-symlinks", str(settings.follow_symlinks).lower())

        self.console.print(table)
        self.console.print(f"[dim]Config file: {escape(location)}[/dim]")

    def show_success(self, message: str) -> None:
        """Show success message."""
        self.console.print(f"[green]✓[/green] {escape(message)}")

    def show_error(self, message: str) -> None:
        """Show error message."""
        self.console.print(f"[red]✗[/red] {escape(message)}")

    def show_warning(self, message: str) -> None:
        """Show warning message."""
        self.console.print(f"[yellow]![/yellow] {escape(message)}")

    def show_info(self, message: str) -> None:
        """Show info message."""
        self.console.print(f"[blue]i[/blue] {escape(message)}")
