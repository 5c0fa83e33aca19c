"""Console reporter: HasMethodAssertionError → rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from methodcheck.domain.exceptions import HasMethodAssertionError


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    All fields have defaults (convenience).
    Immutable (frozen dataclass).

    Attributes:
        width: Console width in characters.
        color: Emit ANSI styles (force terminal).
        show_reason: Show what was actually found on the subject.
    """

    width: int = 120
    color: bool = True
    show_reason: bool = True

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.width <= 0:
            raise ValueError(f"width must be > 0, got {self.width}")


class ConsoleReporter:
    """Console reporter: renders a failed method assertion.

    Output is str, not print(). Caller decides destination.
    """

    def __init__(self, config: ConsoleConfig | None = None) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
        """
        self._config = config or ConsoleConfig()

    def report(self, error: HasMethodAssertionError) -> str:
        """Format assertion failure as rich formatted string.

        Args:
            error: Failed assertion to format.

        Returns:
            Formatted string with header and subject/expected/actual table.
        """
        output = StringIO()
        console = Console(
            file=output,
            force_terminal=self._config.color,
            no_color=not self._config.color,
            width=self._config.width,
        )

        self._render_header(console, error)
        self._render_table(console, error)

        return output.getvalue()

    def _render_header(self, console: Console, error: HasMethodAssertionError) -> None:
        console.print()
        console.rule("[bold]METHOD ASSERTION FAILED[/bold]")
        console.print()
        if error.message:
            console.print(f"[bold]{escape(error.message)}[/bold]")
            console.print()

    def _render_table(self, console: Console, error: HasMethodAssertionError) -> None:
        table = Table(show_header=False, box=None)
        table.add_column("Field", style="cyan")
        table.add_column("Value")

        table.add_row("Subject", escape(error.subject))
        table.add_row("Expected", f"[green]{escape(error.description)}[/green]")
        if self._config.show_reason:
            table.add_row("Actual", f"[yellow]{escape(error.reason)}[/yellow]")

        console.print(table)
        console.print()
