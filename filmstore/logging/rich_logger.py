"""Rich-based reporter for terminal output."""
from __future__ import annotations

import sys
from typing import Iterable, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..core.clock import YearSource
from ..core.models import Film


class FilmReporter:
    """Reporter using Rich for terminal output.

    Status messages are plain text (any markup in them is printed
    literally) and go to stderr; film listings go to stdout.
    """

    def __init__(
        self,
        verbose: bool = False,
        quiet: bool = False,
        clock: Optional[YearSource] = None,
    ):
        """Initialize the reporter.

        Args:
            verbose: Enable verbose output.
            quiet: Suppress all non-essential output.
            clock: Year source for the age column (system clock by default).
        """
        self._console = Console(stderr=True)
        self._out = Console()
        self._verbose = verbose
        self._quiet = quiet
        self._clock = clock

    # --- Logging Methods ---

    def info(self, message: str) -> None:
        """Log an info message."""
        if not self._quiet:
            self._console.print(f"[blue]ℹ[/blue] {escape(message)}")

    def success(self, message: str) -> None:
        """Log a success message."""
        if not self._quiet:
            self._console.print(f"[green]✓[/green] {escape(message)}")

    def warning(self, message: str) -> None:
        """Log a warning message."""
        self._console.print(f"[yellow]⚠[/yellow] {escape(message)}")

    def error(self, message: str) -> None:
        """Log an error message."""
        self._console.print(f"[red]✗[/red] {escape(message)}", style="red")

    def debug(self, message: str) -> None:
        """Log a debug message (only in verbose mode)."""
        if self._verbose:
            self._console.print(f"[dim]  {escape(message)}[/dim]")

    # --- Film Output ---

    def print_film(self, film: Film) -> None:
        """Print one film as a panel."""
        body = Text()
        body.append("Year: ", style="cyan")
        body.append(f"{film.year}\n")
        body.append("Duration: ", style="cyan")
        body.append(f"{film.duration} min\n")
        body.append("Age: ", style="cyan")
        body.append(f"{film.get_age(self._clock)} years")
        self._out.print(Panel(body, title=Text(f"#{film.id} {film.title}"), border_style="cyan"))

    def print_films(self, films: Iterable[Film]) -> None:
        """Print films as a table."""
        table = Table(title="Films", show_header=True, header_style="bold")
        table.add_column("ID", style="cyan", justify="right")
        table.add_column("Title", style="white")
        table.add_column("Year", justify="right")
        table.add_column("Duration", justify="right")
        table.add_column("Age", style="green", justify="right")

        for film in films:
            table.add_row(
                str(film.id),
                Text(film.title),
                str(film.year),
                f"{film.duration} min",
                str(film.get_age(self._clock)),
            )

        self._out.print(table)


class QuietReporter(FilmReporter):
    """Reporter that only shows warnings, errors and requested listings."""

    def __init__(self, clock: Optional[YearSource] = None):
        super().__init__(quiet=True, clock=clock)

    def warning(self, message: str) -> None:
        print(f"WARNING: {message}", file=sys.stderr)

    def error(self, message: str) -> None:
        print(f"ERROR: {message}", file=sys.stderr)
