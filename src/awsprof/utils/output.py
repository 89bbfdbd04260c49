"""Output formatting utilities using Rich.

Messages go to stderr; stdout is reserved for output meant to be captured.
"""

from rich.console import Console
from rich.prompt import Prompt
from rich.table import Table

console = Console(stderr=True)


def print_error(msg: str) -> None:
    """Print an error message to the console.

    Args:
        msg: The error message to display.
    """
    console.print(f"[bold red]Error:[/bold red] {msg}")


def print_success(msg: str) -> None:
    """Print a success message to the console.

    Args:
        msg: The success message to display.
    """
    console.print(f"[bold green]✓[/bold green] {msg}")


def print_warning(msg: str) -> None:
    """Print a warning message to the console.

    Args:
        msg: The warning message to display.
    """
    console.print(f"[bold yellow]Warning:[/bold yellow] {msg}")


def print_info(msg: str) -> None:
    """Print an info message to the console.

    Args:
        msg: The info message to display.
    """
    console.print(f"[cyan]{msg}[/cyan]")


def print_cancelled(msg: str = "Cancelled") -> None:
    """Print a cancellation message to the console.

    Args:
        msg: The cancellation message to display.
    """
    console.print(f"[yellow]{msg}[/yellow]")


def create_table(
    title: str | None = None,
    columns: list[tuple[str, str]] | None = None,
    rows: list[list[str]] | None = None,
    show_header: bool = True,
) -> Table:
    """Create a Rich table.

    Args:
        title: Optional table title.
        columns: List of (column_name, column_style) tuples.
        rows: List of row data.
        show_header: Whether to show the header row.

    Returns:
        A configured Rich Table instance.
    """
    table = Table(title=title, show_header=show_header, header_style="bold cyan")

    if columns:
        for col_name, col_style in columns:
            table.add_column(col_name, style=col_style)

    if rows:
        for row in rows:
            table.add_row(*row)

    return table


def prompt(message: str, default: str | None = None) -> str:
    """Prompt user for text input.

    Args:
        message: The prompt message to display.
        default: Default value if user just presses enter.

    Returns:
        The user's input string.
    """
    if default is None:
        return Prompt.ask(message, console=console)
    return Prompt.ask(message, default=default, console=console)
