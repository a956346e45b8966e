"""
tagfilter CLI output utilities.

Rich-based output for user-facing CLI messages and tables, kept separate
from operational logging.

Usage:
    from tagfilter.cli.output import echo, error, warn, table

    echo("12 catalogers selected")
    warn("Unknown tag: pyhton")
    table(headers=["Cataloger", "Tags"], rows=[("sbom-cataloger", "sbom")])
"""

from typing import Any, List, Optional, Tuple

from rich.console import Console
from rich.markup import escape
from rich.table import Table


# Main console for stdout (user output)
console = Console()

# Error console for stderr
_err_console = Console(stderr=True)


def echo(message: str, style: Optional[str] = None, nl: bool = True) -> None:
    """
    Print a message to the user.

    Args:
        message: The message to print
        style: Optional rich style (e.g., "bold", "green", "bold red")
        nl: Whether to add a newline (default: True)
    """
    console.print(
        message,
        style=style,
        end="\n" if nl else "",
        markup=False,
        highlight=False,
        emoji=False,
        soft_wrap=True,
    )


def error(message: str) -> None:
    """Print an error message to stderr."""
    _err_console.print(f"[bold red]Error:[/bold red] {escape(message)}")


def warn(message: str) -> None:
    """Print a warning message."""
    console.print(f"[yellow]Warning:[/yellow] {escape(message)}")


def dim(message: str) -> None:
    """Print a dimmed/secondary message."""
    console.print(f"[dim]{escape(message)}[/dim]")


def table(
    headers: List[str],
    rows: List[Tuple[Any, ...]],
    title: Optional[str] = None,
    show_lines: bool = False,
) -> None:
    """
    Print a formatted table.

    Args:
        headers: Column headers
        rows: List of row tuples
        title: Optional table title
        show_lines: Show row separator lines
    """
    t = Table(title=title, show_lines=show_lines)

    for header in headers:
        t.add_column(header)

    for row in rows:
        t.add_row(*[str(cell) for cell in row])

    console.print(t)
