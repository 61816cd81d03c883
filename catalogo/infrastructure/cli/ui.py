"""UI helpers for CLI interaction.

This module provides reusable UI components and helpers for the CLI,
keeping the presentation logic separate from the domain entities.
"""

from collections.abc import Callable
import functools
from typing import ParamSpec, TypeVar

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
import typer

from catalogo.config import get_logger
from catalogo.domain import Eatery, Performer

# Initialize console and logger
console = Console()
logger = get_logger(__name__)

P = ParamSpec("P")
R = TypeVar("R")


def command_error_handler(func: Callable[P, R]) -> Callable[P, R]:
    """Decorator to standardize error handling for CLI commands.

    Logs the failure with Loguru, prints a short message with Rich and
    converts the exception into ``typer.Exit(code=1)``.
    """

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        operation = func.__name__.replace("_", " ")

        with logger.contextualize(operation=operation):
            try:
                logger.debug(f"Executing {operation}")
                return func(*args, **kwargs)

            except typer.Exit:
                raise

            except typer.Abort:
                logger.info(f"Operation {operation} aborted by user")
                raise

            except Exception as e:
                logger.exception(f"Error during {operation}")
                console.print(f"\n[bold red]✗ Error during {operation}:[/bold red] {e}")
                raise typer.Exit(code=1) from e

    return wrapper


def display_eatery(eatery: Eatery) -> None:
    """Show the greeting and the menu of a restaurant."""
    console.print(Panel(eatery.present(), title=f"[bold]{eatery.name}[/bold]"))

    table = Table(title="Cardápio", show_header=False)
    table.add_column("Prato")
    for line in eatery.list_menu_items():
        table.add_row(line)
    console.print(table)


def display_performer(performer: Performer) -> None:
    """Show a performer and the titles of its tracks."""
    subtitle = f" [dim]({performer.genre})[/dim]" if performer.genre else ""
    console.print(f"[bold bright_blue]{performer.name}[/bold bright_blue]{subtitle}")
    for title in performer.list_track_titles():
        console.print(f"  • {title}")
