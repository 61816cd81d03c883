"""Catalogo CLI - Main application entry point and app structure."""

from importlib.metadata import version
from typing import Annotated

from rich.console import Console
import typer

from catalogo.config import get_logger, setup_loguru_logger
from catalogo.domain import Eatery, MenuItem, Performer, Track
from catalogo.infrastructure.cli.ui import (
    command_error_handler,
    display_eatery,
    display_performer,
)

VERSION = version("catalogo")

console = Console(width=80)
logger = get_logger(__name__)

app = typer.Typer(
    help=f"Catalogo v{VERSION} - restaurant menus and artist catalogs",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
    pretty_exceptions_enable=True,
    pretty_exceptions_short=True,
    pretty_exceptions_show_locals=False,
)


def build_demo() -> tuple[Eatery, Performer]:
    """Build the sample restaurant and performer shown by ``demo``."""
    eatery = Eatery("Sabor & Cia", "Rua das Flores, 123")
    eatery.add_menu_item(MenuItem("Lasanha", 25.5, ["massa", "queijo", "molho"]))

    performer = Performer("Banda Exemplo", "Rock")
    performer.add_track(Track("Canção 1", 210, performer))
    return eatery, performer


@app.command(name="demo", rich_help_panel="🍽️ Examples")
@command_error_handler
def demo_command(
    play: Annotated[
        bool,
        typer.Option("--play/--no-play", help="Play the sample tracks after listing"),
    ] = True,
) -> None:
    """Build a sample restaurant and artist and show them."""
    eatery, performer = build_demo()

    display_eatery(eatery)
    console.print()
    display_performer(performer)

    if play:
        for track in performer.tracks:
            track.play()


@app.command(name="version", rich_help_panel="⚙️ System")
def version_command() -> None:
    """Show version information."""
    console.print(f"[bold bright_blue]Catalogo[/bold bright_blue] [dim]v{VERSION}[/dim]")


@app.callback()
def init_cli(
    ctx: typer.Context,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose output"),
    ] = False,
) -> None:
    """Initialize Catalogo CLI."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose

    setup_loguru_logger(verbose)


def main() -> int:
    """Application entry point."""
    try:
        return app() or 0
    except Exception:
        logger.exception("Unhandled exception")
        return 1
