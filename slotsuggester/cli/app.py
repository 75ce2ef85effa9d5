"""
Main CLI application using Typer.
"""

import logging
from pathlib import Path
from typing import Annotated, List, Optional

import pendulum
import typer
from pendulum import DateTime
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from ..adapters.ics_reader import IcsCalendarReader
from ..config import load_config
from ..domain.exceptions import SlotSuggesterError
from ..services.slot_suggestion import SlotSuggestionService
from .presenter import render_suggestions

app = typer.Typer(
    name="slotsuggester",
    help="Suggest optimal 30-min interview slots from one or more .ics calendars",
    add_completion=False
)

console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _current_instant() -> DateTime:
    """The reference "now" for a run, in UTC."""
    return pendulum.now("UTC")


@app.command()
def suggest(
    ics_files: Annotated[List[Path], typer.Option("--ics-file", "-i", help="Path to an .ics calendar file (repeat for multiples)")],
    days_ahead: Annotated[Optional[int], typer.Option("--days-ahead", "-d", help="Days ahead to look [default: 7]")] = None,
    start_hour: Annotated[Optional[int], typer.Option("--start-hour", "-s", help="Start hour, 24h [default: 9]")] = None,
    end_hour: Annotated[Optional[int], typer.Option("--end-hour", "-e", help="End hour, 24h [default: 18]")] = None,
    buffer_mins: Annotated[Optional[int], typer.Option("--buffer-mins", "-b", help="Buffer minutes for transitions [default: 15]")] = None,
    timezone: Annotated[Optional[str], typer.Option("--timezone", "-t", help="IANA timezone for output and scoring, e.g. America/New_York [default: UTC]")] = None,
    limit: Annotated[Optional[int], typer.Option("--limit", "-n", help="Number of suggestions to show [default: 5]")] = None,
    config_file: Annotated[Optional[Path], typer.Option("--config", "-c", help="Path to config file. Defaults to ./slotsuggester.yaml if present")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Show debug logging.")] = False,
):
    """
    Suggest free 30-minute slots, mornings first.

    Examples:

        slotsuggester suggest -i work.ics

        slotsuggester suggest -i work.ics -i personal.ics --timezone Europe/London

        slotsuggester suggest -i work.ics -d 14 -s 8 -e 17 -b 10
    """
    _configure_logging(verbose)

    try:
        config = load_config(config_file)
        settings = config.defaults.with_overrides(
            days_ahead=days_ahead,
            start_hour=start_hour,
            end_hour=end_hour,
            buffer_minutes=buffer_mins,
            timezone=timezone,
            limit=limit,
        )

        service = SlotSuggestionService(calendar_reader=IcsCalendarReader())
        result = service.suggest(
            paths=ics_files,
            settings=settings,
            now=_current_instant(),
        )

        logger.info(
            "%d busy interval(s) considered, %d suggestion(s) returned",
            len(result.busy_intervals),
            len(result.suggestions),
        )

        render_suggestions(console, result.suggestions, result.timezone, settings.timezone)

    except SlotSuggesterError as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)

    except ValidationError as e:
        console.print(f"[bold red]Error:[/bold red] Invalid settings: {escape(str(e))}")
        raise typer.Exit(1)

    except (FileNotFoundError, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)


@app.command()
def version():
    """
    Show version information.
    """
    from .. import __version__
    console.print(f"\n[bold cyan]slotsuggester[/bold cyan] version [bold]{__version__}[/bold]\n")


if __name__ == "__main__":
    app()
