"""
Rendering of ranked suggestions with rich.
"""

from typing import Sequence

from pendulum.tz.timezone import Timezone
from rich.console import Console
from rich.table import Table

from ..domain.models import SLOT_DURATION_MINUTES, Candidate

NO_SLOTS_MESSAGE = "No free slots found. Try adjusting hours, range, or timezone!"
CLOSING_TIP = (
    "Pick one for your next talent chat. A genuine conversation is the best investment."
)


def format_slot_time(candidate: Candidate, timezone: Timezone | str) -> str:
    """Format the slot start in the display timezone, e.g. ``2024-11-26 09:00 CET``."""
    return candidate.slot_start.in_timezone(timezone).format("YYYY-MM-DD HH:mm zz")


def format_label(candidate: Candidate) -> str:
    label = f"{SLOT_DURATION_MINUTES} mins"
    if candidate.is_morning:
        label += " [green](Morning Peak!)[/green]"
    return label


def build_slot_table(candidates: Sequence[Candidate], timezone: Timezone | str) -> Table:
    table = Table(show_header=True, header_style="bold bright_green", box=None)
    table.add_column("Time (Local)")
    table.add_column("Label")
    table.add_column("Score", style="cyan")

    for candidate in candidates:
        table.add_row(
            format_slot_time(candidate, timezone),
            format_label(candidate),
            f"(Score: {candidate.score})",
        )

    return table


def render_suggestions(
    console: Console,
    candidates: Sequence[Candidate],
    timezone: Timezone | str,
    timezone_name: str,
) -> None:
    """Print the header and either the ranked table or the empty-result message."""
    console.print(
        f"[bold bright_blue]Suggested {SLOT_DURATION_MINUTES}-min interview slots "
        f"(prioritizing mornings) in {timezone_name}:[/bold bright_blue]"
    )

    if not candidates:
        console.print(f"[yellow]{NO_SLOTS_MESSAGE}[/yellow]")
        return

    console.print(build_slot_table(candidates, timezone))
    console.print(f"\n[italic magenta]{CLOSING_TIP}[/italic magenta]")
