from datetime import date

from rich.console import Console
from rich.table import Table

from banzuke_delta.domain.basho_schedule import BashoSchedule
from banzuke_delta.domain.presentation import Presentation
from banzuke_delta.render.text import render_text

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)

_DELTA_STYLES = {"+": "green", "-": "red"}


def print_error(message: str) -> None:
    err_console.print(f"[red bold]Error:[/red bold] {message}")


def print_presentation_text(presentation: Presentation) -> None:
    console.print(render_text(presentation), markup=False)


def _delta_style(delta_label: str) -> str:
    if "Juryo" in delta_label:
        return "cyan"
    return _DELTA_STYLES.get(delta_label[:1], "")


def print_presentation_table(presentation: Presentation) -> None:
    table = Table(title=presentation.title, caption=presentation.subtitle)
    table.add_column("Tier")
    table.add_column("Rank")
    table.add_column("Shikona")
    table.add_column("Δ", justify="right")
    for row in presentation.rows:
        table.add_row(
            row.tier.value,
            row.rank_label,
            row.shikona,
            row.delta_label,
            style=_delta_style(row.delta_label) or None,
        )
    console.print(table)


def _format_day(value: date | None) -> str:
    return value.isoformat() if value else "-"


def print_basho_schedule(schedule: BashoSchedule) -> None:
    table = Table(title=schedule.title, show_header=False)
    table.add_column("Field", style="bold")
    table.add_column("Value")
    table.add_row("Basho", schedule.basho_id)
    table.add_row("Banzuke release", _format_day(schedule.banzuke_release))
    table.add_row("Start", _format_day(schedule.start))
    table.add_row("End", _format_day(schedule.end))
    if schedule.city:
        table.add_row("City", schedule.city)
    if schedule.venue:
        table.add_row("Venue", schedule.venue)
    console.print(table)
