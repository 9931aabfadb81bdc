from __future__ import annotations

import json
import logging
from enum import Enum

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from availability_schedule.cli._utils import parse_range, parse_ranges, parse_weekly
from availability_schedule.scheduling import Availability, AvailabilitySchedule
from availability_schedule.timestamps import DEFAULT_OFFSET

app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    help="Compute available time ranges within a scheduling window.",
)
console = Console()


class OutputFormat(str, Enum):
    TABLE = "table"
    JSON = "json"


@app.callback()
def main(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Emit debug logging for merge, split and recurrence steps.",
    ),
) -> None:
    """Availability schedule tooling."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        )


def _print_table(schedule: AvailabilitySchedule, rows: list[Availability]) -> None:
    table = Table(title="Availability")
    table.add_column("Start")
    table.add_column("End")
    table.add_column("Duration", justify="right")
    for row, interval in zip(rows, schedule.intervals()):
        table.add_row(row.start, row.end, str(interval.duration))
    console.print(table)


@app.command("show")
def show(
    window_start: str = typer.Argument(..., help="Window start (ISO-8601)."),
    window_end: str = typer.Argument(..., help="Window end (ISO-8601)."),
    add: list[str] | None = typer.Option(
        None,
        "--add",
        "-a",
        help="Range to add, written START/END. Repeatable.",
    ),
    weekly: list[str] | None = typer.Option(
        None,
        "--weekly",
        "-w",
        help="Weekly template START/END@DAYS with ISO weekdays (1=Mon..7=Sun), e.g. @1,3. Repeatable.",
    ),
    remove: list[str] | None = typer.Option(
        None,
        "--remove",
        "-r",
        help="Range to remove, written START/END. Repeatable.",
    ),
    contains: str | None = typer.Option(
        None,
        "--contains",
        "-c",
        help="Also report whether START/END lies entirely within the availability.",
    ),
    offset: str = typer.Option(
        DEFAULT_OFFSET,
        "--offset",
        "-o",
        help="Output offset such as -05:00, or a timestamp carrying one.",
    ),
    output_format: OutputFormat = typer.Option(
        OutputFormat.TABLE,
        "--format",
        "-f",
        help="Output format.",
        case_sensitive=False,
    ),
) -> None:
    """Build a schedule from adds, weekly templates and removals, then list it."""
    try:
        schedule = AvailabilitySchedule(window_start, window_end)
        for start, end in parse_ranges(add):
            schedule.add(start, end)
        for arg in weekly or []:
            start, end, weekdays = parse_weekly(arg)
            schedule.add_weekly_recurring(start, end, weekdays)
        for start, end in parse_ranges(remove):
            schedule.remove(start, end)
        rows = schedule.query(offset)
        covered = schedule.contains(*parse_range(contains)) if contains else None
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    if output_format is OutputFormat.JSON:
        typer.echo(json.dumps([row.model_dump() for row in rows], indent=2))
    else:
        _print_table(schedule, rows)
    if covered is not None:
        typer.echo("true" if covered else "false")


if __name__ == "__main__":
    app()
