from rich.console import Console
from rich.table import Table

from bunt.domain.game import BattedBallReport
from bunt.domain.percentile import PercentileProfile
from bunt.domain.standings import StandingsTable
from bunt.formatting import (
    batted_ball_fields,
    first_sentence,
    matchup_title,
    percentile_description,
    render_standings,
)

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)


def print_error(message: str) -> None:
    err_console.print(f"[red bold]Error:[/red bold] {message}")


def print_batted_ball(report: BattedBallReport) -> None:
    console.print(f"[bold]{matchup_title(report)}[/bold]")
    console.print(first_sentence(report.event.description), markup=False)
    table = Table(show_header=False, box=None, pad_edge=False)
    table.add_column("Stat", style="bold")
    table.add_column("Value")
    for name, value in batted_ball_fields(report):
        table.add_row(name, value)
    console.print(table)


def print_standings(table: StandingsTable) -> None:
    console.print(f"[bold]{table.title}[/bold]")
    console.print(render_standings(table), markup=False)


def print_percentiles(profile: PercentileProfile) -> None:
    console.print(f"[bold]{profile.name} ({profile.year})[/bold]")
    console.print(percentile_description(profile), markup=False)
