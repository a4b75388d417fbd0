import asyncio
import logging
from typing import Annotated

import typer

from bunt.cli._logging import configure_logging
from bunt.cli._output import console, print_batted_ball, print_error, print_percentiles, print_standings
from bunt.discord import ConfigurationError, load_bunt_config, run_bot
from bunt.discord.bot import NO_PLAYER_MESSAGE
from bunt.discord.config import load_team_target
from bunt.domain.errors import ExtractionError
from bunt.ingest.fetcher import ResilientFetcher
from bunt.services.queries import BaseballQueries

logger = logging.getLogger(__name__)

app = typer.Typer(name="bunt", help="Bunt: live game, standings and Statcast percentiles for one team")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable DEBUG logging")] = False,
) -> None:
    """Bunt: live game, standings and Statcast percentiles for one team."""
    configure_logging(verbose=verbose)
    if ctx.invoked_subcommand is None:
        raise typer.Exit()


def _build_queries() -> BaseballQueries:
    try:
        team = load_team_target()
    except ConfigurationError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
    return BaseballQueries.create(team, ResilientFetcher())


@app.command()
def run() -> None:
    """Run the Discord bot until it is stopped."""
    try:
        config = load_bunt_config()
    except ConfigurationError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    logger.info("Starting Discord bot...")
    try:
        asyncio.run(run_bot(config))
    except KeyboardInterrupt:
        logger.info("Bot stopped by user")


@app.command()
def ev() -> None:
    """Show the most recent ball put in play in the followed team's current game."""
    queries = _build_queries()
    try:
        report = queries.latest_batted_ball()
    except ExtractionError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
    if report is None:
        console.print("No batted ball to report.")
        return
    print_batted_ball(report)


@app.command()
def standings(
    words: Annotated[list[str] | None, typer.Argument(help="League/division words, e.g. 'al west' or 'wc'")] = None,
) -> None:
    """Show division or wild-card standings."""
    queries = _build_queries()
    try:
        table = queries.standings(["standings", *(words or [])])
    except ExtractionError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
    print_standings(table)


@app.command()
def savant(
    player: Annotated[list[str], typer.Argument(help="Savant player id or player name")],
) -> None:
    """Show a player's Statcast percentile rankings."""
    queries = _build_queries()
    try:
        player_id = queries.resolve_player(" ".join(player))
        if player_id is None:
            print_error(NO_PLAYER_MESSAGE)
            raise typer.Exit(code=1)
        profile = queries.percentiles(player_id)
    except ExtractionError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
    if profile is None:
        console.print(f"No percentile rankings for player {player_id}.")
        return
    print_percentiles(profile)
