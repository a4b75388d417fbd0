"""Discord embeds for each command's reply."""

import discord

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

_HEADSHOT_URL = "https://content.mlb.com/images/headshots/current/60x60/{player_id}@3x.png"

HELP_COMMANDS: tuple[tuple[str, str], ...] = (
    ("~ev", "Gets the statcast data from the most recent ball put in play in the active game."),
    ("~st / ~standings", "Gets the division standings (specify AL, West/Central, and even WC to get other tables)."),
    ("~wc / ~wildcard", "Gets the wild card standings (specify AL for the American League)."),
    ("~savant / ~sav", "Gets the baseball savant percentile rankings of the player with the given ID or name."),
    ("~h / ~help", "Shows this message."),
)


def batted_ball_embed(report: BattedBallReport) -> discord.Embed:
    embed = discord.Embed(title=matchup_title(report), description=first_sentence(report.event.description))
    for name, value in batted_ball_fields(report):
        embed.add_field(name=name, value=value, inline=True)
    return embed


def standings_embed(table: StandingsTable) -> discord.Embed:
    return discord.Embed(title=table.title, description=render_standings(table))


def percentile_embed(profile: PercentileProfile) -> discord.Embed:
    embed = discord.Embed(title=f"{profile.name} ({profile.year})", description=percentile_description(profile))
    embed.set_thumbnail(url=_HEADSHOT_URL.format(player_id=profile.player_id))
    return embed


def help_embed() -> discord.Embed:
    embed = discord.Embed(title="Bunt Commands")
    for name, value in HELP_COMMANDS:
        embed.add_field(name=name, value=value, inline=False)
    return embed
