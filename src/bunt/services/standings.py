import datetime
import logging
from collections.abc import Iterable
from typing import Any

from bunt.domain.errors import ExtractionError
from bunt.domain.standings import StandingsRow, StandingsSelector, StandingsTable
from bunt.domain.team import AMERICAN_LEAGUE_ID, NATIONAL_LEAGUE_ID, TeamTarget

logger = logging.getLogger(__name__)

_AMERICAN_WORDS = frozenset({"al", "a", "american"})
_NATIONAL_WORDS = frozenset({"nl", "n", "national"})
_EAST_WORDS = frozenset({"east", "e"})
_WEST_WORDS = frozenset({"west", "w"})
_CENTRAL_WORDS = frozenset({"central", "c"})
_WILD_CARD_WORDS = frozenset({"wc", "wildcard"})

# Division ids run West, East, Central from 200 for the AL and from 203 for the NL.
_DIVISION_BASE_ID = 200
_WEST_OFFSET, _EAST_OFFSET, _CENTRAL_OFFSET = 0, 1, 2
_NL_OFFSET = 3

_LATE_SEASON_MONTH = 9


def parse_standings_selector(words: Iterable[str], home: TeamTarget | None = None) -> StandingsSelector:
    """Pick a league, division and wild-card mode from free-text command words.

    Matching is per whitespace token and case-insensitive, so ``"wild card"``
    written as two words does not select wild-card mode. Without league or
    division words the followed team's own division is selected.
    """
    home = home or TeamTarget()
    tokens = {word.lower() for word in words}
    if not tokens.isdisjoint(_AMERICAN_WORDS):
        league_id = AMERICAN_LEAGUE_ID
    elif not tokens.isdisjoint(_NATIONAL_WORDS):
        league_id = NATIONAL_LEAGUE_ID
    else:
        league_id = home.league_id
    league_offset = 0 if league_id == AMERICAN_LEAGUE_ID else _NL_OFFSET

    if not tokens.isdisjoint(_WEST_WORDS):
        division_id = _DIVISION_BASE_ID + _WEST_OFFSET + league_offset
    elif not tokens.isdisjoint(_CENTRAL_WORDS):
        division_id = _DIVISION_BASE_ID + _CENTRAL_OFFSET + league_offset
    elif not tokens.isdisjoint(_EAST_WORDS) or league_id != home.league_id:
        division_id = _DIVISION_BASE_ID + _EAST_OFFSET + league_offset
    else:
        division_id = home.division_id

    return StandingsSelector(
        league_id=league_id,
        division_id=division_id,
        wild_card=not tokens.isdisjoint(_WILD_CARD_WORDS),
    )


def _wild_card_rank(team: dict[str, Any]) -> int:
    try:
        return int(team.get("wildCardRank") or 0)
    except (TypeError, ValueError):
        return 0


def _require(value: Any, description: str) -> str:
    if value is None or value == "":
        raise ExtractionError(f"Could not get {description}")
    return str(value)


def _parse_timestamp(value: Any) -> datetime.datetime:
    try:
        return datetime.datetime.fromisoformat(str(value))
    except ValueError as e:
        raise ExtractionError(f"Could not get last updated timestamp: {value!r}") from e


def _build_row(team: dict[str, Any], *, wild_card: bool, late_season: bool) -> StandingsRow:
    wild_card_rank = _wild_card_rank(team)
    if team.get("divisionLeader") is True:
        marker = "D"
    elif 1 <= wild_card_rank <= 3:
        marker = str(wild_card_rank)
    else:
        marker = " "

    if late_season:
        # Upstream drops magic/elimination numbers once they stop applying.
        third = str(team.get("magicNumber") or "-")
        fourth = str(team.get("eliminationNumber") or "-")
    else:
        third = _require(team.get("wildCardGamesBack" if wild_card else "gamesBack"), "games back")
        fourth = _require(team.get("streak", {}).get("streakCode"), "streak")

    return StandingsRow(
        marker=marker,
        club_name=_require(team.get("team", {}).get("clubName"), "club name"),
        winning_percentage=_require(team.get("winningPercentage"), "team's WPCT"),
        third=third,
        fourth=fourth,
    )


def build_standings_table(
    records: list[dict[str, Any]],
    selector: StandingsSelector,
    now: datetime.datetime,
) -> StandingsTable:
    """Select a division (or the league's wild-card race) from upstream standings records.

    From September on the last two columns switch from games back and streak
    to magic and elimination numbers. Division tables date themselves by the
    division's ``lastUpdated``; wild-card tables use *now*.
    """
    if selector.wild_card:
        title = "AL Wild Card" if selector.league_id == AMERICAN_LEAGUE_ID else "NL Wild Card"
        teams = [team for division in records for team in division.get("teamRecords", [])]
        teams.sort(key=_wild_card_rank)
        timestamp = now
    else:
        division = next(
            (record for record in records if record.get("division", {}).get("id") == selector.division_id),
            None,
        )
        if division is None:
            raise ExtractionError(f"Could not find division {selector.division_id}")
        title = _require(division["division"].get("nameShort"), "division name")
        teams = list(division.get("teamRecords", []))
        timestamp = _parse_timestamp(division.get("lastUpdated"))

    late_season = timestamp.month >= _LATE_SEASON_MONTH
    headers = ("Team", "WPCT", "M#", "E#") if late_season else ("Team", "WPCT", "GB", "Streak")
    rows = tuple(_build_row(team, wild_card=selector.wild_card, late_season=late_season) for team in teams)
    logger.debug("Built %s standings with %d teams", title, len(rows))
    return StandingsTable(title=f"{title} Standings", headers=headers, rows=rows, wild_card=selector.wild_card)
