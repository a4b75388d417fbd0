import logging
from typing import Any

from bunt.domain.errors import ExtractionError
from bunt.domain.game import LiveGameSnapshot, WinProbabilityEntry
from bunt.ingest.fetcher import ResilientFetcher

logger = logging.getLogger(__name__)

_URL = "https://baseballsavant.mlb.com/gf"


def _parse_win_probability(rows: list[dict[str, Any]]) -> tuple[WinProbabilityEntry, ...]:
    entries: list[WinProbabilityEntry] = []
    for row in rows:
        at_bat_index = row.get("atBatIndex")
        cap_index = row.get("capIndex")
        if not isinstance(at_bat_index, int) or not isinstance(cap_index, int):
            continue
        added = row.get("homeTeamWinProbabilityAdded")
        entries.append(
            WinProbabilityEntry(
                at_bat_index=at_bat_index,
                cap_index=cap_index,
                home_win_probability_added=float(added) if isinstance(added, int | float) else None,
            )
        )
    return tuple(entries)


class SavantGameFeedSource:
    """Live game feed from Baseball Savant: scoreboard, batted balls and WPA."""

    def __init__(self, fetcher: ResilientFetcher) -> None:
        self._fetcher = fetcher

    def fetch(self, game_pk: int) -> LiveGameSnapshot:
        logger.debug("GET %s game_pk=%d", _URL, game_pk)
        data = self._fetcher.get_json(_URL, {"game_pk": game_pk})
        if not isinstance(data, dict):
            raise ExtractionError(f"Game feed for {game_pk} is not an object")

        # Pre-game feeds send explicit nulls for sections that are not populated yet.
        scoreboard = data.get("scoreboard") or {}
        teams = scoreboard.get("teams") or {}
        home = teams.get("home") or {}
        away = teams.get("away") or {}
        wpa = ((scoreboard.get("stats") or {}).get("wpa") or {}).get("gameWpa") or []

        return LiveGameSnapshot(
            game_pk=game_pk,
            abstract_game_state=(scoreboard.get("status") or {}).get("abstractGameState"),
            home_team_id=home.get("id"),
            home_name=home.get("name"),
            away_name=away.get("name"),
            batted_balls=tuple(data.get("exit_velocity") or ()),
            win_probability=_parse_win_probability(wpa),
        )
