import logging
from typing import Any

from bunt.domain.errors import ExtractionError
from bunt.domain.game import ScheduleEntry
from bunt.ingest.fetcher import ResilientFetcher

logger = logging.getLogger(__name__)

_URL = "https://statsapi.mlb.com/api/v1/schedule/games/"


def _parse_game(game: dict[str, Any]) -> ScheduleEntry:
    game_pk = game.get("gamePk")
    if not isinstance(game_pk, int):
        raise ExtractionError(f"Schedule game has no gamePk: {game!r}")
    teams = game.get("teams", {})
    return ScheduleEntry(
        game_pk=game_pk,
        home_team_id=teams.get("home", {}).get("team", {}).get("id"),
        away_team_id=teams.get("away", {}).get("team", {}).get("id"),
        abstract_game_state=game.get("status", {}).get("abstractGameState"),
    )


class MLBScheduleSource:
    def __init__(self, fetcher: ResilientFetcher) -> None:
        self._fetcher = fetcher

    def fetch(self, season: int) -> list[ScheduleEntry]:
        """Every MLB game of *season*, in the order the schedule lists them."""
        logger.debug("GET %s season=%d", _URL, season)
        data = self._fetcher.get_json(
            _URL,
            {
                "sportId": 1,
                "startDate": f"{season}-01-01",
                "endDate": f"{season}-12-31",
                "hydrate": "venue(timezone)",
            },
        )
        dates = data.get("dates") if isinstance(data, dict) else None
        if not isinstance(dates, list):
            raise ExtractionError("Schedule response has no dates")

        entries = [_parse_game(game) for date in dates for game in date.get("games", [])]
        logger.info("Fetched %d scheduled games for %d", len(entries), season)
        return entries
