import logging
from typing import Any

from bunt.domain.errors import ExtractionError
from bunt.ingest.fetcher import ResilientFetcher

logger = logging.getLogger(__name__)

_URL = "https://statsapi.mlb.com/api/v1/standings"


class MLBStandingsSource:
    def __init__(self, fetcher: ResilientFetcher) -> None:
        self._fetcher = fetcher

    def fetch(self, league_id: int) -> list[dict[str, Any]]:
        """Per-division standings records for one league, as upstream sends them."""
        logger.debug("GET %s leagueId=%d", _URL, league_id)
        data = self._fetcher.get_json(_URL, {"leagueId": league_id, "hydrate": "team,division"})
        records = data.get("records") if isinstance(data, dict) else None
        if not isinstance(records, list):
            raise ExtractionError("Could not get standings")
        return records
