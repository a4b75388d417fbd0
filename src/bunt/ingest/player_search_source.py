import logging

from bunt.ingest.fetcher import ResilientFetcher

logger = logging.getLogger(__name__)

_URL = "https://baseballsavant.mlb.com/player/search-all"


class SavantPlayerSearchSource:
    def __init__(self, fetcher: ResilientFetcher) -> None:
        self._fetcher = fetcher

    def search(self, name: str) -> int | None:
        """Player id of the best match for *name*, or None when nothing matched."""
        results = self._fetcher.get_json(_URL, {"search": name})
        if not isinstance(results, list) or not results or not isinstance(results[0], dict):
            logger.info("No player matched %r", name)
            return None
        try:
            player_id = int(results[0].get("id"))
        except (TypeError, ValueError):
            logger.warning("Player search for %r returned an unusable id: %r", name, results[0].get("id"))
            return None
        logger.debug("Player search %r -> %d", name, player_id)
        return player_id
