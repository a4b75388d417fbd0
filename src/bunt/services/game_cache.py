"""Memoized resolution of the configured team's current game."""

import datetime
import logging
import threading
from collections.abc import Callable

from bunt.domain.game import LiveGameSnapshot
from bunt.ingest.live_game_source import SavantGameFeedSource
from bunt.ingest.schedule_source import MLBScheduleSource

logger = logging.getLogger(__name__)


class GameResolutionCache:
    """Holds the id of the game the bot reports on.

    The schedule is only queried when nothing is cached, so it is paid for
    once per game; every :meth:`resolve` still fetches a fresh live snapshot.
    A game found to be final is dropped and the next one is discovered in the
    same call.
    """

    def __init__(
        self,
        schedule: MLBScheduleSource,
        games: SavantGameFeedSource,
        team_id: int,
        today: Callable[[], datetime.date] = datetime.date.today,
    ) -> None:
        self._schedule = schedule
        self._games = games
        self._team_id = team_id
        self._today = today
        self._game_pk: int | None = None
        self._lock = threading.Lock()

    @property
    def cached_game_pk(self) -> int | None:
        with self._lock:
            return self._game_pk

    def resolve(self) -> LiveGameSnapshot | None:
        with self._lock:
            finished: set[int] = set()
            while True:
                if self._game_pk is None:
                    self._game_pk = self._discover(exclude=finished)
                if self._game_pk is None:
                    logger.info("No upcoming game for team %d", self._team_id)
                    return None

                snapshot = self._games.fetch(self._game_pk)
                if not snapshot.is_final:
                    return snapshot

                logger.info("Game %d is final, looking for the next one", self._game_pk)
                finished.add(self._game_pk)
                self._game_pk = None

    def _discover(self, exclude: set[int]) -> int | None:
        season = self._today().year
        for entry in self._schedule.fetch(season):
            if entry.involves(self._team_id) and not entry.is_final and entry.game_pk not in exclude:
                logger.info("Resolved current game %d for team %d", entry.game_pk, self._team_id)
                return entry.game_pk
        return None
