"""Blocking query operations shared by the Discord bot and the CLI."""

from __future__ import annotations

import datetime
import logging
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING

from bunt.domain.team import TeamTarget
from bunt.ingest.fetcher import ResilientFetcher
from bunt.ingest.live_game_source import SavantGameFeedSource
from bunt.ingest.percentile_source import SavantPercentileSource
from bunt.ingest.player_search_source import SavantPlayerSearchSource
from bunt.ingest.schedule_source import MLBScheduleSource
from bunt.ingest.standings_source import MLBStandingsSource
from bunt.services.batted_ball import extract_latest_batted_ball
from bunt.services.game_cache import GameResolutionCache
from bunt.services.standings import build_standings_table, parse_standings_selector

if TYPE_CHECKING:
    from bunt.domain.game import BattedBallReport
    from bunt.domain.percentile import PercentileProfile
    from bunt.domain.standings import StandingsTable

logger = logging.getLogger(__name__)


def _utc_now() -> datetime.datetime:
    return datetime.datetime.now(datetime.UTC)


class BaseballQueries:
    """One instance per process: it owns the game cache the bot shares across messages."""

    def __init__(
        self,
        team: TeamTarget,
        game_cache: GameResolutionCache,
        standings: MLBStandingsSource,
        player_search: SavantPlayerSearchSource,
        percentiles: SavantPercentileSource,
        now: Callable[[], datetime.datetime] = _utc_now,
    ) -> None:
        self._team = team
        self._game_cache = game_cache
        self._standings = standings
        self._player_search = player_search
        self._percentiles = percentiles
        self._now = now

    @classmethod
    def create(cls, team: TeamTarget, fetcher: ResilientFetcher) -> BaseballQueries:
        return cls(
            team=team,
            game_cache=GameResolutionCache(MLBScheduleSource(fetcher), SavantGameFeedSource(fetcher), team.team_id),
            standings=MLBStandingsSource(fetcher),
            player_search=SavantPlayerSearchSource(fetcher),
            percentiles=SavantPercentileSource(fetcher),
        )

    @property
    def team(self) -> TeamTarget:
        return self._team

    def latest_batted_ball(self) -> BattedBallReport | None:
        snapshot = self._game_cache.resolve()
        if snapshot is None:
            return None
        return extract_latest_batted_ball(snapshot, self._team.team_id)

    def standings(self, words: Iterable[str]) -> StandingsTable:
        selector = parse_standings_selector(words, self._team)
        logger.debug("Standings selector %s", selector)
        records = self._standings.fetch(selector.league_id)
        return build_standings_table(records, selector, self._now())

    def resolve_player(self, argument: str) -> int | None:
        """A numeric argument is taken as a player id; anything else is searched by name."""
        argument = argument.strip()
        if not argument:
            return None
        try:
            return int(argument)
        except ValueError:
            return self._player_search.search(argument)

    def percentiles(self, player_id: int) -> PercentileProfile | None:
        return self._percentiles.fetch(player_id)
