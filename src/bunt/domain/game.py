from dataclasses import dataclass, field
from typing import Any

FINAL_GAME_STATE = "Final"
HOME_RUN_DISTANCE = 300


@dataclass(frozen=True)
class ScheduleEntry:
    game_pk: int
    home_team_id: int | None
    away_team_id: int | None
    abstract_game_state: str | None = None

    def involves(self, team_id: int) -> bool:
        return team_id in (self.home_team_id, self.away_team_id)

    @property
    def is_final(self) -> bool:
        return self.abstract_game_state == FINAL_GAME_STATE


@dataclass(frozen=True)
class WinProbabilityEntry:
    at_bat_index: int
    cap_index: int
    home_win_probability_added: float | None = None


@dataclass(frozen=True)
class LiveGameSnapshot:
    """One decoded Savant game feed.

    ``batted_balls`` keeps the raw upstream events in feed order; only the one
    being reported on is parsed into a :class:`BattedBallEvent`.
    """

    game_pk: int
    abstract_game_state: str | None = None
    home_team_id: int | None = None
    home_name: str | None = None
    away_name: str | None = None
    batted_balls: tuple[dict[str, Any], ...] = ()
    win_probability: tuple[WinProbabilityEntry, ...] = field(default=())

    @property
    def is_final(self) -> bool:
        return self.abstract_game_state == FINAL_GAME_STATE


@dataclass(frozen=True)
class BattedBallEvent:
    """One ball put in play. Exit velocity, launch angle and xBA keep Savant's own text."""

    description: str
    at_bat_number: int
    cap_index: int
    exit_velocity: str
    launch_angle: str
    hit_distance: int
    xba: str
    home_run_ballparks: int | None = None

    @property
    def win_probability_key(self) -> tuple[int, int]:
        # Event at-bat numbers are 1-based, the WPA table is 0-based.
        return self.at_bat_number - 1, self.cap_index


@dataclass(frozen=True)
class BattedBallReport:
    event: BattedBallEvent
    home_name: str
    away_name: str
    is_home: bool
    win_probability_added: float
