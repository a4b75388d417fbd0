import logging
from typing import Any

from bunt.domain.errors import ExtractionError
from bunt.domain.game import HOME_RUN_DISTANCE, BattedBallEvent, BattedBallReport, LiveGameSnapshot

logger = logging.getLogger(__name__)


def _require(event: dict[str, Any], key: str, description: str) -> Any:
    value = event.get(key)
    if value is None or value == "":
        raise ExtractionError(f"Could not get {description}")
    return value


def _integer(event: dict[str, Any], key: str, description: str) -> int:
    # Savant sends most numbers as strings.
    raw = _require(event, key, description)
    try:
        return int(raw)
    except (TypeError, ValueError) as e:
        raise ExtractionError(f"Could not parse {description}: {raw!r}") from e


def parse_batted_ball_event(event: dict[str, Any]) -> BattedBallEvent:
    hit_distance = _integer(event, "hit_distance", "hit distance")
    home_run_ballparks = (event.get("contextMetrics") or {}).get("homeRunBallparks")
    if hit_distance >= HOME_RUN_DISTANCE and not isinstance(home_run_ballparks, int):
        raise ExtractionError("Could not get home run ballpark quantity")

    return BattedBallEvent(
        description=str(_require(event, "des", "description")),
        at_bat_number=_integer(event, "ab_number", "at bat number"),
        cap_index=_integer(event, "cap_index", "cap index"),
        exit_velocity=str(_require(event, "hit_speed", "hit speed")),
        launch_angle=str(_require(event, "hit_angle", "hit angle")),
        hit_distance=hit_distance,
        xba=str(_require(event, "xba", "xBA")),
        home_run_ballparks=home_run_ballparks if isinstance(home_run_ballparks, int) else None,
    )


def extract_latest_batted_ball(snapshot: LiveGameSnapshot, team_id: int) -> BattedBallReport | None:
    """Describe the most recent ball put in play, from *team_id*'s point of view.

    Returns None before the first batted ball of the game.
    """
    if not snapshot.batted_balls:
        logger.info("No batted balls yet in game %d", snapshot.game_pk)
        return None

    event = parse_batted_ball_event(snapshot.batted_balls[-1])
    if snapshot.home_name is None:
        raise ExtractionError("Could not get home team name")
    if snapshot.away_name is None:
        raise ExtractionError("Could not get away team name")
    if snapshot.home_team_id is None:
        raise ExtractionError("Could not get home team id")
    is_home = snapshot.home_team_id == team_id

    key = event.win_probability_key
    matches = [entry for entry in snapshot.win_probability if (entry.at_bat_index, entry.cap_index) == key]
    if not matches:
        raise ExtractionError(f"No win probability entry for at bat {key[0]}, cap {key[1]}")
    home_added = matches[-1].home_win_probability_added
    if home_added is None:
        raise ExtractionError("Could not get WPA")

    return BattedBallReport(
        event=event,
        home_name=snapshot.home_name,
        away_name=snapshot.away_name,
        is_home=is_home,
        win_probability_added=home_added if is_home else -home_added,
    )
