from dataclasses import dataclass


@dataclass(frozen=True)
class PercentileProfile:
    """A player's most recent Savant percentile rankings.

    Every stat is optional: a hitter has no pitching percentiles and upstream
    leaves cells blank for stats without enough qualifying events.
    """

    player_id: int
    year: int
    name: str
    xwoba: int | None = None
    xba: int | None = None
    xslg: int | None = None
    avg_exit_velocity: int | None = None
    bat_speed: int | None = None
    barrel_pct: int | None = None
    hard_hit_pct: int | None = None
    chase_pct: int | None = None
    whiff_pct: int | None = None
    k_pct: int | None = None
    bb_pct: int | None = None
    oaa: int | None = None
    arm_strength: int | None = None
    sprint_speed: int | None = None
    xera: int | None = None
    fb_velocity: int | None = None
    fb_spin: int | None = None
    cb_spin: int | None = None
    extension: int | None = None

    @property
    def is_hitter(self) -> bool:
        return self.xwoba is not None

    @property
    def is_fielder(self) -> bool:
        return self.oaa is not None or self.arm_strength is not None

    @property
    def is_runner(self) -> bool:
        return self.sprint_speed is not None

    @property
    def is_pitcher(self) -> bool:
        return self.xera is not None
