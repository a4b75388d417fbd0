from dataclasses import dataclass


@dataclass(frozen=True)
class StandingsSelector:
    league_id: int
    division_id: int
    wild_card: bool = False


@dataclass(frozen=True)
class StandingsRow:
    marker: str
    club_name: str
    winning_percentage: str
    third: str
    fourth: str


@dataclass(frozen=True)
class StandingsTable:
    title: str
    headers: tuple[str, str, str, str]
    rows: tuple[StandingsRow, ...]
    wild_card: bool = False
