from dataclasses import dataclass

ATLANTA_BRAVES_TEAM_ID = 144
AMERICAN_LEAGUE_ID = 103
NATIONAL_LEAGUE_ID = 104
NL_EAST_DIVISION_ID = 204


@dataclass(frozen=True)
class TeamTarget:
    team_id: int = ATLANTA_BRAVES_TEAM_ID
    league_id: int = NATIONAL_LEAGUE_ID
    division_id: int = NL_EAST_DIVISION_ID
