import datetime

from bunt.domain.team import TeamTarget
from bunt.ingest.live_game_source import SavantGameFeedSource
from bunt.ingest.percentile_source import SavantPercentileSource
from bunt.ingest.player_search_source import SavantPlayerSearchSource
from bunt.ingest.schedule_source import MLBScheduleSource
from bunt.ingest.standings_source import MLBStandingsSource
from bunt.services.game_cache import GameResolutionCache
from bunt.services.queries import BaseballQueries
from tests.fakes.http import RoutingTransport, html_response, json_response, make_fetcher
from tests.fakes.payloads import (
    BRAVES,
    GAME_FEED_PATH,
    PLAYER_SEARCH_PATH,
    SCHEDULE_PATH,
    STANDINGS_PATH,
    batted_ball,
    division_record,
    game_feed,
    percentile_page,
    schedule_game,
    schedule_payload,
    team_record,
    wpa_row,
)


def _queries(routes: dict) -> tuple[BaseballQueries, RoutingTransport]:
    transport = RoutingTransport(routes)
    fetcher = make_fetcher(transport)
    team = TeamTarget()
    queries = BaseballQueries(
        team=team,
        game_cache=GameResolutionCache(
            MLBScheduleSource(fetcher),
            SavantGameFeedSource(fetcher),
            team.team_id,
            today=lambda: datetime.date(2024, 7, 4),
        ),
        standings=MLBStandingsSource(fetcher),
        player_search=SavantPlayerSearchSource(fetcher),
        percentiles=SavantPercentileSource(fetcher),
        now=lambda: datetime.datetime(2024, 7, 4, tzinfo=datetime.UTC),
    )
    return queries, transport


class TestBaseballQueries:
    def test_latest_batted_ball(self) -> None:
        queries, _ = _queries(
            {
                SCHEDULE_PATH: json_response(schedule_payload([schedule_game(7)])),
                GAME_FEED_PATH: json_response(game_feed(events=[batted_ball()], wpa=[wpa_row(9, 3, 0.02)])),
            }
        )

        report = queries.latest_batted_ball()

        assert report is not None
        assert report.is_home
        assert report.win_probability_added == 0.02

    def test_latest_batted_ball_without_game(self) -> None:
        queries, transport = _queries({SCHEDULE_PATH: json_response(schedule_payload())})

        assert queries.latest_batted_ball() is None
        assert transport.calls_to(GAME_FEED_PATH) == []

    def test_standings_uses_words(self) -> None:
        records = [division_record(200, "AL West", [team_record("Astros", division_leader=True)])]
        queries, transport = _queries({STANDINGS_PATH: json_response({"records": records})})

        table = queries.standings(["st", "al", "west"])

        assert table.title == "AL West Standings"
        assert transport.requests[0].url.params["leagueId"] == "103"

    def test_numeric_player_argument_skips_search(self) -> None:
        queries, transport = _queries({})

        assert queries.resolve_player(" 660670 ") == 660670
        assert transport.requests == []

    def test_named_player_is_searched(self) -> None:
        queries, _ = _queries({PLAYER_SEARCH_PATH: json_response([{"id": "605141"}])})

        assert queries.resolve_player("mookie betts") == 605141

    def test_empty_player_argument(self) -> None:
        queries, transport = _queries({})

        assert queries.resolve_player("  ") is None
        assert transport.requests == []

    def test_percentiles(self) -> None:
        queries, _ = _queries({"/savant-player/605141": html_response(percentile_page([["2024", "77"]]))})

        profile = queries.percentiles(605141)

        assert profile is not None
        assert profile.xwoba == 77

    def test_create_wires_sources(self) -> None:
        queries = BaseballQueries.create(TeamTarget(team_id=BRAVES), make_fetcher(RoutingTransport({})))

        assert queries.team.team_id == BRAVES
