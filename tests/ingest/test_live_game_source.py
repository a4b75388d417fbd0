import pytest

from bunt.domain.errors import ExtractionError
from bunt.domain.game import WinProbabilityEntry
from bunt.ingest.live_game_source import SavantGameFeedSource
from bunt.services.batted_ball import extract_latest_batted_ball
from tests.fakes.http import RoutingTransport, json_response, make_fetcher
from tests.fakes.payloads import BRAVES, GAME_FEED_PATH, batted_ball, game_feed, wpa_row


class TestSavantGameFeedSource:
    def test_parses_scoreboard_and_events(self) -> None:
        payload = game_feed(
            events=[batted_ball(ab_number=1), batted_ball(ab_number=2)],
            wpa=[wpa_row(0, 1, 0.01), wpa_row(1, 2, -0.03)],
        )
        transport = RoutingTransport({GAME_FEED_PATH: json_response(payload)})
        source = SavantGameFeedSource(make_fetcher(transport))

        snapshot = source.fetch(745804)

        assert transport.requests[0].url.params["game_pk"] == "745804"
        assert snapshot.game_pk == 745804
        assert snapshot.abstract_game_state == "Live"
        assert not snapshot.is_final
        assert snapshot.home_team_id == BRAVES
        assert snapshot.home_name == "Braves"
        assert snapshot.away_name == "Mets"
        assert [event["ab_number"] for event in snapshot.batted_balls] == [1, 2]
        assert snapshot.win_probability == (
            WinProbabilityEntry(at_bat_index=0, cap_index=1, home_win_probability_added=0.01),
            WinProbabilityEntry(at_bat_index=1, cap_index=2, home_win_probability_added=-0.03),
        )

    def test_final_state(self) -> None:
        transport = RoutingTransport({GAME_FEED_PATH: json_response(game_feed(state="Final"))})
        source = SavantGameFeedSource(make_fetcher(transport))

        assert source.fetch(1).is_final

    def test_missing_sections_leave_fields_empty(self) -> None:
        transport = RoutingTransport({GAME_FEED_PATH: json_response({})})
        source = SavantGameFeedSource(make_fetcher(transport))

        snapshot = source.fetch(1)

        assert snapshot.abstract_game_state is None
        assert snapshot.home_name is None
        assert snapshot.batted_balls == ()
        assert snapshot.win_probability == ()

    def test_null_sections_in_pre_game_feed(self) -> None:
        payload = {
            "scoreboard": {"status": None, "teams": None, "stats": {"wpa": None}},
            "exit_velocity": None,
        }
        transport = RoutingTransport({GAME_FEED_PATH: json_response(payload)})
        source = SavantGameFeedSource(make_fetcher(transport))

        snapshot = source.fetch(1)

        assert snapshot.home_team_id is None
        assert snapshot.batted_balls == ()
        assert snapshot.win_probability == ()
        assert extract_latest_batted_ball(snapshot, BRAVES) is None

    def test_null_scoreboard(self) -> None:
        transport = RoutingTransport({GAME_FEED_PATH: json_response({"scoreboard": None})})
        source = SavantGameFeedSource(make_fetcher(transport))

        assert source.fetch(1).abstract_game_state is None

    def test_wpa_rows_without_indexes_are_skipped(self) -> None:
        payload = game_feed(wpa=[{"homeTeamWinProbabilityAdded": 0.5}, wpa_row(3, 0, 0.2)])
        transport = RoutingTransport({GAME_FEED_PATH: json_response(payload)})
        source = SavantGameFeedSource(make_fetcher(transport))

        snapshot = source.fetch(1)

        assert snapshot.win_probability == (WinProbabilityEntry(3, 0, 0.2),)

    def test_non_object_feed_raises(self) -> None:
        transport = RoutingTransport({GAME_FEED_PATH: json_response([])})
        source = SavantGameFeedSource(make_fetcher(transport))

        with pytest.raises(ExtractionError):
            source.fetch(1)
