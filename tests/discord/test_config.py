import os
from unittest.mock import patch

import pytest

from bunt.discord.config import ConfigurationError, load_bunt_config, load_team_target
from bunt.domain.team import TeamTarget


class TestLoadBuntConfig:
    def test_token_only(self) -> None:
        with patch.dict(os.environ, {"BUNT_DISCORD_TOKEN": "test-token"}, clear=True):
            config = load_bunt_config()

        assert config.bot_token == "test-token"
        assert config.allowed_channels is None
        assert config.command_prefix == "~"
        assert config.retry_interval == 1.5
        assert config.team == TeamTarget(team_id=144, league_id=104, division_id=204)

    def test_with_channels(self) -> None:
        with patch.dict(
            os.environ,
            {"BUNT_DISCORD_TOKEN": "test-token", "BUNT_ALLOWED_CHANNELS": "123, 456,789"},
            clear=True,
        ):
            config = load_bunt_config()

        assert config.allowed_channels == (123, 456, 789)

    def test_missing_token_raises(self) -> None:
        with patch.dict(os.environ, {}, clear=True), pytest.raises(ConfigurationError, match="BUNT_DISCORD_TOKEN"):
            load_bunt_config()

    def test_invalid_channels_raises(self) -> None:
        with (
            patch.dict(
                os.environ,
                {"BUNT_DISCORD_TOKEN": "test-token", "BUNT_ALLOWED_CHANNELS": "123,not-a-number"},
                clear=True,
            ),
            pytest.raises(ConfigurationError, match="comma-separated integers"),
        ):
            load_bunt_config()

    def test_retry_interval(self) -> None:
        with patch.dict(os.environ, {"BUNT_DISCORD_TOKEN": "t", "BUNT_RETRY_INTERVAL": "0.25"}, clear=True):
            assert load_bunt_config().retry_interval == 0.25

    @pytest.mark.parametrize("value", ["soon", "-1"])
    def test_invalid_retry_interval_raises(self, value: str) -> None:
        with (
            patch.dict(os.environ, {"BUNT_DISCORD_TOKEN": "t", "BUNT_RETRY_INTERVAL": value}, clear=True),
            pytest.raises(ConfigurationError, match="BUNT_RETRY_INTERVAL"),
        ):
            load_bunt_config()


class TestLoadTeamTarget:
    def test_overrides(self) -> None:
        env = {"BUNT_TEAM_ID": "147", "BUNT_LEAGUE_ID": "103", "BUNT_DIVISION_ID": "201"}
        with patch.dict(os.environ, env, clear=True):
            assert load_team_target() == TeamTarget(team_id=147, league_id=103, division_id=201)

    def test_invalid_team_raises(self) -> None:
        with patch.dict(os.environ, {"BUNT_TEAM_ID": "braves"}, clear=True), pytest.raises(
            ConfigurationError, match="BUNT_TEAM_ID"
        ):
            load_team_target()
