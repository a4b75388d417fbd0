"""Bot configuration.

Loads configuration from environment variables.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from bunt.domain.team import TeamTarget
from bunt.ingest._retry import DEFAULT_RETRY_INTERVAL


@dataclass(frozen=True)
class BuntConfig:
    """Configuration for the bot.

    Attributes:
        bot_token: Discord bot token (required).
        allowed_channels: Optional tuple of channel IDs where the bot answers.
            If None, the bot answers in every channel it can read.
        command_prefix: Character that marks a message as a command.
        retry_interval: Seconds to wait before re-sending a failed upstream request.
        team: The team, league and division the bot follows.
    """

    bot_token: str
    allowed_channels: tuple[int, ...] | None = None
    command_prefix: str = "~"
    retry_interval: float = DEFAULT_RETRY_INTERVAL
    team: TeamTarget = field(default_factory=TeamTarget)


class ConfigurationError(Exception):
    """Raised when required configuration is missing."""


def _int_env(name: str, default: int) -> int:
    value = os.environ.get(name)
    if not value:
        return default
    try:
        return int(value)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be an integer: {e}") from e


def load_team_target() -> TeamTarget:
    """Load the followed team from BUNT_TEAM_ID, BUNT_LEAGUE_ID and BUNT_DIVISION_ID, defaulting to the Braves."""
    defaults = TeamTarget()
    return TeamTarget(
        team_id=_int_env("BUNT_TEAM_ID", defaults.team_id),
        league_id=_int_env("BUNT_LEAGUE_ID", defaults.league_id),
        division_id=_int_env("BUNT_DIVISION_ID", defaults.division_id),
    )


def load_bunt_config() -> BuntConfig:
    """Load bot configuration from environment variables.

    Environment variables:
        BUNT_DISCORD_TOKEN: Required. The Discord bot token.
        BUNT_ALLOWED_CHANNELS: Optional. Comma-separated list of channel IDs.
        BUNT_RETRY_INTERVAL: Optional. Seconds between upstream retries.
        BUNT_TEAM_ID, BUNT_LEAGUE_ID, BUNT_DIVISION_ID: Optional. The followed team.

    Returns:
        BuntConfig instance.

    Raises:
        ConfigurationError: If required environment variables are missing or malformed.
    """
    bot_token = os.environ.get("BUNT_DISCORD_TOKEN")
    if not bot_token:
        raise ConfigurationError("BUNT_DISCORD_TOKEN environment variable is required")

    allowed_channels: tuple[int, ...] | None = None
    allowed_channels_str = os.environ.get("BUNT_ALLOWED_CHANNELS")
    if allowed_channels_str:
        try:
            allowed_channels = tuple(int(ch.strip()) for ch in allowed_channels_str.split(",") if ch.strip())
        except ValueError as e:
            raise ConfigurationError(f"BUNT_ALLOWED_CHANNELS must be comma-separated integers: {e}") from e

    retry_interval = DEFAULT_RETRY_INTERVAL
    retry_interval_str = os.environ.get("BUNT_RETRY_INTERVAL")
    if retry_interval_str:
        try:
            retry_interval = float(retry_interval_str)
        except ValueError as e:
            raise ConfigurationError(f"BUNT_RETRY_INTERVAL must be a number of seconds: {e}") from e
        if retry_interval < 0:
            raise ConfigurationError("BUNT_RETRY_INTERVAL must not be negative")

    return BuntConfig(
        bot_token=bot_token,
        allowed_channels=allowed_channels,
        retry_interval=retry_interval,
        team=load_team_target(),
    )
