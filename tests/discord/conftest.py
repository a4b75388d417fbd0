"""Test fixtures for Discord bot tests."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from bunt.discord.config import BuntConfig
from bunt.services.queries import BaseballQueries


@pytest.fixture
def bunt_config() -> BuntConfig:
    """Create a test bot configuration."""
    return BuntConfig(
        bot_token="test-token-123",
        allowed_channels=(123456789, 987654321),
        retry_interval=0,
    )


@pytest.fixture
def bunt_config_no_channels() -> BuntConfig:
    """Create a test bot configuration without channel restrictions."""
    return BuntConfig(
        bot_token="test-token-123",
        allowed_channels=None,
        retry_interval=0,
    )


@pytest.fixture
def queries() -> MagicMock:
    """A stand-in for the blocking query operations."""
    return MagicMock(spec=BaseballQueries)
