"""Discord frontend for Bunt.

Answers prefixed commands (``~ev``, ``~standings``, ``~savant``, ``~help``)
about the followed team's live game, the standings and Statcast percentiles.

Public API:
    create_bot(config) -> BuntBot
    run_bot(config) -> None (async)
    load_bunt_config() -> BuntConfig

Example usage:
    import asyncio
    from bunt.discord import load_bunt_config, run_bot

    config = load_bunt_config()
    asyncio.run(run_bot(config))
"""

from bunt.discord.bot import (
    BuntBot,
    create_bot,
    run_bot,
)
from bunt.discord.config import (
    BuntConfig,
    ConfigurationError,
    load_bunt_config,
)

__all__ = [
    "BuntBot",
    "BuntConfig",
    "ConfigurationError",
    "create_bot",
    "load_bunt_config",
    "run_bot",
]
