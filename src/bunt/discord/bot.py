"""Discord client for Bunt.

Reads prefixed commands from channel messages and answers each with one embed.
Upstream queries block, so every handler runs them on a worker thread and
shows a typing indicator while they are in flight.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

import discord
from bunt.discord.commands import Command, CommandKind, parse_command
from bunt.discord.embeds import batted_ball_embed, help_embed, percentile_embed, standings_embed
from bunt.ingest._retry import RetryPolicy
from bunt.ingest.fetcher import ResilientFetcher
from bunt.services.queries import BaseballQueries

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from bunt.discord.config import BuntConfig

logger = logging.getLogger(__name__)

NO_PLAYER_MESSAGE = "No player ID or name matched the given argument"


class BuntBot(discord.Client):
    """Discord bot answering game, standings and Statcast percentile commands.

    Each message is handled independently; a failure while answering one is
    logged and never reaches the others.
    """

    def __init__(
        self,
        config: BuntConfig,
        queries: BaseballQueries,
        fetcher: ResilientFetcher | None = None,
        **kwargs,
    ) -> None:
        """Initialize the bot.

        Args:
            config: Bot configuration.
            queries: Query operations, shared by every message.
            fetcher: HTTP fetcher to close when the bot shuts down.
            **kwargs: Additional arguments passed to discord.Client.
        """
        # Commands are plain messages, so the bot must read message content
        intents = discord.Intents.default()
        intents.message_content = True

        super().__init__(intents=intents, **kwargs)

        self._config = config
        self._queries = queries
        self._fetcher = fetcher
        self._handlers: dict[CommandKind, Callable[[discord.Message, Command], Awaitable[None]]] = {
            CommandKind.BATTED_BALL: self._send_batted_ball,
            CommandKind.STANDINGS: self._send_standings,
            CommandKind.PERCENTILES: self._send_percentiles,
            CommandKind.HELP: self._send_help,
        }

    async def on_ready(self) -> None:
        """Handle bot ready event."""
        logger.info("Bot is ready. Logged in as %s (ID: %s)", self.user, self.user.id if self.user else "unknown")

    async def on_message(self, message: discord.Message) -> None:
        """Dispatch a command message to its handler.

        Args:
            message: The incoming Discord message.
        """
        if message.author == self.user:
            return

        if self._config.allowed_channels:
            if isinstance(message.channel, discord.Thread):
                channel_id = message.channel.parent_id
            else:
                channel_id = message.channel.id
            if channel_id not in self._config.allowed_channels:
                logger.debug("Ignoring message in non-allowed channel: %s", channel_id)
                return

        command = parse_command(message.content, self._config.command_prefix)
        if command is None:
            return

        logger.info("Handling ~%s from %s", command.verb, message.author)
        try:
            await self._handlers[command.kind](message, command)
        except Exception:
            logger.exception("Error handling %r in channel %s", message.content, message.channel.id)

    async def _send_batted_ball(self, message: discord.Message, command: Command) -> None:
        async with message.channel.typing():
            report = await asyncio.to_thread(self._queries.latest_batted_ball)
        if report is None:
            return
        await message.channel.send(embed=batted_ball_embed(report))

    async def _send_standings(self, message: discord.Message, command: Command) -> None:
        async with message.channel.typing():
            table = await asyncio.to_thread(self._queries.standings, command.words)
        await message.channel.send(embed=standings_embed(table))

    async def _send_percentiles(self, message: discord.Message, command: Command) -> None:
        player_id = await asyncio.to_thread(self._queries.resolve_player, command.argument)
        if player_id is None:
            await message.channel.send(NO_PLAYER_MESSAGE)
            return

        async with message.channel.typing():
            profile = await asyncio.to_thread(self._queries.percentiles, player_id)
        if profile is None:
            return
        await message.channel.send(embed=percentile_embed(profile))

    async def _send_help(self, message: discord.Message, command: Command) -> None:
        await message.channel.send(embed=help_embed())

    async def close(self) -> None:
        await super().close()
        if self._fetcher is not None:
            self._fetcher.close()


def create_bot(config: BuntConfig) -> BuntBot:
    """Create a new bot instance wired to the live upstream services.

    Args:
        config: Bot configuration.

    Returns:
        A configured BuntBot instance.
    """
    fetcher = ResilientFetcher(retry_policy=RetryPolicy(interval=config.retry_interval))
    return BuntBot(config, BaseballQueries.create(config.team, fetcher), fetcher=fetcher)


async def run_bot(config: BuntConfig) -> None:
    """Run the bot until it disconnects.

    Args:
        config: Bot configuration.
    """
    bot = create_bot(config)
    await bot.start(config.bot_token)
