import logging
import re
from typing import Any, List, Optional

import hikari

from config.settings import settings

from .registry import CommandName, CommandRegistry

logger = logging.getLogger(__name__)


class MessageContext:
    """The inbound message a command is dispatched for."""

    def __init__(self, event: hikari.MessageCreateEvent, bot: Any):
        self.event = event
        self.bot = bot

        self.content: str = event.content or ""
        self.author = event.author
        self.member = getattr(event, "member", None)
        self.guild_id = getattr(event, "guild_id", None)
        self.channel_id = event.channel_id
        self.message_id = event.message_id

        # Name typed after the prefix, set once the message is tokenized
        self.command_name: Optional[str] = None

    def get_guild(self) -> Optional[hikari.Guild]:
        if self.guild_id:
            return self.bot.cache.get_guild(self.guild_id)
        return None

    async def reply(self, content: str = None, *, embed: hikari.Embed = None) -> None:
        await self.bot.rest.create_message(
            self.channel_id,
            content=content,
            embed=embed,
            reply=self.message_id,
        )


class Dispatcher:
    def __init__(
        self,
        bot: Any,
        registry: CommandRegistry,
        prefix: Optional[str] = None,
        collapse_whitespace: Optional[bool] = None,
    ):
        self.bot = bot
        self.registry = registry
        self.prefix = prefix if prefix is not None else settings.command_prefix
        if not self.prefix:
            raise ValueError("Command prefix cannot be empty.")
        self.collapse_whitespace = (
            collapse_whitespace if collapse_whitespace is not None else settings.collapse_whitespace
        )
        self._pattern = re.compile(rf"^{re.escape(self.prefix)}\w+(\s+)?(.+)?", re.IGNORECASE | re.DOTALL)

    def should_handle_message(self, ctx: MessageContext) -> bool:
        # Ignore bot messages, our own included
        if ctx.author.is_bot:
            return False
        return bool(ctx.content and self._pattern.match(ctx.content))

    def parse_message(self, content: str) -> List[str]:
        """Split a message into the command name followed by its raw arguments."""
        body = content[len(self.prefix):]
        if self.collapse_whitespace:
            return body.split()
        # Legacy tokenizer: only the first whitespace run is collapsed
        return re.sub(r"\s+", " ", body, count=1).split(" ")

    async def handle_message(self, event: hikari.MessageCreateEvent) -> bool:
        ctx = MessageContext(event, self.bot)
        if not self.should_handle_message(ctx):
            return False

        tokens = self.parse_message(ctx.content)
        ctx.command_name = tokens.pop(0).lower()

        command = self.registry.resolve_command(CommandName(ctx.command_name))
        if command is None:
            logger.info(f"Unknown command: {self.prefix}{ctx.command_name} by {ctx.author.username}")
            if self.registry.unknown_command is not None:
                await self._run(self.registry.unknown_command, ctx, None)
            await self.bot.event_system.emit("unknown_command", ctx)
            return True

        logger.info(f"Prefix command called: {self.prefix}{command.name} by {ctx.author.username}")

        args = None
        collector = command.has_arguments()
        if collector is not None:
            collection = collector.collect(ctx, command, tokens)
            if collection.failed:
                logger.info(f"Rejected {command.name} arguments: {collection.message}")
                await ctx.reply(collection.message)
                return True
            args = collection.values

        if not await self._run(command, ctx, args):
            return True

        await self.bot.event_system.emit("command_trigger", command, args, ctx)
        return True

    async def _run(self, command: Any, ctx: MessageContext, args: Optional[dict]) -> bool:
        try:
            await command.run(ctx, args)
            return True
        except Exception as e:
            logger.exception(f"Error executing prefix command {command.name}: {e}")
            await self.bot.event_system.emit("command_error", command, e, ctx)
            try:
                await ctx.reply(f"an error occurred while running `{command.name}`.")
            except hikari.HikariError as reply_error:
                logger.error(f"Could not report the failure of {command.name}: {reply_error}")
            return False
