import logging
from typing import Optional

import hikari

from config.settings import BotSettings, settings as default_settings

from ..middleware import logging_middleware
from .dispatcher import Dispatcher
from .event_system import EventSystem
from .registry import CommandRegistry

logger = logging.getLogger(__name__)


class CommandBot:
    """Discord client routing prefixed messages to registered commands."""

    def __init__(self, settings: Optional[BotSettings] = None) -> None:
        self.settings = settings or default_settings
        if not self.settings.discord_token:
            raise ValueError("DISCORD_TOKEN is not configured.")

        intents = hikari.Intents.ALL_MESSAGES | hikari.Intents.GUILDS | hikari.Intents.MESSAGE_CONTENT
        self.hikari_bot = hikari.GatewayBot(token=self.settings.discord_token, intents=intents)

        # Fixed for the lifetime of the client
        self._command_prefix = self.settings.command_prefix

        self.event_system = EventSystem()
        self.event_system.add_middleware(logging_middleware)

        self.registry = CommandRegistry(self)
        self.dispatcher = Dispatcher(
            self,
            self.registry,
            prefix=self._command_prefix,
            collapse_whitespace=self.settings.collapse_whitespace,
        )

        if self.settings.register_default_types:
            self.registry.register_default_types()
        if self.settings.register_default_commands:
            self.registry.register_default_commands()

        self._setup_event_listeners()

    @property
    def command_prefix(self) -> str:
        return self._command_prefix

    @property
    def rest(self) -> hikari.api.RESTClient:
        return self.hikari_bot.rest

    @property
    def cache(self) -> hikari.api.Cache:
        return self.hikari_bot.cache

    def _setup_event_listeners(self) -> None:
        @self.hikari_bot.listen(hikari.StartedEvent)
        async def on_started(event: hikari.StartedEvent) -> None:
            logger.info(
                f"Bot has started with {len(self.registry.commands)} commands "
                f"and {len(self.registry.types)} argument types"
            )

        @self.hikari_bot.listen(hikari.StoppingEvent)
        async def on_stopping(event: hikari.StoppingEvent) -> None:
            logger.info("Bot is stopping...")

        @self.hikari_bot.listen(hikari.MessageCreateEvent)
        async def on_message_create(event: hikari.MessageCreateEvent) -> None:
            await self.on_message(event)

    async def on_message(self, event: hikari.MessageCreateEvent) -> None:
        logger.debug(f"Message received: '{event.content}' from {event.author.username}")

        handled = await self.dispatcher.handle_message(event)
        if not handled:
            await self.event_system.emit("message_create", event)

    def run(self) -> None:
        try:
            logger.info("Starting Discord bot...")
            self.hikari_bot.run()
        except KeyboardInterrupt:
            logger.info("Bot stopped by user")
        except Exception as e:
            logger.error(f"Bot crashed: {e}")
            raise
