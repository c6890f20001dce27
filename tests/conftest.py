"""Pytest configuration and shared fixtures."""

import logging
from unittest.mock import AsyncMock, MagicMock

import hikari
import pytest

from commandbot.commands.base import Command
from commandbot.core.dispatcher import Dispatcher
from commandbot.core.event_system import EventSystem
from commandbot.core.registry import CommandRegistry

# Disable logging during tests
logging.disable(logging.CRITICAL)


@pytest.fixture
def mock_hikari_bot():
    """Mock Hikari bot instance."""
    bot = MagicMock(spec=hikari.GatewayBot)
    bot.cache = MagicMock()
    bot.rest = MagicMock()
    bot.rest.create_message = AsyncMock()
    bot.get_me = MagicMock(
        return_value=MagicMock(
            id=12345,
            username="TestBot",
            display_name="TestBot",
        )
    )
    bot.heartbeat_latency = 0.05
    bot.cache.get_guild = MagicMock(return_value=None)
    return bot


@pytest.fixture
def mock_bot(mock_hikari_bot):
    """Mock client with a real, empty registry and event system."""
    bot = MagicMock()
    bot.hikari_bot = mock_hikari_bot
    bot.rest = mock_hikari_bot.rest
    bot.cache = mock_hikari_bot.cache
    bot.command_prefix = "!"
    bot.event_system = EventSystem()
    bot.registry = CommandRegistry(bot)
    return bot


@pytest.fixture
def registry(mock_bot):
    """Registry with the built-in argument types."""
    mock_bot.registry.register_default_types()
    return mock_bot.registry


@pytest.fixture
def dispatcher(mock_bot, registry):
    """Dispatcher using the ``!`` prefix."""
    return Dispatcher(mock_bot, registry, prefix="!", collapse_whitespace=True)


@pytest.fixture
def mock_user():
    """Mock Discord user."""
    user = MagicMock(spec=hikari.User)
    user.id = 111111111
    user.username = "testuser"
    user.display_name = "Test User"
    user.is_bot = False
    user.mention = "<@111111111>"
    return user


@pytest.fixture
def mock_message_event(mock_user):
    """Mock message create event."""
    event = MagicMock(spec=hikari.GuildMessageCreateEvent)
    event.author = mock_user
    event.member = MagicMock()
    event.guild_id = 123456789
    event.channel_id = 444444444
    event.message_id = 555555555
    event.content = "!test command"
    return event


@pytest.fixture
def mock_context(mock_bot, mock_user):
    """Mock message context handed to commands and argument types."""
    ctx = MagicMock()
    ctx.bot = mock_bot
    ctx.author = mock_user
    ctx.channel_id = 444444444
    ctx.message_id = 555555555
    ctx.command_name = None
    ctx.reply = AsyncMock()
    return ctx


def make_command_class(
    command_name,
    aliases=None,
    args=None,
    hidden=False,
    unknown=False,
    description=None,
    run=None,
):
    """Build a Command subclass the registry can instantiate."""

    def __init__(self, bot):
        Command.__init__(
            self,
            bot,
            name=command_name,
            aliases=aliases,
            description=description,
            args=args,
            hidden=hidden,
            unknown=unknown,
        )
        self.run = run or AsyncMock()

    class_name = f"{command_name.title().replace('-', '').replace('_', '')}Command"
    return type(class_name, (Command,), {"__init__": __init__})


@pytest.fixture
def command_factory():
    """Factory for Command subclasses with an ``AsyncMock`` run."""
    return make_command_class
