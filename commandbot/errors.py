"""Exceptions raised by the command system.

Everything here signals a programming or configuration mistake. User input
problems (missing or invalid arguments) are reported through
:class:`~commandbot.commands.collector.CollectionResult` instead.
"""


class CommandBotError(Exception):
    """Base class for command system errors."""


class RegistrationError(CommandBotError, ValueError):
    """A type or command could not be added to the registry."""


class CommandDefinitionError(CommandBotError, ValueError):
    """A command was constructed with invalid metadata."""


class ArgumentDeclarationError(CommandBotError, ValueError):
    """A command declared its arguments in an unusable way."""


class CommandResolutionError(CommandBotError, TypeError):
    """A command reference could not be resolved."""
