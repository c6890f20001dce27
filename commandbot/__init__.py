"""Prefix command routing for hikari Discord bots."""

from .commands import ArgumentCollector, ArgumentDeclaration, ArgumentType, Command
from .core import CommandBot, CommandName, CommandRegistry, Dispatcher, EventSystem, ResolvedCommand
from .errors import (
    ArgumentDeclarationError,
    CommandBotError,
    CommandDefinitionError,
    CommandResolutionError,
    RegistrationError,
)

__version__ = "1.0.0"

__all__ = [
    "CommandBot",
    "CommandRegistry",
    "Dispatcher",
    "EventSystem",
    "CommandName",
    "ResolvedCommand",
    "Command",
    "ArgumentCollector",
    "ArgumentDeclaration",
    "ArgumentType",
    "CommandBotError",
    "RegistrationError",
    "CommandDefinitionError",
    "ArgumentDeclarationError",
    "CommandResolutionError",
]
