"""Command and argument type registry."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from ..commands.base import Command
from ..commands.parsers import DEFAULT_TYPES, ArgumentType
from ..errors import CommandResolutionError, RegistrationError

logger = logging.getLogger(__name__)


class CommandReference(ABC):
    """Something the registry can resolve to a command."""

    @abstractmethod
    def resolve(self, registry: CommandRegistry) -> Command | None:
        ...


@dataclass(frozen=True, slots=True)
class ResolvedCommand(CommandReference):
    command: Command

    def resolve(self, registry: CommandRegistry) -> Command:
        return self.command


@dataclass(frozen=True, slots=True)
class CommandName(CommandReference):
    name: str

    def resolve(self, registry: CommandRegistry) -> Command | None:
        if not self.name:
            return None
        return registry.find_command(self.name)


class CommandRegistry:
    """Registers and looks up commands and argument types.

    Populated once at startup; read-only while messages are dispatched.
    """

    def __init__(self, bot: Any) -> None:
        self.bot = bot
        self.commands: dict[str, Command] = {}
        self.types: dict[str, ArgumentType] = {}
        self.unknown_command: Command | None = None

    def _notify(self, event_name: str, *args: Any) -> None:
        events = getattr(self.bot, "event_system", None)
        if events is not None:
            events.emit_nowait(event_name, *args)

    def register_type(self, type_cls: type[ArgumentType]) -> CommandRegistry:
        if not (isinstance(type_cls, type) and issubclass(type_cls, ArgumentType)):
            raise RegistrationError(f"Invalid argument type to register: {type_cls!r}")
        argument_type = type_cls(self.bot)

        if argument_type.id in self.types:
            raise RegistrationError(f'An argument type with the ID "{argument_type.id}" is already registered.')

        self.types[argument_type.id] = argument_type
        logger.info(f"Registered argument type: {argument_type.id}")
        self._notify("type_registered", argument_type)
        return self

    def register_types(self, types: Iterable[type[ArgumentType]]) -> CommandRegistry:
        if not isinstance(types, (list, tuple)):
            raise RegistrationError("Types must be a list.")
        for type_cls in types:
            self.register_type(type_cls)
        return self

    def register_command(self, command_cls: type[Command]) -> CommandRegistry:
        if not (isinstance(command_cls, type) and issubclass(command_cls, Command)):
            raise RegistrationError(f"Invalid command to register: {command_cls!r}")
        command = command_cls(self.bot)

        for keyword in sorted(command.keywords):
            if any(keyword in registered.keywords for registered in self.commands.values()):
                raise RegistrationError(f'A command with the name/alias "{keyword}" is already registered.')
        if command.unknown and self.unknown_command is not None:
            raise RegistrationError("An unknown command is already registered.")

        self.commands[command.name] = command
        if command.unknown:
            self.unknown_command = command

        logger.info(f"Registered command: {command.name} (aliases: {command.aliases})")
        self._notify("command_registered", command)
        return self

    def register_commands(self, commands: Iterable[type[Command]]) -> CommandRegistry:
        if not isinstance(commands, (list, tuple)):
            raise RegistrationError("Commands must be a list.")
        for command_cls in commands:
            self.register_command(command_cls)
        return self

    def register_defaults(self) -> CommandRegistry:
        self.register_default_types()
        self.register_default_commands()
        return self

    def register_default_types(self, **types: bool) -> CommandRegistry:
        """Register the built-in argument types.

        Pass ``<type id>=False`` to skip one, e.g. ``register_default_types(user=False)``.
        """
        unknown = set(types) - set(DEFAULT_TYPES)
        if unknown:
            raise RegistrationError(f"Unknown default types: {sorted(unknown)}")
        for type_id, type_cls in DEFAULT_TYPES.items():
            if types.get(type_id, True):
                self.register_type(type_cls)
        return self

    def register_default_commands(
        self, help: bool = True, ping: bool = True, unknown: bool = True
    ) -> CommandRegistry:
        from ..commands.builtin import HelpCommand, PingCommand, UnknownCommand

        if help:
            self.register_command(HelpCommand)
        if ping:
            self.register_command(PingCommand)
        if unknown:
            self.register_command(UnknownCommand)
        return self

    def find_type(self, key: str | None = None) -> ArgumentType | list[ArgumentType] | None:
        if not key:
            return list(self.types.values())
        return self.types.get(key.lower())

    def find_command(self, key: str | None = None) -> Command | list[Command] | None:
        if not key:
            return list(self.commands.values())
        key = key.lower()
        for command in self.commands.values():
            if key in command.keywords:
                return command
        return None

    def resolve_command(self, reference: CommandReference) -> Command | None:
        if not isinstance(reference, CommandReference):
            raise CommandResolutionError(f"Unable to resolve command: {reference!r}")
        return reference.resolve(self)
