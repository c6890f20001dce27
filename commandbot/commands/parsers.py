"""Argument types using strategy pattern."""

import re
from abc import ABC, abstractmethod
from typing import Any

import hikari

USER_MENTION_PATTERN = re.compile(r"^(?:<@!?(\d+)>|(\d+))$")
INTEGER_PATTERN = re.compile(r"^[+-]?\d+$")

TRUE_VALUES = frozenset({"true", "yes", "y", "on", "1"})
FALSE_VALUES = frozenset({"false", "no", "n", "off", "0"})


class ArgumentType(ABC):
    """Base class for argument types.

    ``validate`` must be called before ``parse``; parsing a value that failed
    validation is undefined.
    """

    def __init__(self, bot: Any, type_id: str) -> None:
        if not type_id or not isinstance(type_id, str):
            raise TypeError("Argument type id must be a non-empty string.")
        self.bot = bot
        self.id = type_id.lower()

    @abstractmethod
    def validate(self, value: str) -> bool:
        """Whether the raw string is acceptable for this type."""

    @abstractmethod
    def parse(self, ctx: Any, value: str) -> Any:
        """Convert an already validated raw string."""

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} id={self.id!r}>"


class StringArgumentType(ArgumentType):
    def __init__(self, bot: Any) -> None:
        super().__init__(bot, "string")

    def validate(self, value: str) -> bool:
        return isinstance(value, str) and value != ""

    def parse(self, ctx: Any, value: str) -> str:
        return value


class IntegerArgumentType(ArgumentType):
    def __init__(self, bot: Any) -> None:
        super().__init__(bot, "integer")

    def validate(self, value: str) -> bool:
        return bool(INTEGER_PATTERN.match(value))

    def parse(self, ctx: Any, value: str) -> int:
        return int(value)


class BooleanArgumentType(ArgumentType):
    def __init__(self, bot: Any) -> None:
        super().__init__(bot, "boolean")

    def validate(self, value: str) -> bool:
        return value.lower() in TRUE_VALUES | FALSE_VALUES

    def parse(self, ctx: Any, value: str) -> bool:
        return value.lower() in TRUE_VALUES


class UserArgumentType(ArgumentType):
    """A user mention or raw user ID, parsed to its snowflake."""

    def __init__(self, bot: Any) -> None:
        super().__init__(bot, "user")

    def validate(self, value: str) -> bool:
        return bool(USER_MENTION_PATTERN.match(value))

    def parse(self, ctx: Any, value: str) -> hikari.Snowflake:
        match = USER_MENTION_PATTERN.match(value)
        return hikari.Snowflake(int(match.group(1) or match.group(2)))


class CommandArgumentType(ArgumentType):
    """The name or alias of a registered command."""

    def __init__(self, bot: Any) -> None:
        super().__init__(bot, "command")

    def validate(self, value: str) -> bool:
        return self.bot.registry.find_command(value) is not None

    def parse(self, ctx: Any, value: str) -> Any:
        return self.bot.registry.find_command(value)


DEFAULT_TYPES: dict[str, type[ArgumentType]] = {
    "string": StringArgumentType,
    "integer": IntegerArgumentType,
    "boolean": BooleanArgumentType,
    "user": UserArgumentType,
    "command": CommandArgumentType,
}
