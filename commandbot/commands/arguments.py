"""Declared command arguments bound to their argument types."""

from dataclasses import dataclass
from typing import Any

from ..errors import ArgumentDeclarationError
from .argument_types import ArgumentDeclaration
from .parsers import ArgumentType


@dataclass(frozen=True, slots=True)
class BoundArgument:
    """Value of one argument for a single invocation."""

    key: str
    raw: Any
    value: Any
    defaulted: bool = False


class Argument:
    """A declared argument with its resolved type.

    Holds no per-invocation state; the collector returns fresh
    :class:`BoundArgument` records on every call.
    """

    def __init__(self, bot: Any, declaration: ArgumentDeclaration) -> None:
        self.bot = bot
        self.declaration = declaration

        argument_type = bot.registry.find_type(declaration.type)
        if argument_type is None:
            raise ArgumentDeclarationError(
                f'Argument "{declaration.key}" uses the unknown type "{declaration.type}".'
            )
        self.type: ArgumentType = argument_type

    @property
    def key(self) -> str:
        return self.declaration.key

    @property
    def label(self) -> str:
        return self.declaration.label

    @property
    def default(self) -> Any:
        return self.declaration.default

    @property
    def infinite(self) -> bool:
        return self.declaration.infinite

    @property
    def optional(self) -> bool:
        return self.declaration.optional

    def validate(self, value: str) -> bool:
        return self.type.validate(value)

    def parse(self, ctx: Any, value: str) -> Any:
        return self.type.parse(ctx, value)

    def usage(self) -> str:
        name = f"{self.key}..." if self.infinite else self.key
        return f"[{name}]" if self.optional else f"<{name}>"

    def __repr__(self) -> str:
        return f"<Argument key={self.key!r} type={self.type.id!r}>"
