"""Command system: declarations, argument types and collection."""

from .argument_types import ArgumentDeclaration
from .arguments import Argument, BoundArgument
from .base import Command
from .collector import ArgumentCollector, CollectionResult
from .parsers import (
    DEFAULT_TYPES,
    ArgumentType,
    BooleanArgumentType,
    CommandArgumentType,
    IntegerArgumentType,
    StringArgumentType,
    UserArgumentType,
)

__all__ = [
    "ArgumentDeclaration",
    "Argument",
    "BoundArgument",
    "Command",
    "ArgumentCollector",
    "CollectionResult",
    "ArgumentType",
    "StringArgumentType",
    "IntegerArgumentType",
    "BooleanArgumentType",
    "UserArgumentType",
    "CommandArgumentType",
    "DEFAULT_TYPES",
]
