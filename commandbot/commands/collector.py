"""Collects, validates and parses command arguments."""

import logging
from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from ..errors import ArgumentDeclarationError
from .argument_types import ArgumentDeclaration
from .arguments import Argument, BoundArgument

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CollectionResult:
    """Outcome of :meth:`ArgumentCollector.collect`.

    Either ``failed`` with a user-facing ``message``, or successful with
    ``values`` mapping each argument key to its parsed value.
    """

    failed: bool
    message: str | None = None
    values: dict[str, Any] | None = None
    bound: tuple[BoundArgument, ...] = field(default_factory=tuple)

    @property
    def success(self) -> bool:
        return not self.failed

    @classmethod
    def fail(cls, message: str) -> "CollectionResult":
        return cls(failed=True, message=message)

    @classmethod
    def ok(cls, bound: Sequence[BoundArgument]) -> "CollectionResult":
        bound = tuple(bound)
        return cls(failed=False, values={item.key: item.value for item in bound}, bound=bound)


def _is_empty(raw: Any) -> bool:
    return raw is None or raw == ""


def _is_raw_default(default: Any) -> bool:
    return isinstance(default, str) and default != ""


def _format_labels(args: Sequence[Argument]) -> str:
    return ", ".join(f"`{arg.label}`" for arg in args)


class ArgumentCollector:
    def __init__(self, bot: Any, args: list[ArgumentDeclaration | Mapping[str, Any]]) -> None:
        if bot is None:
            raise TypeError("Collector bot must be specified.")
        if not isinstance(args, (list, tuple)):
            raise TypeError("Collector args must be a list.")

        self.bot = bot

        collected: list[Argument] = []
        has_infinite = False
        has_optional = False
        for raw_declaration in args:
            declaration = ArgumentDeclaration.coerce(raw_declaration)

            if has_infinite:
                raise ArgumentDeclarationError("Arguments are not accepted after an infinite argument.")
            if declaration.optional:
                has_optional = True
            elif has_optional:
                raise ArgumentDeclarationError(
                    "Required arguments are not accepted after optional arguments."
                )
            if any(arg.key == declaration.key for arg in collected):
                raise ArgumentDeclarationError(
                    f'Argument key "{declaration.key}" is already registered for the same command.'
                )

            argument = Argument(bot, declaration)
            collected.append(argument)
            if argument.infinite:
                has_infinite = True

        self.args: tuple[Argument, ...] = tuple(collected)

    def __len__(self) -> int:
        return len(self.args)

    def __iter__(self) -> Iterator[Argument]:
        return iter(self.args)

    def usage(self) -> str:
        return " ".join(arg.usage() for arg in self.args)

    def collect(self, ctx: Any, command: Any, given: Sequence[str] | None = None) -> CollectionResult:
        """Bind ``given`` tokens to the declared arguments, then validate and parse them."""
        command_name = getattr(command, "name", command)
        remaining = list(given or [])

        # (argument, raw token, whether the default was substituted, text to validate and parse)
        slots: list[tuple[Argument, Any, bool, str | None]] = []
        for arg in self.args:
            if arg.infinite:
                raw = " ".join(remaining)
                remaining = []
            else:
                raw = remaining.pop(0) if remaining else None
            defaulted = _is_empty(raw) and arg.default is not None
            if not defaulted:
                text = raw
            elif _is_raw_default(arg.default):
                # String defaults go through the argument type like typed input
                text = arg.default
            else:
                text = None
            slots.append((arg, raw, defaulted, text))

        missing = [arg for arg, raw, defaulted, text in slots if not defaulted and _is_empty(raw)]
        if missing:
            logger.debug(f"Command {command_name} is missing arguments: {[arg.key for arg in missing]}")
            return CollectionResult.fail(
                f"the command `{command_name}` is invalid: missing arguments: {_format_labels(missing)}."
            )

        wrong = [arg for arg, raw, defaulted, text in slots if text is not None and not arg.validate(text)]
        if wrong:
            logger.debug(f"Command {command_name} received invalid arguments: {[arg.key for arg in wrong]}")
            return CollectionResult.fail(
                f"the command `{command_name}` is invalid: invalid arguments: {_format_labels(wrong)}."
            )

        bound = [
            BoundArgument(
                key=arg.key,
                raw=raw,
                value=arg.default if text is None else arg.parse(ctx, text),
                defaulted=defaulted,
            )
            for arg, raw, defaulted, text in slots
        ]
        return CollectionResult.ok(bound)
