from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any

from ..errors import CommandDefinitionError
from .argument_types import ArgumentDeclaration
from .collector import ArgumentCollector

if TYPE_CHECKING:
    from ..core.dispatcher import MessageContext


class Command:
    """A named unit of bot behavior.

    Subclasses pass their metadata to ``__init__`` and implement :meth:`run`.
    The registry instantiates them with the bot they belong to::

        class PingCommand(Command):
            def __init__(self, bot):
                super().__init__(bot, name="ping", description="Check the latency.")

            async def run(self, ctx, args):
                await ctx.reply("pong")
    """

    def __init__(
        self,
        bot: Any,
        *,
        name: str,
        aliases: Sequence[str] | None = None,
        description: str | None = None,
        args: Sequence[ArgumentDeclaration | Mapping[str, Any]] | None = None,
        hidden: bool = False,
        unknown: bool = False,
    ) -> None:
        self.validate_data(name=name, aliases=aliases, description=description, hidden=hidden)
        if bot is None:
            raise CommandDefinitionError("Command bot must be specified.")

        self.bot = bot
        self.name = name
        self.aliases: list[str] = list(aliases or [])
        self.description = description
        self.hidden = hidden
        self.unknown = unknown

        # Only commands declaring at least one argument get a collector
        self.args_collector: ArgumentCollector | None = (
            ArgumentCollector(bot, list(args)) if args else None
        )

    @staticmethod
    def validate_data(
        *,
        name: Any,
        aliases: Any = None,
        description: Any = None,
        hidden: Any = False,
    ) -> None:
        """Validate command metadata before loading."""
        if not name:
            raise CommandDefinitionError("Command name cannot be empty.")
        if not isinstance(name, str):
            raise CommandDefinitionError("Command name must be a string.")
        if name != name.lower():
            raise CommandDefinitionError("Command name must be in lower case.")

        if aliases is not None and (
            not isinstance(aliases, (list, tuple)) or any(not isinstance(alias, str) for alias in aliases)
        ):
            raise CommandDefinitionError("Command aliases must be a list of strings.")

        if description is not None and not isinstance(description, str):
            raise CommandDefinitionError("Command description must be a string.")

        if not isinstance(hidden, bool):
            raise CommandDefinitionError("Command hidden state must be a boolean.")

    @property
    def keywords(self) -> frozenset[str]:
        """The name and every alias, the keys this command answers to."""
        return frozenset(keyword.lower() for keyword in [self.name, *self.aliases])

    def has_arguments(self) -> ArgumentCollector | None:
        return self.args_collector

    def usage(self, prefix: str = "") -> str:
        if self.args_collector is None:
            return f"{prefix}{self.name}"
        return f"{prefix}{self.name} {self.args_collector.usage()}"

    async def run(self, ctx: MessageContext, args: dict[str, Any] | None) -> None:
        raise NotImplementedError(f"Command {self.name} does not implement run().")

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"
