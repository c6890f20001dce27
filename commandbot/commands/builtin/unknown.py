from ..base import Command


class UnknownCommand(Command):
    """Fallback run when a message names no registered command."""

    def __init__(self, bot):
        super().__init__(bot, name="unknown", hidden=True, unknown=True)

    async def run(self, ctx, args) -> None:
        await ctx.reply(f"the command `{ctx.command_name}` does not exist.")
