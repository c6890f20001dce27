import math

from ..base import Command


class PingCommand(Command):
    def __init__(self, bot):
        super().__init__(bot, name="ping", description="check that the bot is alive.")

    async def run(self, ctx, args) -> None:
        latency = self.bot.hikari_bot.heartbeat_latency
        if latency is None or math.isnan(latency):
            await ctx.reply("pong!")
        else:
            await ctx.reply(f"pong! ({latency * 1000:.0f}ms)")
