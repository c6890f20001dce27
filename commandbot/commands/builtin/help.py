from datetime import datetime, timezone

import hikari

from ..base import Command

EMBED_COLOR = hikari.Color(0x5865F2)


class HelpCommand(Command):
    def __init__(self, bot):
        super().__init__(
            bot,
            name="help",
            aliases=["h", "commands"],
            description="show this help message.",
            args=[
                {
                    "key": "cmd",
                    "label": "command",
                    "type": "command",
                    "default": "",
                }
            ],
        )

    async def run(self, ctx, args) -> None:
        command = args["cmd"] if args else None
        if isinstance(command, Command):
            embed = self.command_embed(command)
        else:
            embed = self.overview_embed()
        await ctx.reply(embed=embed)

    def overview_embed(self) -> hikari.Embed:
        prefix = self.bot.command_prefix
        lines = []
        for command in self.bot.registry.find_command():
            if command.hidden:
                continue
            line = f"`{prefix}{command.name}`"
            if command.description:
                line += f" : {command.description}"
            lines.append(line)

        embed = hikari.Embed(
            title="Help",
            color=EMBED_COLOR,
            timestamp=datetime.now(timezone.utc),
        )
        embed.add_field(name="Commands", value="\n".join(lines) or "No commands available.")
        embed.set_footer(text=self._bot_name())
        return embed

    def command_embed(self, command: Command) -> hikari.Embed:
        prefix = self.bot.command_prefix
        embed = hikari.Embed(
            title=f"{prefix}{command.name}",
            description=command.description or "No description.",
            color=EMBED_COLOR,
            timestamp=datetime.now(timezone.utc),
        )
        embed.add_field(name="Usage", value=f"`{command.usage(prefix)}`")
        if command.aliases:
            embed.add_field(name="Aliases", value=", ".join(f"`{alias}`" for alias in command.aliases))
        embed.set_footer(text=self._bot_name())
        return embed

    def _bot_name(self) -> str:
        me = self.bot.hikari_bot.get_me()
        return me.username if me else "commandbot"
