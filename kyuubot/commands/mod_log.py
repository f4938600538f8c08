"""
KyuuBot - Mod Log Command Cog
=============================

``mod-log enable #channel`` / ``mod-log disable`` / ``mod-log``: configure
the guild's event log.

Author: Kyuu
"""

import asyncio
from typing import TYPE_CHECKING

import discord
from discord.ext import commands

from kyuubot.core.config import EmbedColors
from kyuubot.utils.replies import clean_reply, send_error

if TYPE_CHECKING:
    from kyuubot.bot import KyuuBot


class ModLogCog(commands.Cog):
    """
    Mod log configuration.

    DESIGN:
        Requires Manage Server. Settings are written through the mod log
        service so the event listeners see them immediately.
    """

    def __init__(self, bot: "KyuuBot") -> None:
        self.bot = bot

    async def cog_check(self, ctx: commands.Context) -> bool:
        if ctx.guild is None:
            raise commands.NoPrivateMessage()
        if not ctx.author.guild_permissions.manage_guild:
            raise commands.MissingPermissions(["manage_guild"])
        return True

    @commands.group(
        name="mod-log",
        aliases=["modlog"],
        invoke_without_command=True,
        help="Show or change where server events are logged.",
        usage="[enable <channel>|disable]",
        extras={
            "group": "mod",
            "examples": ["mod-log", "mod-log enable #mod-log", "mod-log disable"],
        },
    )
    async def mod_log(self, ctx: commands.Context) -> None:
        settings = self.bot.mod_log.get_settings(ctx.guild.id)
        channel = self.bot.mod_log.get_log_channel(ctx.guild)

        if settings.get("enabled") and channel is not None:
            text = f"Mod log is **enabled** in {channel.mention}."
        else:
            text = "Mod log is **disabled**."
        await clean_reply(ctx, embed=discord.Embed(description=text, color=EmbedColors.INFO))

    @mod_log.command(name="enable", help="Log server events to a channel.")
    async def enable(self, ctx: commands.Context, channel: discord.TextChannel) -> None:
        permissions = channel.permissions_for(ctx.guild.me)
        if not (permissions.send_messages and permissions.embed_links):
            await send_error(ctx, f"I need Send Messages and Embed Links in {channel.mention}.")
            return

        await asyncio.to_thread(self.bot.mod_log.enable, ctx.guild.id, channel.id)
        await clean_reply(ctx, f"Mod log enabled in {channel.mention}.")

    @mod_log.command(name="disable", help="Stop logging server events.")
    async def disable(self, ctx: commands.Context) -> None:
        await asyncio.to_thread(self.bot.mod_log.disable, ctx.guild.id)
        await clean_reply(ctx, "Mod log disabled.")


async def setup(bot: "KyuuBot") -> None:
    """Add the mod log cog to the bot."""
    await bot.add_cog(ModLogCog(bot))


__all__ = ["ModLogCog", "setup"]
