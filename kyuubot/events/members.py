"""
KyuuBot - Member Events
=======================

Bans, unbans, joins and leaves posted to the mod log, plus cleanup of
guild settings when the bot leaves a guild.

Author: Kyuu
"""

import asyncio
from typing import TYPE_CHECKING, Union

import discord
from discord.ext import commands

from kyuubot.core.logger import logger
from kyuubot.services.mod_log import LogKind
from kyuubot.utils.error_handler import safe_execute

if TYPE_CHECKING:
    from kyuubot.bot import KyuuBot


class MemberEvents(commands.Cog):
    """Member event handlers."""

    def __init__(self, bot: "KyuuBot") -> None:
        self.bot = bot

    @commands.Cog.listener()
    @safe_execute
    async def on_member_ban(self, guild: discord.Guild, user: Union[discord.User, discord.Member]) -> None:
        await self.bot.mod_log.send(guild, LogKind.USER, user.id, f"{user.mention} was banned ⛔️", user)

    @commands.Cog.listener()
    @safe_execute
    async def on_member_unban(self, guild: discord.Guild, user: discord.User) -> None:
        await self.bot.mod_log.send(guild, LogKind.USER, user.id, f"{user.mention} was unbanned", user)

    @commands.Cog.listener()
    @safe_execute
    async def on_member_join(self, member: discord.Member) -> None:
        await self.bot.mod_log.send(
            member.guild, LogKind.USER, member.id, f"{member.mention} joined the server 📥", member,
        )

    @commands.Cog.listener()
    @safe_execute
    async def on_member_remove(self, member: discord.Member) -> None:
        await self.bot.mod_log.send(
            member.guild, LogKind.USER, member.id, f"{member.mention} left the server 📤", member,
        )

    @commands.Cog.listener()
    @safe_execute
    async def on_guild_remove(self, guild: discord.Guild) -> None:
        """
        Drop every setting stored for a guild the bot left.

        DESIGN: Global lists are untouched; only the guild's own scope
        (mod log and other per-guild settings) is cleared.
        """
        removed = await asyncio.to_thread(self.bot.db.clear_scope, guild.id)
        logger.tree("Left Guild", [
            ("Guild", f"{guild.name} ({guild.id})"),
            ("Settings Removed", str(removed)),
        ], emoji="👋")


async def setup(bot: "KyuuBot") -> None:
    """Add the member events cog to the bot."""
    await bot.add_cog(MemberEvents(bot))


__all__ = ["MemberEvents", "setup"]
