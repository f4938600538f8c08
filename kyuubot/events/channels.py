"""
KyuuBot - Channel Events
========================

Channel creation and deletion, and voice channel movement, posted to
the mod log.

Author: Kyuu
"""

from typing import TYPE_CHECKING

import discord
from discord.ext import commands

from kyuubot.services.mod_log import LogKind, describe_voice_change
from kyuubot.utils.error_handler import safe_execute

if TYPE_CHECKING:
    from kyuubot.bot import KyuuBot


class ChannelEvents(commands.Cog):
    """Channel and voice event handlers."""

    def __init__(self, bot: "KyuuBot") -> None:
        self.bot = bot

    @commands.Cog.listener()
    @safe_execute
    async def on_guild_channel_create(self, channel: discord.abc.GuildChannel) -> None:
        await self.bot.mod_log.send(
            channel.guild, LogKind.CHANNEL, channel.id, f"Channel {channel.mention} was created",
        )

    @commands.Cog.listener()
    @safe_execute
    async def on_guild_channel_delete(self, channel: discord.abc.GuildChannel) -> None:
        await self.bot.mod_log.send(
            channel.guild, LogKind.CHANNEL, channel.id, f"Channel #{channel.name} was deleted",
        )

    @commands.Cog.listener()
    @safe_execute
    async def on_voice_state_update(
        self,
        member: discord.Member,
        before: discord.VoiceState,
        after: discord.VoiceState,
    ) -> None:
        description = describe_voice_change(member, before.channel, after.channel)
        if description is None:
            return
        await self.bot.mod_log.send(member.guild, LogKind.VOICE, member.id, description, member)


async def setup(bot: "KyuuBot") -> None:
    """Add the channel events cog to the bot."""
    await bot.add_cog(ChannelEvents(bot))


__all__ = ["ChannelEvents", "setup"]
