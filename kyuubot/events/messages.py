"""
KyuuBot - Message Events
========================

Deleted messages posted to the mod log.

Author: Kyuu
"""

from typing import TYPE_CHECKING

import discord
from discord.ext import commands

from kyuubot.core.constants import EMBED_FIELD_MAX, EMBED_PREFIX
from kyuubot.services.mod_log import LogKind, build_event_embed
from kyuubot.utils.delete_tracker import pop_bot_deleted
from kyuubot.utils.error_handler import safe_execute

if TYPE_CHECKING:
    from kyuubot.bot import KyuuBot


class MessageEvents(commands.Cog):
    """Message event handlers."""

    def __init__(self, bot: "KyuuBot") -> None:
        self.bot = bot

    @commands.Cog.listener()
    @safe_execute
    async def on_message_delete(self, message: discord.Message) -> None:
        """
        Log a deleted message.

        DESIGN: Bot messages are skipped, which covers the log channel's
        own embeds. Messages the bot deleted itself (list command triggers,
        clean replies) are user-authored, so they are skipped by id.
        Messages deleted inside the log channel are never logged.
        """
        if message.guild is None or message.author.bot:
            return
        if await pop_bot_deleted(message.id) is not None:
            return
        if not self.bot.mod_log.should_log(message.guild):
            return
        if self.bot.mod_log.is_log_channel(message.channel):
            return

        embed = build_event_embed(
            LogKind.MESSAGE,
            message.id,
            f"Message sent by {message.author.mention} deleted in {message.channel.mention}",
            message.author,
        )
        if message.content:
            content = message.content
            if len(content) > EMBED_FIELD_MAX:
                content = content[:EMBED_FIELD_MAX - 3] + "..."
            embed.add_field(name=f"{EMBED_PREFIX} Content", value=content, inline=False)
        if message.attachments:
            embed.add_field(
                name=f"{EMBED_PREFIX} Attachments",
                value="\n".join(a.filename for a in message.attachments)[:EMBED_FIELD_MAX],
                inline=False,
            )

        await self.bot.mod_log.send(message.guild, LogKind.MESSAGE, message.id, "", embed=embed)


async def setup(bot: "KyuuBot") -> None:
    """Add the message events cog to the bot."""
    await bot.add_cog(MessageEvents(bot))


__all__ = ["MessageEvents", "setup"]
