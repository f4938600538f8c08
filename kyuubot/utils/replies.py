"""
KyuuBot - Reply Helpers
=======================

The two reply paths every command uses: the error notification and the
"clean" reply that tidies up the triggering message afterwards.

Author: Kyuu
"""

import asyncio
from typing import Optional

import discord
from discord.ext import commands

from kyuubot.core.config import EmbedColors
from kyuubot.core.constants import CLEAN_REPLY_DELAY
from kyuubot.utils.async_utils import create_safe_task
from kyuubot.utils.delete_tracker import mark_bot_deleted, pop_bot_deleted


async def delete_later(message: discord.Message, delay: float) -> None:
    """
    Delete a message after a delay.

    Missing messages and missing permissions are ignored: the message is
    either already gone or the bot is not allowed to remove it. The id is
    marked first so the mod log skips the deletion.
    """
    await asyncio.sleep(delay)
    await mark_bot_deleted(message.id)
    try:
        await message.delete()
    except (discord.NotFound, discord.Forbidden):
        await pop_bot_deleted(message.id)


def schedule_delete(message: discord.Message, delay: float) -> asyncio.Task:
    """Delete a message in the background after a delay."""
    return create_safe_task(delete_later(message, delay), "Delete Trigger Message")


def build_error_embed(text: str) -> discord.Embed:
    """Build the embed used for user-facing errors."""
    return discord.Embed(description=f"❌ {text}", color=EmbedColors.ERROR)


async def send_error(ctx: commands.Context, text: str) -> discord.Message:
    """
    Notify the invoker that their command failed.

    Args:
        ctx: Invocation context.
        text: Message shown to the user verbatim.
    """
    return await ctx.reply(embed=build_error_embed(text), mention_author=False)


async def clean_reply(
    ctx: commands.Context,
    content: Optional[str] = None,
    *,
    embed: Optional[discord.Embed] = None,
    delay: float = CLEAN_REPLY_DELAY,
) -> discord.Message:
    """
    Reply to the invoker and remove the triggering message after a delay.

    Args:
        ctx: Invocation context.
        content: Text content of the reply.
        embed: Optional embed for the reply.
        delay: Seconds before the triggering message is deleted.
    """
    reply = await ctx.reply(content, embed=embed, mention_author=False)
    if ctx.guild is not None:
        schedule_delete(ctx.message, delay)
    return reply


__all__ = [
    "delete_later",
    "schedule_delete",
    "build_error_embed",
    "send_error",
    "clean_reply",
]
