"""
KyuuBot - Mod Log Embeds
========================

The single embed shape every mod log entry uses, and the description
builders for events that need more than one line of logic.

Author: Kyuu
"""

from datetime import datetime
from enum import Enum
from typing import Optional, Union

import discord

from kyuubot.core.config import EmbedColors
from kyuubot.core.logger import NY_TZ


class LogKind(Enum):
    """Event families; each has its own embed color."""

    USER = EmbedColors.LOG_USER
    MESSAGE = EmbedColors.LOG_MESSAGE
    CHANNEL = EmbedColors.LOG_CHANNEL
    VOICE = EmbedColors.LOG_VOICE


def build_event_embed(
    kind: LogKind,
    object_id: int,
    description: str,
    user: Optional[Union[discord.User, discord.Member]] = None,
) -> discord.Embed:
    """
    Build a mod log embed.

    Args:
        kind: Event family, which picks the color.
        object_id: ID shown in the footer (user, message or channel).
        description: Event summary, shown in bold.
        user: User the event is about; shown as the embed author.
    """
    embed = discord.Embed(
        description=f"**{description}**",
        color=kind.value,
        timestamp=datetime.now(NY_TZ),
    )
    embed.set_footer(text=f"ID: {object_id}")
    if user is not None:
        embed.set_author(name=str(user), icon_url=user.display_avatar.url)
    return embed


def describe_voice_change(
    member: discord.Member,
    before: Optional[discord.abc.GuildChannel],
    after: Optional[discord.abc.GuildChannel],
) -> Optional[str]:
    """
    Describe a voice channel transition.

    Returns:
        The enter / leave / move sentence, or None when the member stayed
        in the same channel (mute, deafen, stream changes).
    """
    before_id = before.id if before else None
    after_id = after.id if after else None

    if before_id == after_id:
        return None
    if before is None:
        return f"{member.mention} entered voice channel {after.mention}"
    if after is None:
        return f"{member.mention} left voice channel {before.mention}"
    return f"{member.mention} moved from {before.mention} to {after.mention}"


__all__ = ["LogKind", "build_event_embed", "describe_voice_change"]
