"""
KyuuBot - Mod Log Service
=========================

Per-guild event log. Each guild opts in with ``mod-log enable #channel``;
the settings live in the provider under (guild id, "mod_log") as
``{"enabled": bool, "channel_id": int}``.

Author: Kyuu
"""

from typing import TYPE_CHECKING, Any, Dict, Optional, Union

import discord

from kyuubot.core.database import get_db
from kyuubot.core.logger import logger
from kyuubot.services.mod_log.embeds import LogKind, build_event_embed

if TYPE_CHECKING:
    from kyuubot.bot import KyuuBot


MOD_LOG_KEY = "mod_log"


class ModLogService:
    """
    Reads mod log settings and posts log embeds.

    Attributes:
        bot: Reference to the main bot instance.
        provider: Settings provider (the shared database by default).
    """

    def __init__(self, bot: "KyuuBot", provider: Any = None) -> None:
        self.bot = bot
        self.provider = provider if provider is not None else get_db()

    # =========================================================================
    # Settings
    # =========================================================================

    def get_settings(self, guild_id: int) -> Dict[str, Any]:
        settings = self.provider.get_setting(guild_id, MOD_LOG_KEY, {})
        return settings if isinstance(settings, dict) else {}

    def enable(self, guild_id: int, channel_id: int) -> None:
        self.provider.set_setting(guild_id, MOD_LOG_KEY, {"enabled": True, "channel_id": channel_id})
        logger.tree("Mod Log Enabled", [
            ("Guild ID", str(guild_id)),
            ("Channel ID", str(channel_id)),
        ], emoji="📋")

    def disable(self, guild_id: int) -> None:
        settings = self.get_settings(guild_id)
        settings["enabled"] = False
        self.provider.set_setting(guild_id, MOD_LOG_KEY, settings)
        logger.tree("Mod Log Disabled", [("Guild ID", str(guild_id))], emoji="📋")

    def should_log(self, guild: Optional[discord.Guild]) -> bool:
        """Check whether a guild has its mod log switched on."""
        if guild is None:
            return False
        return bool(self.get_settings(guild.id).get("enabled"))

    def get_log_channel(self, guild: discord.Guild) -> Optional[discord.TextChannel]:
        channel_id = self.get_settings(guild.id).get("channel_id")
        if channel_id is None:
            return None
        return guild.get_channel(channel_id)

    def is_log_channel(self, channel: discord.abc.GuildChannel) -> bool:
        """Check whether a channel is its guild's log channel."""
        return self.get_settings(channel.guild.id).get("channel_id") == channel.id

    # =========================================================================
    # Sending
    # =========================================================================

    async def send(
        self,
        guild: discord.Guild,
        kind: LogKind,
        object_id: int,
        description: str,
        user: Optional[Union[discord.User, discord.Member]] = None,
        embed: Optional[discord.Embed] = None,
    ) -> Optional[discord.Message]:
        """
        Post an event to the guild's log channel if logging is enabled.

        Args:
            guild: Guild the event happened in.
            kind: Event family.
            object_id: ID shown in the footer.
            description: Event summary.
            user: User the event is about.
            embed: Pre-built embed, used instead of building one.

        Returns:
            The posted message, or None if nothing was sent.
        """
        if not self.should_log(guild):
            return None

        channel = self.get_log_channel(guild)
        if channel is None:
            logger.debug("Mod Log Channel Missing", [("Guild ID", str(guild.id))])
            return None

        if embed is None:
            embed = build_event_embed(kind, object_id, description, user)

        try:
            return await channel.send(embed=embed)
        except discord.Forbidden:
            logger.warning("Mod Log Send Forbidden", [
                ("Guild", f"{guild.name} ({guild.id})"),
                ("Channel ID", str(channel.id)),
            ])
        except discord.HTTPException as e:
            logger.warning("Mod Log Send Failed", [
                ("Guild ID", str(guild.id)),
                ("Error", str(e)[:100]),
            ])
        return None


__all__ = ["ModLogService", "MOD_LOG_KEY"]
