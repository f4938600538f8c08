"""
KyuuBot - Lists Cog
===================

Registers the list commands with the bot.

DESIGN:
    List commands are built from ListBaseCommand objects rather than
    decorated cog methods, so the cog adds them to the bot when it loads
    and removes them again when it unloads.

Author: Kyuu
"""

from typing import TYPE_CHECKING, List

from discord.ext import commands

from kyuubot.commands.lists.definitions import build_list_commands
from kyuubot.core.config import get_config
from kyuubot.core.logger import logger

if TYPE_CHECKING:
    from kyuubot.bot import KyuuBot


# =============================================================================
# Lists Cog
# =============================================================================

class ListsCog(commands.Cog):
    """
    Owner of the list commands.

    Attributes:
        bot: Reference to the main bot instance.
        config: Bot configuration.
    """

    def __init__(self, bot: "KyuuBot") -> None:
        self.bot = bot
        self.config = get_config()
        self._registered: List[str] = []

    async def cog_load(self) -> None:
        """Build and register every list command."""
        list_commands = build_list_commands(
            command_prefix=self.config.command_prefix,
            delete_delay=self.config.message_delete_delay,
        )
        for list_command in list_commands:
            command = list_command.to_command()
            self.bot.add_command(command)
            self._registered.append(command.name)

        logger.tree("List Commands Registered", [
            ("Count", str(len(self._registered))),
            ("Lists", ", ".join(sorted({c.list_name for c in list_commands}))),
        ], emoji="📋")

    async def cog_unload(self) -> None:
        """Remove the commands registered by cog_load."""
        for name in self._registered:
            self.bot.remove_command(name)
        self._registered.clear()


# =============================================================================
# Setup
# =============================================================================

async def setup(bot: "KyuuBot") -> None:
    """Add the lists cog to the bot."""
    await bot.add_cog(ListsCog(bot))


__all__ = ["ListsCog", "setup"]
