"""
KyuuBot - Main Bot Class
========================

Core Discord client: loads the command and event cogs, runs the
reminder scheduler and turns command errors into user-facing replies.

Author: Kyuu
"""

from datetime import datetime
from pathlib import Path
from typing import Optional

import discord
from discord.ext import commands

from kyuubot.core.config import get_config
from kyuubot.core.database import get_db
from kyuubot.core.logger import logger
from kyuubot.commands.help import KyuuHelpCommand
from kyuubot.services.mod_log import ModLogService
from kyuubot.utils.error_handler import ErrorHandler
from kyuubot.utils.replies import send_error


# =============================================================================
# KyuuBot Class
# =============================================================================

class KyuuBot(commands.Bot):
    """
    Main Discord bot class.

    DESIGN: Central orchestrator that:
    - Holds references to services shared by cogs (db, mod_log)
    - Loads command and event cogs in setup_hook
    - Starts background services once connected
    - Reports command errors in one place

    SERVICE INITIALIZATION ORDER:
    1. __init__: database, mod log service
    2. setup_hook: command cogs, event cogs
    3. on_ready: reminder scheduler, error webhook
    """

    # =========================================================================
    # Initialization
    # =========================================================================

    def __init__(self) -> None:
        self.config = get_config()

        intents = discord.Intents.default()
        intents.message_content = True
        intents.members = True

        super().__init__(
            command_prefix=commands.when_mentioned_or(self.config.command_prefix),
            intents=intents,
            help_command=KyuuHelpCommand(),
            owner_id=self.config.owner_id,
        )

        self.db = get_db(Path(self.config.database_path))
        self.mod_log = ModLogService(self, self.db)
        self.reminder_scheduler = None
        self.start_time: datetime = datetime.now()
        self._ready_initialized: bool = False

        logger.info("Bot Instance Created")

    # =========================================================================
    # Setup Hook
    # =========================================================================

    async def setup_hook(self) -> None:
        """Load cogs before on_ready."""
        from kyuubot.commands import COMMAND_COGS
        for cog in COMMAND_COGS:
            try:
                await self.load_extension(cog)
                logger.info(f"Cog Loaded: {cog.split('.')[-1]}")
            except commands.ExtensionError as e:
                logger.error("Failed to Load Cog", [("Cog", cog), ("Error", str(e))])

        from kyuubot.events import EVENT_COGS
        for cog in EVENT_COGS:
            try:
                await self.load_extension(cog)
                logger.debug(f"Event Cog Loaded: {cog.split('.')[-1]}")
            except commands.ExtensionError as e:
                logger.error("Failed to Load Event Cog", [("Cog", cog), ("Error", str(e))])

    # =========================================================================
    # On Ready
    # =========================================================================

    async def on_ready(self) -> None:
        """Start services when the bot is ready."""
        if self._ready_initialized:
            logger.info("Bot Reconnected (skipping re-initialization)")
            return
        self._ready_initialized = True

        if not self.user:
            return

        logger.tree("BOT ONLINE", [
            ("Name", self.user.name),
            ("ID", str(self.user.id)),
            ("Guilds", str(len(self.guilds))),
            ("Prefix", self.config.command_prefix),
        ], emoji="🚀")

        if self.config.error_webhook_url:
            logger.set_webhook(self.config.error_webhook_url)

        from kyuubot.services.reminder_scheduler import ReminderScheduler
        self.reminder_scheduler = ReminderScheduler(self)
        await self.reminder_scheduler.start()

        logger.tree("KYUU READY", [
            ("Commands", str(len(self.commands))),
            ("Reminder Scheduler", "Running"),
            ("Error Webhook", "Enabled" if self.config.error_webhook_url else "Disabled"),
        ], emoji="🦊")

    # =========================================================================
    # Command Errors
    # =========================================================================

    async def on_command_error(self, ctx: commands.Context, error: commands.CommandError) -> None:
        """
        Report a failed command to its invoker.

        DESIGN: Argument and permission problems are the user's to fix and
        get a short reply. Unknown commands are ignored. Anything else is
        a bug and goes through ErrorHandler.
        """
        if isinstance(error, commands.CommandNotFound):
            return

        message = self._user_error_message(ctx, error)
        if message is not None:
            await send_error(ctx, message)
            return

        original = getattr(error, "original", error)
        ErrorHandler.handle(
            original,
            location=f"command.{ctx.command.qualified_name if ctx.command else 'unknown'}",
            critical=False,
            message=ctx.message,
        )
        await send_error(ctx, "Something went wrong while running that command.")

    def _user_error_message(self, ctx: commands.Context, error: commands.CommandError) -> Optional[str]:
        """Map expected command errors to the reply shown to the user."""
        prefix = ctx.clean_prefix
        name = ctx.command.qualified_name if ctx.command else "command"

        if isinstance(error, commands.MissingRequiredArgument):
            return f"Missing `{error.param.name}`. See `{prefix}help {name}` for examples."
        if isinstance(error, commands.BadArgument):
            return f"{error} See `{prefix}help {name}` for examples."
        if isinstance(error, commands.CommandOnCooldown):
            return f"Slow down! Try again in {error.retry_after:.1f}s."
        if isinstance(error, commands.MissingPermissions):
            return "You do not have permission to use this command."
        if isinstance(error, commands.NoPrivateMessage):
            return "This command can only be used in a server."
        if isinstance(error, commands.CheckFailure):
            return "You cannot use this command here."
        return None

    # =========================================================================
    # Shutdown
    # =========================================================================

    async def shutdown(self) -> None:
        """Graceful shutdown with proper cleanup."""
        logger.info("Initiating Graceful Shutdown")

        if self.reminder_scheduler:
            await self.reminder_scheduler.stop()

        await super().close()
        self.db.close()

        logger.tree("SHUTDOWN COMPLETE", [
            ("Uptime", str(datetime.now() - self.start_time)),
        ], emoji="🛑")

    async def close(self) -> None:
        """Override close to ensure proper shutdown."""
        await self.shutdown()


__all__ = ["KyuuBot"]
