"""
KyuuBot - Reminder Scheduler Service
====================================

Background service that delivers due reminders.

DESIGN:
    Polls the database every ``reminder_check_interval`` seconds.
    Due reminders are delivered concurrently in batches and marked
    delivered whether or not the channel still exists, so a deleted
    channel cannot make a reminder fire forever.

Author: Kyuu
"""

import asyncio
import sqlite3
from typing import TYPE_CHECKING, Optional

import discord

from kyuubot.core.config import get_config
from kyuubot.core.constants import REMINDER_BATCH_SIZE
from kyuubot.core.database import get_db
from kyuubot.core.logger import logger
from kyuubot.utils.async_utils import gather_with_logging

if TYPE_CHECKING:
    from kyuubot.bot import KyuuBot


# =============================================================================
# Reminder Scheduler Service
# =============================================================================

class ReminderScheduler:
    """
    Background service for reminder delivery.

    Attributes:
        bot: Reference to the main bot instance.
        config: Bot configuration.
        db: Database manager.
        task: Background task reference.
        running: Whether the scheduler is active.
    """

    def __init__(self, bot: "KyuuBot") -> None:
        self.bot = bot
        self.config = get_config()
        self.db = get_db()
        self.task: Optional[asyncio.Task] = None
        self.running: bool = False

    # =========================================================================
    # Lifecycle Management
    # =========================================================================

    async def start(self) -> None:
        """Start the scheduler, replacing any previous task."""
        if self.task and not self.task.done():
            self.task.cancel()

        self.running = True
        self.task = asyncio.create_task(self._scheduler_loop())

        logger.tree("Reminder Scheduler Started", [
            ("Check Interval", f"{self.config.reminder_check_interval} seconds"),
            ("Status", "Running"),
        ], emoji="⏰")

    async def stop(self) -> None:
        """Stop the scheduler background task."""
        self.running = False

        if self.task and not self.task.done():
            self.task.cancel()
            try:
                await self.task
            except asyncio.CancelledError:
                pass

        logger.info("Reminder Scheduler Stopped")

    # =========================================================================
    # Scheduler Loop
    # =========================================================================

    async def _scheduler_loop(self) -> None:
        """Deliver due reminders until stopped; errors never end the loop."""
        await self.bot.wait_until_ready()

        while self.running:
            try:
                await self.process_due_reminders()
            except asyncio.CancelledError:
                break
            except (sqlite3.Error, discord.HTTPException) as e:
                logger.error("Reminder Scheduler Error", [
                    ("Error Type", type(e).__name__),
                    ("Error", str(e)[:100]),
                ])
            await asyncio.sleep(self.config.reminder_check_interval)

    # =========================================================================
    # Delivery
    # =========================================================================

    async def process_due_reminders(self) -> int:
        """
        Deliver every due reminder.

        Returns:
            Number of reminders processed.
        """
        due = await asyncio.to_thread(self.db.get_due_reminders)
        if not due:
            return 0

        for i in range(0, len(due), REMINDER_BATCH_SIZE):
            batch = due[i:i + REMINDER_BATCH_SIZE]
            await gather_with_logging(
                *((f"Reminder {reminder['id']}", self._safe_deliver(reminder)) for reminder in batch),
                context="Reminder Delivery",
            )

        logger.tree("Due Reminders Processed", [
            ("Total", str(len(due))),
            ("Batches", str((len(due) + REMINDER_BATCH_SIZE - 1) // REMINDER_BATCH_SIZE)),
        ], emoji="⏰")
        return len(due)

    async def _safe_deliver(self, reminder) -> None:
        """Deliver one reminder and always mark it delivered."""
        try:
            await self._deliver(reminder)
        except discord.HTTPException as e:
            logger.error("Reminder Delivery Failed", [
                ("ID", str(reminder["id"])),
                ("Channel ID", str(reminder["channel_id"])),
                ("Error", str(e)[:100]),
            ])
        finally:
            await asyncio.to_thread(self.db.mark_reminder_delivered, reminder["id"])

    async def _deliver(self, reminder) -> None:
        channel = self.bot.get_channel(reminder["channel_id"])
        if channel is None:
            try:
                channel = await self.bot.fetch_channel(reminder["channel_id"])
            except (discord.NotFound, discord.Forbidden):
                logger.warning("Reminder Channel Unavailable", [
                    ("ID", str(reminder["id"])),
                    ("Channel ID", str(reminder["channel_id"])),
                ])
                return

        remindee = reminder["remindee"]
        author_mention = f"<@{reminder['author_id']}>"
        if remindee == author_mention:
            header = f"⏰ {remindee}, you asked me to remind you:"
        else:
            header = f"⏰ {remindee}, {author_mention} asked me to remind you:"

        await channel.send(
            f"{header}\n{reminder['content']}",
            allowed_mentions=discord.AllowedMentions(everyone=True, users=True, roles=True),
        )
        logger.tree("Reminder Delivered", [
            ("ID", str(reminder["id"])),
            ("Remindee", remindee),
        ], emoji="🔔")


__all__ = ["ReminderScheduler"]
