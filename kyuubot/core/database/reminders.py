"""
KyuuBot - Reminder Operations Mixin
===================================

Storage for scheduled reminders.

Author: Kyuu
"""

import sqlite3
import time
from typing import TYPE_CHECKING, List, Optional

from kyuubot.core.logger import logger
from kyuubot.utils.duration import format_duration

if TYPE_CHECKING:
    from .manager import DatabaseManager


class RemindersMixin:
    """Mixin for reminder operations."""

    def add_reminder(
        self: "DatabaseManager",
        channel_id: int,
        author_id: int,
        remindee: str,
        content: str,
        due_at: float,
        guild_id: Optional[int] = None,
    ) -> int:
        """
        Schedule a reminder.

        Args:
            channel_id: Channel the reminder is delivered to.
            author_id: User who created the reminder.
            remindee: Mention string of whoever gets pinged.
            content: Reminder text.
            due_at: Delivery time as a Unix timestamp.
            guild_id: Guild the reminder was created in (None for DMs).

        Returns:
            Row id of the new reminder.
        """
        cursor = self.execute(
            """INSERT INTO reminders
               (guild_id, channel_id, author_id, remindee, content, due_at, created_at)
               VALUES (?, ?, ?, ?, ?, ?, ?)""",
            (guild_id, channel_id, author_id, remindee, content, due_at, time.time()),
        )
        logger.tree("Reminder Scheduled", [
            ("ID", str(cursor.lastrowid)),
            ("Author ID", str(author_id)),
            ("Remindee", remindee),
            ("Due In", format_duration(int(due_at - time.time()))),
        ], emoji="⏰")
        return cursor.lastrowid

    def get_due_reminders(self: "DatabaseManager", now: Optional[float] = None) -> List[sqlite3.Row]:
        """
        Get undelivered reminders whose due time has passed.

        Returns:
            Reminder rows ordered by due time.
        """
        now = time.time() if now is None else now
        return self.fetchall(
            """SELECT * FROM reminders
               WHERE delivered = 0 AND due_at <= ?
               ORDER BY due_at""",
            (now,),
        )

    def get_pending_reminders(self: "DatabaseManager", author_id: int) -> List[sqlite3.Row]:
        """Get a user's undelivered reminders, soonest first."""
        return self.fetchall(
            """SELECT * FROM reminders
               WHERE delivered = 0 AND author_id = ?
               ORDER BY due_at""",
            (author_id,),
        )

    def mark_reminder_delivered(self: "DatabaseManager", reminder_id: int) -> None:
        """Flag a reminder as delivered so it is not sent again."""
        self.execute("UPDATE reminders SET delivered = 1 WHERE id = ?", (reminder_id,))

    def cancel_reminder(self: "DatabaseManager", reminder_id: int, author_id: int) -> bool:
        """
        Delete a pending reminder owned by author_id.

        Returns:
            True if the reminder existed and belonged to the author.
        """
        cursor = self.execute(
            "DELETE FROM reminders WHERE id = ? AND author_id = ? AND delivered = 0",
            (reminder_id, author_id),
        )
        return cursor.rowcount > 0


__all__ = ["RemindersMixin"]
