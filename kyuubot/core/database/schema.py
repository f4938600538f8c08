"""
Database Schema Module
======================

Table definitions.

Author: Kyuu
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from kyuubot.core.database.manager import DatabaseManager


class SchemaMixin:
    """Mixin for database schema initialization."""

    def _init_tables(self: "DatabaseManager") -> None:
        """
        Initialize all database tables.

        DESIGN: Tables are created if not exist, allowing safe restarts.
        """
        conn = self._ensure_connection()
        cursor = conn.cursor()

        # -----------------------------------------------------------------
        # Settings Table
        # DESIGN: JSON values keyed by (scope, key); scope is "global"
        # or a guild id. Backs every list and per-guild setting.
        # -----------------------------------------------------------------
        cursor.execute("""
            CREATE TABLE IF NOT EXISTS settings (
                scope TEXT NOT NULL,
                key TEXT NOT NULL,
                value TEXT NOT NULL,
                updated_at REAL NOT NULL,
                PRIMARY KEY (scope, key)
            )
        """)

        # -----------------------------------------------------------------
        # Reminders Table
        # -----------------------------------------------------------------
        cursor.execute("""
            CREATE TABLE IF NOT EXISTS reminders (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                guild_id INTEGER,
                channel_id INTEGER NOT NULL,
                author_id INTEGER NOT NULL,
                remindee TEXT NOT NULL,
                content TEXT NOT NULL,
                due_at REAL NOT NULL,
                created_at REAL NOT NULL,
                delivered INTEGER NOT NULL DEFAULT 0
            )
        """)
        cursor.execute("""
            CREATE INDEX IF NOT EXISTS idx_reminders_due
            ON reminders(delivered, due_at)
        """)

        conn.commit()
