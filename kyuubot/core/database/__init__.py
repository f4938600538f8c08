"""
KyuuBot - Database Module
=========================

SQLite-backed persistence: the scoped settings provider and reminders.

Author: Kyuu
"""

from kyuubot.core.database.manager import (
    DatabaseManager,
    get_db,
    DATA_DIR,
    DB_PATH,
)

__all__ = [
    "DatabaseManager",
    "get_db",
    "DATA_DIR",
    "DB_PATH",
]
