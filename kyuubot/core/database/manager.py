"""
KyuuBot - Database Manager
==========================

Central SQLite database manager for all bot data.

Author: Kyuu
"""

import sqlite3
import threading
from pathlib import Path
from typing import Optional, List, Tuple

from kyuubot.core.logger import logger
from kyuubot.core.constants import DB_CONNECTION_TIMEOUT, SQLITE_BUSY_TIMEOUT

from kyuubot.core.database.schema import SchemaMixin
from kyuubot.core.database.settings import SettingsMixin
from kyuubot.core.database.reminders import RemindersMixin


# =============================================================================
# Constants
# =============================================================================

# Path: kyuubot/core/database/manager.py -> go up 4 levels to reach project root
DATA_DIR: Path = Path(__file__).parent.parent.parent.parent / "data"
DB_PATH: Path = DATA_DIR / "kyuu.db"


# =============================================================================
# Database Manager (Singleton)
# =============================================================================

class DatabaseManager(
    SchemaMixin,
    SettingsMixin,
    RemindersMixin,
):
    """
    Centralized database manager with thread-safe operations.

    DESIGN: Singleton pattern ensures a single connection.
    Uses WAL mode so reads are not blocked by the write-back of a list.
    All operations are serialized by an internal lock, which lets
    provider writes run in a worker thread.
    """

    _instance: Optional["DatabaseManager"] = None
    _lock: threading.Lock = threading.Lock()

    def __new__(cls, db_path: Optional[Path] = None) -> "DatabaseManager":
        """Singleton pattern - only one instance."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
                    cls._instance._initialized = False
        return cls._instance

    def __init__(self, db_path: Optional[Path] = None) -> None:
        """Initialize database connection and tables."""
        if self._initialized:
            return

        self._db_lock: threading.Lock = threading.Lock()
        self._conn: Optional[sqlite3.Connection] = None
        self.db_path: Path = Path(db_path) if db_path else DB_PATH

        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._connect()
        self._init_tables()
        self._initialized = True

        logger.tree("Database Manager Initialized", [
            ("Path", str(self.db_path)),
            ("WAL Mode", "Enabled"),
        ], emoji="🗄️")

    # =========================================================================
    # Connection Management
    # =========================================================================

    def _connect(self) -> None:
        """Establish database connection with WAL mode."""
        try:
            self._conn = sqlite3.connect(
                str(self.db_path),
                check_same_thread=False,
                timeout=DB_CONNECTION_TIMEOUT,
            )
            self._conn.execute("PRAGMA journal_mode=WAL")
            self._conn.execute("PRAGMA synchronous=NORMAL")
            self._conn.execute(f"PRAGMA busy_timeout={SQLITE_BUSY_TIMEOUT}")
            self._conn.row_factory = sqlite3.Row
        except sqlite3.Error as e:
            logger.error("Database Connection Failed", [("Error", str(e))])
            raise

    def _ensure_connection(self) -> sqlite3.Connection:
        """Ensure connection is valid, reconnect if needed."""
        if self._conn is None:
            self._connect()
        try:
            self._conn.execute("SELECT 1")
        except sqlite3.Error:
            self._connect()
        return self._conn

    def execute(
        self,
        query: str,
        params: Tuple = (),
        commit: bool = True
    ) -> sqlite3.Cursor:
        """Execute a query with thread safety."""
        with self._db_lock:
            conn = self._ensure_connection()
            cursor = conn.cursor()
            cursor.execute(query, params)
            if commit:
                conn.commit()
            return cursor

    def fetchone(self, query: str, params: Tuple = ()) -> Optional[sqlite3.Row]:
        """Execute query and fetch one result."""
        with self._db_lock:
            cursor = self._ensure_connection().execute(query, params)
            return cursor.fetchone()

    def fetchall(self, query: str, params: Tuple = ()) -> List[sqlite3.Row]:
        """Execute query and fetch all results."""
        with self._db_lock:
            cursor = self._ensure_connection().execute(query, params)
            return cursor.fetchall()

    def close(self) -> None:
        """Close database connection."""
        with self._db_lock:
            if self._conn:
                self._conn.close()
                self._conn = None
                logger.info("Database Connection Closed")


# =============================================================================
# Global Instance
# =============================================================================

def get_db(db_path: Optional[Path] = None) -> DatabaseManager:
    """
    Get the global database manager instance.

    Args:
        db_path: Database file used when the instance is first created.
    """
    return DatabaseManager(db_path)


# =============================================================================
# Module Export
# =============================================================================

__all__ = ["DatabaseManager", "get_db", "DB_PATH", "DATA_DIR"]
