"""
KyuuBot - Centralized Constants
===============================

Magic numbers and fixed paths shared across modules.

Author: Kyuu
"""

from pathlib import Path


# =============================================================================
# Paths
# =============================================================================

PACKAGE_DIR = Path(__file__).resolve().parent.parent
LIST_ASSETS_DIR = PACKAGE_DIR / "assets" / "lists"
"""Bundled default list documents, one ``<list-name>.json`` per list."""

# =============================================================================
# Database
# =============================================================================

DB_CONNECTION_TIMEOUT = 30.0          # sqlite3.connect timeout
SQLITE_BUSY_TIMEOUT = 5000            # PRAGMA busy_timeout (ms)

# =============================================================================
# Scopes
# =============================================================================

GLOBAL_SCOPE = "global"
"""Provider scope shared by every guild."""

# =============================================================================
# Timing (seconds)
# =============================================================================

MESSAGE_DELETE_DELAY = 2              # Trigger message cleanup after a list edit
CLEAN_REPLY_DELAY = 5                 # Trigger message cleanup after a clean reply
REMINDER_CHECK_INTERVAL = 30          # Poll interval for due reminders
API_TIMEOUT = 10                      # External API request timeout

# =============================================================================
# Discord Limits
# =============================================================================

EMBED_FIELD_MAX = 1024
EMBED_DESCRIPTION_MAX = 4096
MESSAGE_MAX = 2000
REMINDER_CONTENT_MAX = 1000
REMINDER_BATCH_SIZE = 25

ZERO_WIDTH_SPACE = "\u200b"
EMBED_PREFIX = "❯"
EMBED_BULLET = "•"


__all__ = [
    "PACKAGE_DIR",
    "LIST_ASSETS_DIR",
    "DB_CONNECTION_TIMEOUT",
    "SQLITE_BUSY_TIMEOUT",
    "GLOBAL_SCOPE",
    "MESSAGE_DELETE_DELAY",
    "CLEAN_REPLY_DELAY",
    "REMINDER_CHECK_INTERVAL",
    "API_TIMEOUT",
    "EMBED_FIELD_MAX",
    "EMBED_DESCRIPTION_MAX",
    "MESSAGE_MAX",
    "REMINDER_CONTENT_MAX",
    "REMINDER_BATCH_SIZE",
    "ZERO_WIDTH_SPACE",
    "EMBED_PREFIX",
    "EMBED_BULLET",
]
