"""
KyuuBot - Settings Operations Mixin
===================================

Scoped key-value provider. Every list document and per-guild setting
is a JSON value stored under (scope, key).

Author: Kyuu
"""

import json
import time
from typing import TYPE_CHECKING, Any, Union

from kyuubot.core.logger import logger

if TYPE_CHECKING:
    from .manager import DatabaseManager


Scope = Union[str, int]
"""``"global"`` or a guild id."""


def _scope_key(scope: Scope) -> str:
    """Normalize a scope so guild ids and their string form share rows."""
    return str(scope)


class SettingsMixin:
    """Mixin for the scoped settings provider."""

    def get_setting(self: "DatabaseManager", scope: Scope, key: str, default: Any = None) -> Any:
        """
        Get a stored value.

        Args:
            scope: "global" or a guild id.
            key: Setting key (list name, "mod_log", ...).
            default: Value returned when nothing is stored.

        Returns:
            The decoded JSON value, or default.
        """
        row = self.fetchone(
            "SELECT value FROM settings WHERE scope = ? AND key = ?",
            (_scope_key(scope), key),
        )
        if row is None:
            return default
        try:
            return json.loads(row["value"])
        except json.JSONDecodeError:
            logger.warning("Corrupted Setting Ignored", [
                ("Scope", _scope_key(scope)),
                ("Key", key),
            ])
            return default

    def set_setting(self: "DatabaseManager", scope: Scope, key: str, value: Any) -> None:
        """
        Store a JSON-serializable value.

        Args:
            scope: "global" or a guild id.
            key: Setting key.
            value: Value to store (JSON encoded).

        Raises:
            TypeError: If value is not JSON serializable.
        """
        self.execute(
            "INSERT OR REPLACE INTO settings (scope, key, value, updated_at) VALUES (?, ?, ?, ?)",
            (_scope_key(scope), key, json.dumps(value), time.time()),
        )

    def remove_setting(self: "DatabaseManager", scope: Scope, key: str) -> bool:
        """
        Delete a stored value.

        Returns:
            True if a row was removed.
        """
        cursor = self.execute(
            "DELETE FROM settings WHERE scope = ? AND key = ?",
            (_scope_key(scope), key),
        )
        return cursor.rowcount > 0

    def clear_scope(self: "DatabaseManager", scope: Scope) -> int:
        """
        Delete every value stored under a scope (used when leaving a guild).

        Returns:
            Number of rows removed.
        """
        cursor = self.execute("DELETE FROM settings WHERE scope = ?", (_scope_key(scope),))
        if cursor.rowcount:
            logger.tree("Settings Cleared", [
                ("Scope", _scope_key(scope)),
                ("Rows", str(cursor.rowcount)),
            ], emoji="🧹")
        return cursor.rowcount


__all__ = ["SettingsMixin", "Scope"]
