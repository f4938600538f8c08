"""
KyuuBot - Error Handler
=======================

Error context capture and categorized logging for failures that escape
a command or an event listener.

Features:
- Error categorization (Discord, API, Database)
- Recovery suggestions per category
- Discord-specific context capture
- Critical errors dumped to logs/errors/*.json

Author: Kyuu
"""

import functools
import json
import sqlite3
import sys
import traceback
from datetime import datetime
from pathlib import Path
from typing import Any, Dict

import aiohttp
import discord

from kyuubot.core.logger import logger, LOGS_DIR


class ErrorContext:
    """Captures and formats detailed error context."""

    @staticmethod
    def get_full_context(e: Exception, location: str, **kwargs) -> Dict[str, Any]:
        """
        Get comprehensive error context.

        Args:
            e: The exception.
            location: Where the error occurred.
            **kwargs: Additional context (message, member, command...).

        Returns:
            Dictionary with full error context.
        """
        context = {
            "timestamp": datetime.now().isoformat(),
            "location": location,
            "error_type": type(e).__name__,
            "error_message": str(e),
            "traceback": "".join(traceback.format_exception(type(e), e, e.__traceback__)),
            "python_version": sys.version,
            "additional_context": {k: str(v) for k, v in kwargs.items()},
        }

        msg = kwargs.get("message")
        if isinstance(msg, discord.Message):
            context["discord_context"] = {
                "guild": msg.guild.name if msg.guild else "DM",
                "channel": getattr(msg.channel, "name", str(msg.channel)),
                "author": str(msg.author),
                "author_id": msg.author.id,
                "content": msg.content[:100] if msg.content else None,
            }

        member = kwargs.get("member")
        if isinstance(member, discord.Member):
            context["member_context"] = {
                "name": str(member),
                "id": member.id,
                "joined_at": member.joined_at.isoformat() if member.joined_at else None,
            }

        return context


class ErrorHandler:
    """Categorized error handling with context and recovery hints."""

    ERROR_CATEGORIES = {
        "discord": (discord.Forbidden, discord.NotFound, discord.HTTPException),
        "api": (aiohttp.ClientError, ConnectionError, TimeoutError),
        "database": (sqlite3.Error,),
    }

    RECOVERY_SUGGESTIONS = {
        "discord": [
            (discord.Forbidden, "Check bot permissions in server settings"),
            (discord.NotFound, "Resource not found - check IDs and channels"),
            (discord.HTTPException, "Discord API issue - retry later"),
        ],
        "api": [
            (aiohttp.ClientError, "External API request failed - check keys and quota"),
            (ConnectionError, "Network connection issue - check internet connection"),
            (TimeoutError, "Request timed out - retry later"),
        ],
        "database": [
            (sqlite3.OperationalError, "Database locked or unreadable - check the data directory"),
            (sqlite3.IntegrityError, "Database constraint violation - check data validity"),
            (sqlite3.Error, "General database error - check database file"),
        ],
    }

    @classmethod
    def categorize_error(cls, e: Exception) -> str:
        """Return the category name for an exception, or "general"."""
        for category, error_types in cls.ERROR_CATEGORIES.items():
            if isinstance(e, error_types):
                return category
        return "general"

    @classmethod
    def get_recovery_suggestion(cls, e: Exception, category: str) -> str:
        """Return a short operator hint for the error."""
        for error_type, suggestion in cls.RECOVERY_SUGGESTIONS.get(category, []):
            if isinstance(e, error_type):
                return suggestion
        return "Unexpected error - check logs for details"

    @classmethod
    def handle(cls, e: Exception, location: str, critical: bool = False, **context) -> None:
        """
        Handle an error with full context.

        Args:
            e: The exception.
            location: Where the error occurred.
            critical: Whether the error should be dumped for later analysis.
            **context: Additional context.
        """
        category = cls.categorize_error(e)
        suggestion = cls.get_recovery_suggestion(e, category)
        full_context = ErrorContext.get_full_context(e, location, **context)

        details = [
            ("Category", category.upper()),
            ("Location", location),
            ("Error Type", full_context["error_type"]),
            ("Error", full_context["error_message"][:200]),
            ("Recovery", suggestion),
        ]
        if "discord_context" in full_context:
            dc = full_context["discord_context"]
            details.append(("Guild", dc["guild"]))
            details.append(("Author", dc["author"]))

        if critical:
            logger.error("Critical Error", details)
            cls._store_critical_error(full_context)
        else:
            logger.warning("Handled Error", details)

    @staticmethod
    def _store_critical_error(context: Dict[str, Any]) -> None:
        """Write the error context to logs/errors for later analysis."""
        try:
            error_dir = LOGS_DIR / "errors"
            error_dir.mkdir(exist_ok=True, parents=True)

            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            error_file: Path = error_dir / f"error_{timestamp}.json"

            with open(error_file, "w") as f:
                json.dump(context, f, indent=2, default=str)

            logger.info(f"Critical error saved to {error_file}")
        except OSError as save_error:
            logger.warning("Failed To Save Error Details", [("Error", str(save_error))])


def safe_execute(func):
    """
    Decorator that logs and swallows errors of an async function.

    Usage:
        @safe_execute
        async def on_member_join(self, member):
            ...
    """
    @functools.wraps(func)
    async def wrapper(*args, **kwargs):
        try:
            return await func(*args, **kwargs)
        except Exception as e:
            ErrorHandler.handle(e, location=f"{func.__module__}.{func.__qualname__}")
            return None

    return wrapper


__all__ = ["ErrorContext", "ErrorHandler", "safe_execute"]
