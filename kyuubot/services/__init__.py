"""
KyuuBot - Services Package
==========================

Long-lived helpers used by cogs and the bot.

DESIGN:
    Services are standalone classes owned by the bot or a cog. They
    handle their own error cases and log instead of raising where the
    caller cannot recover.

Available Services:
    ModLogService: Per-guild event log channel
    ReminderScheduler: Background delivery of due reminders
    WebSearchClient: YouTube and Wolfram|Alpha lookups

Author: Kyuu
"""

from .mod_log import ModLogService
from .reminder_scheduler import ReminderScheduler
from .web_search import WebSearchClient, WebSearchError


__all__ = [
    "ModLogService",
    "ReminderScheduler",
    "WebSearchClient",
    "WebSearchError",
]
