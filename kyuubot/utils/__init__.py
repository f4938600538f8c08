"""
KyuuBot - Utils Package
=======================

Stateless helpers shared by commands, events and services.

DESIGN:
    Utils do not hold bot state (the delete tracker only remembers
    message ids). Anything that needs the bot or the
    database receives it as an argument.

Author: Kyuu
"""

from .async_utils import create_safe_task, gather_with_logging
from .delete_tracker import mark_bot_deleted, pop_bot_deleted
from .duration import format_duration, parse_duration, parse_reminder_time, split_reminder
from .error_handler import ErrorHandler, safe_execute
from .replies import build_error_embed, clean_reply, schedule_delete, send_error
from .type_checks import is_url


__all__ = [
    # Async
    "create_safe_task",
    "gather_with_logging",
    # Deletes
    "mark_bot_deleted",
    "pop_bot_deleted",
    # Duration
    "format_duration",
    "parse_duration",
    "parse_reminder_time",
    "split_reminder",
    # Errors
    "ErrorHandler",
    "safe_execute",
    # Replies
    "build_error_embed",
    "clean_reply",
    "schedule_delete",
    "send_error",
    # Type checks
    "is_url",
]
