"""
KyuuBot - Delete Tracker
========================

Remembers messages the bot deletes itself (list command triggers,
clean replies) so the mod log does not report them as user deletions.

Author: Kyuu
"""

import asyncio
from typing import Dict, Optional

from kyuubot.core.logger import logger


# =============================================================================
# Constants
# =============================================================================

_MAX_TRACKED_IDS = 1000
"""Maximum number of message IDs to track before cleanup."""


# =============================================================================
# Module State
# =============================================================================

# Maps message_id -> reason
_deleted_messages: Dict[int, str] = {}
_lock = asyncio.Lock()


# =============================================================================
# Public API
# =============================================================================

async def mark_bot_deleted(message_id: int, reason: str = "Trigger cleanup") -> None:
    """
    Record that the bot is about to delete a message.

    Call this BEFORE deleting, since on_message_delete may fire before
    the delete call returns.

    Args:
        message_id: The message being deleted.
        reason: Why the bot deletes it.
    """
    async with _lock:
        _deleted_messages[message_id] = reason

        if len(_deleted_messages) > _MAX_TRACKED_IDS:
            # Oldest first, dicts keep insertion order
            stale = list(_deleted_messages)[:_MAX_TRACKED_IDS // 2]
            for stale_id in stale:
                _deleted_messages.pop(stale_id, None)
            logger.tree("Delete Tracker Cleanup", [
                ("Removed", str(len(stale))),
                ("Remaining", str(len(_deleted_messages))),
            ], emoji="🧹")


async def pop_bot_deleted(message_id: int) -> Optional[str]:
    """
    Check whether the bot deleted a message, forgetting it afterwards.

    Returns:
        The recorded reason, or None for deletions the bot did not make.
    """
    async with _lock:
        return _deleted_messages.pop(message_id, None)


__all__ = ["mark_bot_deleted", "pop_bot_deleted"]
