"""
KyuuBot - Async Utilities
=========================

Helpers for background tasks and gathers that must not fail silently.

Usage:
    from kyuubot.utils.async_utils import create_safe_task

    create_safe_task(persist(), "Persist List")

Author: Kyuu
"""

import asyncio
from typing import Tuple, Coroutine, Any, List, Optional

from kyuubot.core.logger import logger


async def gather_with_logging(
    *operations: Tuple[str, Coroutine[Any, Any, Any]],
    context: Optional[str] = None,
) -> List[Any]:
    """
    Run multiple async operations concurrently with error logging.

    Args:
        *operations: Tuples of (operation_name, coroutine).
        context: Optional context string for error logs.

    Returns:
        List of results (exceptions are returned as values, not raised).
    """
    names = [name for name, _ in operations]
    coros = [coro for _, coro in operations]

    results = await asyncio.gather(*coros, return_exceptions=True)

    for name, result in zip(names, results):
        if isinstance(result, Exception):
            error_details = [
                ("Operation", name),
                ("Error Type", type(result).__name__),
                ("Error", str(result)[:100]),
            ]
            if context:
                error_details.insert(0, ("Context", context))

            logger.warning("Async Operation Failed", error_details)

    return results


# =============================================================================
# Safe Background Tasks
# =============================================================================

def create_safe_task(
    coro: Coroutine[Any, Any, Any],
    name: str = "Background Task",
) -> asyncio.Task:
    """
    Create a background task with automatic error logging.

    Unlike raw asyncio.create_task(), exceptions are logged instead of
    disappearing with the task.

    Args:
        coro: The coroutine to run as a background task.
        name: Name for logging purposes.

    Returns:
        The created asyncio.Task.
    """
    async def wrapped():
        try:
            await coro
        except asyncio.CancelledError:
            pass
        except Exception as e:
            logger.error("Background Task Failed", [
                ("Task", name),
                ("Error Type", type(e).__name__),
                ("Error", str(e)[:200]),
            ])

    return asyncio.create_task(wrapped())


__all__ = [
    "gather_with_logging",
    "create_safe_task",
]
