"""
KyuuBot - Logger Module
=======================

Tree-style logging with Eastern timestamps and daily log folders.

Every entry is one timestamped title line, optionally followed by
``key: value`` branches:

    [02:30:45 PM EST] 📝 List Updated
      ├─ List: tag
      └─ Entries: 4

Entries go to the console and to ``logs/<date>/Kyuu-<date>.log``; errors
are also copied to ``Kyuu-Errors-<date>.log`` and, when a webhook is set,
posted to Discord.

Author: Kyuu
"""

import os
import uuid
import shutil
import asyncio
from datetime import datetime, timedelta
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

import aiohttp
from zoneinfo import ZoneInfo


# =============================================================================
# Constants
# =============================================================================

LOGS_DIR = Path(os.getenv("KYUU_LOGS_DIR", "logs"))
"""Root directory for dated log folders and error dumps."""

LOG_RETENTION_DAYS = 7
"""Dated folders older than this are pruned at startup."""

NY_TZ = ZoneInfo("America/New_York")
"""Timezone for log timestamps and embed times."""

WEBHOOK_COLOR = 0xDC3545
WEBHOOK_TIMEOUT = 10
WEBHOOK_DESCRIPTION_MAX = 4000

Details = Sequence[Tuple[str, str]]


# =============================================================================
# Tree Logger Class
# =============================================================================

class TreeLogger:
    """
    Console and file logger shared by the whole bot.

    Attributes:
        run_id: Short id of this process, written into the session
            marker and the webhook footer.
        log_file: Today's log file.
        error_file: Today's error-only log file.
    """

    def __init__(self, logs_dir: Path = LOGS_DIR) -> None:
        self.run_id: str = uuid.uuid4().hex[:8]
        self._webhook_url: Optional[str] = None

        today = datetime.now(NY_TZ).date()
        self.log_dir = logs_dir / today.isoformat()
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.log_file = self.log_dir / f"Kyuu-{today.isoformat()}.log"
        self.error_file = self.log_dir / f"Kyuu-Errors-{today.isoformat()}.log"

        self._prune(logs_dir, today)
        self._append(self.log_file, f"\n===== Session {self.run_id} started {self._stamp()} =====")

    def set_webhook(self, url: Optional[str]) -> None:
        """Forward error entries with details to a Discord webhook (None disables)."""
        self._webhook_url = url

    # =========================================================================
    # Files
    # =========================================================================

    @staticmethod
    def _prune(logs_dir: Path, today) -> None:
        cutoff = today - timedelta(days=LOG_RETENTION_DAYS)
        removed = 0

        for folder in logs_dir.iterdir():
            if not folder.is_dir():
                continue
            try:
                folder_date = datetime.strptime(folder.name, "%Y-%m-%d").date()
            except ValueError:
                continue  # errors/ and anything else undated
            if folder_date < cutoff:
                shutil.rmtree(folder, ignore_errors=True)
                removed += 1

        if removed:
            print(f"[LOGGER] Pruned {removed} log folder(s) older than {LOG_RETENTION_DAYS} days")

    @staticmethod
    def _append(path: Path, text: str) -> None:
        with open(path, "a", encoding="utf-8") as f:
            f.write(f"{text}\n")

    # =========================================================================
    # Formatting
    # =========================================================================

    @staticmethod
    def _stamp() -> str:
        return datetime.now(NY_TZ).strftime("[%I:%M:%S %p %Z]")

    @staticmethod
    def _branches(details: Details) -> List[str]:
        last = len(details) - 1
        return [
            f"  {'└─' if i == last else '├─'} {key}: {value}"
            for i, (key, value) in enumerate(details)
        ]

    def _log(self, emoji: str, title: str, details: Optional[Details] = None, is_error: bool = False) -> None:
        text = "\n".join([f"{self._stamp()} {emoji} {title}", *self._branches(details or [])])
        print(text)
        self._append(self.log_file, text)
        if is_error:
            self._append(self.error_file, text)

    # =========================================================================
    # Public API
    # =========================================================================

    def tree(self, title: str, items: Details, emoji: str = "📦") -> None:
        """Log a titled entry with one branch per (key, value) pair."""
        self._log(emoji, title, items)

    def debug(self, msg: str, details: Optional[Details] = None) -> None:
        """Only written when the DEBUG environment variable is set."""
        if os.getenv("DEBUG"):
            self._log("🔍", msg, details)

    def info(self, msg: str) -> None:
        self._log("ℹ️", msg)

    def warning(self, msg: str, details: Optional[Details] = None) -> None:
        self._log("⚠️", msg, details)

    def error(self, msg: str, details: Optional[Details] = None) -> None:
        """
        Log an error to both files.

        Errors that carry details are also posted to the webhook, provided
        one is set and an event loop is running.
        """
        self._log("❌", msg, details, is_error=True)
        if not details or not self._webhook_url:
            return

        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            return  # startup or synchronous tests
        loop.create_task(self._post_webhook(msg, details))

    # =========================================================================
    # Webhook
    # =========================================================================

    async def _post_webhook(self, title: str, details: Details) -> None:
        description = "\n".join(f"**{key}:** {value}" for key, value in details)
        payload = {
            "embeds": [{
                "title": f"❌ {title}",
                "description": description[:WEBHOOK_DESCRIPTION_MAX],
                "color": WEBHOOK_COLOR,
                "timestamp": datetime.now(NY_TZ).isoformat(),
                "footer": {"text": f"Run {self.run_id}"},
            }]
        }

        # Failures are printed, not logged, so a dead webhook cannot recurse
        try:
            timeout = aiohttp.ClientTimeout(total=WEBHOOK_TIMEOUT)
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.post(self._webhook_url, json=payload) as resp:
                    if resp.status >= 300:
                        print(f"[LOGGER] Webhook rejected error report: HTTP {resp.status}")
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            print(f"[LOGGER] Webhook unreachable: {e}")


# =============================================================================
# Global Instance
# =============================================================================

logger = TreeLogger()
"""Shared logger instance."""


__all__ = [
    "logger",
    "TreeLogger",
    "LOGS_DIR",
    "NY_TZ",
]
