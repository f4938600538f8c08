"""
KyuuBot - Duration Utilities
============================

Parsing and formatting of the time expressions reminders accept.

Usage:
    from kyuubot.utils.duration import parse_duration, parse_reminder_time

    seconds = parse_duration("1d12h30m")     # 131400
    due = parse_reminder_time("2h", now)     # now + 2 hours
    due = parse_reminder_time("4/13/2027 2:23pm", now)

Author: Kyuu
"""

import re
from datetime import datetime, timedelta
from typing import Optional, Tuple

from dateutil import parser as date_parser


# =============================================================================
# Time Constants
# =============================================================================

SECONDS_PER_YEAR = 31536000
SECONDS_PER_WEEK = 604800
SECONDS_PER_DAY = 86400
SECONDS_PER_HOUR = 3600
SECONDS_PER_MINUTE = 60

TIME_MULTIPLIERS = {
    "y": SECONDS_PER_YEAR,
    "w": SECONDS_PER_WEEK,
    "d": SECONDS_PER_DAY,
    "h": SECONDS_PER_HOUR,
    "m": SECONDS_PER_MINUTE,
    "s": 1,
}

# Full word aliases mapping to short forms
TIME_UNIT_ALIASES = {
    "year": "y", "years": "y", "yr": "y", "yrs": "y",
    "week": "w", "weeks": "w", "wk": "w", "wks": "w",
    "day": "d", "days": "d",
    "hour": "h", "hours": "h", "hr": "h", "hrs": "h",
    "minute": "m", "minutes": "m", "min": "m", "mins": "m",
    "second": "s", "seconds": "s", "sec": "s", "secs": "s",
}

_COMBINED_PATTERN = re.compile(
    r"(?:(\d+)y)?(?:(\d+)w)?(?:(\d+)d)?(?:(\d+)h)?(?:(\d+)m)?(?:(\d+)s)?"
)


# =============================================================================
# Parsing Functions
# =============================================================================

def _normalize_duration_string(duration_str: str) -> str:
    """
    Convert full unit words to their short forms and drop spaces.

    Examples:
        "1 day" -> "1d"
        "2 hours 5 mins" -> "2h5m"
        "1 monday" -> "1monday" (left alone, fails validation)
    """
    result = duration_str.lower().strip()
    if result.startswith("in "):
        result = result[3:]

    result = re.sub(r"(\d+)\s+", r"\1", result)

    # Longest first so "minutes" is not eaten by "min"
    for word, short in sorted(TIME_UNIT_ALIASES.items(), key=lambda x: -len(x[0])):
        result = re.sub(rf"(?<=\d){word}\b|(?<!\w){word}\b", short, result)

    return result.replace(" ", "")


def parse_duration(duration_str: str) -> Optional[int]:
    """
    Parse a duration string into seconds.

    Supports:
        - "30s", "10m", "2h", "1d", "1w", "1y"
        - Combined: "1d12h30m", "2w3d"
        - Full words: "1 day", "2 hours", "in 5 minutes"
        - Plain number: "30" -> 30 minutes

    Args:
        duration_str: Duration string to parse.

    Returns:
        Duration in seconds, or None if the string is not a duration.

    Examples:
        >>> parse_duration("1h")
        3600
        >>> parse_duration("30")
        1800
        >>> parse_duration("friday")
        None
    """
    if not duration_str or not duration_str.strip():
        return None

    normalized = _normalize_duration_string(duration_str)

    if normalized.isdigit():
        return int(normalized) * SECONDS_PER_MINUTE or None

    match = _COMBINED_PATTERN.fullmatch(normalized)
    if not match or not any(match.groups()):
        return None

    total = sum(
        int(value or 0) * TIME_MULTIPLIERS[unit]
        for value, unit in zip(match.groups(), ("y", "w", "d", "h", "m", "s"))
    )
    return total if total > 0 else None


def parse_reminder_time(when: str, now: datetime) -> Optional[datetime]:
    """
    Resolve a reminder time expression against ``now``.

    Relative durations ("2h", "in 10 minutes") are tried first, then
    absolute dates and times through dateutil ("4/13/2027 2:23pm",
    "friday 8pm"). A bare time that already passed today rolls over to
    tomorrow.

    Args:
        when: User supplied time expression.
        now: Reference time (timezone-aware or naive, matching the result).

    Returns:
        The due datetime, or None if the expression cannot be parsed or
        lies in the past.
    """
    seconds = parse_duration(when)
    if seconds is not None:
        return now + timedelta(seconds=seconds)

    try:
        due = date_parser.parse(when, default=now.replace(second=0, microsecond=0), fuzzy=False)
    except (ValueError, OverflowError):
        return None

    if due.tzinfo is None and now.tzinfo is not None:
        due = due.replace(tzinfo=now.tzinfo)

    if due <= now and due.date() == now.date():
        due += timedelta(days=1)

    if due <= now:
        return None
    return due


def split_reminder(text: str, now: datetime, max_words: int = 6) -> Optional[Tuple[datetime, str]]:
    """
    Split "<when> <message>" where <when> may span several words.

    The longest leading run of words that parses as a time wins, so
    "friday 8pm movie night" gives ("friday 8pm", "movie night").

    Returns:
        (due, message), or None if no leading time was found or the
        message is empty.
    """
    words = text.split()
    for count in range(min(max_words, len(words) - 1), 0, -1):
        due = parse_reminder_time(" ".join(words[:count]), now)
        if due is not None:
            return due, " ".join(words[count:])
    return None


# =============================================================================
# Formatting Functions
# =============================================================================

def format_duration(seconds: Optional[int], max_units: int = 3) -> str:
    """
    Format seconds into a human-readable duration string.

    Args:
        seconds: Duration in seconds.
        max_units: Maximum number of time units to show.

    Returns:
        Formatted string like "1d 12h 30m".

    Examples:
        >>> format_duration(3661)
        "1h 1m 1s"
        >>> format_duration(45)
        "45s"
    """
    if not seconds or seconds <= 0:
        return "0s"

    parts = []
    for unit in ("y", "w", "d", "h", "m", "s"):
        size = TIME_MULTIPLIERS[unit]
        if seconds >= size and len(parts) < max_units:
            value, seconds = divmod(seconds, size)
            parts.append(f"{value}{unit}")

    return " ".join(parts)


__all__ = [
    "SECONDS_PER_YEAR",
    "SECONDS_PER_WEEK",
    "SECONDS_PER_DAY",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_MINUTE",
    "parse_duration",
    "parse_reminder_time",
    "split_reminder",
    "format_duration",
]
