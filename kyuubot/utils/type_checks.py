"""
KyuuBot - Type Checks
=====================

Small predicates used to validate command arguments.

Author: Kyuu
"""

import re


URL_PATTERN = re.compile(r"https?://[^ /.]+\.[^ /.]+")
"""http(s) scheme followed by a host segment containing a dot."""


def is_url(item: str) -> bool:
    """Return True if item contains something that looks like an http(s) URL."""
    return URL_PATTERN.search(item) is not None


__all__ = ["URL_PATTERN", "is_url"]
