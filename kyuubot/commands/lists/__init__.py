"""
KyuuBot - List Commands
=======================

Add, remove and show commands over persisted lists.

Author: Kyuu
"""

from .base import ListArgs, ListBaseCommand, ListInfo, ListReply, get_list
from .add import GuessAddCommand, ListAddCommand
from .remove import GuessRemoveCommand, ListRemoveCommand
from .show import ListShowCommand
from .definitions import build_list_commands


__all__ = [
    "ListArgs",
    "ListBaseCommand",
    "ListInfo",
    "ListReply",
    "get_list",
    "ListAddCommand",
    "GuessAddCommand",
    "ListRemoveCommand",
    "GuessRemoveCommand",
    "ListShowCommand",
    "build_list_commands",
]
