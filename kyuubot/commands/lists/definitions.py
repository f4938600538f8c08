"""
KyuuBot - List Definitions
==========================

The concrete lists the bot ships with and the commands each one gets.

    tag       tags       mapping tag -> [url]     add/remove by tags, show requires a tag
    snippet   snippets   array of text            add/remove/show
    shortcut  snippets   mapping key -> text      add/remove/show
    guess     pkmn-spec  mapping phrase -> [url]  add/remove (guess rules)/show

Author: Kyuu
"""

from typing import Any, List

from kyuubot.commands.lists.add import GuessAddCommand, ListAddCommand
from kyuubot.commands.lists.base import ListBaseCommand, ListInfo
from kyuubot.commands.lists.remove import GuessRemoveCommand, ListRemoveCommand
from kyuubot.commands.lists.show import ListShowCommand
from kyuubot.core.constants import MESSAGE_DELETE_DELAY


TAG_INFO = ListInfo(require_options=True, multiple_options=True, url_only=True, is_arr_list=False)
SNIPPET_INFO = ListInfo(require_options=False, multiple_options=False, url_only=False, is_arr_list=True)
SHORTCUT_INFO = ListInfo(require_options=True, multiple_options=False, url_only=False, is_arr_list=False)
GUESS_INFO = ListInfo(require_options=True, multiple_options=False, url_only=False, is_arr_list=False)


def build_list_commands(
    command_prefix: str = "!",
    delete_delay: float = MESSAGE_DELETE_DELAY,
    provider: Any = None,
) -> List[ListBaseCommand]:
    """
    Create every list command.

    Args:
        command_prefix: Prefix shown in help hints inside replies.
        delete_delay: Seconds before a triggering message is deleted.
        provider: Settings provider (the shared database when None).
    """
    list_commands: List[ListBaseCommand] = [
        # Tags
        ListAddCommand("tag", "tags", TAG_INFO, provider=provider),
        ListRemoveCommand("tag", "tags", TAG_INFO, provider=provider),
        ListShowCommand("tag", "tags", require_item=True, provider=provider),
        # Snippets
        ListAddCommand("snippet", "snippets", SNIPPET_INFO, provider=provider),
        ListRemoveCommand("snippet", "snippets", SNIPPET_INFO, provider=provider),
        ListShowCommand("snippet", "snippets", is_arr_list=True, provider=provider),
        ListAddCommand("shortcut", "snippets", SHORTCUT_INFO, provider=provider),
        ListRemoveCommand("shortcut", "snippets", SHORTCUT_INFO, provider=provider),
        ListShowCommand("shortcut", "snippets", provider=provider),
        # Pokemon speculation
        GuessAddCommand(provider=provider),
        GuessRemoveCommand(provider=provider),
        ListShowCommand("guess", "pkmn-spec", provider=provider),
    ]

    for list_command in list_commands:
        list_command.command_prefix = command_prefix
        list_command.delete_delay = delete_delay

    return list_commands


__all__ = [
    "TAG_INFO",
    "SNIPPET_INFO",
    "SHORTCUT_INFO",
    "GUESS_INFO",
    "build_list_commands",
]
