"""
KyuuBot - List Show Command
===========================

``<list> [item]``: read from a persisted list without changing it.

Author: Kyuu
"""

import random
from typing import Any, Dict

from kyuubot.commands.lists.base import (
    ListArgs,
    ListBaseCommand,
    ListDocument,
    ListInfo,
    ListReply,
)
from kyuubot.core.constants import MESSAGE_MAX


class ListShowCommand(ListBaseCommand):
    """
    Show command for a list.

    Without an item: a random entry of an array list, or the keys of a
    mapping list. With an item: the value stored under that key, or a
    random one when the key holds several.

    Args:
        list_name: Name of the list.
        group_name: Help group.
        is_arr_list: True if the list is array-shaped.
        require_item: Fail when no item is given.
        url_only: Keys are URLs and keep their case.
    """

    def __init__(
        self,
        list_name: str,
        group_name: str,
        *,
        is_arr_list: bool = False,
        require_item: bool = False,
        url_only: bool = False,
        **command_info: Any,
    ) -> None:
        list_info = ListInfo(
            url_only=url_only,
            is_arr_list=is_arr_list,
            read_only=True,
            delete_msg=False,
        )
        info: Dict[str, Any] = {
            "name": list_name,
            "description": (
                f"Show an entry of the {list_name} list."
                if require_item or is_arr_list
                else f"Show an entry of the {list_name} list, or every key when none is given."
            ),
            "examples": [list_name] if is_arr_list else [f"{list_name} kyuu"],
            "usage": "<item>" if require_item else "[item]",
        }
        info.update(command_info)
        super().__init__(list_name, group_name, list_info, **info)
        self.require_item = require_item

    def _make_callback(self):
        list_command = self

        async def callback(ctx, *, item: str = ""):
            await list_command.run(ctx, ListArgs(item=item))

        return callback

    # =========================================================================
    # Reply Hook
    # =========================================================================

    def get_reply(self, args: ListArgs, document: ListDocument) -> ListReply:
        item = args.item.strip()

        if not item:
            if self.require_item:
                return ListReply.fail(
                    f"Please specify what to show from \"{self.list_name}\". "
                    f"See examples in `{self.command_prefix}help {self.list_name}`"
                )
            return self._reply_for_list(document)

        if isinstance(document, list):
            if item not in document:
                return ListReply.fail(f'`{item}` is not in "{self.list_name}"')
            return ListReply.ok(item)

        key = item if self.list_info.url_only else item.lower()
        if key not in document:
            return ListReply.fail(f'`{key}` does not exist in "{self.list_name}"')

        value = document[key]
        if isinstance(value, list):
            if not value:
                return ListReply.fail(f"`{key}` is empty.")
            return ListReply.ok(random.choice(value))
        return ListReply.ok(value)

    def _reply_for_list(self, document: ListDocument) -> ListReply:
        if not document:
            return ListReply.fail(f'"{self.list_name}" is empty.')

        if isinstance(document, list):
            return ListReply.ok(random.choice(document))

        keys = ", ".join(f"`{key}`" for key in sorted(document))
        message = f'Entries in "{self.list_name}": {keys}'
        if len(message) > MESSAGE_MAX:
            message = message[:MESSAGE_MAX - 1] + "…"
        return ListReply.ok(message)


__all__ = ["ListShowCommand"]
