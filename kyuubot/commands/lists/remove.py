"""
KyuuBot - List Remove Command
=============================

``<list>-remove`` / ``remove-<list>``: take an item out of a persisted
list. Mirrors the add command mode for mode; mapping keys left without
values are dropped.

Author: Kyuu
"""

from typing import Any, Dict, List

from discord.ext import commands

from kyuubot.commands.lists.add import EXAMPLE_URL
from kyuubot.commands.lists.base import (
    ListArgs,
    ListBaseCommand,
    ListDocument,
    ListInfo,
    ListReply,
    unquote,
)
from kyuubot.utils.replies import send_error
from kyuubot.utils.type_checks import is_url


class ListRemoveCommand(ListBaseCommand):
    """Remove command for a list. Takes the same arguments as ListAddCommand."""

    def __init__(self, list_name: str, group_name: str, list_info: ListInfo, **command_info: Any) -> None:
        info: Dict[str, Any] = {
            "name": f"{list_name}-remove",
            "aliases": [f"remove-{list_name}"],
            "description": self._construct_description(list_name, list_info),
            "examples": self._construct_examples(list_name, list_info),
            "usage": "<url> <tags...>" if list_info.multiple_options else "<item> [value]",
        }
        info.update(command_info)
        super().__init__(list_name, group_name, list_info, **info)

    @staticmethod
    def _construct_description(list_name: str, list_info: ListInfo) -> str:
        description = "Remove a URL " if list_info.url_only else "Remove an item "
        if list_info.multiple_options:
            description += "from the given tags of "
        else:
            description += "from "
        return description + f"the {list_name} list."

    @staticmethod
    def _construct_examples(list_name: str, list_info: ListInfo) -> List[str]:
        command = f"remove-{list_name}"
        if list_info.multiple_options:
            return [f"{command} {EXAMPLE_URL} kyuu lhu", f"{command} {EXAMPLE_URL} kyuu"]
        if list_info.is_arr_list:
            return [f'{command} "snippet of text"']
        return [f"{command} lenny", f'{command} omw "On my way!"']

    # =========================================================================
    # Reply Hook
    # =========================================================================

    def get_reply(self, args: ListArgs, document: ListDocument) -> ListReply:
        args = self.join_array_item(args, document)
        if self.list_info.url_only and not is_url(args.item):
            return ListReply.fail(
                f'`{args.item}` must be a valid URL beginning with "http". '
                "Make sure your arguments are in the right order."
            )

        if args.options:
            if self.list_info.multiple_options:
                return self._reply_for_multiple_options(args, document)
            return self._reply_for_single_option(args, document)
        return self._reply_for_no_options(args, document)

    def _key(self, item: str) -> str:
        return item if self.list_info.url_only else item.lower()

    def _reply_for_no_options(self, args: ListArgs, document: ListDocument) -> ListReply:
        if isinstance(document, list):
            if args.item not in document:
                return ListReply.fail(f'`{args.item}` is not in "{self.list_name}"')
            document.remove(args.item)
            return ListReply.ok(f'`{args.item}` was removed from "{self.list_name}"')

        key = self._key(args.item)
        if key not in document:
            return ListReply.fail(f'`{key}` does not exist in "{self.list_name}"')

        del document[key]
        return ListReply.ok(f'`{key}` was removed from "{self.list_name}"')

    def _reply_for_single_option(self, args: ListArgs, document: ListDocument) -> ListReply:
        key = self._key(args.item)
        value = unquote(args.options)

        if isinstance(document, list) or key not in document:
            return ListReply.fail(f'`{key}` does not exist in "{self.list_name}"')

        existing = document[key]
        if isinstance(existing, list):
            if value not in existing:
                return ListReply.fail(f"`{value}` is not in `{key}`")
            existing.remove(value)
            if not existing:
                del document[key]
        elif existing != value:
            return ListReply.fail(f"`{value}` is not in `{key}`")
        else:
            del document[key]

        return ListReply.ok(f"`{value}` was removed from `{key}`")

    def _reply_for_multiple_options(self, args: ListArgs, document: ListDocument) -> ListReply:
        tags = [tag.lower() for tag in args.options.split()]
        skipped = []

        for tag in tags:
            entry = document.get(tag)
            if not isinstance(entry, list) or args.item not in entry:
                skipped.append(tag)
                continue
            entry.remove(args.item)
            if not entry:
                del document[tag]

        if len(skipped) == len(tags):
            return ListReply.fail(f"`{args.item}` is not in `{', '.join(skipped)}`")

        if skipped:
            return ListReply.ok(
                f"`{args.item}` is not in `{', '.join(skipped)}` "
                "but was removed from any tags not listed."
            )

        return ListReply.ok(f"`{args.item}` was removed from tags `{', '.join(tags)}`")


# =============================================================================
# Guess Remove
# =============================================================================

class GuessRemoveCommand(ListRemoveCommand):
    """
    Remove command for the guess list.

    DESIGN:
        Guess phrases often start with "i'll", and an unquoted apostrophe
        splits the phrase at the first word. A bare ``i'll`` is rejected
        with a hint, and ``ill`` is accepted as a spelling of ``i'll``.
    """

    def __init__(self, **command_info: Any) -> None:
        info: Dict[str, Any] = {"examples": ["remove-guess \"i'll die\""]}
        info.update(command_info)
        super().__init__(
            "guess",
            "pkmn-spec",
            ListInfo(require_options=False, url_only=False),
            **info,
        )

    async def run(self, ctx: commands.Context, args: ListArgs):
        if args.item == "i'll":
            return await send_error(
                ctx,
                "You're trying to remove the tag `i'll`. Please wrap your tag in quotations, like so:\n"
                "`remove-guess \"i'll die\" http://i.imgur.com/V8hvLx7.png`",
            )

        if args.item.startswith("ill "):
            args.item = f"i'll {args.item[4:]}"

        return await super().run(ctx, args)


__all__ = ["ListRemoveCommand", "GuessRemoveCommand"]
