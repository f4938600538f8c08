"""
KyuuBot - List Add Command
==========================

``<list>-add`` / ``add-<list>``: put an item into a persisted list.

DESIGN:
    The ListInfo flags pick one of three modes:

    - no options:       append to an array list
    - single option:    store key -> value in a mapping list
    - multiple options: file a URL under one or more tags

    Help text and examples are derived from the same flags so the help
    menu always matches what the command accepts.

Author: Kyuu
"""

from typing import Any, Dict, List

from discord.ext import commands

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


EXAMPLE_URL = "`http://i.imgur.com/f75Pzvn.jpg`"


class ListAddCommand(ListBaseCommand):
    """
    Add command for a list.

    Args:
        list_name: Name of the list.
        group_name: Help group.
        list_info: How the command handles the list.
        **command_info: Overrides for the generated name, aliases,
            description, examples or usage.
    """

    def __init__(self, list_name: str, group_name: str, list_info: ListInfo, **command_info: Any) -> None:
        info: Dict[str, Any] = {
            "name": f"{list_name}-add",
            "aliases": [f"add-{list_name}"],
            "description": self._construct_description(list_name, list_info),
            "examples": self._construct_examples(list_name, list_info),
            "usage": self._construct_usage(list_info),
        }
        info.update(command_info)
        super().__init__(list_name, group_name, list_info, **info)

    # =========================================================================
    # Help Text
    # =========================================================================

    @staticmethod
    def _construct_description(list_name: str, list_info: ListInfo) -> str:
        description = "Add a URL " if list_info.url_only else "Add an item "
        if list_info.require_options:
            description += (
                "with its corresponding tags "
                if list_info.multiple_options
                else "with a corresponding value "
            )
        return description + f"to the {list_name} list."

    @staticmethod
    def _construct_examples(list_name: str, list_info: ListInfo) -> List[str]:
        command = f"add-{list_name}"

        if not list_info.require_options:
            examples = [] if list_info.url_only else [f'{command} "snippet of text"']
            # URL example is always shown so users know URLs are accepted
            examples.append(f"{command} {EXAMPLE_URL}")
            return examples

        if list_info.multiple_options:
            return [
                f"{command} {EXAMPLE_URL} kyuu lhu email",
                f"{command} {EXAMPLE_URL} kyuu",
            ]

        return [
            f'{command} lenny "( ͡° ͜ʖ ͡°)"',
            f'{command} omw "On my way!"',
            f"{command} u you",
        ]

    @staticmethod
    def _construct_usage(list_info: ListInfo) -> str:
        if not list_info.require_options:
            return "<item>"
        return "<url> <tags...>" if list_info.multiple_options else "<key> <value>"

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

    def _reply_for_no_options(self, args: ListArgs, document: ListDocument) -> ListReply:
        if not isinstance(document, list):
            return ListReply.fail(
                f"`{args.item}` needs a value to be added to \"{self.list_name}\". "
                f"See examples in `{self.command_prefix}help {self.list_name}`"
            )

        if args.item in document:
            return ListReply.fail(f'`{args.item}` is already in "{self.list_name}"')

        document.append(args.item)
        return ListReply.ok(f'`{args.item}` was added to "{self.list_name}"')

    def _reply_for_single_option(self, args: ListArgs, document: ListDocument) -> ListReply:
        if not self.list_info.url_only and is_url(args.item):
            return ListReply.fail(
                "Item must not be a URL. Did you perhaps mix up your arguments? "
                f"See examples in `{self.command_prefix}help {self.list_name}`"
            )

        key = args.item if self.list_info.url_only else args.item.lower()
        value = unquote(args.options)
        existing = document.get(key)

        if isinstance(existing, list):
            if value in existing:
                return ListReply.fail(f"`{value}` is already in `{key}`")
            existing.append(value)
        elif key in document:
            return ListReply.fail(f"`{key}` already exists. Please use another value.")
        else:
            document[key] = value

        return ListReply.ok(f"`{value}` was added to `{key}`")

    def _reply_for_multiple_options(self, args: ListArgs, document: ListDocument) -> ListReply:
        tags = [tag.lower() for tag in args.options.split()]
        skipped = []

        for tag in tags:
            entry = document.get(tag)
            if entry is None:
                document[tag] = [args.item]
            elif isinstance(entry, list) and args.item not in entry:
                entry.append(args.item)
            else:
                skipped.append(tag)

        if len(skipped) == len(tags):
            return ListReply.fail(f"`{args.item}` is already in `{', '.join(skipped)}`")

        if skipped:
            return ListReply.ok(
                f"`{args.item}` is already in `{', '.join(skipped)}` "
                "but any tags not listed were added successfully."
            )

        return ListReply.ok(f"`{args.item}` was added with tags `{', '.join(tags)}`")



# =============================================================================
# Guess Add
# =============================================================================

class GuessAddCommand(ListAddCommand):
    """
    Add command for the guess list.

    A bare ``i'll`` would file the rest of the phrase as the value, so
    it is rejected with a quoting hint. ``ill`` is read as ``i'll``.
    """

    def __init__(self, **command_info: Any) -> None:
        info: Dict[str, Any] = {"examples": ["add-guess \"i'll die\" http://i.imgur.com/V8hvLx7.png"]}
        info.update(command_info)
        super().__init__(
            "guess",
            "pkmn-spec",
            ListInfo(require_options=True, multiple_options=False, url_only=False),
            **info,
        )

    async def run(self, ctx: commands.Context, args: ListArgs):
        if args.item == "i'll":
            return await send_error(
                ctx,
                "You're trying to add the tag `i'll`. Please wrap your tag in quotations, like so:\n"
                "`add-guess \"i'll die\" http://i.imgur.com/V8hvLx7.png`",
            )

        if args.item.startswith("ill "):
            args.item = f"i'll {args.item[4:]}"

        return await super().run(ctx, args)


__all__ = ["ListAddCommand", "GuessAddCommand", "EXAMPLE_URL"]
