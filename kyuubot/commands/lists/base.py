"""
KyuuBot - List Command Base
===========================

Shared machinery for the commands that edit and show persisted lists.

DESIGN:
    A list is one JSON document stored in the settings provider under
    (scope, list name). It has one of two shapes:

    - array:   ["snippet one", "snippet two"]
    - mapping: {"lenny": "( ͡° ͜ʖ ͡°)", "kyuu": ["http://..."]}

    Every command loads the document, asks its ``get_reply`` hook for a
    ListReply (mutating the document in place on success), then persists
    the document in the background, schedules deletion of the triggering
    message and replies.

    The read and the background write-back are not serialized. Two
    commands editing the same list at the same moment both read the old
    document and the later write wins, dropping the earlier edit.

Author: Kyuu
"""

import asyncio
import json
from abc import ABC, abstractmethod
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Dict, List, Optional, Sequence, Union

import discord
from discord.ext import commands

from kyuubot.core.constants import GLOBAL_SCOPE, LIST_ASSETS_DIR, MESSAGE_DELETE_DELAY
from kyuubot.core.database import get_db
from kyuubot.core.logger import logger
from kyuubot.utils.async_utils import create_safe_task
from kyuubot.utils.replies import schedule_delete, send_error


ListDocument = Union[List[str], Dict[str, Union[str, List[str]]]]
"""A persisted list: array-shaped or mapping-shaped."""


# =============================================================================
# Data Types
# =============================================================================

@dataclass(frozen=True)
class ListReply:
    """
    Outcome of a list command's reply hook.

    Attributes:
        error: True when the command failed and nothing should be saved.
        message: Text shown to the invoker.
    """

    error: bool
    message: str

    @classmethod
    def ok(cls, message: str) -> "ListReply":
        return cls(error=False, message=message)

    @classmethod
    def fail(cls, message: str) -> "ListReply":
        return cls(error=True, message=message)


@dataclass(frozen=True)
class ListInfo:
    """
    How a command treats its list.

    Attributes:
        require_options: Whether the options argument must be given.
        multiple_options: Whether options is a whitespace separated tag list.
        url_only: Whether the item must be a URL.
        is_arr_list: True for array-shaped lists, False for mappings.
        read_only: Skip persisting the list after a successful reply.
        delete_msg: Delete the triggering message after a successful reply.
    """

    require_options: bool = False
    multiple_options: bool = False
    url_only: bool = False
    is_arr_list: bool = False
    read_only: bool = False
    delete_msg: bool = True


@dataclass
class ListArgs:
    """Parsed command arguments: the item and the rest of the line."""

    item: str = ""
    options: str = ""


# =============================================================================
# List Store Accessor
# =============================================================================

@lru_cache(maxsize=None)
def _read_asset(list_name: str) -> Optional[str]:
    """Return the raw bundled default document for a list, if one ships."""
    path = LIST_ASSETS_DIR / f"{list_name}.json"
    if not path.is_file():
        return None
    return path.read_text(encoding="utf-8")


def get_default_list(list_name: str, is_arr_list: bool) -> ListDocument:
    """
    Build the document a list starts with before anyone edits it.

    Args:
        list_name: Name of the list.
        is_arr_list: True if the list is array-shaped.

    Returns:
        A fresh copy of the bundled asset, or an empty container of the
        list's shape.
    """
    raw = _read_asset(list_name)
    if raw is not None:
        return json.loads(raw)
    return [] if is_arr_list else {}


def get_list(
    provider: Any,
    list_name: str,
    is_arr_list: bool,
    scope: Union[str, int] = GLOBAL_SCOPE,
) -> ListDocument:
    """
    Load a list from the provider, falling back to its default document.

    Args:
        provider: Object exposing ``get_setting(scope, key, default)``.
        list_name: Name of the list.
        is_arr_list: True if the list is array-shaped.
        scope: Provider scope, "global" unless a guild id is given.
    """
    return provider.get_setting(scope, list_name, get_default_list(list_name, is_arr_list))


def unquote(text: str) -> str:
    """Strip one pair of matching surrounding quotes."""
    text = text.strip()
    pairs = (('"', '"'), ("'", "'"), ("“", "”"), ("«", "»"))
    for opening, closing in pairs:
        if len(text) >= 2 and text.startswith(opening) and text.endswith(closing):
            return text[1:-1]
    return text


# =============================================================================
# List Command Base
# =============================================================================

class ListBaseCommand(ABC):
    """
    Base class for commands operating on a persisted list.

    Subclasses implement ``get_reply``; forgetting to do so makes the
    class abstract, so it cannot be instantiated.

    Attributes:
        list_name: Name of the list (also the provider key).
        group_name: Help menu group the command is listed under.
        list_info: How the list is treated.
        provider: Settings provider; the shared database when None.
        command_prefix: Prefix used in help hints inside replies.
        delete_delay: Seconds before the triggering message is deleted.
    """

    command_prefix: str = "!"
    delete_delay: float = MESSAGE_DELETE_DELAY

    def __init__(
        self,
        list_name: str,
        group_name: str,
        list_info: ListInfo,
        *,
        name: str,
        aliases: Sequence[str] = (),
        description: str = "",
        examples: Sequence[str] = (),
        usage: Optional[str] = None,
        provider: Any = None,
    ) -> None:
        self.list_name = list_name
        self.group_name = group_name
        self.list_info = list_info
        self.name = name
        self.aliases = list(aliases)
        self.description = description
        self.examples = list(examples)
        self.usage = usage
        self.provider = provider

    def __repr__(self) -> str:
        return f"<{type(self).__name__} name={self.name!r} list={self.list_name!r}>"

    # =========================================================================
    # Reply Hook
    # =========================================================================

    @abstractmethod
    def get_reply(self, args: ListArgs, document: ListDocument) -> ListReply:
        """
        Compute the reply, mutating ``document`` in place on success.

        Returns:
            ListReply.ok with the success text, or ListReply.fail with
            the text shown through the error path.
        """

    @staticmethod
    def join_array_item(args: ListArgs, document: ListDocument) -> ListArgs:
        """
        Fold the options back into the item for array lists.

        Array entries are whole lines of text, so `add-snippet hello world`
        means the single entry "hello world" rather than a key and a value.
        """
        if isinstance(document, list) and args.options:
            return ListArgs(f"{args.item} {args.options}", "")
        return args

    # =========================================================================
    # Execution
    # =========================================================================

    def get_provider(self) -> Any:
        return self.provider if self.provider is not None else get_db()

    def get_list(self) -> ListDocument:
        return get_list(self.get_provider(), self.list_name, self.list_info.is_arr_list)

    async def run(self, ctx: commands.Context, args: ListArgs) -> Optional[discord.Message]:
        """
        Execute the command for one invocation.

        DESIGN:
            Failure: error reply only, the list is not saved and the
            trigger stays. Success: save in the background, delete the
            trigger after ``delete_delay`` and reply. The reply does not
            wait for the save; a failed save is only logged.
        """
        document = self.get_list()
        reply = self.get_reply(args, document)

        if reply.error:
            return await send_error(ctx, reply.message)

        if not self.list_info.read_only:
            create_safe_task(self._persist(document), f"Persist List {self.list_name}")

        if self.list_info.delete_msg:
            schedule_delete(ctx.message, self.delete_delay)

        return await ctx.reply(reply.message)

    async def _persist(self, document: ListDocument) -> None:
        """Write the list back through the provider on a worker thread."""
        await asyncio.to_thread(
            self.get_provider().set_setting, GLOBAL_SCOPE, self.list_name, document,
        )
        logger.tree("List Updated", [
            ("List", self.list_name),
            ("Command", self.name),
            ("Entries", str(len(document))),
        ], emoji="📝")

    # =========================================================================
    # Command Registration
    # =========================================================================

    def _make_callback(self):
        """
        Build the coroutine discord.py invokes.

        ``item`` is one (optionally quoted) word, ``options`` the rest of
        the line. A nested function is used so discord.py sees ``ctx`` as
        the only implicit parameter.
        """
        list_command = self

        if self.list_info.require_options:
            async def callback(ctx: commands.Context, item: str, *, options: str):
                await list_command.run(ctx, ListArgs(item, options))
        else:
            async def callback(ctx: commands.Context, item: str, *, options: str = ""):
                await list_command.run(ctx, ListArgs(item, options))

        return callback

    def to_command(self) -> commands.Command:
        """Create the discord.py command for this list command."""
        return commands.Command(
            self._make_callback(),
            name=self.name,
            aliases=self.aliases,
            help=self.description,
            brief=self.description,
            usage=self.usage,
            extras={
                "group": self.group_name,
                "examples": self.examples,
                "list": self.list_name,
            },
        )


__all__ = [
    "ListDocument",
    "ListReply",
    "ListInfo",
    "ListArgs",
    "ListBaseCommand",
    "get_default_list",
    "get_list",
    "unquote",
]
