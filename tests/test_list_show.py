"""
KyuuBot - List Show Tests
=========================

Tests for the read-only ListShowCommand.
"""

from unittest.mock import patch

import pytest

from kyuubot.commands.lists.base import ListArgs
from kyuubot.commands.lists.show import ListShowCommand


class TestShowCommandInfo:
    """Tests for show command flags."""

    def test_name_is_list_name(self):
        command = ListShowCommand("shortcut", "snippets")
        assert command.name == "shortcut"
        assert command.aliases == []

    def test_is_read_only(self):
        command = ListShowCommand("shortcut", "snippets")
        assert command.list_info.read_only is True
        assert command.list_info.delete_msg is False


class TestShowArray:
    """Tests for showing array-shaped lists."""

    def test_random_entry(self):
        command = ListShowCommand("snippet", "snippets", is_arr_list=True)
        with patch("kyuubot.commands.lists.show.random.choice", side_effect=lambda seq: seq[-1]):
            reply = command.get_reply(ListArgs(), ["one", "two"])
        assert reply.error is False
        assert reply.message == "two"

    def test_empty_list_fails(self):
        command = ListShowCommand("snippet", "snippets", is_arr_list=True)
        reply = command.get_reply(ListArgs(), [])
        assert reply.error is True
        assert reply.message == '"snippet" is empty.'

    def test_specific_entry(self):
        command = ListShowCommand("snippet", "snippets", is_arr_list=True)
        assert command.get_reply(ListArgs("two"), ["one", "two"]).message == "two"
        assert command.get_reply(ListArgs("three"), ["one", "two"]).error is True


class TestShowMapping:
    """Tests for showing mapping-shaped lists."""

    def test_key_listing_is_sorted(self):
        command = ListShowCommand("shortcut", "snippets")
        reply = command.get_reply(ListArgs(), {"omw": "On my way!", "lenny": "( ͡° ͜ʖ ͡°)"})
        assert reply.message == 'Entries in "shortcut": `lenny`, `omw`'

    def test_scalar_value(self):
        command = ListShowCommand("shortcut", "snippets")
        reply = command.get_reply(ListArgs("OMW"), {"omw": "On my way!"})
        assert reply.error is False
        assert reply.message == "On my way!"

    def test_array_value_picks_one(self):
        command = ListShowCommand("tag", "tags", require_item=True)
        urls = ["http://a.com/1.png", "http://a.com/2.png"]
        reply = command.get_reply(ListArgs("kyuu"), {"kyuu": urls})
        assert reply.message in urls

    def test_missing_key(self):
        command = ListShowCommand("tag", "tags", require_item=True)
        reply = command.get_reply(ListArgs("nope"), {"kyuu": ["http://a.com/1.png"]})
        assert reply.error is True
        assert reply.message == '`nope` does not exist in "tag"'

    def test_require_item(self):
        command = ListShowCommand("tag", "tags", require_item=True)
        reply = command.get_reply(ListArgs(), {"kyuu": ["http://a.com/1.png"]})
        assert reply.error is True
        assert reply.message == 'Please specify what to show from "tag". See examples in `!help tag`'

    def test_long_listing_truncated(self):
        command = ListShowCommand("shortcut", "snippets")
        document = {f"key{i:04d}": "value" for i in range(500)}
        reply = command.get_reply(ListArgs(), document)
        assert len(reply.message) == 2000
        assert reply.message.endswith("…")


class TestShowRun:
    """Tests for running show commands."""

    @pytest.mark.asyncio
    async def test_show_never_persists_or_deletes(self, test_db, mock_ctx, no_delete, drain):
        command = ListShowCommand("shortcut", "snippets", provider=test_db)

        await command.run(mock_ctx, ListArgs("lenny"))
        await drain()

        mock_ctx.reply.assert_awaited_with("( ͡° ͜ʖ ͡°)")
        no_delete.assert_not_called()
        assert test_db.get_setting("global", "shortcut") is None
