"""
KyuuBot - List Add Tests
========================

Tests for ListAddCommand reply logic and help text.
"""

import pytest

from kyuubot.commands.lists.add import GuessAddCommand, ListAddCommand
from kyuubot.commands.lists.base import ListArgs, ListInfo
from kyuubot.commands.lists.definitions import GUESS_INFO, SHORTCUT_INFO, SNIPPET_INFO, TAG_INFO


URL = "http://i.imgur.com/f75Pzvn.jpg"


def make_add(list_name, list_info, provider=None):
    return ListAddCommand(list_name, "test", list_info, provider=provider)


# =============================================================================
# Naming and Help Text
# =============================================================================

class TestAddCommandInfo:
    """Tests for generated names, descriptions and examples."""

    def test_name_and_alias(self):
        """Test the command is named <list>-add with alias add-<list>."""
        command = make_add("thing", SNIPPET_INFO)
        assert command.name == "thing-add"
        assert command.aliases == ["add-thing"]

    def test_description_for_items(self):
        command = make_add("snippet", SNIPPET_INFO)
        assert command.description == "Add an item to the snippet list."

    def test_description_for_tags(self):
        command = make_add("tag", TAG_INFO)
        assert command.description == "Add a URL with its corresponding tags to the tag list."

    def test_description_for_values(self):
        command = make_add("shortcut", SHORTCUT_INFO)
        assert command.description == "Add an item with a corresponding value to the shortcut list."

    def test_examples_for_tags(self):
        command = make_add("tag", TAG_INFO)
        assert command.examples == [
            "add-tag `http://i.imgur.com/f75Pzvn.jpg` kyuu lhu email",
            "add-tag `http://i.imgur.com/f75Pzvn.jpg` kyuu",
        ]

    def test_examples_for_values(self):
        command = make_add("shortcut", SHORTCUT_INFO)
        assert 'add-shortcut lenny "( ͡° ͜ʖ ͡°)"' in command.examples
        assert "add-shortcut u you" in command.examples

    def test_examples_always_show_url(self):
        """Test item lists still advertise that URLs are accepted."""
        command = make_add("snippet", SNIPPET_INFO)
        assert command.examples[-1] == "add-snippet `http://i.imgur.com/f75Pzvn.jpg`"

    def test_command_info_overrides(self):
        """Test explicit command info replaces the generated values."""
        command = ListAddCommand("guess", "pkmn-spec", GUESS_INFO, examples=["custom"], aliases=[])
        assert command.examples == ["custom"]
        assert command.aliases == []


# =============================================================================
# No Options (array lists)
# =============================================================================

class TestAddNoOptions:
    """Tests for adding to array-shaped lists."""

    def test_add_new_item(self):
        document = []
        reply = make_add("thing", SNIPPET_INFO).get_reply(ListArgs("hello"), document)
        assert reply.error is False
        assert reply.message == '`hello` was added to "thing"'
        assert document == ["hello"]

    def test_add_duplicate_fails(self):
        document = ["hello"]
        reply = make_add("thing", SNIPPET_INFO).get_reply(ListArgs("hello"), document)
        assert reply.error is True
        assert reply.message == '`hello` is already in "thing"'
        assert document == ["hello"]

    def test_duplicates_are_case_sensitive(self):
        document = ["hello"]
        reply = make_add("thing", SNIPPET_INFO).get_reply(ListArgs("Hello"), document)
        assert reply.error is False
        assert document == ["hello", "Hello"]

    def test_unquoted_words_form_one_item(self):
        """Test an unquoted multi-word snippet is added as a single entry."""
        document = []
        reply = make_add("snippet", SNIPPET_INFO).get_reply(ListArgs("hello", "world"), document)
        assert reply.error is False
        assert reply.message == '`hello world` was added to "snippet"'
        assert document == ["hello world"]

    def test_mapping_list_needs_value(self):
        """Test a mapping list rejects an add with no value."""
        document = {}
        command = make_add("shortcut", ListInfo(is_arr_list=False))
        reply = command.get_reply(ListArgs("lenny"), document)
        assert reply.error is True
        assert reply.message == '`lenny` needs a value to be added to "shortcut". See examples in `!help shortcut`'
        assert document == {}


# =============================================================================
# Single Option (key -> value)
# =============================================================================

class TestAddSingleOption:
    """Tests for key/value adds on mapping lists."""

    def test_add_new_key(self):
        document = {}
        reply = make_add("shortcut", SHORTCUT_INFO).get_reply(ListArgs("Lenny", '"( ͡° ͜ʖ ͡°)"'), document)
        assert reply.error is False
        assert reply.message == "`( ͡° ͜ʖ ͡°)` was added to `lenny`"
        assert document == {"lenny": "( ͡° ͜ʖ ͡°)"}

    def test_existing_scalar_fails_regardless_of_value(self):
        document = {"omw": "On my way!"}
        command = make_add("shortcut", SHORTCUT_INFO)

        for value in ("On my way!", "something else"):
            reply = command.get_reply(ListArgs("omw", value), document)
            assert reply.error is True
            assert reply.message == "`omw` already exists. Please use another value."
        assert document == {"omw": "On my way!"}

    def test_append_to_existing_array(self):
        document = {"i'll die": ["http://a.com/1.png"]}
        reply = make_add("guess", GUESS_INFO).get_reply(ListArgs("i'll die", "http://a.com/2.png"), document)
        assert reply.error is False
        assert document == {"i'll die": ["http://a.com/1.png", "http://a.com/2.png"]}

    def test_append_duplicate_to_array_fails(self):
        document = {"i'll die": ["http://a.com/1.png"]}
        reply = make_add("guess", GUESS_INFO).get_reply(ListArgs("i'll die", "http://a.com/1.png"), document)
        assert reply.error is True
        assert reply.message == "`http://a.com/1.png` is already in `i'll die`"
        assert document == {"i'll die": ["http://a.com/1.png"]}

    def test_url_item_rejected(self):
        """Test swapped arguments are caught when the key looks like a URL."""
        document = {}
        reply = make_add("shortcut", SHORTCUT_INFO).get_reply(ListArgs(URL, "lenny"), document)
        assert reply.error is True
        assert reply.message.startswith("Item must not be a URL.")
        assert document == {}


# =============================================================================
# Multiple Options (tags)
# =============================================================================

class TestAddMultipleOptions:
    """Tests for URL-under-tags adds."""

    def test_add_with_new_tags(self):
        document = {}
        reply = make_add("tag", TAG_INFO).get_reply(ListArgs(URL, "kyuu lhu"), document)
        assert reply.error is False
        assert reply.message == f"`{URL}` was added with tags `kyuu, lhu`"
        assert document == {"kyuu": [URL], "lhu": [URL]}

    def test_repeat_fails_for_every_tag(self):
        document = {"kyuu": [URL], "lhu": [URL]}
        reply = make_add("tag", TAG_INFO).get_reply(ListArgs(URL, "kyuu lhu"), document)
        assert reply.error is True
        assert reply.message == f"`{URL}` is already in `kyuu, lhu`"
        assert document == {"kyuu": [URL], "lhu": [URL]}

    def test_partial_skip_reports_subset(self):
        document = {"kyuu": [URL]}
        reply = make_add("tag", TAG_INFO).get_reply(ListArgs(URL, "kyuu email"), document)
        assert reply.error is False
        assert reply.message == (
            f"`{URL}` is already in `kyuu` but any tags not listed were added successfully."
        )
        assert document == {"kyuu": [URL], "email": [URL]}

    def test_append_to_existing_tag(self):
        other = "http://i.imgur.com/other.png"
        document = {"kyuu": [other]}
        make_add("tag", TAG_INFO).get_reply(ListArgs(URL, "kyuu"), document)
        assert document == {"kyuu": [other, URL]}

    def test_tags_are_lower_cased(self):
        document = {}
        make_add("tag", TAG_INFO).get_reply(ListArgs(URL, "Kyuu LHU"), document)
        assert set(document) == {"kyuu", "lhu"}

    def test_scalar_entry_counts_as_skipped(self):
        document = {"kyuu": "not a list"}
        reply = make_add("tag", TAG_INFO).get_reply(ListArgs(URL, "kyuu"), document)
        assert reply.error is True
        assert document == {"kyuu": "not a list"}

    def test_non_url_rejected(self):
        document = {}
        reply = make_add("tag", TAG_INFO).get_reply(ListArgs("not a url", "kyuu"), document)
        assert reply.error is True
        assert reply.message == (
            '`not a url` must be a valid URL beginning with "http". '
            "Make sure your arguments are in the right order."
        )
        assert document == {}

    def test_url_accepted(self):
        document = {}
        reply = make_add("tag", TAG_INFO).get_reply(ListArgs("http://example.com/x", "kyuu"), document)
        assert reply.error is False


# =============================================================================
# End to End
# =============================================================================

class TestAddRun:
    """Tests for running add commands against the database."""

    @pytest.mark.asyncio
    async def test_add_then_repeat(self, test_db, mock_ctx, no_delete, drain):
        """Test adding "hello" twice to an empty array list."""
        command = make_add("thing", SNIPPET_INFO, provider=test_db)

        await command.run(mock_ctx, ListArgs("hello"))
        await drain()

        mock_ctx.reply.assert_awaited_with('`hello` was added to "thing"')
        assert test_db.get_setting("global", "thing") == ["hello"]

        await command.run(mock_ctx, ListArgs("hello"))
        await drain()

        embed = mock_ctx.reply.await_args.kwargs["embed"]
        assert '`hello` is already in "thing"' in embed.description
        assert test_db.get_setting("global", "thing") == ["hello"]

    @pytest.mark.asyncio
    async def test_tag_scenario(self, test_db, mock_ctx, no_delete, drain):
        """Test tagging a URL with two tags, then repeating the call."""
        command = make_add("tag", TAG_INFO, provider=test_db)

        await command.run(mock_ctx, ListArgs(URL, "kyuu lhu"))
        await drain()
        assert test_db.get_setting("global", "tag") == {"kyuu": [URL], "lhu": [URL]}

        await command.run(mock_ctx, ListArgs(URL, "kyuu lhu"))
        await drain()

        embed = mock_ctx.reply.await_args.kwargs["embed"]
        assert "kyuu, lhu" in embed.description
        assert test_db.get_setting("global", "tag") == {"kyuu": [URL], "lhu": [URL]}

    @pytest.mark.asyncio
    async def test_multi_word_snippet(self, test_db, mock_ctx, no_delete, drain):
        command = make_add("snippet", SNIPPET_INFO, provider=test_db)

        await command.run(mock_ctx, ListArgs("hello", "world"))
        await drain()

        mock_ctx.reply.assert_awaited_with('`hello world` was added to "snippet"')
        assert test_db.get_setting("global", "snippet") == ["hello world"]
        no_delete.assert_called_once()


# =============================================================================
# Guess Add
# =============================================================================

class TestGuessAdd:
    """Tests for GuessAddCommand."""

    def test_command_info(self):
        command = GuessAddCommand()
        assert command.name == "guess-add"
        assert command.aliases == ["add-guess"]
        assert command.group_name == "pkmn-spec"
        assert command.examples == ["add-guess \"i'll die\" http://i.imgur.com/V8hvLx7.png"]

    @pytest.mark.asyncio
    async def test_bare_ill_rejected(self, test_db, mock_ctx, no_delete, drain):
        """Test an unquoted apostrophe phrase gets the quoting hint instead of a new entry."""
        command = GuessAddCommand(provider=test_db)

        await command.run(mock_ctx, ListArgs("i'll", "die http://a.com/1.png"))
        await drain()

        embed = mock_ctx.reply.await_args.kwargs["embed"]
        assert "Please wrap your tag in quotations" in embed.description
        no_delete.assert_not_called()
        assert test_db.get_setting("global", "guess") is None

    @pytest.mark.asyncio
    async def test_ill_spelling_rewritten(self, test_db, mock_ctx, no_delete, drain):
        command = GuessAddCommand(provider=test_db)
        test_db.set_setting("global", "guess", {})

        await command.run(mock_ctx, ListArgs("ill win", "http://a.com/3.png"))
        await drain()

        mock_ctx.reply.assert_awaited_with("`http://a.com/3.png` was added to `i'll win`")
        assert test_db.get_setting("global", "guess") == {"i'll win": "http://a.com/3.png"}
