"""
KyuuBot - Event Cog Tests
=========================

Tests for the guild event listeners that feed the mod log.
"""

from unittest.mock import AsyncMock, MagicMock

import discord
import pytest

from kyuubot.events.channels import ChannelEvents
from kyuubot.events.members import MemberEvents
from kyuubot.events.messages import MessageEvents
from kyuubot.services.mod_log import LogKind, ModLogService
from kyuubot.utils.delete_tracker import pop_bot_deleted
from kyuubot.utils.replies import delete_later


@pytest.fixture
def event_bot(test_db, mock_discord_guild, mock_discord_text_channel):
    """Bot with a real mod log service, enabled for the mock guild."""
    bot = MagicMock()
    bot.db = test_db
    bot.mod_log = ModLogService(bot, test_db)
    bot.mod_log.enable(mock_discord_guild.id, mock_discord_text_channel.id)
    mock_discord_guild.get_channel.return_value = mock_discord_text_channel
    return bot


class TestMemberEvents:
    """Tests for member join, leave and ban logging."""

    @pytest.mark.asyncio
    async def test_join(self, event_bot, mock_discord_user, mock_discord_guild, mock_discord_text_channel):
        mock_discord_user.guild = mock_discord_guild

        await MemberEvents(event_bot).on_member_join(mock_discord_user)

        embed = mock_discord_text_channel.send.await_args.kwargs["embed"]
        assert embed.description == "**<@123456789> joined the server 📥**"
        assert embed.footer.text == "ID: 123456789"

    @pytest.mark.asyncio
    async def test_ban(self, event_bot, mock_discord_user, mock_discord_guild, mock_discord_text_channel):
        await MemberEvents(event_bot).on_member_ban(mock_discord_guild, mock_discord_user)

        embed = mock_discord_text_channel.send.await_args.kwargs["embed"]
        assert embed.description == "**<@123456789> was banned ⛔️**"

    @pytest.mark.asyncio
    async def test_guild_remove_clears_scope(self, event_bot, test_db, mock_discord_guild):
        test_db.set_setting("global", "snippet", ["kept"])

        await MemberEvents(event_bot).on_guild_remove(mock_discord_guild)

        assert test_db.get_setting(mock_discord_guild.id, "mod_log") is None
        assert test_db.get_setting("global", "snippet") == ["kept"]


class TestMessageEvents:
    """Tests for deleted message logging."""

    @pytest.mark.asyncio
    async def test_deleted_message_logged(
        self, event_bot, mock_discord_message, mock_discord_guild, mock_discord_text_channel,
    ):
        mock_discord_message.guild = mock_discord_guild
        mock_discord_message.channel.guild = mock_discord_guild
        mock_discord_message.channel.mention = "<#555666777>"

        await MessageEvents(event_bot).on_message_delete(mock_discord_message)

        embed = mock_discord_text_channel.send.await_args.kwargs["embed"]
        assert embed.description == "**Message sent by <@123456789> deleted in <#555666777>**"
        assert embed.fields[0].value == "Test message content"
        assert embed.color.value == LogKind.MESSAGE.value

    @pytest.mark.asyncio
    async def test_bot_message_skipped(self, event_bot, mock_discord_message, mock_discord_guild, mock_discord_text_channel):
        mock_discord_message.guild = mock_discord_guild
        mock_discord_message.author.bot = True

        await MessageEvents(event_bot).on_message_delete(mock_discord_message)

        mock_discord_text_channel.send.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_log_channel_skipped(self, event_bot, mock_discord_message, mock_discord_guild, mock_discord_text_channel):
        mock_discord_message.guild = mock_discord_guild
        mock_discord_message.channel = mock_discord_text_channel

        await MessageEvents(event_bot).on_message_delete(mock_discord_message)

        mock_discord_text_channel.send.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_trigger_cleanup_skipped(
        self, event_bot, mock_discord_message, mock_discord_guild, mock_discord_text_channel,
    ):
        """Test a list command trigger removed by the bot is not logged as a user deletion."""
        mock_discord_message.guild = mock_discord_guild
        mock_discord_message.content = "!add-snippet hello"
        mock_discord_message.delete = AsyncMock()

        await delete_later(mock_discord_message, 0)
        await MessageEvents(event_bot).on_message_delete(mock_discord_message)

        mock_discord_message.delete.assert_awaited_once()
        mock_discord_text_channel.send.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_failed_cleanup_forgotten(self, mock_discord_message):
        """Test a delete the bot could not make is not remembered."""
        mock_discord_message.delete = AsyncMock(
            side_effect=discord.Forbidden(MagicMock(status=403, reason="Forbidden"), "Missing Access"),
        )

        await delete_later(mock_discord_message, 0)

        assert await pop_bot_deleted(mock_discord_message.id) is None


class TestChannelEvents:
    """Tests for channel and voice logging."""

    @pytest.mark.asyncio
    async def test_voice_move(self, event_bot, mock_discord_user, mock_discord_guild, mock_discord_text_channel):
        mock_discord_user.guild = mock_discord_guild
        before = MagicMock(channel=MagicMock(id=1, mention="<#1>"))
        after = MagicMock(channel=MagicMock(id=2, mention="<#2>"))

        await ChannelEvents(event_bot).on_voice_state_update(mock_discord_user, before, after)

        embed = mock_discord_text_channel.send.await_args.kwargs["embed"]
        assert embed.description == "**<@123456789> moved from <#1> to <#2>**"

    @pytest.mark.asyncio
    async def test_mute_not_logged(self, event_bot, mock_discord_user, mock_discord_guild, mock_discord_text_channel):
        mock_discord_user.guild = mock_discord_guild
        channel = MagicMock(id=1, mention="<#1>")

        await ChannelEvents(event_bot).on_voice_state_update(
            mock_discord_user, MagicMock(channel=channel), MagicMock(channel=channel),
        )

        mock_discord_text_channel.send.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_disabled_guild_not_logged(self, event_bot, mock_discord_user, mock_discord_guild, mock_discord_text_channel):
        event_bot.mod_log.disable(mock_discord_guild.id)
        mock_discord_user.guild = mock_discord_guild

        await ChannelEvents(event_bot).on_voice_state_update(
            mock_discord_user, MagicMock(channel=None), MagicMock(channel=MagicMock(id=1, mention="<#1>")),
        )

        mock_discord_text_channel.send.assert_not_awaited()
