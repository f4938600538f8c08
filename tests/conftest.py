"""
KyuuBot - Test Fixtures
=======================

Shared fixtures for all tests.
"""

import asyncio
import os
import sys
import tempfile
import pytest
from pathlib import Path
from unittest.mock import MagicMock, AsyncMock, patch

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

# Set up test environment before importing modules
os.environ["TESTING"] = "1"
os.environ.setdefault("DISCORD_TOKEN", "test-token")
os.environ["KYUU_LOGS_DIR"] = tempfile.mkdtemp(prefix="kyuu-logs-")


# =============================================================================
# Database Fixtures
# =============================================================================

@pytest.fixture
def temp_db_path(tmp_path):
    """Create a temporary database path."""
    return tmp_path / "test_kyuu.db"


@pytest.fixture
def test_db(temp_db_path):
    """Create a fresh test database instance."""
    from kyuubot.core.database import manager as db_module

    # Reset singleton
    db_module.DatabaseManager._instance = None

    db = db_module.DatabaseManager(temp_db_path)

    yield db

    # Cleanup
    db.close()
    db_module.DatabaseManager._instance = None


@pytest.fixture
def fresh_config():
    """Reload configuration from the environment for one test."""
    from kyuubot.core.config import reset_config
    reset_config()
    yield
    reset_config()


# =============================================================================
# List Command Fixtures
# =============================================================================

@pytest.fixture
def no_delete():
    """Replace trigger deletion so no delayed task outlives the test."""
    with patch("kyuubot.commands.lists.base.schedule_delete") as scheduled:
        yield scheduled


async def drain_tasks() -> None:
    """Wait for every background task created by the code under test."""
    current = asyncio.current_task()
    pending = [task for task in asyncio.all_tasks() if task is not current]
    if pending:
        await asyncio.gather(*pending)


@pytest.fixture
def drain():
    """Awaitable that finishes background persistence tasks."""
    return drain_tasks


# =============================================================================
# Mock Discord Objects
# =============================================================================

@pytest.fixture
def mock_discord_user():
    """Create a mock Discord user (not in a guild)."""
    from datetime import datetime
    user = MagicMock()
    user.id = 123456789
    user.name = "testuser"
    user.display_name = "Test User"
    user.display_avatar = MagicMock()
    user.display_avatar.url = "https://example.com/avatar.png"
    user.created_at = datetime(2020, 9, 13, 12, 0, 0)
    user.mention = "<@123456789>"
    user.__str__.return_value = "testuser"
    user.send = AsyncMock(return_value=MagicMock(id=111222333))
    user.bot = False
    return user


@pytest.fixture
def mock_discord_guild():
    """Create a mock Discord guild."""
    guild = MagicMock()
    guild.id = 987654321
    guild.name = "Test Server"
    guild.get_channel = MagicMock(return_value=None)
    guild.get_member = MagicMock(return_value=None)
    return guild


@pytest.fixture
def mock_discord_text_channel(mock_discord_guild):
    """Create a mock Discord text channel."""
    channel = MagicMock()
    channel.id = 444555666
    channel.name = "mod-log"
    channel.mention = "<#444555666>"
    channel.guild = mock_discord_guild
    channel.send = AsyncMock(return_value=MagicMock(id=111222333))
    return channel


@pytest.fixture
def mock_discord_message(mock_discord_user):
    """Create a mock Discord message."""
    message = MagicMock()
    message.id = 111222333
    message.content = "Test message content"
    message.author = mock_discord_user
    message.channel = MagicMock()
    message.channel.id = 555666777
    message.attachments = []
    message.delete = AsyncMock()
    return message


@pytest.fixture
def mock_ctx(mock_discord_user, mock_discord_guild, mock_discord_message):
    """Create a mock command context."""
    ctx = MagicMock()
    ctx.author = mock_discord_user
    ctx.guild = mock_discord_guild
    ctx.message = mock_discord_message
    ctx.channel = mock_discord_message.channel
    ctx.clean_prefix = "!"
    ctx.reply = AsyncMock(return_value=MagicMock(id=999000111))
    ctx.send = AsyncMock(return_value=MagicMock(id=999000112))
    return ctx


@pytest.fixture
def mock_bot(mock_discord_text_channel):
    """Create a mock bot instance."""
    bot = MagicMock()
    bot.get_channel = MagicMock(return_value=mock_discord_text_channel)
    bot.fetch_channel = AsyncMock(return_value=mock_discord_text_channel)
    bot.wait_until_ready = AsyncMock()
    return bot
