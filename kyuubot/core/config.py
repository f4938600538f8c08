"""
KyuuBot - Configuration Module
==============================

Centralized configuration loaded from environment variables.

DESIGN:
    One source of truth for all settings, read once at startup into a
    dataclass. ``get_config()`` caches the instance so every module sees
    the same values.

    Key patterns:
    - Validation happens once at load time, not on every access
    - Optional integers are clamped to sane ranges with a warning
    - Permission helpers live next to the values they read

Author: Kyuu
"""

import os
from dataclasses import dataclass
from typing import Optional

from kyuubot.core.constants import MESSAGE_DELETE_DELAY, REMINDER_CHECK_INTERVAL


# =============================================================================
# Configuration Dataclass
# =============================================================================

@dataclass
class Config:
    """
    Bot configuration loaded from environment variables.

    Attributes:
        discord_token: Discord bot authentication token.
        command_prefix: Prefix for chat commands.
        owner_id: User ID of the bot owner, if set.
        youtube_api_key: Google API key for the youtube command.
        wolfram_app_id: Wolfram|Alpha app id for the wolfram command.
        error_webhook_url: Webhook that receives error trees.
        database_path: Path of the sqlite file backing the provider.
    """

    # -------------------------------------------------------------------------
    # Required: Discord
    # -------------------------------------------------------------------------

    discord_token: str

    # -------------------------------------------------------------------------
    # Optional: Bot
    # -------------------------------------------------------------------------

    command_prefix: str = "!"
    owner_id: Optional[int] = None

    # -------------------------------------------------------------------------
    # Optional: Web Search
    # -------------------------------------------------------------------------

    youtube_api_key: Optional[str] = None
    wolfram_app_id: Optional[str] = None

    # -------------------------------------------------------------------------
    # Optional: Webhooks
    # -------------------------------------------------------------------------

    error_webhook_url: Optional[str] = None

    # -------------------------------------------------------------------------
    # Optional: Timing (seconds)
    # -------------------------------------------------------------------------

    reminder_check_interval: int = REMINDER_CHECK_INTERVAL
    message_delete_delay: int = MESSAGE_DELETE_DELAY

    # -------------------------------------------------------------------------
    # Optional: Storage
    # -------------------------------------------------------------------------

    database_path: str = "data/kyuu.db"


# =============================================================================
# Embed Colors
# =============================================================================

class EmbedColors:
    """Standardized color palette for Discord embeds."""

    GREEN = 0x51C151    # Help menus, success
    GOLD = 0xE6B84A     # Errors shown to users
    RED = 0xDC3545
    BLUE = 0x3498DB

    SUCCESS = GREEN
    ERROR = GOLD
    INFO = BLUE
    HELP = GREEN

    # Mod log colors, one per event family
    LOG_USER = 0xEACB00
    LOG_MESSAGE = 0xCB0F0F
    LOG_CHANNEL = 0x67A4E2
    LOG_VOICE = 0x8E72E2


# =============================================================================
# Validation
# =============================================================================

class ConfigValidationError(Exception):
    """Raised when required configuration is missing or invalid."""
    pass


def _parse_int_optional(value: Optional[str], name: str) -> Optional[int]:
    """
    Parse an optional integer.

    Raises:
        ConfigValidationError: If the value is set but not an integer.
    """
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        raise ConfigValidationError(f"Invalid integer for {name}: {value}")


def _parse_int_with_default(
    value: Optional[str],
    default: int,
    name: str,
    min_val: Optional[int] = None,
    max_val: Optional[int] = None,
) -> int:
    """
    Parse an optional integer with default and range clamping.

    Args:
        value: String value from environment variable.
        default: Default value if not set or invalid.
        name: Variable name for warning messages.
        min_val: Minimum allowed value (inclusive).
        max_val: Maximum allowed value (inclusive).

    Returns:
        Parsed integer within range, or default.
    """
    if not value:
        return default

    from kyuubot.core.logger import logger

    try:
        parsed = int(value)
    except ValueError:
        logger.warning(f"Config {name}='{value}' invalid, using default {default}")
        return default

    if min_val is not None and parsed < min_val:
        logger.warning(f"Config {name}={parsed} below min {min_val}, using {min_val}")
        return min_val
    if max_val is not None and parsed > max_val:
        logger.warning(f"Config {name}={parsed} above max {max_val}, using {max_val}")
        return max_val
    return parsed


def _validate_url(value: Optional[str], name: str) -> Optional[str]:
    """Return the URL if it looks like http(s), otherwise None with a warning."""
    if not value:
        return None
    if not value.startswith(("https://", "http://")):
        from kyuubot.core.logger import logger
        logger.warning(f"Config {name} invalid URL format, ignoring")
        return None
    return value


# =============================================================================
# Configuration Loading
# =============================================================================

def load_config() -> Config:
    """
    Load and validate configuration from environment variables.

    Returns:
        Validated Config object.

    Raises:
        ConfigValidationError: If DISCORD_TOKEN is missing or a value is invalid.
    """
    discord_token = os.getenv("DISCORD_TOKEN")
    if not discord_token:
        raise ConfigValidationError("Missing required environment variables: DISCORD_TOKEN")

    return Config(
        discord_token=discord_token,
        command_prefix=os.getenv("COMMAND_PREFIX") or "!",
        owner_id=_parse_int_optional(os.getenv("OWNER_ID"), "OWNER_ID"),
        youtube_api_key=os.getenv("YOUTUBE_API_KEY") or None,
        wolfram_app_id=os.getenv("WOLFRAM_APP_ID") or None,
        error_webhook_url=_validate_url(os.getenv("ERROR_WEBHOOK_URL"), "ERROR_WEBHOOK_URL"),
        reminder_check_interval=_parse_int_with_default(
            os.getenv("REMINDER_CHECK_INTERVAL"), REMINDER_CHECK_INTERVAL,
            "REMINDER_CHECK_INTERVAL", min_val=5, max_val=3600,
        ),
        message_delete_delay=_parse_int_with_default(
            os.getenv("MESSAGE_DELETE_DELAY"), MESSAGE_DELETE_DELAY,
            "MESSAGE_DELETE_DELAY", min_val=0, max_val=60,
        ),
        database_path=os.getenv("DATABASE_PATH") or "data/kyuu.db",
    )


_config: Optional[Config] = None


def get_config() -> Config:
    """Return the cached Config, loading it on first use."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reset_config() -> None:
    """Drop the cached Config so the next get_config() reloads it."""
    global _config
    _config = None


# =============================================================================
# Permission Helpers
# =============================================================================

def is_owner(user_id: int) -> bool:
    """Check if user is the configured bot owner."""
    owner_id = get_config().owner_id
    return owner_id is not None and user_id == owner_id


# =============================================================================
# Module Export
# =============================================================================

__all__ = [
    "Config",
    "ConfigValidationError",
    "EmbedColors",
    "get_config",
    "load_config",
    "reset_config",
    "is_owner",
]
