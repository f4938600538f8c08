#!/usr/bin/env python3
"""
KyuuBot Entry Point
===================

Loads the environment, validates configuration and runs the bot.

Author: Kyuu
"""

import asyncio
import sys

from dotenv import load_dotenv

# Environment must be loaded before config and logger read it
load_dotenv()

from kyuubot import __version__  # noqa: E402
from kyuubot.core.config import ConfigValidationError, get_config  # noqa: E402
from kyuubot.core.logger import logger  # noqa: E402
from kyuubot.utils.error_handler import ErrorHandler  # noqa: E402


async def main() -> None:
    """
    Main entry point.

    Raises:
        SystemExit: If configuration is invalid or the bot fails to start.
    """
    try:
        config = get_config()
    except ConfigValidationError as e:
        logger.error("Invalid Configuration", [("Error", str(e))])
        sys.exit(1)

    logger.tree("KYUU STARTING", [
        ("Version", __version__),
        ("Prefix", config.command_prefix),
        ("Database", config.database_path),
    ], emoji="🦊")

    from kyuubot.bot import KyuuBot

    bot = KyuuBot()
    async with bot:
        await bot.start(config.discord_token)


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Bot stopped by user (Ctrl+C)")
    except Exception as e:
        ErrorHandler.handle(e, location="main.__main__", critical=True)
        sys.exit(1)
