"""
KyuuBot - Source Package
========================

A Discord chat-bot built on discord.py's command framework.

Package Structure:
- bot.py: Main bot class
- commands/: Command cogs (lists, reminders, web search, help, mod log)
- events/: Event listener cogs (mod log)
- core/: Config, logging and the sqlite settings provider
- services/: Reminder scheduler, web-search clients, mod log embeds
- utils/: Reply helpers, duration parsing, error handling

Author: Kyuu
Version: v1.0.0
"""

__version__ = "1.0.0"
