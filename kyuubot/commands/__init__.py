"""
KyuuBot - Commands Package
==========================

Prefix command implementations, one Cog per module.

DESIGN:
    Each command module contains a Cog class and an
    ``async def setup(bot)`` function. Cogs are loaded by the bot using
    load_extension().

    To add a new command:
    1. Create new_command.py in this directory
    2. Create a Cog class with @commands.command decorators
    3. Add async def setup(bot) at the end
    4. Add the module to COMMAND_COGS below

Available Commands:
    <list>, <list>-add, <list>-remove: List management (tag, snippet, shortcut, guess)
    remind, remind-other, reminders, reminder-cancel: Reminders
    youtube, wolfram: Web search
    mod-log: Mod log configuration (Manage Server)
    help: Installed directly on the bot, see help.py

Author: Kyuu
"""

# =============================================================================
# Command Cog Registry
# =============================================================================

COMMAND_COGS = [
    "kyuubot.commands.lists.cog",
    "kyuubot.commands.remind",
    "kyuubot.commands.web",
    "kyuubot.commands.mod_log",
]
"""Command cog module paths, loaded in order by setup_hook."""


__all__ = [
    "COMMAND_COGS",
]
