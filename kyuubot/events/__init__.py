"""
KyuuBot - Events Package
========================

Event listener Cogs, organized by category.

DESIGN:
    Each event file contains a Cog class with @commands.Cog.listener
    decorators. Cogs are loaded by the bot using load_extension().

    Event routing:
    - members.py: Ban/unban/join/leave, guild removal cleanup
    - messages.py: Message delete
    - channels.py: Channel create/delete, voice state changes

Author: Kyuu
"""

# =============================================================================
# Event Cog Registry
# =============================================================================

EVENT_COGS = [
    "kyuubot.events.members",
    "kyuubot.events.messages",
    "kyuubot.events.channels",
]
"""Event cog module paths, loaded in order by setup_hook."""


__all__ = [
    "EVENT_COGS",
]
