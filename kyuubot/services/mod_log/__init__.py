"""
KyuuBot - Mod Log Package
=========================

Author: Kyuu
"""

from .embeds import LogKind, build_event_embed, describe_voice_change
from .service import MOD_LOG_KEY, ModLogService


__all__ = [
    "LogKind",
    "build_event_embed",
    "describe_voice_change",
    "MOD_LOG_KEY",
    "ModLogService",
]
