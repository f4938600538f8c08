"""
KyuuBot - Core Package
======================

Configuration, logging and persistence shared by every module.

DESIGN:
    Core modules are singletons or global instances so state is
    consistent across the application:
    - get_config() returns the same Config instance
    - get_db() returns the same DatabaseManager instance
    - logger is a global TreeLogger instance

Author: Kyuu
"""

from .config import (
    Config,
    ConfigValidationError,
    EmbedColors,
    get_config,
    is_owner,
)

from .database import DatabaseManager, get_db

from .logger import logger, TreeLogger, NY_TZ


__all__ = [
    # Config
    "Config",
    "ConfigValidationError",
    "EmbedColors",
    "get_config",
    "is_owner",
    # Database
    "DatabaseManager",
    "get_db",
    # Logger
    "logger",
    "TreeLogger",
    "NY_TZ",
]
