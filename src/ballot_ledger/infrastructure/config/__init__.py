"""
Configuration module for Ballot Ledger.

設定管理の一元化モジュール。settings.pyが唯一のエントリーポイント。
"""

from ballot_ledger.infrastructure.config.async_database import AsyncDatabase
from ballot_ledger.infrastructure.config.settings import (
    DEFAULT_DATABASE_URL,
    ENV_FILE_PATH,
    Settings,
    find_env_file,
    get_settings,
    reload_settings,
)


__all__ = [
    # Settings
    "Settings",
    "get_settings",
    "reload_settings",
    "find_env_file",
    "ENV_FILE_PATH",
    "DEFAULT_DATABASE_URL",
    # Async database
    "AsyncDatabase",
]
