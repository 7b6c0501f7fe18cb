"""Application settings.

環境変数（および最寄りの .env ファイル）から設定を読み込む。
設定の読み込み口はこのモジュールに一元化する。
"""

import os

from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from ballot_ledger.domain.value_objects.reserve_policy import (
    DEFAULT_FEE_PERCENT,
    DEFAULT_MINIMUM_BALANCE,
    DEFAULT_VOTE_COST,
    ReservePolicy,
)
from ballot_ledger.infrastructure.exceptions import ConfigurationError


DEFAULT_DATABASE_URL = "sqlite+aiosqlite:///./ballot_ledger.db"


def find_env_file(start: Path | None = None) -> Path | None:
    """カレントディレクトリから親方向に .env を探す."""
    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / ".env"
        if candidate.is_file():
            return candidate
    return None


ENV_FILE_PATH = find_env_file()


class Settings(BaseModel):
    """アプリケーション設定."""

    database_url: str = DEFAULT_DATABASE_URL
    platform_owner_address: str = ""
    platform_fee_percent: int = Field(default=DEFAULT_FEE_PERCENT, ge=0, le=100)
    reserve_minimum_balance: int = Field(default=DEFAULT_MINIMUM_BALANCE, ge=0)
    vote_execution_cost: int = Field(default=DEFAULT_VOTE_COST, ge=0)
    open_creator_management: bool = False
    log_level: str = "INFO"
    log_format: str = "console"

    @field_validator("log_format")
    @classmethod
    def _validate_log_format(cls, value: str) -> str:
        if value not in ("console", "json"):
            raise ValueError("log_format must be 'console' or 'json'")
        return value

    @field_validator("platform_owner_address")
    @classmethod
    def _strip_owner(cls, value: str) -> str:
        return value.strip()

    @model_validator(mode="after")
    def _validate_reserve(self) -> "Settings":
        if self.vote_execution_cost > self.reserve_minimum_balance:
            raise ValueError(
                "VOTE_EXECUTION_COST must not exceed RESERVE_MINIMUM_BALANCE"
            )
        return self

    @classmethod
    def from_env(cls) -> "Settings":
        """環境変数から設定を生成する."""
        values = {
            "database_url": os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL),
            "platform_owner_address": os.getenv("PLATFORM_OWNER_ADDRESS", ""),
            "platform_fee_percent": os.getenv(
                "PLATFORM_FEE_PERCENT", str(DEFAULT_FEE_PERCENT)
            ),
            "reserve_minimum_balance": os.getenv(
                "RESERVE_MINIMUM_BALANCE", str(DEFAULT_MINIMUM_BALANCE)
            ),
            "vote_execution_cost": os.getenv(
                "VOTE_EXECUTION_COST", str(DEFAULT_VOTE_COST)
            ),
            "open_creator_management": os.getenv("OPEN_CREATOR_MANAGEMENT", "false"),
            "log_level": os.getenv("LOG_LEVEL", "INFO"),
            "log_format": os.getenv("LOG_FORMAT", "console"),
        }
        try:
            return cls.model_validate(values)
        except ValidationError as e:
            raise ConfigurationError("Invalid settings", {"error": str(e)}) from e

    def get_database_url(self) -> str:
        return self.database_url

    def get_reserve_policy(self) -> ReservePolicy:
        return ReservePolicy(
            fee_percent=self.platform_fee_percent,
            minimum_balance=self.reserve_minimum_balance,
            vote_cost=self.vote_execution_cost,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """設定を取得する（キャッシュ付き）."""
    if ENV_FILE_PATH is not None:
        load_dotenv(ENV_FILE_PATH, override=False)
    return Settings.from_env()


def reload_settings() -> Settings:
    """キャッシュを破棄して設定を読み直す."""
    get_settings.cache_clear()
    return get_settings()
