"""Async database configuration and session management."""

import asyncio

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from ballot_ledger.infrastructure.config.settings import Settings, get_settings
from ballot_ledger.infrastructure.persistence.sqlalchemy_models import Base


class AsyncDatabase:
    """Async database manager.

    イベントループごとにエンジンを管理することで、CLIとテストのように
    異なるイベントループから呼び出されても安全に動作する。
    """

    def __init__(self, settings: Settings | None = None):
        """Initialize async database manager."""
        database_url = (settings or get_settings()).get_database_url()
        # Replace postgresql:// with postgresql+asyncpg://
        if database_url.startswith("postgresql://"):
            self._async_url = database_url.replace(
                "postgresql://", "postgresql+asyncpg://"
            )
        elif database_url.startswith("sqlite://"):
            self._async_url = database_url.replace("sqlite://", "sqlite+aiosqlite://")
        else:
            self._async_url = database_url

        self._engines: dict[int, AsyncEngine] = {}
        self._session_makers: dict[int, async_sessionmaker[AsyncSession]] = {}

    @property
    def url(self) -> str:
        return self._async_url

    def _engine_options(self) -> dict[str, Any]:
        if self._async_url.startswith("sqlite"):
            # 書き込みロック待ちのタイムアウト（秒）
            return {"connect_args": {"timeout": 30}}
        return {"pool_pre_ping": True}

    def _get_engine_and_session_maker(
        self,
    ) -> tuple[AsyncEngine, async_sessionmaker[AsyncSession]]:
        """現在のイベントループに対応するエンジンとセッションメーカーを取得する。"""
        try:
            loop = asyncio.get_running_loop()
            loop_id = id(loop)
        except RuntimeError:
            # イベントループが存在しない場合は0をIDとして使用
            loop_id = 0

        if loop_id not in self._engines:
            engine = create_async_engine(
                self._async_url, echo=False, **self._engine_options()
            )
            session_maker = async_sessionmaker(
                engine, class_=AsyncSession, expire_on_commit=False
            )
            self._engines[loop_id] = engine
            self._session_makers[loop_id] = session_maker

        return self._engines[loop_id], self._session_makers[loop_id]

    @property
    def engine(self) -> AsyncEngine:
        """現在のイベントループに対応するエンジンを取得する。"""
        engine, _ = self._get_engine_and_session_maker()
        return engine

    @property
    def async_session_maker(self) -> async_sessionmaker[AsyncSession]:
        """現在のイベントループに対応するセッションメーカーを取得する。"""
        _, session_maker = self._get_engine_and_session_maker()
        return session_maker

    def new_session(self) -> AsyncSession:
        """Create a session whose lifecycle the caller manages."""
        return self.async_session_maker()

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession]:
        """Get an async database session.

        Yields:
            AsyncSession: Database session
        """
        async with self.async_session_maker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise
            finally:
                await session.close()

    async def create_all(self) -> None:
        """Create every table that does not exist yet."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        """Dispose every cached engine."""
        for engine in self._engines.values():
            await engine.dispose()
        self._engines.clear()
        self._session_makers.clear()
