"""Ledger-wide write serialization."""

import asyncio
import weakref

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager


class LedgerLock:
    """台帳全体で同時に1つの操作だけを実行させるロック.

    イベントループごとに asyncio.Lock を持つ。ロックの取得後に
    時刻を読み、事前条件を検証することで、コミット済みの最新状態に
    対して検証が行われる。
    """

    def __init__(self) -> None:
        # ループが破棄されると対応するロックも消える
        self._locks: weakref.WeakKeyDictionary[
            asyncio.AbstractEventLoop, asyncio.Lock
        ] = weakref.WeakKeyDictionary()

    def _lock_for_current_loop(self) -> asyncio.Lock:
        loop = asyncio.get_running_loop()
        lock = self._locks.get(loop)
        if lock is None:
            lock = self._locks[loop] = asyncio.Lock()
        return lock

    @asynccontextmanager
    async def hold(self) -> AsyncGenerator[None]:
        """ロックを保持するコンテキスト."""
        lock = self._lock_for_current_loop()
        async with lock:
            yield

    def locked(self) -> bool:
        try:
            return self._lock_for_current_loop().locked()
        except RuntimeError:
            return False
