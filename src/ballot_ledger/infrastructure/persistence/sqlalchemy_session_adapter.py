"""Narrow AsyncSession wrapper handed to ledger repositories.

The Unit of Work owns the session lifecycle; repositories only read, stage
and flush through this adapter and can never end the transaction early.
"""

from typing import Any

from sqlalchemy.engine.result import Result
from sqlalchemy.ext.asyncio import AsyncSession

from ballot_ledger.domain.repositories.session_adapter import ISessionAdapter


class SQLAlchemySessionAdapter(ISessionAdapter):
    def __init__(self, async_session: AsyncSession):
        self._session = async_session

    async def execute(
        self, statement: Any, params: dict[str, Any] | None = None
    ) -> Result[Any]:
        if params:
            return await self._session.execute(statement, params)
        return await self._session.execute(statement)

    def add(self, instance: Any) -> None:
        self._session.add(instance)

    async def flush(self) -> None:
        await self._session.flush()

    async def refresh(self, instance: Any) -> None:
        await self._session.refresh(instance)

    async def get(
        self, entity_type: Any, entity_id: Any, *, with_for_update: bool = False
    ) -> Any | None:
        # SQLite ignores FOR UPDATE; the ledger lock serializes writers there
        return await self._session.get(
            entity_type, entity_id, with_for_update=with_for_update
        )
