"""SQLAlchemySessionAdapterのテスト."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from sqlalchemy.ext.asyncio import AsyncSession

from ballot_ledger.infrastructure.persistence.sqlalchemy_session_adapter import (
    SQLAlchemySessionAdapter,
)


@pytest.fixture
def session() -> AsyncMock:
    return AsyncMock(spec=AsyncSession)


class TestSQLAlchemySessionAdapter:
    @pytest.mark.asyncio
    async def test_get_forwards_row_lock_flag(self, session: AsyncMock) -> None:
        model_class = MagicMock()
        session.get.return_value = "row"
        adapter = SQLAlchemySessionAdapter(session)

        assert await adapter.get(model_class, 3, with_for_update=True) == "row"
        session.get.assert_awaited_once_with(model_class, 3, with_for_update=True)

    @pytest.mark.asyncio
    async def test_execute_without_params(self, session: AsyncMock) -> None:
        adapter = SQLAlchemySessionAdapter(session)

        await adapter.execute("stmt")

        session.execute.assert_awaited_once_with("stmt")

    @pytest.mark.asyncio
    async def test_execute_with_params(self, session: AsyncMock) -> None:
        adapter = SQLAlchemySessionAdapter(session)

        await adapter.execute("stmt", {"id": 1})

        session.execute.assert_awaited_once_with("stmt", {"id": 1})

    def test_does_not_expose_transaction_control(self, session: AsyncMock) -> None:
        adapter = SQLAlchemySessionAdapter(session)

        assert not hasattr(adapter, "commit")
        assert not hasattr(adapter, "rollback")
