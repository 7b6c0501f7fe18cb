"""Shared fixtures.

Integration fixtures build the real SQLAlchemy stack on a temporary SQLite
file so that every operation runs through the Unit of Work and ledger lock.
"""

from collections.abc import AsyncGenerator
from pathlib import Path

import pytest
import pytest_asyncio

from ballot_ledger.application.services.ledger_components import LedgerPolicy
from ballot_ledger.domain.value_objects.reserve_policy import ReservePolicy
from ballot_ledger.infrastructure.concurrency.ledger_lock import LedgerLock
from ballot_ledger.infrastructure.config.async_database import AsyncDatabase
from ballot_ledger.infrastructure.config.settings import Settings
from ballot_ledger.infrastructure.external.logging_event_publisher import (
    InMemoryEventPublisher,
)
from ballot_ledger.infrastructure.external.system_clock import FixedClock
from ballot_ledger.infrastructure.persistence.unit_of_work_impl import (
    UnitOfWorkFactory,
)


OWNER = "0xowner"


@pytest.fixture
def sqlite_settings(tmp_path: Path) -> Settings:
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'ledger.db'}",
        platform_owner_address=OWNER,
    )


@pytest_asyncio.fixture
async def database(sqlite_settings: Settings) -> AsyncGenerator[AsyncDatabase]:
    db = AsyncDatabase(sqlite_settings)
    await db.create_all()
    yield db
    await db.dispose()


@pytest.fixture
def event_publisher() -> InMemoryEventPublisher:
    return InMemoryEventPublisher()


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(0)


@pytest.fixture
def uow_factory(
    database: AsyncDatabase, event_publisher: InMemoryEventPublisher
) -> UnitOfWorkFactory:
    return UnitOfWorkFactory(database, LedgerLock(), event_publisher)


@pytest.fixture
def ledger_policy() -> LedgerPolicy:
    return LedgerPolicy(owner_address=OWNER, reserve_policy=ReservePolicy())
