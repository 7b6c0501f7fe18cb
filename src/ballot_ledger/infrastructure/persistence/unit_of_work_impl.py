"""Unit of Work implementation backed by one SQLAlchemy AsyncSession."""

from contextlib import AbstractAsyncContextManager
from types import TracebackType
from typing import Self

from sqlalchemy.ext.asyncio import AsyncSession

from ballot_ledger.common.logging import get_logger
from ballot_ledger.domain.events import DomainEvent
from ballot_ledger.domain.repositories.candidate_repository import CandidateRepository
from ballot_ledger.domain.repositories.election_creator_repository import (
    ElectionCreatorRepository,
)
from ballot_ledger.domain.repositories.election_repository import ElectionRepository
from ballot_ledger.domain.repositories.reserve_repository import ReserveRepository
from ballot_ledger.domain.repositories.vote_record_repository import (
    VoteRecordRepository,
)
from ballot_ledger.domain.repositories.whitelist_repository import WhitelistRepository
from ballot_ledger.domain.services.interfaces.event_publisher import IEventPublisher
from ballot_ledger.domain.services.interfaces.unit_of_work import IUnitOfWork
from ballot_ledger.infrastructure.concurrency.ledger_lock import LedgerLock
from ballot_ledger.infrastructure.config.async_database import AsyncDatabase
from ballot_ledger.infrastructure.persistence.candidate_repository_impl import (
    CandidateRepositoryImpl,
)
from ballot_ledger.infrastructure.persistence.election_creator_repository_impl import (
    ElectionCreatorRepositoryImpl,
)
from ballot_ledger.infrastructure.persistence.election_repository_impl import (
    ElectionRepositoryImpl,
)
from ballot_ledger.infrastructure.persistence.reserve_repository_impl import (
    ReserveRepositoryImpl,
)
from ballot_ledger.infrastructure.persistence.sqlalchemy_session_adapter import (
    SQLAlchemySessionAdapter,
)
from ballot_ledger.infrastructure.persistence.vote_record_repository_impl import (
    VoteRecordRepositoryImpl,
)
from ballot_ledger.infrastructure.persistence.whitelist_repository_impl import (
    WhitelistRepositoryImpl,
)


logger = get_logger(__name__)


class UnitOfWorkImpl(IUnitOfWork):
    """One ledger operation = one lock hold + one database transaction.

    Entering acquires the ledger lock and opens a session; exiting without
    a commit rolls back. Events are buffered and handed to the publisher
    only after the transaction commits.
    """

    def __init__(
        self,
        database: AsyncDatabase,
        lock: LedgerLock,
        event_publisher: IEventPublisher,
    ):
        self._database = database
        self._lock = lock
        self._event_publisher = event_publisher
        self._pending_events: list[DomainEvent] = []
        self._committed = False
        self._lock_context: AbstractAsyncContextManager[None] | None = None
        self._session: AsyncSession | None = None

    async def __aenter__(self) -> Self:
        self._lock_context = self._lock.hold()
        await self._lock_context.__aenter__()
        try:
            self._session = self._database.new_session()
            adapter = SQLAlchemySessionAdapter(self._session)
            self._election_repository = ElectionRepositoryImpl(adapter)
            self._candidate_repository = CandidateRepositoryImpl(adapter)
            self._whitelist_repository = WhitelistRepositoryImpl(adapter)
            self._vote_record_repository = VoteRecordRepositoryImpl(adapter)
            self._election_creator_repository = ElectionCreatorRepositoryImpl(adapter)
            self._reserve_repository = ReserveRepositoryImpl(adapter)
        except BaseException:
            await self._lock_context.__aexit__(None, None, None)
            raise
        self._pending_events = []
        self._committed = False
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        try:
            if not self._committed:
                await self.rollback()
        finally:
            try:
                if self._session is not None:
                    await self._session.close()
            finally:
                self._session = None
                if self._lock_context is not None:
                    await self._lock_context.__aexit__(None, None, None)
                    self._lock_context = None

    @property
    def election_repository(self) -> ElectionRepository:
        return self._election_repository

    @property
    def candidate_repository(self) -> CandidateRepository:
        return self._candidate_repository

    @property
    def whitelist_repository(self) -> WhitelistRepository:
        return self._whitelist_repository

    @property
    def vote_record_repository(self) -> VoteRecordRepository:
        return self._vote_record_repository

    @property
    def election_creator_repository(self) -> ElectionCreatorRepository:
        return self._election_creator_repository

    @property
    def reserve_repository(self) -> ReserveRepository:
        return self._reserve_repository

    def publish(self, event: DomainEvent) -> None:
        self._pending_events.append(event)

    async def commit(self) -> None:
        if self._session is None:
            raise RuntimeError("Unit of work is not active")
        await self._session.commit()
        self._committed = True

        events, self._pending_events = self._pending_events, []
        for event in events:
            try:
                self._event_publisher.publish(event)
            except Exception as e:
                # 通知の失敗はコミット済みの状態に影響させない
                logger.error(f"Failed to publish {event.event_name}: {e}")

    async def rollback(self) -> None:
        self._pending_events = []
        if self._session is not None:
            await self._session.rollback()


class UnitOfWorkFactory:
    """Creates a fresh UnitOfWorkImpl per operation."""

    def __init__(
        self,
        database: AsyncDatabase,
        lock: LedgerLock,
        event_publisher: IEventPublisher,
    ):
        self.database = database
        self.lock = lock
        self.event_publisher = event_publisher

    def __call__(self) -> UnitOfWorkImpl:
        return UnitOfWorkImpl(self.database, self.lock, self.event_publisher)
