"""Unit of Work interface for transaction management.

This interface provides a clean abstraction for applying one ledger
operation atomically across every repository it touches.
"""

from abc import ABC, abstractmethod
from types import TracebackType
from typing import Self

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


class IUnitOfWork(ABC):
    """Unit of Work interface for transaction management.

    All repository operations within a use case share the same database
    transaction. Events recorded during the unit are delivered only after a
    successful commit; a rollback discards them.
    """

    @property
    @abstractmethod
    def election_repository(self) -> ElectionRepository:
        """Get the election repository for this unit of work."""
        pass

    @property
    @abstractmethod
    def candidate_repository(self) -> CandidateRepository:
        """Get the candidate repository for this unit of work."""
        pass

    @property
    @abstractmethod
    def whitelist_repository(self) -> WhitelistRepository:
        """Get the whitelist repository for this unit of work."""
        pass

    @property
    @abstractmethod
    def vote_record_repository(self) -> VoteRecordRepository:
        """Get the vote record repository for this unit of work."""
        pass

    @property
    @abstractmethod
    def election_creator_repository(self) -> ElectionCreatorRepository:
        """Get the election creator repository for this unit of work."""
        pass

    @property
    @abstractmethod
    def reserve_repository(self) -> ReserveRepository:
        """Get the reserve repository for this unit of work."""
        pass

    @abstractmethod
    def publish(self, event: DomainEvent) -> None:
        """Buffer an event until commit."""
        pass

    @abstractmethod
    async def commit(self) -> None:
        """Commit the current transaction and deliver buffered events."""
        pass

    @abstractmethod
    async def rollback(self) -> None:
        """Rollback the current transaction and drop buffered events."""
        pass

    @abstractmethod
    async def __aenter__(self) -> Self:
        pass

    @abstractmethod
    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        pass
