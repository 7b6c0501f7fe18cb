"""Vote record repository interface."""

from abc import ABC, abstractmethod

from ballot_ledger.domain.entities.vote_record import VoteRecord


class VoteRecordRepository(ABC):
    """Repository interface for per-voter voted flags."""

    @abstractmethod
    async def exists(self, election_id: int, voter_address: str) -> bool:
        """投票済みかどうか."""
        pass

    @abstractmethod
    async def create(self, record: VoteRecord) -> VoteRecord:
        """投票済みとして記録."""
        pass

    @abstractmethod
    async def count_by_election(self, election_id: int) -> int:
        """選挙の投票済み件数."""
        pass
