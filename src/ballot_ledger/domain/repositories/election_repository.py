"""Election repository interface."""

from abc import abstractmethod

from ballot_ledger.domain.entities.election import Election
from ballot_ledger.domain.repositories.base import BaseRepository


class ElectionRepository(BaseRepository[Election]):
    """Repository interface for elections."""

    @abstractmethod
    async def get_for_update(self, election_id: int) -> Election | None:
        """選挙を行ロック付きで取得.

        Args:
            election_id: 選挙ID

        Returns:
            選挙エンティティ、見つからない場合はNone
        """
        pass
