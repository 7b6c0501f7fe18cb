"""Election creator repository interface."""

from abc import ABC, abstractmethod

from ballot_ledger.domain.entities.election_creator import ElectionCreator


class ElectionCreatorRepository(ABC):
    """Repository interface for the creator role set."""

    @abstractmethod
    async def get_by_address(self, address: str) -> ElectionCreator | None:
        """アドレスの作成者レコードを取得（無効化済みも含む）."""
        pass

    @abstractmethod
    async def get_active(self) -> list[ElectionCreator]:
        """有効な作成者をアドレス順で取得."""
        pass

    @abstractmethod
    async def save(self, creator: ElectionCreator) -> ElectionCreator:
        """作成者レコードを追加または更新."""
        pass
