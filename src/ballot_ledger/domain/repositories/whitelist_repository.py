"""Whitelist repository interface."""

from abc import ABC, abstractmethod

from ballot_ledger.domain.entities.whitelist_entry import WhitelistEntry


class WhitelistRepository(ABC):
    """Repository interface for registration-number bindings."""

    @abstractmethod
    async def get_by_wallet(
        self, election_id: int, wallet_address: str
    ) -> WhitelistEntry | None:
        """アドレスの登録を取得."""
        pass

    @abstractmethod
    async def get_by_registration_number(
        self, election_id: int, registration_number: int
    ) -> WhitelistEntry | None:
        """登録番号の紐付けを取得."""
        pass

    @abstractmethod
    async def create(self, entry: WhitelistEntry) -> WhitelistEntry:
        """紐付けを追加."""
        pass

    @abstractmethod
    async def count_by_election(self, election_id: int) -> int:
        """選挙の登録件数."""
        pass
