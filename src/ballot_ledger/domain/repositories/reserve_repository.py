"""Reserve repository interface."""

from abc import ABC, abstractmethod

from ballot_ledger.domain.entities.deposit import Deposit


class ReserveRepository(ABC):
    """Repository interface for per-election reserve balances and deposits."""

    @abstractmethod
    async def get_balance(self, election_id: int, for_update: bool = False) -> int:
        """準備金残高を取得. 行がなければ0."""
        pass

    @abstractmethod
    async def set_balance(self, election_id: int, balance: int) -> None:
        """準備金残高を書き込む（行がなければ作成）."""
        pass

    @abstractmethod
    async def add_deposit(self, deposit: Deposit) -> Deposit:
        """入金記録を追記."""
        pass

    @abstractmethod
    async def get_deposits(self, election_id: int) -> list[Deposit]:
        """選挙の入金記録を古い順に取得."""
        pass

    @abstractmethod
    async def get_total_fees(self) -> int:
        """プラットフォームが受け取った手数料の合計."""
        pass
