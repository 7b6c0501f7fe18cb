"""選挙ごとの実行コスト準備金ドメインサービス."""

from ballot_ledger.domain.entities.deposit import Deposit
from ballot_ledger.domain.events import DepositMade
from ballot_ledger.domain.exceptions import (
    InsufficientReserveError,
    InvalidAmountError,
)
from ballot_ledger.domain.repositories.reserve_repository import ReserveRepository
from ballot_ledger.domain.services.access_registry import AccessRegistry
from ballot_ledger.domain.services.interfaces.event_publisher import IEventPublisher
from ballot_ledger.domain.value_objects.reserve_policy import (
    MAX_RESERVE_AMOUNT,
    ReservePolicy,
)


class ReserveAccount:
    """選挙ごとの準備金残高を管理する.

    入金時に手数料を差し引いて残高に加算し、投票ごとに
    固定の実行コストを引き落とす。選挙の作成前でも入金できる。
    """

    def __init__(
        self,
        reserve_repository: ReserveRepository,
        access_registry: AccessRegistry,
        policy: ReservePolicy,
        events: IEventPublisher,
    ) -> None:
        self.reserve_repository = reserve_repository
        self.access_registry = access_registry
        self.policy = policy
        self.events = events

    async def deposit(
        self, election_id: int, depositor: str, amount: int, now: int
    ) -> Deposit:
        """準備金に入金する.

        Args:
            election_id: 選挙ID（未作成の選挙でもよい）
            depositor: 入金者アドレス（承認済み作成者であること）
            amount: 入金額
            now: 現在時刻

        Returns:
            記録された入金

        Raises:
            UnauthorizedError: 入金者が作成者でない
            InvalidAmountError: 入金額が0以下、または残高が保存可能な上限を超える
        """
        await self.access_registry.require_creator(depositor)
        if amount <= 0:
            raise InvalidAmountError(
                "Deposit amount must be positive", {"amount": amount}
            )
        if amount > MAX_RESERVE_AMOUNT:
            raise InvalidAmountError(
                "Deposit amount exceeds the storable maximum",
                {"amount": amount, "max": MAX_RESERVE_AMOUNT},
            )

        fee = self.policy.fee_for(amount)
        balance = await self.reserve_repository.get_balance(election_id, for_update=True)
        new_balance = balance + amount - fee
        if new_balance > MAX_RESERVE_AMOUNT:
            raise InvalidAmountError(
                "Reserve balance would exceed the storable maximum",
                {"election_id": election_id, "balance": balance, "amount": amount},
            )
        await self.reserve_repository.set_balance(election_id, new_balance)

        # 手数料はプラットフォームへ送金されたものとして入金記録に残す
        deposit = await self.reserve_repository.add_deposit(
            Deposit(
                election_id=election_id,
                depositor=depositor,
                amount=amount,
                fee=fee,
                created_at=now,
            )
        )
        self.events.publish(DepositMade(election_id=election_id, amount=amount, fee=fee))
        return deposit

    async def ensure_can_debit(self, election_id: int) -> int:
        """引き落とし可能か検証し、現在の残高を返す."""
        balance = await self.reserve_repository.get_balance(election_id, for_update=True)
        if not self.policy.can_debit(balance):
            raise InsufficientReserveError(
                "Election reserve is at or below the minimum balance",
                {
                    "election_id": election_id,
                    "balance": balance,
                    "minimum_balance": self.policy.minimum_balance,
                },
            )
        return balance

    async def debit(self, election_id: int) -> int:
        """1票分の実行コストを引き落とし、引き落とし後の残高を返す."""
        balance = await self.ensure_can_debit(election_id)
        new_balance = balance - self.policy.vote_cost
        await self.reserve_repository.set_balance(election_id, new_balance)
        return new_balance

    async def balance_of(self, election_id: int) -> int:
        return await self.reserve_repository.get_balance(election_id)

    async def platform_fee_total(self) -> int:
        return await self.reserve_repository.get_total_fees()
