"""準備金に関するDTO."""

from dataclasses import dataclass, field

from ballot_ledger.domain.entities.deposit import Deposit


@dataclass
class DepositInputDto:
    """入金の入力DTO."""

    caller: str
    election_id: int
    amount: int


@dataclass
class DepositOutputDto:
    """入金の出力DTO."""

    success: bool
    amount: int = 0
    fee: int = 0
    balance: int | None = None
    error_code: str | None = None
    error_message: str | None = None


@dataclass
class GetReserveOutputDto:
    """準備金残高の出力DTO."""

    election_id: int
    balance: int = 0
    success: bool = True
    error_code: str | None = None
    error_message: str | None = None


@dataclass
class DepositOutputItem:
    """入金記録の出力アイテム."""

    id: int | None
    election_id: int
    depositor: str
    amount: int
    fee: int
    created_at: int | None

    @property
    def net_amount(self) -> int:
        return self.amount - self.fee

    @classmethod
    def from_entity(cls, entity: Deposit) -> "DepositOutputItem":
        return cls(
            id=entity.id,
            election_id=entity.election_id,
            depositor=entity.depositor,
            amount=entity.amount,
            fee=entity.fee,
            created_at=entity.created_at,
        )


@dataclass
class ListDepositsOutputDto:
    """入金記録一覧の出力DTO."""

    deposits: list[DepositOutputItem] = field(default_factory=list)
    success: bool = True
    error_code: str | None = None
    error_message: str | None = None


@dataclass
class PlatformFeeOutputDto:
    """プラットフォーム手数料合計の出力DTO."""

    total_fees: int = 0
    success: bool = True
    error_code: str | None = None
    error_message: str | None = None
