"""Deposit entity."""

from ballot_ledger.domain.entities.base import BaseEntity


class Deposit(BaseEntity):
    """準備金への入金記録（追記のみ）.

    fee はプラットフォームに送られた手数料、net_amount が準備金に
    加算された額となる。
    """

    def __init__(
        self,
        election_id: int,
        depositor: str,
        amount: int,
        fee: int,
        created_at: int | None = None,
        id: int | None = None,
    ) -> None:
        super().__init__(id)
        self.election_id = election_id
        self.depositor = depositor
        self.amount = amount
        self.fee = fee
        self.created_at = created_at

    @property
    def net_amount(self) -> int:
        return self.amount - self.fee
