"""実行コスト準備金のポリシー."""

from dataclasses import dataclass


DEFAULT_FEE_PERCENT = 5
DEFAULT_MINIMUM_BALANCE = 30000
DEFAULT_VOTE_COST = 30000

# 金額列は符号付き64bit整数で保存する
MAX_RESERVE_AMOUNT = 2**63 - 1


@dataclass(frozen=True)
class ReservePolicy:
    """入金手数料率・最低残高・1票あたりの実行コスト.

    Attributes:
        fee_percent: 入金時にプラットフォームへ回す手数料率（%）
        minimum_balance: 投票に必要な残高の下限（この値より大きいこと）
        vote_cost: 1票ごとに引き落とす実行コスト
    """

    fee_percent: int = DEFAULT_FEE_PERCENT
    minimum_balance: int = DEFAULT_MINIMUM_BALANCE
    vote_cost: int = DEFAULT_VOTE_COST

    def __post_init__(self) -> None:
        if not 0 <= self.fee_percent <= 100:
            raise ValueError(
                f"fee_percent must be between 0 and 100, got {self.fee_percent}"
            )
        if self.vote_cost < 0:
            raise ValueError(f"vote_cost must be non-negative, got {self.vote_cost}")
        # 残高 > minimum_balance >= vote_cost なら引き落とし後も負にならない
        if self.vote_cost > self.minimum_balance:
            raise ValueError(
                "vote_cost must not exceed minimum_balance "
                f"({self.vote_cost} > {self.minimum_balance})"
            )

    def fee_for(self, amount: int) -> int:
        """入金額に対する手数料（切り捨て）."""
        return amount * self.fee_percent // 100

    def can_debit(self, balance: int) -> bool:
        """残高が下限を厳密に上回っているか."""
        return balance > self.minimum_balance
