"""WhitelistEntry entity."""

from dataclasses import dataclass


@dataclass
class WhitelistEntry:
    """登録番号とウォレットアドレスの紐付け.

    1つの行が (election_id, registration_number) の紐付けと
    (election_id, wallet_address) の投票資格の両方を表す。
    紐付けは恒久的で、解除や付け替えはできない。
    """

    election_id: int
    registration_number: int
    wallet_address: str
    registered_at: int | None = None
