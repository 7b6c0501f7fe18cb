"""VoteRecord entity."""

from dataclasses import dataclass


@dataclass
class VoteRecord:
    """投票済みフラグ. 行が存在すれば投票済み."""

    election_id: int
    voter_address: str
    voted_at: int | None = None
