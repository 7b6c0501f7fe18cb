"""Candidate entity."""

from ballot_ledger.domain.entities.base import BaseEntity


class Candidate(BaseEntity):
    """選挙ごとの候補者.

    IDは選挙内で1から連番で採番され、(election_id, id) で一意になる。
    """

    def __init__(
        self,
        election_id: int,
        name: str,
        image_url: str = "",
        vote_count: int = 0,
        id: int | None = None,
    ) -> None:
        """候補者エンティティを初期化する.

        Args:
            election_id: 選挙ID
            name: 候補者名
            image_url: 画像URL
            vote_count: 得票数
            id: 選挙内の候補者ID
        """
        super().__init__(id)
        self.election_id = election_id
        self.name = name
        self.image_url = image_url
        self.vote_count = vote_count

    @classmethod
    def empty(cls, election_id: int) -> "Candidate":
        """未登録の候補者を表すゼロ値レコード."""
        return cls(election_id=election_id, name="", image_url="", vote_count=0, id=0)

    def is_empty(self) -> bool:
        return not self.id

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Candidate):
            return False
        return (self.election_id, self.id) == (other.election_id, other.id)

    def __hash__(self) -> int:
        return hash(("Candidate", self.election_id, self.id))

    def __str__(self) -> str:
        return f"{self.id}: {self.name}"
