"""候補者管理に関するDTO."""

from dataclasses import dataclass, field

from ballot_ledger.domain.entities.candidate import Candidate


@dataclass
class AddCandidateInputDto:
    """候補者追加の入力DTO."""

    caller: str
    election_id: int
    name: str
    image_url: str = ""


@dataclass
class CandidateOutputItem:
    """候補者の出力アイテム."""

    id: int
    election_id: int
    name: str
    image_url: str
    vote_count: int

    @classmethod
    def from_entity(cls, entity: Candidate) -> "CandidateOutputItem":
        """エンティティから出力アイテムを生成する."""
        return cls(
            id=entity.id or 0,
            election_id=entity.election_id,
            name=entity.name,
            image_url=entity.image_url,
            vote_count=entity.vote_count,
        )


@dataclass
class AddCandidateOutputDto:
    """候補者追加の出力DTO."""

    success: bool
    candidate_id: int | None = None
    error_code: str | None = None
    error_message: str | None = None


@dataclass
class GetCandidateOutputDto:
    """候補者取得の出力DTO. 未登録の場合はゼロ値の候補者を返す."""

    success: bool
    candidate: CandidateOutputItem | None = None
    error_code: str | None = None
    error_message: str | None = None


@dataclass
class ListCandidatesOutputDto:
    """候補者一覧の出力DTO."""

    candidates: list[CandidateOutputItem] = field(default_factory=list)
    success: bool = True
    error_code: str | None = None
    error_message: str | None = None
