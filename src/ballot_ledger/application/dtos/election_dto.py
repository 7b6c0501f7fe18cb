"""選挙管理に関するDTO."""

from dataclasses import dataclass

from ballot_ledger.domain.entities.election import Election
from ballot_ledger.domain.value_objects.election_phase import ElectionPhase


# =============================================================================
# Input DTOs
# =============================================================================


@dataclass
class CreateElectionInputDto:
    """選挙作成の入力DTO."""

    caller: str
    name: str
    whitelist_start: int
    whitelist_end: int
    voting_start: int
    voting_end: int


@dataclass
class GetElectionInputDto:
    """選挙取得の入力DTO."""

    election_id: int


@dataclass
class ListElectionsInputDto:
    """選挙一覧取得の入力DTO."""

    limit: int | None = None
    offset: int | None = None


# =============================================================================
# Output DTOs
# =============================================================================


@dataclass
class ElectionOutputItem:
    """選挙の出力アイテム."""

    id: int | None
    name: str
    whitelist_start: int
    whitelist_end: int
    voting_start: int
    voting_end: int
    candidate_count: int
    voter_count: int
    is_active: bool
    reserve_balance: int
    phase: ElectionPhase
    created_by: str | None = None

    @classmethod
    def from_entity(
        cls, entity: Election, reserve_balance: int, now: int
    ) -> "ElectionOutputItem":
        """エンティティから出力アイテムを生成する."""
        return cls(
            id=entity.id,
            name=entity.name,
            whitelist_start=entity.whitelist_start,
            whitelist_end=entity.whitelist_end,
            voting_start=entity.voting_start,
            voting_end=entity.voting_end,
            candidate_count=entity.candidate_count,
            voter_count=entity.voter_count,
            is_active=entity.is_active,
            reserve_balance=reserve_balance,
            phase=entity.phase_at(now),
            created_by=entity.created_by,
        )


@dataclass
class CreateElectionOutputDto:
    """選挙作成の出力DTO."""

    success: bool
    election_id: int | None = None
    error_code: str | None = None
    error_message: str | None = None


@dataclass
class GetElectionOutputDto:
    """選挙取得の出力DTO."""

    success: bool
    election: ElectionOutputItem | None = None
    error_code: str | None = None
    error_message: str | None = None


@dataclass
class ListElectionsOutputDto:
    """選挙一覧取得の出力DTO."""

    elections: list[ElectionOutputItem]
    success: bool = True
    error_code: str | None = None
    error_message: str | None = None
