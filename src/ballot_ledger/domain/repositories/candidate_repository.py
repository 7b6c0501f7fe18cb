"""Candidate repository interface."""

from abc import ABC, abstractmethod

from ballot_ledger.domain.entities.candidate import Candidate


class CandidateRepository(ABC):
    """Repository interface for candidates keyed by (election_id, candidate_id)."""

    @abstractmethod
    async def get(self, election_id: int, candidate_id: int) -> Candidate | None:
        """候補者を取得. 存在しない場合はNone."""
        pass

    @abstractmethod
    async def get_by_election(self, election_id: int) -> list[Candidate]:
        """選挙の全候補者をID昇順で取得."""
        pass

    @abstractmethod
    async def create(self, candidate: Candidate) -> Candidate:
        """候補者を追加. candidate.id は呼び出し側で採番済みであること."""
        pass

    @abstractmethod
    async def increment_vote_count(self, election_id: int, candidate_id: int) -> int:
        """得票数を1増やし、更新後の得票数を返す."""
        pass
