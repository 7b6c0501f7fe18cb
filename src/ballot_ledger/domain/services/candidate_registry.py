"""候補者管理ドメインサービス."""

from ballot_ledger.domain.entities.candidate import Candidate
from ballot_ledger.domain.events import CandidateAdded
from ballot_ledger.domain.exceptions import ElectionNotFoundError
from ballot_ledger.domain.repositories.candidate_repository import CandidateRepository
from ballot_ledger.domain.repositories.election_repository import ElectionRepository
from ballot_ledger.domain.services.access_registry import AccessRegistry
from ballot_ledger.domain.services.interfaces.event_publisher import IEventPublisher


class CandidateRegistry:
    """選挙ごとの候補者一覧と得票数を管理する."""

    def __init__(
        self,
        candidate_repository: CandidateRepository,
        election_repository: ElectionRepository,
        access_registry: AccessRegistry,
        events: IEventPublisher,
    ) -> None:
        self.candidate_repository = candidate_repository
        self.election_repository = election_repository
        self.access_registry = access_registry
        self.events = events

    async def add_candidate(
        self, caller: str, election_id: int, name: str, image_url: str
    ) -> Candidate:
        """候補者を追加する.

        IDは現在の候補者数+1で採番する。

        Raises:
            UnauthorizedError: 呼び出し元がオーナーでない
            ElectionNotFoundError: 選挙が存在しないか有効でない
        """
        self.access_registry.require_owner(caller)

        election = await self.election_repository.get_for_update(election_id)
        if election is None or not election.is_active:
            raise ElectionNotFoundError(
                "Election does not exist or is not active",
                {"election_id": election_id},
            )

        candidate = await self.candidate_repository.create(
            Candidate(
                election_id=election_id,
                name=name,
                image_url=image_url,
                vote_count=0,
                id=election.next_candidate_id(),
            )
        )
        election.candidate_count += 1
        await self.election_repository.update(election)

        self.events.publish(
            CandidateAdded(
                election_id=election_id,
                candidate_id=candidate.id or 0,
                name=name,
                image_url=image_url,
            )
        )
        return candidate

    async def get(self, election_id: int, candidate_id: int) -> Candidate:
        """候補者を取得する. 未登録の場合はゼロ値レコードを返す."""
        candidate = await self.candidate_repository.get(election_id, candidate_id)
        if candidate is None:
            return Candidate.empty(election_id)
        return candidate

    async def list_all(self, election_id: int) -> list[Candidate]:
        """ID 1..candidate_count の候補者を昇順で返す."""
        election = await self.election_repository.get_by_id(election_id)
        if election is None:
            return []

        stored = {
            c.id: c for c in await self.candidate_repository.get_by_election(election_id)
        }
        return [
            stored.get(candidate_id, Candidate.empty(election_id))
            for candidate_id in range(1, election.candidate_count + 1)
        ]

    async def record_vote(self, election_id: int, candidate_id: int) -> int:
        """得票数を1増やす."""
        return await self.candidate_repository.increment_vote_count(
            election_id, candidate_id
        )
