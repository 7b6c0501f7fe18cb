"""選挙のライフサイクルを管理するドメインサービス."""

from ballot_ledger.domain.entities.election import Election
from ballot_ledger.domain.events import ElectionCreated, VoteCasted
from ballot_ledger.domain.exceptions import (
    AlreadyVotedError,
    ElectionNotFoundError,
    InvalidCandidateError,
    InvalidTimeWindowError,
    NotWhitelistedError,
    VotingClosedError,
)
from ballot_ledger.domain.repositories.election_repository import ElectionRepository
from ballot_ledger.domain.services.access_registry import AccessRegistry
from ballot_ledger.domain.services.candidate_registry import CandidateRegistry
from ballot_ledger.domain.services.interfaces.event_publisher import IEventPublisher
from ballot_ledger.domain.services.reserve_account import ReserveAccount
from ballot_ledger.domain.services.vote_ledger import VoteLedger
from ballot_ledger.domain.services.whitelist_ledger import WhitelistLedger
from ballot_ledger.domain.value_objects.election_phase import ElectionPhase


class ElectionRegistry:
    """選挙レコードを所有し、各コンポーネントを束ねる状態機械.

    フェーズ（登録前・登録中・中間・投票中・終了）は保存せず、
    時刻と時間窓から導出する。終了への状態遷移は行わない。
    """

    def __init__(
        self,
        election_repository: ElectionRepository,
        access_registry: AccessRegistry,
        reserve_account: ReserveAccount,
        candidate_registry: CandidateRegistry,
        whitelist_ledger: WhitelistLedger,
        vote_ledger: VoteLedger,
        events: IEventPublisher,
    ) -> None:
        self.election_repository = election_repository
        self.access_registry = access_registry
        self.reserve_account = reserve_account
        self.candidate_registry = candidate_registry
        self.whitelist_ledger = whitelist_ledger
        self.vote_ledger = vote_ledger
        self.events = events

    async def create(
        self,
        caller: str,
        name: str,
        whitelist_start: int,
        whitelist_end: int,
        voting_start: int,
        voting_end: int,
        now: int,
    ) -> Election:
        """選挙を作成する.

        Raises:
            UnauthorizedError: 呼び出し元が承認済み作成者でない
            InvalidTimeWindowError: いずれかの時間窓が start < end でない
        """
        await self.access_registry.require_creator(caller)

        election = Election(
            name=name,
            whitelist_start=whitelist_start,
            whitelist_end=whitelist_end,
            voting_start=voting_start,
            voting_end=voting_end,
            created_by=caller,
            created_at=now,
        )
        if not election.has_valid_windows():
            raise InvalidTimeWindowError(
                "Time windows must satisfy start < end",
                {
                    "whitelist_start": whitelist_start,
                    "whitelist_end": whitelist_end,
                    "voting_start": voting_start,
                    "voting_end": voting_end,
                },
            )

        created = await self.election_repository.create(election)
        self.events.publish(ElectionCreated(election_id=created.id or 0, name=name))
        return created

    async def vote(
        self, election_id: int, caller: str, candidate_id: int, now: int
    ) -> int:
        """投票する.

        検証はホワイトリスト→投票期間→投票済み→候補者ID→準備金の順に行い、
        すべて通過した場合のみ投票記録・得票加算・準備金引き落としを行う。

        Returns:
            引き落とし後の準備金残高
        """
        if not await self.whitelist_ledger.is_eligible(election_id, caller):
            raise NotWhitelistedError(
                "Address is not whitelisted for this election",
                {"election_id": election_id, "voter_address": caller},
            )

        election = await self.election_repository.get_for_update(election_id)
        if election is None or not election.is_voting_at(now):
            raise VotingClosedError(
                "Voting is not open",
                {"election_id": election_id, "now": now},
            )

        if await self.vote_ledger.has_voted(election_id, caller):
            raise AlreadyVotedError(
                "Address has already voted",
                {"election_id": election_id, "voter_address": caller},
            )

        if not election.is_valid_candidate_id(candidate_id):
            raise InvalidCandidateError(
                "Candidate does not exist",
                {
                    "election_id": election_id,
                    "candidate_id": candidate_id,
                    "candidate_count": election.candidate_count,
                },
            )

        await self.reserve_account.ensure_can_debit(election_id)

        await self.vote_ledger.record_vote(election_id, caller, now)
        await self.candidate_registry.record_vote(election_id, candidate_id)
        remaining = await self.reserve_account.debit(election_id)

        self.events.publish(
            VoteCasted(
                election_id=election_id, voter_address=caller, candidate_id=candidate_id
            )
        )
        return remaining

    async def get(self, election_id: int) -> Election:
        election = await self.election_repository.get_by_id(election_id)
        if election is None:
            raise ElectionNotFoundError(
                "Election does not exist", {"election_id": election_id}
            )
        return election

    async def list_all(
        self, limit: int | None = None, offset: int | None = None
    ) -> list[Election]:
        return await self.election_repository.get_all(limit=limit, offset=offset)

    async def phase_of(self, election_id: int, now: int) -> ElectionPhase:
        election = await self.get(election_id)
        return election.phase_at(now)
