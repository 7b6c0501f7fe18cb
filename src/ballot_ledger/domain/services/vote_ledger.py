"""投票済みフラグのドメインサービス."""

from ballot_ledger.domain.entities.vote_record import VoteRecord
from ballot_ledger.domain.exceptions import AlreadyVotedError
from ballot_ledger.domain.repositories.vote_record_repository import (
    VoteRecordRepository,
)


class VoteLedger:
    """(選挙, アドレス) ごとの投票済みフラグを管理する. 一度立てたら戻さない."""

    def __init__(self, vote_record_repository: VoteRecordRepository) -> None:
        self.vote_record_repository = vote_record_repository

    async def has_voted(self, election_id: int, voter_address: str) -> bool:
        return await self.vote_record_repository.exists(election_id, voter_address)

    async def record_vote(self, election_id: int, voter_address: str, now: int) -> None:
        if await self.has_voted(election_id, voter_address):
            raise AlreadyVotedError(
                "Address has already voted",
                {"election_id": election_id, "voter_address": voter_address},
            )
        await self.vote_record_repository.create(
            VoteRecord(election_id=election_id, voter_address=voter_address, voted_at=now)
        )
