"""VoteLedgerのテスト."""

from unittest.mock import AsyncMock

import pytest

from ballot_ledger.domain.exceptions import AlreadyVotedError
from ballot_ledger.domain.repositories.vote_record_repository import (
    VoteRecordRepository,
)
from ballot_ledger.domain.services.vote_ledger import VoteLedger


class TestVoteLedger:
    @pytest.mark.asyncio
    async def test_record_vote(self) -> None:
        repo = AsyncMock(spec=VoteRecordRepository)
        repo.exists.return_value = False

        await VoteLedger(repo).record_vote(1, "0xvoter", now=150)

        record = repo.create.call_args.args[0]
        assert (record.election_id, record.voter_address, record.voted_at) == (
            1,
            "0xvoter",
            150,
        )

    @pytest.mark.asyncio
    async def test_second_vote_is_rejected(self) -> None:
        repo = AsyncMock(spec=VoteRecordRepository)
        repo.exists.return_value = True

        with pytest.raises(AlreadyVotedError):
            await VoteLedger(repo).record_vote(1, "0xvoter", now=150)
        repo.create.assert_not_called()
