"""CastVoteUseCaseのテスト."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from ballot_ledger.application.dtos.vote_dto import CastVoteInputDto
from ballot_ledger.application.services.ledger_components import LedgerPolicy
from ballot_ledger.application.usecases.cast_vote_usecase import CastVoteUseCase
from ballot_ledger.domain.exceptions import (
    AlreadyVotedError,
    InsufficientReserveError,
    NotWhitelistedError,
)
from ballot_ledger.domain.services.election_registry import ElectionRegistry
from ballot_ledger.domain.services.interfaces.unit_of_work import IUnitOfWork
from ballot_ledger.domain.services.vote_ledger import VoteLedger
from ballot_ledger.domain.value_objects.reserve_policy import ReservePolicy
from ballot_ledger.infrastructure.external.system_clock import FixedClock


@pytest.fixture
def uow() -> AsyncMock:
    mock = AsyncMock(spec=IUnitOfWork)
    mock.__aenter__.return_value = mock
    mock.__aexit__.return_value = False
    return mock


@pytest.fixture
def components() -> MagicMock:
    return MagicMock(
        election_registry=AsyncMock(spec=ElectionRegistry),
        vote_ledger=AsyncMock(spec=VoteLedger),
    )


@pytest.fixture
def use_case(uow, components) -> CastVoteUseCase:
    use_case = CastVoteUseCase(
        uow_factory=lambda: uow,
        clock=FixedClock(150),
        policy=LedgerPolicy("0xowner", ReservePolicy()),
    )
    use_case._components = MagicMock(return_value=components)
    return use_case


class TestVote:
    """voteメソッドのテスト."""

    @pytest.mark.asyncio
    async def test_success(self, use_case, uow, components) -> None:
        components.election_registry.vote.return_value = 1

        result = await use_case.vote(
            CastVoteInputDto(caller="0xvoter", election_id=1, candidate_id=2)
        )

        assert result.success is True
        assert result.remaining_reserve == 1
        components.election_registry.vote.assert_awaited_once_with(
            election_id=1, caller="0xvoter", candidate_id=2, now=150
        )
        uow.commit.assert_awaited_once()

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "error,code",
        [
            (NotWhitelistedError("x"), "NotWhitelisted"),
            (AlreadyVotedError("x"), "AlreadyVoted"),
            (InsufficientReserveError("x"), "InsufficientReserve"),
        ],
    )
    async def test_rejections_do_not_commit(
        self, use_case, uow, components, error, code
    ) -> None:
        components.election_registry.vote.side_effect = error

        result = await use_case.vote(
            CastVoteInputDto(caller="0xvoter", election_id=1, candidate_id=2)
        )

        assert result.success is False
        assert result.error_code == code
        assert result.remaining_reserve is None
        uow.commit.assert_not_called()


class TestHasVoted:
    @pytest.mark.asyncio
    async def test_has_voted(self, use_case, components) -> None:
        components.vote_ledger.has_voted.return_value = True

        result = await use_case.has_voted(1, "0xvoter")

        assert result.success is True
        assert result.has_voted is True

    @pytest.mark.asyncio
    async def test_failure(self, use_case, components) -> None:
        components.vote_ledger.has_voted.side_effect = RuntimeError("boom")

        result = await use_case.has_voted(1, "0xvoter")

        assert result.success is False
        assert result.error_code == "InternalError"
