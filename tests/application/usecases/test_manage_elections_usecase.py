"""ManageElectionsUseCaseのテスト."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from ballot_ledger.application.dtos.election_dto import (
    CreateElectionInputDto,
    GetElectionInputDto,
    ListElectionsInputDto,
)
from ballot_ledger.application.services.ledger_components import LedgerPolicy
from ballot_ledger.application.usecases.manage_elections_usecase import (
    ManageElectionsUseCase,
)
from ballot_ledger.domain.entities.election import Election
from ballot_ledger.domain.exceptions import (
    ElectionNotFoundError,
    InvalidTimeWindowError,
)
from ballot_ledger.domain.services.election_registry import ElectionRegistry
from ballot_ledger.domain.services.interfaces.unit_of_work import IUnitOfWork
from ballot_ledger.domain.services.reserve_account import ReserveAccount
from ballot_ledger.domain.value_objects.election_phase import ElectionPhase
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
        reserve_account=AsyncMock(spec=ReserveAccount),
    )


@pytest.fixture
def use_case(uow, components) -> ManageElectionsUseCase:
    use_case = ManageElectionsUseCase(
        uow_factory=lambda: uow,
        clock=FixedClock(150),
        policy=LedgerPolicy("0xowner", ReservePolicy()),
    )
    use_case._components = MagicMock(return_value=components)
    return use_case


def _create_input() -> CreateElectionInputDto:
    return CreateElectionInputDto(
        caller="0xcreator",
        name="生徒会選挙",
        whitelist_start=0,
        whitelist_end=100,
        voting_start=100,
        voting_end=200,
    )


class TestCreateElection:
    """create_electionメソッドのテスト."""

    @pytest.mark.asyncio
    async def test_success_commits(self, use_case, uow, components) -> None:
        components.election_registry.create.return_value = Election(
            "生徒会選挙", 0, 100, 100, 200, id=3
        )

        result = await use_case.create_election(_create_input())

        assert result.success is True
        assert result.election_id == 3
        components.election_registry.create.assert_awaited_once_with(
            caller="0xcreator",
            name="生徒会選挙",
            whitelist_start=0,
            whitelist_end=100,
            voting_start=100,
            voting_end=200,
            now=150,
        )
        uow.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_domain_error_is_reported(self, use_case, uow, components) -> None:
        components.election_registry.create.side_effect = InvalidTimeWindowError(
            "bad windows"
        )

        result = await use_case.create_election(_create_input())

        assert result.success is False
        assert result.error_code == "InvalidTimeWindow"
        assert result.error_message == "bad windows"
        uow.commit.assert_not_called()

    @pytest.mark.asyncio
    async def test_unexpected_error_is_internal(self, use_case, components) -> None:
        components.election_registry.create.side_effect = RuntimeError("db down")

        result = await use_case.create_election(_create_input())

        assert result.success is False
        assert result.error_code == "InternalError"
        assert "db down" in (result.error_message or "")


class TestGetElection:
    """get_electionメソッドのテスト."""

    @pytest.mark.asyncio
    async def test_includes_phase_and_reserve(self, use_case, components) -> None:
        components.election_registry.get.return_value = Election(
            "生徒会選挙", 0, 100, 100, 200, candidate_count=2, id=3
        )
        components.reserve_account.balance_of.return_value = 950

        result = await use_case.get_election(GetElectionInputDto(election_id=3))

        assert result.success is True
        assert result.election is not None
        assert result.election.phase is ElectionPhase.VOTING
        assert result.election.reserve_balance == 950
        assert result.election.candidate_count == 2

    @pytest.mark.asyncio
    async def test_not_found(self, use_case, components) -> None:
        components.election_registry.get.side_effect = ElectionNotFoundError("missing")

        result = await use_case.get_election(GetElectionInputDto(election_id=9))

        assert result.success is False
        assert result.error_code == "ElectionNotFound"
        assert result.election is None


class TestListElections:
    """list_electionsメソッドのテスト."""

    @pytest.mark.asyncio
    async def test_list(self, use_case, components) -> None:
        components.election_registry.list_all.return_value = [
            Election("A", 0, 100, 100, 200, id=1),
            Election("B", 0, 100, 300, 400, id=2),
        ]
        components.reserve_account.balance_of.return_value = 0

        result = await use_case.list_elections(ListElectionsInputDto(limit=5))

        assert result.success is True
        assert [e.name for e in result.elections] == ["A", "B"]
        assert result.elections[1].phase is ElectionPhase.INTERIM
        components.election_registry.list_all.assert_awaited_once_with(
            limit=5, offset=None
        )

    @pytest.mark.asyncio
    async def test_list_failure(self, use_case, components) -> None:
        components.election_registry.list_all.side_effect = RuntimeError("boom")

        result = await use_case.list_elections()

        assert result.success is False
        assert result.elections == []
