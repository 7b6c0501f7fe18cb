"""RegisterVoterUseCaseのテスト."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from ballot_ledger.application.dtos.whitelist_dto import WhitelistUserInputDto
from ballot_ledger.application.services.ledger_components import LedgerPolicy
from ballot_ledger.application.usecases.register_voter_usecase import (
    RegisterVoterUseCase,
)
from ballot_ledger.domain.entities.whitelist_entry import WhitelistEntry
from ballot_ledger.domain.exceptions import RegistrationNumberTakenError
from ballot_ledger.domain.services.interfaces.unit_of_work import IUnitOfWork
from ballot_ledger.domain.services.whitelist_ledger import WhitelistLedger
from ballot_ledger.domain.value_objects.reserve_policy import ReservePolicy
from ballot_ledger.infrastructure.external.system_clock import FixedClock


@pytest.fixture
def uow() -> AsyncMock:
    mock = AsyncMock(spec=IUnitOfWork)
    mock.__aenter__.return_value = mock
    mock.__aexit__.return_value = False
    return mock


@pytest.fixture
def whitelist_ledger() -> AsyncMock:
    return AsyncMock(spec=WhitelistLedger)


@pytest.fixture
def use_case(uow, whitelist_ledger) -> RegisterVoterUseCase:
    use_case = RegisterVoterUseCase(
        uow_factory=lambda: uow,
        clock=FixedClock(50),
        policy=LedgerPolicy("0xowner", ReservePolicy()),
    )
    use_case._components = MagicMock(
        return_value=MagicMock(whitelist_ledger=whitelist_ledger)
    )
    return use_case


class TestWhitelistUser:
    """whitelist_userメソッドのテスト."""

    @pytest.mark.asyncio
    async def test_success(self, use_case, uow, whitelist_ledger) -> None:
        whitelist_ledger.register.return_value = WhitelistEntry(1, 7, "0xvoter", 50)
        whitelist_ledger.total_registered_voters.return_value = 1

        result = await use_case.whitelist_user(
            WhitelistUserInputDto(
                caller="0xvoter", election_id=1, registration_number=7
            )
        )

        assert result.success is True
        assert result.voter_count == 1
        whitelist_ledger.register.assert_awaited_once_with(
            election_id=1, caller="0xvoter", registration_number=7, now=50
        )
        uow.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_number_taken(self, use_case, uow, whitelist_ledger) -> None:
        whitelist_ledger.register.side_effect = RegistrationNumberTakenError("taken")

        result = await use_case.whitelist_user(
            WhitelistUserInputDto(
                caller="0xother", election_id=1, registration_number=7
            )
        )

        assert result.success is False
        assert result.error_code == "RegistrationNumberTaken"
        uow.commit.assert_not_called()


class TestQueries:
    @pytest.mark.asyncio
    async def test_wallet_for_registration(self, use_case, whitelist_ledger) -> None:
        whitelist_ledger.wallet_for.return_value = None

        result = await use_case.get_wallet_for_registration(1, 7)

        assert result.success is True
        assert result.wallet_address is None
        assert result.registration_number == 7

    @pytest.mark.asyncio
    async def test_total_registered_voters(self, use_case, whitelist_ledger) -> None:
        whitelist_ledger.total_registered_voters.return_value = 12

        result = await use_case.get_total_registered_voters(1)

        assert result.total == 12

    @pytest.mark.asyncio
    async def test_is_whitelisted(self, use_case, whitelist_ledger) -> None:
        whitelist_ledger.is_eligible.return_value = True

        result = await use_case.is_whitelisted(1, "0xvoter")

        assert result.is_whitelisted is True
        assert result.wallet_address == "0xvoter"
