"""elections コマンドのテスト."""

from unittest.mock import AsyncMock, MagicMock, patch

from click.testing import CliRunner

from ballot_ledger.application.dtos.election_dto import (
    CreateElectionInputDto,
    CreateElectionOutputDto,
    ElectionOutputItem,
    GetElectionOutputDto,
    ListElectionsOutputDto,
)
from ballot_ledger.domain.value_objects.election_phase import ElectionPhase
from ballot_ledger.interfaces.cli.commands.elections import elections


_DI_PATH = "ballot_ledger.infrastructure.di.container"


def _setup_usecase_mock(mock_get_container: MagicMock) -> MagicMock:
    mock_container = MagicMock()
    mock_get_container.return_value = mock_container
    usecase = MagicMock()
    mock_container.use_cases.manage_elections_usecase.return_value = usecase
    return usecase


def _item(**overrides) -> ElectionOutputItem:
    values = {
        "id": 1,
        "name": "生徒会選挙",
        "whitelist_start": 0,
        "whitelist_end": 100,
        "voting_start": 100,
        "voting_end": 200,
        "candidate_count": 3,
        "voter_count": 12,
        "is_active": True,
        "reserve_balance": 95000,
        "phase": ElectionPhase.VOTING,
    }
    values.update(overrides)
    return ElectionOutputItem(**values)


class TestElectionsCommand:
    @patch(f"{_DI_PATH}.get_container")
    def test_create(self, mock_get_container: MagicMock) -> None:
        usecase = _setup_usecase_mock(mock_get_container)
        usecase.create_election = AsyncMock(
            return_value=CreateElectionOutputDto(success=True, election_id=1)
        )

        result = CliRunner().invoke(
            elections,
            [
                "create",
                "生徒会選挙",
                "--whitelist-start",
                "0",
                "--whitelist-end",
                "100",
                "--voting-start",
                "100",
                "--voting-end",
                "200",
                "--caller",
                "0xcreator",
            ],
        )

        assert result.exit_code == 0
        assert "Created election 1" in result.output
        usecase.create_election.assert_awaited_once_with(
            CreateElectionInputDto("0xcreator", "生徒会選挙", 0, 100, 100, 200)
        )

    @patch(f"{_DI_PATH}.get_container")
    def test_show(self, mock_get_container: MagicMock) -> None:
        usecase = _setup_usecase_mock(mock_get_container)
        usecase.get_election = AsyncMock(
            return_value=GetElectionOutputDto(success=True, election=_item())
        )

        result = CliRunner().invoke(elections, ["show", "1"])

        assert result.exit_code == 0
        assert "生徒会選挙 (voting)" in result.output
        assert "95,000" in result.output

    @patch(f"{_DI_PATH}.get_container")
    def test_show_missing(self, mock_get_container: MagicMock) -> None:
        usecase = _setup_usecase_mock(mock_get_container)
        usecase.get_election = AsyncMock(
            return_value=GetElectionOutputDto(
                success=False,
                error_code="ElectionNotFound",
                error_message="Election does not exist",
            )
        )

        result = CliRunner().invoke(elections, ["show", "9"])

        assert result.exit_code == 1
        assert "ElectionNotFound" in result.output

    @patch(f"{_DI_PATH}.get_container")
    def test_list_empty(self, mock_get_container: MagicMock) -> None:
        usecase = _setup_usecase_mock(mock_get_container)
        usecase.list_elections = AsyncMock(
            return_value=ListElectionsOutputDto(elections=[])
        )

        result = CliRunner().invoke(elections, ["list"])

        assert result.exit_code == 0
        assert "No elections." in result.output
