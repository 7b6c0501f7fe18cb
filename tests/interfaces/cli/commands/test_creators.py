"""creators コマンドのテスト."""

from unittest.mock import AsyncMock, MagicMock, patch

from click.testing import CliRunner

from ballot_ledger.application.dtos.election_creator_dto import (
    ListCreatorsOutputDto,
    ManageCreatorInputDto,
    ManageCreatorOutputDto,
)
from ballot_ledger.interfaces.cli.commands.creators import creators


_DI_PATH = "ballot_ledger.infrastructure.di.container"


def _setup_usecase_mock(mock_get_container: MagicMock) -> MagicMock:
    mock_container = MagicMock()
    mock_get_container.return_value = mock_container
    usecase = MagicMock()
    mock_container.use_cases.manage_election_creators_usecase.return_value = usecase
    return usecase


class TestCreatorsCommand:
    @patch(f"{_DI_PATH}.get_container")
    def test_add(self, mock_get_container: MagicMock) -> None:
        usecase = _setup_usecase_mock(mock_get_container)
        usecase.add_creator = AsyncMock(
            return_value=ManageCreatorOutputDto(success=True)
        )

        result = CliRunner().invoke(
            creators, ["add", "0xcreator", "--caller", "0xowner"]
        )

        assert result.exit_code == 0
        assert "0xcreator" in result.output
        usecase.add_creator.assert_awaited_once_with(
            ManageCreatorInputDto(caller="0xowner", address="0xcreator")
        )

    @patch(f"{_DI_PATH}.get_container")
    def test_add_failure_exits_1(self, mock_get_container: MagicMock) -> None:
        usecase = _setup_usecase_mock(mock_get_container)
        usecase.add_creator = AsyncMock(
            return_value=ManageCreatorOutputDto(
                success=False,
                error_code="Unauthorized",
                error_message="Caller is not the platform owner",
            )
        )

        result = CliRunner().invoke(
            creators, ["add", "0xcreator", "--caller", "0xsomeone"]
        )

        assert result.exit_code == 1
        assert "Unauthorized" in result.output

    @patch(f"{_DI_PATH}.get_container")
    def test_remove(self, mock_get_container: MagicMock) -> None:
        usecase = _setup_usecase_mock(mock_get_container)
        usecase.remove_creator = AsyncMock(
            return_value=ManageCreatorOutputDto(success=True)
        )

        result = CliRunner().invoke(
            creators, ["remove", "0xcreator", "--caller", "0xowner"]
        )

        assert result.exit_code == 0
        assert "Removed" in result.output

    @patch(f"{_DI_PATH}.get_container")
    def test_list(self, mock_get_container: MagicMock) -> None:
        usecase = _setup_usecase_mock(mock_get_container)
        usecase.list_creators = AsyncMock(
            return_value=ListCreatorsOutputDto(creators=["0xa", "0xb"])
        )

        result = CliRunner().invoke(creators, ["list"])

        assert result.exit_code == 0
        assert "0xa" in result.output
        assert "0xb" in result.output

    def test_caller_is_required(self) -> None:
        result = CliRunner().invoke(creators, ["add", "0xcreator"])

        assert result.exit_code == 2
        assert "--caller" in result.output
