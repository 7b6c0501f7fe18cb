"""vote コマンドのテスト."""

from unittest.mock import AsyncMock, MagicMock, patch

from click.testing import CliRunner

from ballot_ledger.application.dtos.vote_dto import (
    CastVoteInputDto,
    CastVoteOutputDto,
    VoteStatusOutputDto,
)
from ballot_ledger.interfaces.cli.commands.vote import vote


_DI_PATH = "ballot_ledger.infrastructure.di.container"


def _setup_usecase_mock(mock_get_container: MagicMock) -> MagicMock:
    mock_container = MagicMock()
    mock_get_container.return_value = mock_container
    usecase = MagicMock()
    mock_container.use_cases.cast_vote_usecase.return_value = usecase
    return usecase


class TestVoteCommand:
    @patch(f"{_DI_PATH}.get_container")
    def test_cast(self, mock_get_container: MagicMock) -> None:
        usecase = _setup_usecase_mock(mock_get_container)
        usecase.vote = AsyncMock(
            return_value=CastVoteOutputDto(success=True, remaining_reserve=1)
        )

        result = CliRunner().invoke(
            vote,
            ["--election-id", "1", "--candidate-id", "2", "--caller", "0xvoter"],
        )

        assert result.exit_code == 0
        assert "candidate 2" in result.output
        usecase.vote.assert_awaited_once_with(
            CastVoteInputDto(caller="0xvoter", election_id=1, candidate_id=2)
        )

    @patch(f"{_DI_PATH}.get_container")
    def test_rejected_vote(self, mock_get_container: MagicMock) -> None:
        usecase = _setup_usecase_mock(mock_get_container)
        usecase.vote = AsyncMock(
            return_value=CastVoteOutputDto(
                success=False,
                error_code="AlreadyVoted",
                error_message="Address has already voted",
            )
        )

        result = CliRunner().invoke(
            vote,
            ["--election-id", "1", "--candidate-id", "2", "--caller", "0xvoter"],
        )

        assert result.exit_code == 1
        assert "AlreadyVoted" in result.output

    def test_missing_options(self) -> None:
        result = CliRunner().invoke(vote, ["--election-id", "1"])

        assert result.exit_code == 2

    @patch(f"{_DI_PATH}.get_container")
    def test_status(self, mock_get_container: MagicMock) -> None:
        usecase = _setup_usecase_mock(mock_get_container)
        usecase.has_voted = AsyncMock(
            return_value=VoteStatusOutputDto(
                election_id=1, voter_address="0xvoter", has_voted=True
            )
        )

        result = CliRunner().invoke(
            vote, ["status", "--election-id", "1", "--address", "0xvoter"]
        )

        assert result.exit_code == 0
        assert result.output.strip() == "voted"
        usecase.vote.assert_not_called()
