"""投票ユースケース."""

from ballot_ledger.application.dtos.vote_dto import (
    CastVoteInputDto,
    CastVoteOutputDto,
    VoteStatusOutputDto,
)
from ballot_ledger.application.usecases.base import INTERNAL_ERROR_CODE, LedgerUseCase
from ballot_ledger.common.logging import get_logger
from ballot_ledger.domain.exceptions import BallotLedgerException


logger = get_logger(__name__)


class CastVoteUseCase(LedgerUseCase):
    """投票の実行と投票状況の参照."""

    async def vote(self, input_dto: CastVoteInputDto) -> CastVoteOutputDto:
        """投票する.

        成功すると投票記録・得票数・準備金残高が同時に更新される。
        いずれかの検証に失敗した場合は何も変更されない。
        """
        try:
            async with self.uow_factory() as uow:
                registry = self._components(uow).election_registry
                remaining = await registry.vote(
                    election_id=input_dto.election_id,
                    caller=input_dto.caller,
                    candidate_id=input_dto.candidate_id,
                    now=self.clock.now(),
                )
                await uow.commit()
            return CastVoteOutputDto(success=True, remaining_reserve=remaining)
        except BallotLedgerException as e:
            logger.warning(f"Vote rejected: {e.message}", code=e.code)
            return CastVoteOutputDto(
                success=False, error_code=e.code, error_message=e.message
            )
        except Exception as e:
            logger.error(f"Failed to cast vote: {e}")
            return CastVoteOutputDto(
                success=False, error_code=INTERNAL_ERROR_CODE, error_message=str(e)
            )

    async def has_voted(self, election_id: int, voter_address: str) -> VoteStatusOutputDto:
        try:
            async with self.uow_factory() as uow:
                voted = await self._components(uow).vote_ledger.has_voted(
                    election_id, voter_address
                )
            return VoteStatusOutputDto(
                election_id=election_id, voter_address=voter_address, has_voted=voted
            )
        except Exception as e:
            logger.error(f"Failed to check vote status: {e}")
            return VoteStatusOutputDto(
                election_id=election_id,
                voter_address=voter_address,
                success=False,
                error_code=INTERNAL_ERROR_CODE,
                error_message=str(e),
            )
