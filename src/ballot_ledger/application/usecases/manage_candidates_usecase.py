"""候補者管理のユースケース."""

from ballot_ledger.application.dtos.candidate_dto import (
    AddCandidateInputDto,
    AddCandidateOutputDto,
    CandidateOutputItem,
    GetCandidateOutputDto,
    ListCandidatesOutputDto,
)
from ballot_ledger.application.usecases.base import INTERNAL_ERROR_CODE, LedgerUseCase
from ballot_ledger.common.logging import get_logger
from ballot_ledger.domain.exceptions import BallotLedgerException


logger = get_logger(__name__)


class ManageCandidatesUseCase(LedgerUseCase):
    """候補者の追加と参照."""

    async def add_candidate(
        self, input_dto: AddCandidateInputDto
    ) -> AddCandidateOutputDto:
        """候補者を追加する. オーナーのみ実行できる."""
        try:
            async with self.uow_factory() as uow:
                registry = self._components(uow).candidate_registry
                candidate = await registry.add_candidate(
                    caller=input_dto.caller,
                    election_id=input_dto.election_id,
                    name=input_dto.name,
                    image_url=input_dto.image_url,
                )
                await uow.commit()
            return AddCandidateOutputDto(success=True, candidate_id=candidate.id)
        except BallotLedgerException as e:
            logger.warning(f"Add candidate rejected: {e.message}", code=e.code)
            return AddCandidateOutputDto(
                success=False, error_code=e.code, error_message=e.message
            )
        except Exception as e:
            logger.error(f"Failed to add candidate: {e}")
            return AddCandidateOutputDto(
                success=False, error_code=INTERNAL_ERROR_CODE, error_message=str(e)
            )

    async def get_candidate(
        self, election_id: int, candidate_id: int
    ) -> GetCandidateOutputDto:
        """候補者を取得する."""
        try:
            async with self.uow_factory() as uow:
                candidate = await self._components(uow).candidate_registry.get(
                    election_id, candidate_id
                )
            return GetCandidateOutputDto(
                success=True, candidate=CandidateOutputItem.from_entity(candidate)
            )
        except Exception as e:
            logger.error(f"Failed to get candidate: {e}")
            return GetCandidateOutputDto(
                success=False, error_code=INTERNAL_ERROR_CODE, error_message=str(e)
            )

    async def get_candidates(self, election_id: int) -> ListCandidatesOutputDto:
        """選挙の候補者一覧をID昇順で取得する."""
        try:
            async with self.uow_factory() as uow:
                candidates = await self._components(uow).candidate_registry.list_all(
                    election_id
                )
            return ListCandidatesOutputDto(
                candidates=[CandidateOutputItem.from_entity(c) for c in candidates]
            )
        except Exception as e:
            logger.error(f"Failed to list candidates: {e}")
            return ListCandidatesOutputDto(
                success=False, error_code=INTERNAL_ERROR_CODE, error_message=str(e)
            )
