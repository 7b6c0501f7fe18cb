"""選挙作成者管理のユースケース."""

from ballot_ledger.application.dtos.election_creator_dto import (
    ListCreatorsOutputDto,
    ManageCreatorInputDto,
    ManageCreatorOutputDto,
)
from ballot_ledger.application.usecases.base import INTERNAL_ERROR_CODE, LedgerUseCase
from ballot_ledger.common.logging import get_logger
from ballot_ledger.domain.exceptions import BallotLedgerException


logger = get_logger(__name__)


class ManageElectionCreatorsUseCase(LedgerUseCase):
    """選挙作成者の追加・削除・一覧."""

    async def add_creator(
        self, input_dto: ManageCreatorInputDto
    ) -> ManageCreatorOutputDto:
        """作成者を追加する."""
        try:
            async with self.uow_factory() as uow:
                access = self._components(uow).access_registry
                await access.add_creator(
                    input_dto.caller, input_dto.address, now=self.clock.now()
                )
                await uow.commit()
            return ManageCreatorOutputDto(success=True)
        except BallotLedgerException as e:
            logger.warning(f"Add creator rejected: {e.message}", code=e.code)
            return ManageCreatorOutputDto(
                success=False, error_code=e.code, error_message=e.message
            )
        except Exception as e:
            logger.error(f"Failed to add creator: {e}")
            return ManageCreatorOutputDto(
                success=False, error_code=INTERNAL_ERROR_CODE, error_message=str(e)
            )

    async def remove_creator(
        self, input_dto: ManageCreatorInputDto
    ) -> ManageCreatorOutputDto:
        """作成者を削除する."""
        try:
            async with self.uow_factory() as uow:
                access = self._components(uow).access_registry
                await access.remove_creator(
                    input_dto.caller, input_dto.address, now=self.clock.now()
                )
                await uow.commit()
            return ManageCreatorOutputDto(success=True)
        except BallotLedgerException as e:
            logger.warning(f"Remove creator rejected: {e.message}", code=e.code)
            return ManageCreatorOutputDto(
                success=False, error_code=e.code, error_message=e.message
            )
        except Exception as e:
            logger.error(f"Failed to remove creator: {e}")
            return ManageCreatorOutputDto(
                success=False, error_code=INTERNAL_ERROR_CODE, error_message=str(e)
            )

    async def list_creators(self) -> ListCreatorsOutputDto:
        """有効な作成者一覧を取得する."""
        try:
            async with self.uow_factory() as uow:
                creators = await self._components(uow).access_registry.list_creators()
            return ListCreatorsOutputDto(creators=creators)
        except Exception as e:
            logger.error(f"Failed to list creators: {e}")
            return ListCreatorsOutputDto(
                success=False, error_code=INTERNAL_ERROR_CODE, error_message=str(e)
            )
