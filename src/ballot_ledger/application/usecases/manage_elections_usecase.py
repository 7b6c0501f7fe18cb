"""選挙管理のユースケース."""

from ballot_ledger.application.dtos.election_dto import (
    CreateElectionInputDto,
    CreateElectionOutputDto,
    ElectionOutputItem,
    GetElectionInputDto,
    GetElectionOutputDto,
    ListElectionsInputDto,
    ListElectionsOutputDto,
)
from ballot_ledger.application.usecases.base import INTERNAL_ERROR_CODE, LedgerUseCase
from ballot_ledger.common.logging import get_logger
from ballot_ledger.domain.exceptions import BallotLedgerException


logger = get_logger(__name__)


class ManageElectionsUseCase(LedgerUseCase):
    """選挙の作成・参照."""

    async def create_election(
        self, input_dto: CreateElectionInputDto
    ) -> CreateElectionOutputDto:
        """選挙を作成する."""
        try:
            async with self.uow_factory() as uow:
                registry = self._components(uow).election_registry
                election = await registry.create(
                    caller=input_dto.caller,
                    name=input_dto.name,
                    whitelist_start=input_dto.whitelist_start,
                    whitelist_end=input_dto.whitelist_end,
                    voting_start=input_dto.voting_start,
                    voting_end=input_dto.voting_end,
                    now=self.clock.now(),
                )
                await uow.commit()
            return CreateElectionOutputDto(success=True, election_id=election.id)
        except BallotLedgerException as e:
            logger.warning(f"Election creation rejected: {e.message}", code=e.code)
            return CreateElectionOutputDto(
                success=False, error_code=e.code, error_message=e.message
            )
        except Exception as e:
            logger.error(f"Failed to create election: {e}")
            return CreateElectionOutputDto(
                success=False, error_code=INTERNAL_ERROR_CODE, error_message=str(e)
            )

    async def get_election(
        self, input_dto: GetElectionInputDto
    ) -> GetElectionOutputDto:
        """選挙を取得する（フェーズと準備金残高を含む）."""
        try:
            async with self.uow_factory() as uow:
                components = self._components(uow)
                election = await components.election_registry.get(input_dto.election_id)
                balance = await components.reserve_account.balance_of(
                    input_dto.election_id
                )
                item = ElectionOutputItem.from_entity(
                    election, reserve_balance=balance, now=self.clock.now()
                )
            return GetElectionOutputDto(success=True, election=item)
        except BallotLedgerException as e:
            return GetElectionOutputDto(
                success=False, error_code=e.code, error_message=e.message
            )
        except Exception as e:
            logger.error(f"Failed to get election: {e}")
            return GetElectionOutputDto(
                success=False, error_code=INTERNAL_ERROR_CODE, error_message=str(e)
            )

    async def list_elections(
        self, input_dto: ListElectionsInputDto | None = None
    ) -> ListElectionsOutputDto:
        """選挙一覧を取得する."""
        input_dto = input_dto or ListElectionsInputDto()
        try:
            async with self.uow_factory() as uow:
                components = self._components(uow)
                elections = await components.election_registry.list_all(
                    limit=input_dto.limit, offset=input_dto.offset
                )
                now = self.clock.now()
                items = [
                    ElectionOutputItem.from_entity(
                        e,
                        reserve_balance=await components.reserve_account.balance_of(
                            e.id or 0
                        ),
                        now=now,
                    )
                    for e in elections
                ]
            return ListElectionsOutputDto(elections=items)
        except Exception as e:
            logger.error(f"Failed to list elections: {e}")
            return ListElectionsOutputDto(
                elections=[],
                success=False,
                error_code=INTERNAL_ERROR_CODE,
                error_message=str(e),
            )
