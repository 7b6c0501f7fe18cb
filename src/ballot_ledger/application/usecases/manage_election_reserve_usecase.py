"""選挙準備金のユースケース."""

from ballot_ledger.application.dtos.reserve_dto import (
    DepositInputDto,
    DepositOutputDto,
    DepositOutputItem,
    GetReserveOutputDto,
    ListDepositsOutputDto,
    PlatformFeeOutputDto,
)
from ballot_ledger.application.usecases.base import INTERNAL_ERROR_CODE, LedgerUseCase
from ballot_ledger.common.logging import get_logger
from ballot_ledger.domain.exceptions import BallotLedgerException


logger = get_logger(__name__)


class ManageElectionReserveUseCase(LedgerUseCase):
    """準備金への入金と残高参照."""

    async def deposit(self, input_dto: DepositInputDto) -> DepositOutputDto:
        """準備金に入金する. 手数料を差し引いた額が残高に加算される."""
        try:
            async with self.uow_factory() as uow:
                reserve = self._components(uow).reserve_account
                deposit = await reserve.deposit(
                    election_id=input_dto.election_id,
                    depositor=input_dto.caller,
                    amount=input_dto.amount,
                    now=self.clock.now(),
                )
                balance = await reserve.balance_of(input_dto.election_id)
                await uow.commit()
            return DepositOutputDto(
                success=True, amount=deposit.amount, fee=deposit.fee, balance=balance
            )
        except BallotLedgerException as e:
            logger.warning(f"Deposit rejected: {e.message}", code=e.code)
            return DepositOutputDto(
                success=False, error_code=e.code, error_message=e.message
            )
        except Exception as e:
            logger.error(f"Failed to deposit: {e}")
            return DepositOutputDto(
                success=False, error_code=INTERNAL_ERROR_CODE, error_message=str(e)
            )

    async def get_gas_reserve(self, election_id: int) -> GetReserveOutputDto:
        """選挙の準備金残高を取得する."""
        try:
            async with self.uow_factory() as uow:
                balance = await self._components(uow).reserve_account.balance_of(
                    election_id
                )
            return GetReserveOutputDto(election_id=election_id, balance=balance)
        except Exception as e:
            logger.error(f"Failed to get reserve: {e}")
            return GetReserveOutputDto(
                election_id=election_id,
                success=False,
                error_code=INTERNAL_ERROR_CODE,
                error_message=str(e),
            )

    async def list_deposits(self, election_id: int) -> ListDepositsOutputDto:
        """選挙の入金記録を取得する."""
        try:
            async with self.uow_factory() as uow:
                deposits = await uow.reserve_repository.get_deposits(election_id)
            return ListDepositsOutputDto(
                deposits=[DepositOutputItem.from_entity(d) for d in deposits]
            )
        except Exception as e:
            logger.error(f"Failed to list deposits: {e}")
            return ListDepositsOutputDto(
                success=False, error_code=INTERNAL_ERROR_CODE, error_message=str(e)
            )

    async def get_platform_fee_total(self) -> PlatformFeeOutputDto:
        """プラットフォームが受け取った手数料の合計を取得する."""
        try:
            async with self.uow_factory() as uow:
                total = await self._components(uow).reserve_account.platform_fee_total()
            return PlatformFeeOutputDto(total_fees=total)
        except Exception as e:
            logger.error(f"Failed to get platform fee total: {e}")
            return PlatformFeeOutputDto(
                success=False, error_code=INTERNAL_ERROR_CODE, error_message=str(e)
            )
