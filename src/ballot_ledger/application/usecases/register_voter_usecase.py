"""有権者のホワイトリスト登録ユースケース."""

from ballot_ledger.application.dtos.whitelist_dto import (
    RegisteredVotersOutputDto,
    WalletForRegistrationOutputDto,
    WhitelistStatusOutputDto,
    WhitelistUserInputDto,
    WhitelistUserOutputDto,
)
from ballot_ledger.application.usecases.base import INTERNAL_ERROR_CODE, LedgerUseCase
from ballot_ledger.common.logging import get_logger
from ballot_ledger.domain.exceptions import BallotLedgerException


logger = get_logger(__name__)


class RegisterVoterUseCase(LedgerUseCase):
    """ホワイトリストへの自己登録と登録状況の参照.

    登録は選挙のホワイトリスト登録期間中のみ受け付ける。
    登録番号とアドレスの紐付けは一度きりで、後から変更できない。
    """

    async def whitelist_user(
        self, input_dto: WhitelistUserInputDto
    ) -> WhitelistUserOutputDto:
        """呼び出し元アドレスを登録番号で登録する."""
        try:
            async with self.uow_factory() as uow:
                ledger = self._components(uow).whitelist_ledger
                await ledger.register(
                    election_id=input_dto.election_id,
                    caller=input_dto.caller,
                    registration_number=input_dto.registration_number,
                    now=self.clock.now(),
                )
                voter_count = await ledger.total_registered_voters(
                    input_dto.election_id
                )
                await uow.commit()
            return WhitelistUserOutputDto(success=True, voter_count=voter_count)
        except BallotLedgerException as e:
            logger.warning(f"Whitelist registration rejected: {e.message}", code=e.code)
            return WhitelistUserOutputDto(
                success=False, error_code=e.code, error_message=e.message
            )
        except Exception as e:
            logger.error(f"Failed to whitelist user: {e}")
            return WhitelistUserOutputDto(
                success=False, error_code=INTERNAL_ERROR_CODE, error_message=str(e)
            )

    async def get_wallet_for_registration(
        self, election_id: int, registration_number: int
    ) -> WalletForRegistrationOutputDto:
        try:
            async with self.uow_factory() as uow:
                wallet = await self._components(uow).whitelist_ledger.wallet_for(
                    election_id, registration_number
                )
            return WalletForRegistrationOutputDto(
                election_id=election_id,
                registration_number=registration_number,
                wallet_address=wallet,
            )
        except Exception as e:
            logger.error(f"Failed to look up registration number: {e}")
            return WalletForRegistrationOutputDto(
                election_id=election_id,
                registration_number=registration_number,
                success=False,
                error_code=INTERNAL_ERROR_CODE,
                error_message=str(e),
            )

    async def get_total_registered_voters(
        self, election_id: int
    ) -> RegisteredVotersOutputDto:
        try:
            async with self.uow_factory() as uow:
                total = await self._components(
                    uow
                ).whitelist_ledger.total_registered_voters(election_id)
            return RegisteredVotersOutputDto(election_id=election_id, total=total)
        except Exception as e:
            logger.error(f"Failed to count registered voters: {e}")
            return RegisteredVotersOutputDto(
                election_id=election_id,
                success=False,
                error_code=INTERNAL_ERROR_CODE,
                error_message=str(e),
            )

    async def is_whitelisted(
        self, election_id: int, wallet_address: str
    ) -> WhitelistStatusOutputDto:
        try:
            async with self.uow_factory() as uow:
                eligible = await self._components(uow).whitelist_ledger.is_eligible(
                    election_id, wallet_address
                )
            return WhitelistStatusOutputDto(
                election_id=election_id,
                wallet_address=wallet_address,
                is_whitelisted=eligible,
            )
        except Exception as e:
            logger.error(f"Failed to check whitelist status: {e}")
            return WhitelistStatusOutputDto(
                election_id=election_id,
                wallet_address=wallet_address,
                success=False,
                error_code=INTERNAL_ERROR_CODE,
                error_message=str(e),
            )
