"""ホワイトリスト管理ドメインサービス."""

from ballot_ledger.domain.entities.whitelist_entry import WhitelistEntry
from ballot_ledger.domain.events import Whitelisted
from ballot_ledger.domain.exceptions import (
    AlreadyWhitelistedError,
    ElectionNotFoundError,
    InvalidPhaseError,
    RegistrationNumberTakenError,
)
from ballot_ledger.domain.repositories.election_repository import ElectionRepository
from ballot_ledger.domain.repositories.whitelist_repository import WhitelistRepository
from ballot_ledger.domain.services.interfaces.event_publisher import IEventPublisher


class WhitelistLedger:
    """登録番号とアドレスの紐付けと投票資格を管理する.

    1つの登録番号は1つのアドレスにのみ、1つのアドレスは選挙ごとに
    1度だけ紐付けられる。紐付けは恒久的で解除できない。
    """

    def __init__(
        self,
        whitelist_repository: WhitelistRepository,
        election_repository: ElectionRepository,
        events: IEventPublisher,
    ) -> None:
        self.whitelist_repository = whitelist_repository
        self.election_repository = election_repository
        self.events = events

    async def register(
        self, election_id: int, caller: str, registration_number: int, now: int
    ) -> WhitelistEntry:
        """呼び出し元アドレスを登録番号で自己登録する.

        Raises:
            ElectionNotFoundError: 選挙が存在しない
            InvalidPhaseError: ホワイトリスト登録期間外
            AlreadyWhitelistedError: 呼び出し元が登録済み
            RegistrationNumberTakenError: 登録番号が使用済み
        """
        election = await self.election_repository.get_for_update(election_id)
        if election is None:
            raise ElectionNotFoundError(
                "Election does not exist", {"election_id": election_id}
            )

        if not election.is_whitelisting_at(now):
            raise InvalidPhaseError(
                "Whitelist registration is not open",
                {
                    "election_id": election_id,
                    "now": now,
                    "whitelist_start": election.whitelist_start,
                    "whitelist_end": election.whitelist_end,
                },
            )

        if await self.is_eligible(election_id, caller):
            raise AlreadyWhitelistedError(
                "Address is already whitelisted",
                {"election_id": election_id, "wallet_address": caller},
            )

        if await self.wallet_for(election_id, registration_number) is not None:
            raise RegistrationNumberTakenError(
                "Registration number is already bound to another address",
                {
                    "election_id": election_id,
                    "registration_number": registration_number,
                },
            )

        entry = await self.whitelist_repository.create(
            WhitelistEntry(
                election_id=election_id,
                registration_number=registration_number,
                wallet_address=caller,
                registered_at=now,
            )
        )
        election.voter_count += 1
        await self.election_repository.update(election)

        self.events.publish(Whitelisted(election_id=election_id, wallet_address=caller))
        return entry

    async def is_eligible(self, election_id: int, wallet_address: str) -> bool:
        entry = await self.whitelist_repository.get_by_wallet(election_id, wallet_address)
        return entry is not None

    async def wallet_for(self, election_id: int, registration_number: int) -> str | None:
        """登録番号に紐付いたアドレス. 未使用ならNone."""
        entry = await self.whitelist_repository.get_by_registration_number(
            election_id, registration_number
        )
        return entry.wallet_address if entry else None

    async def total_registered_voters(self, election_id: int) -> int:
        election = await self.election_repository.get_by_id(election_id)
        return election.voter_count if election else 0
