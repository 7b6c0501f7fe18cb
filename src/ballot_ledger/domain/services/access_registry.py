"""アクセス制御ドメインサービス."""

from ballot_ledger.domain.entities.election_creator import ElectionCreator
from ballot_ledger.domain.events import ElectionCreatorAdded, ElectionCreatorRemoved
from ballot_ledger.domain.exceptions import (
    AlreadyCreatorError,
    UnauthorizedError,
    UnknownCreatorError,
)
from ballot_ledger.domain.repositories.election_creator_repository import (
    ElectionCreatorRepository,
)
from ballot_ledger.domain.services.interfaces.event_publisher import IEventPublisher


class AccessRegistry:
    """プラットフォームオーナーと選挙作成者の権限を管理する.

    オーナーはシステム初期化時に1つだけ決まり、以後変わらない。
    作成者は有効フラグの付いたアドレスの集合として保持する。
    """

    def __init__(
        self,
        owner_address: str,
        creator_repository: ElectionCreatorRepository,
        events: IEventPublisher,
        open_creator_management: bool = False,
    ) -> None:
        """サービスを初期化する.

        Args:
            owner_address: プラットフォームオーナーのアドレス
            creator_repository: 作成者リポジトリ
            events: イベント発行先
            open_creator_management: Trueの場合、作成者の追加・削除を
                誰でも実行できる（オーナー制限なし）
        """
        self.owner_address = owner_address
        self.creator_repository = creator_repository
        self.events = events
        self.open_creator_management = open_creator_management

    def is_owner(self, address: str) -> bool:
        return bool(self.owner_address) and address == self.owner_address

    async def is_creator(self, address: str) -> bool:
        creator = await self.creator_repository.get_by_address(address)
        return creator is not None and creator.is_active

    def require_owner(self, address: str) -> None:
        """オーナーでなければ UnauthorizedError."""
        if not self.is_owner(address):
            raise UnauthorizedError(
                "Caller is not the platform owner", {"caller": address}
            )

    async def require_creator(self, address: str) -> None:
        """承認済み作成者でなければ UnauthorizedError."""
        if not await self.is_creator(address):
            raise UnauthorizedError(
                "Caller is not an approved election creator", {"caller": address}
            )

    async def list_creators(self) -> list[str]:
        creators = await self.creator_repository.get_active()
        return [c.address for c in creators]

    async def add_creator(self, caller: str, address: str, now: int) -> None:
        """作成者を追加する."""
        self._require_creator_manager(caller)

        existing = await self.creator_repository.get_by_address(address)
        if existing is not None and existing.is_active:
            raise AlreadyCreatorError(
                "Address is already an election creator", {"address": address}
            )

        await self.creator_repository.save(
            ElectionCreator(address=address, is_active=True, updated_at=now)
        )
        self.events.publish(ElectionCreatorAdded(address=address))

    async def remove_creator(self, caller: str, address: str, now: int) -> None:
        """作成者を削除する（無効化）."""
        self._require_creator_manager(caller)

        existing = await self.creator_repository.get_by_address(address)
        if existing is None or not existing.is_active:
            raise UnknownCreatorError(
                "Address is not an election creator", {"address": address}
            )

        existing.is_active = False
        existing.updated_at = now
        await self.creator_repository.save(existing)
        self.events.publish(ElectionCreatorRemoved(address=address))

    def _require_creator_manager(self, caller: str) -> None:
        if not self.open_creator_management:
            self.require_owner(caller)
