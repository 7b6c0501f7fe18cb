"""ドメインイベント発行のインターフェース."""

from typing import Protocol

from ballot_ledger.domain.events import DomainEvent


class IEventPublisher(Protocol):
    """ドメインイベントを外部へ通知するインターフェース."""

    def publish(self, event: DomainEvent) -> None:
        """イベントを発行する."""
        ...
