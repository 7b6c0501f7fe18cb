"""Session adapter port.

リポジトリが必要とするセッション操作だけを公開する。トランザクションの
確定と破棄はUnit of Workの責務なので、ここには含めない。
"""

from abc import ABC, abstractmethod
from typing import Any


class ISessionAdapter(ABC):
    """リポジトリから見たデータベースセッション."""

    @abstractmethod
    async def execute(self, statement: Any, params: dict[str, Any] | None = None) -> Any:
        pass

    @abstractmethod
    def add(self, instance: Any) -> None:
        pass

    @abstractmethod
    async def flush(self) -> None:
        """保留中の変更をトランザクション内でDBへ送る."""
        pass

    @abstractmethod
    async def refresh(self, instance: Any) -> None:
        pass

    @abstractmethod
    async def get(
        self, entity_type: Any, entity_id: Any, *, with_for_update: bool = False
    ) -> Any | None:
        """主キーで1行取得する.

        with_for_update=Trueの場合、行ロックを取りトランザクション終了まで保持する。
        """
        pass
