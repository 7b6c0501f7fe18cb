"""台帳操作ユースケースの共通基盤."""

from collections.abc import Callable

from ballot_ledger.application.services.ledger_components import (
    LedgerComponents,
    LedgerPolicy,
    build_ledger_components,
)
from ballot_ledger.domain.services.interfaces.clock import IClock
from ballot_ledger.domain.services.interfaces.unit_of_work import IUnitOfWork


INTERNAL_ERROR_CODE = "InternalError"


class LedgerUseCase:
    """Unit of Work とドメインサービスを用意するユースケースの基底クラス.

    各操作は1つの Unit of Work の中で実行し、成功時のみコミットする。
    時刻は Unit of Work に入った後（ロック取得後）に読むこと。
    """

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        clock: IClock,
        policy: LedgerPolicy,
    ) -> None:
        """ユースケースを初期化する.

        Args:
            uow_factory: Unit of Work を生成する呼び出し可能オブジェクト
            clock: 時刻オラクル
            policy: オーナー・準備金ポリシー等の設定
        """
        self.uow_factory = uow_factory
        self.clock = clock
        self.policy = policy

    def _components(self, uow: IUnitOfWork) -> LedgerComponents:
        return build_ledger_components(uow, self.policy)
