"""Election entity."""

from ballot_ledger.domain.entities.base import BaseEntity
from ballot_ledger.domain.value_objects.election_phase import (
    ElectionPhase,
    TimeWindow,
    derive_phase,
)


class Election(BaseEntity):
    """選挙を表すエンティティ.

    ホワイトリスト登録期間と投票期間の2つの時間窓を持つ。
    フェーズは保存せず、時刻から都度導出する。
    """

    def __init__(
        self,
        name: str,
        whitelist_start: int,
        whitelist_end: int,
        voting_start: int,
        voting_end: int,
        candidate_count: int = 0,
        voter_count: int = 0,
        is_active: bool = True,
        created_by: str | None = None,
        created_at: int | None = None,
        id: int | None = None,
    ) -> None:
        """選挙エンティティを初期化する.

        Args:
            name: 選挙名
            whitelist_start: ホワイトリスト登録開始時刻（UNIX秒）
            whitelist_end: ホワイトリスト登録終了時刻（UNIX秒）
            voting_start: 投票開始時刻（UNIX秒）
            voting_end: 投票終了時刻（UNIX秒）
            candidate_count: 登録済み候補者数
            voter_count: ホワイトリスト登録済み有権者数
            is_active: 有効フラグ（作成時にTrue、現状クリアする操作はない）
            created_by: 作成者アドレス
            created_at: 作成時刻（UNIX秒）
            id: 選挙ID
        """
        super().__init__(id)
        self.name = name
        self.whitelist_start = whitelist_start
        self.whitelist_end = whitelist_end
        self.voting_start = voting_start
        self.voting_end = voting_end
        self.candidate_count = candidate_count
        self.voter_count = voter_count
        self.is_active = is_active
        self.created_by = created_by
        self.created_at = created_at

    @property
    def whitelist_window(self) -> TimeWindow:
        """ホワイトリスト登録期間."""
        return TimeWindow(self.whitelist_start, self.whitelist_end)

    @property
    def voting_window(self) -> TimeWindow:
        """投票期間."""
        return TimeWindow(self.voting_start, self.voting_end)

    def has_valid_windows(self) -> bool:
        """両方の時間窓が start < end を満たすか."""
        return self.whitelist_window.is_valid() and self.voting_window.is_valid()

    def is_whitelisting_at(self, now: int) -> bool:
        return self.whitelist_window.contains(now)

    def is_voting_at(self, now: int) -> bool:
        return self.voting_window.contains(now)

    def phase_at(self, now: int) -> ElectionPhase:
        """指定時刻のフェーズを返す."""
        return derive_phase(now, self.whitelist_window, self.voting_window)

    def is_valid_candidate_id(self, candidate_id: int) -> bool:
        """候補者IDが 1..candidate_count の範囲にあるか."""
        return 1 <= candidate_id <= self.candidate_count

    def next_candidate_id(self) -> int:
        return self.candidate_count + 1

    def __str__(self) -> str:
        """文字列表現を返す."""
        return f"{self.name} (#{self.id})"
