"""選挙フェーズの Value Object.

フェーズは保存されず、常に現在時刻と時間窓から導出される。
"""

from dataclasses import dataclass
from enum import Enum


class ElectionPhase(Enum):
    """選挙のフェーズ."""

    PRE_WHITELIST = "pre_whitelist"
    WHITELISTING = "whitelisting"
    INTERIM = "interim"
    VOTING = "voting"
    CLOSED = "closed"


@dataclass(frozen=True)
class TimeWindow:
    """UNIX秒で表す時間窓.

    境界は両端とも含む（start <= t <= end）。
    """

    start: int
    end: int

    def is_valid(self) -> bool:
        """start < end であるか."""
        return self.start < self.end

    def contains(self, timestamp: int) -> bool:
        """時刻が窓の内側にあるか."""
        return self.start <= timestamp <= self.end


def derive_phase(
    now: int, whitelist_window: TimeWindow, voting_window: TimeWindow
) -> ElectionPhase:
    """現在時刻と時間窓からフェーズを導出する.

    ホワイトリスト窓と投票窓が重なる時刻では投票フェーズを優先する。

    Args:
        now: 現在時刻（UNIX秒）
        whitelist_window: ホワイトリスト登録期間
        voting_window: 投票期間

    Returns:
        導出されたフェーズ
    """
    if voting_window.contains(now):
        return ElectionPhase.VOTING
    if whitelist_window.contains(now):
        return ElectionPhase.WHITELISTING
    # 窓の順序は問わない
    if now < min(whitelist_window.start, voting_window.start):
        return ElectionPhase.PRE_WHITELIST
    if now > max(whitelist_window.end, voting_window.end):
        return ElectionPhase.CLOSED
    return ElectionPhase.INTERIM
