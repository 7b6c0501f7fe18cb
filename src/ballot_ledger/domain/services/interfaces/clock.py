"""時刻オラクルのインターフェース."""

from typing import Protocol


class IClock(Protocol):
    """信頼できる現在時刻を返すインターフェース."""

    def now(self) -> int:
        """現在時刻（UNIX秒）を返す."""
        ...
