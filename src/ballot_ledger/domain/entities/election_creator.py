"""ElectionCreator entity."""

from dataclasses import dataclass


@dataclass
class ElectionCreator:
    """選挙作成権限を持つアドレス.

    削除はせず is_active を切り替える。
    """

    address: str
    is_active: bool = True
    updated_at: int | None = None
