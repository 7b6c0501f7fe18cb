"""選挙作成者の管理に関するDTO."""

from dataclasses import dataclass, field


@dataclass
class ManageCreatorInputDto:
    """作成者の追加・削除の入力DTO."""

    caller: str
    address: str


@dataclass
class ManageCreatorOutputDto:
    """作成者の追加・削除の出力DTO."""

    success: bool
    error_code: str | None = None
    error_message: str | None = None


@dataclass
class ListCreatorsOutputDto:
    """作成者一覧の出力DTO."""

    creators: list[str] = field(default_factory=list)
    success: bool = True
    error_code: str | None = None
    error_message: str | None = None
