"""ホワイトリスト登録に関するDTO."""

from dataclasses import dataclass


@dataclass
class WhitelistUserInputDto:
    """ホワイトリスト自己登録の入力DTO."""

    caller: str
    election_id: int
    registration_number: int


@dataclass
class WhitelistUserOutputDto:
    """ホワイトリスト自己登録の出力DTO."""

    success: bool
    voter_count: int | None = None
    error_code: str | None = None
    error_message: str | None = None


@dataclass
class WalletForRegistrationOutputDto:
    """登録番号に紐付くアドレスの出力DTO. 未使用ならwallet_addressはNone."""

    election_id: int
    registration_number: int
    wallet_address: str | None = None
    success: bool = True
    error_code: str | None = None
    error_message: str | None = None


@dataclass
class RegisteredVotersOutputDto:
    """登録済み有権者数の出力DTO."""

    election_id: int
    total: int = 0
    success: bool = True
    error_code: str | None = None
    error_message: str | None = None


@dataclass
class WhitelistStatusOutputDto:
    """アドレスの登録状況の出力DTO."""

    election_id: int
    wallet_address: str
    is_whitelisted: bool = False
    success: bool = True
    error_code: str | None = None
    error_message: str | None = None
