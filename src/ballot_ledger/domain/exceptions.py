"""Domain exceptions.

操作の事前条件違反はすべてこのモジュールの例外で表す。
例外が送出された操作はトランザクションごとロールバックされる。
"""

from typing import Any


class BallotLedgerException(Exception):
    """ドメイン例外の基底クラス.

    Attributes:
        code: 呼び出し側に返す安定したエラーコード
        message: 人が読むためのメッセージ
        details: 追加情報
    """

    code = "BallotLedgerError"

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class UnauthorizedError(BallotLedgerException):
    """呼び出し元が必要なロールを持たない."""

    code = "Unauthorized"


class NotWhitelistedError(UnauthorizedError):
    """呼び出し元がホワイトリストに登録されていない."""

    code = "NotWhitelisted"


class InvalidTimeWindowError(BallotLedgerException):
    """作成時の時間窓が start < end を満たさない."""

    code = "InvalidTimeWindow"


class InvalidPhaseError(BallotLedgerException):
    """必要な時間窓の外で操作された."""

    code = "InvalidPhase"


class VotingClosedError(InvalidPhaseError):
    """投票期間外の投票."""

    code = "VotingClosed"


class AlreadyWhitelistedError(BallotLedgerException):
    code = "AlreadyWhitelisted"


class RegistrationNumberTakenError(BallotLedgerException):
    code = "RegistrationNumberTaken"


class AlreadyVotedError(BallotLedgerException):
    code = "AlreadyVoted"


class InvalidCandidateError(BallotLedgerException):
    code = "InvalidCandidate"


class InsufficientReserveError(BallotLedgerException):
    """準備金残高が最低残高以下."""

    code = "InsufficientReserve"


class InvalidAmountError(BallotLedgerException):
    code = "InvalidAmount"


class ElectionNotFoundError(BallotLedgerException):
    code = "ElectionNotFound"


class AlreadyCreatorError(BallotLedgerException):
    code = "AlreadyCreator"


class UnknownCreatorError(BallotLedgerException):
    code = "UnknownCreator"
