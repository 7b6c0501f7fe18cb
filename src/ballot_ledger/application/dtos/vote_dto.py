"""投票に関するDTO."""

from dataclasses import dataclass


@dataclass
class CastVoteInputDto:
    """投票の入力DTO."""

    caller: str
    election_id: int
    candidate_id: int


@dataclass
class CastVoteOutputDto:
    """投票の出力DTO."""

    success: bool
    remaining_reserve: int | None = None
    error_code: str | None = None
    error_message: str | None = None


@dataclass
class VoteStatusOutputDto:
    """投票済みかどうかの出力DTO."""

    election_id: int
    voter_address: str
    has_voted: bool = False
    success: bool = True
    error_code: str | None = None
    error_message: str | None = None
