"""Domain events (notifications).

コミットされた操作についてのみ発行される。
"""

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class DomainEvent:
    """ドメインイベントの基底クラス."""

    @property
    def event_name(self) -> str:
        return self.__class__.__name__

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ElectionCreatorAdded(DomainEvent):
    address: str


@dataclass(frozen=True)
class ElectionCreatorRemoved(DomainEvent):
    address: str


@dataclass(frozen=True)
class DepositMade(DomainEvent):
    election_id: int
    amount: int
    fee: int


@dataclass(frozen=True)
class ElectionCreated(DomainEvent):
    election_id: int
    name: str


@dataclass(frozen=True)
class Whitelisted(DomainEvent):
    election_id: int
    wallet_address: str


@dataclass(frozen=True)
class VoteCasted(DomainEvent):
    election_id: int
    voter_address: str
    candidate_id: int


@dataclass(frozen=True)
class CandidateAdded(DomainEvent):
    election_id: int
    candidate_id: int
    name: str
    image_url: str
