"""ドメインイベントのテスト."""

import dataclasses

import pytest

from ballot_ledger.domain.events import (
    CandidateAdded,
    DepositMade,
    DomainEvent,
    ElectionCreated,
    ElectionCreatorAdded,
    ElectionCreatorRemoved,
    VoteCasted,
    Whitelisted,
)


@pytest.mark.parametrize(
    ("event", "expected"),
    [
        (ElectionCreatorAdded(address="0xc"), {"address": "0xc"}),
        (ElectionCreatorRemoved(address="0xc"), {"address": "0xc"}),
        (
            DepositMade(election_id=1, amount=100, fee=5),
            {"election_id": 1, "amount": 100, "fee": 5},
        ),
        (
            ElectionCreated(election_id=1, name="生徒会"),
            {"election_id": 1, "name": "生徒会"},
        ),
        (
            Whitelisted(election_id=1, wallet_address="0xv"),
            {"election_id": 1, "wallet_address": "0xv"},
        ),
        (
            VoteCasted(election_id=1, voter_address="0xv", candidate_id=2),
            {"election_id": 1, "voter_address": "0xv", "candidate_id": 2},
        ),
        (
            CandidateAdded(
                election_id=1, candidate_id=2, name="山田", image_url="http://img"
            ),
            {
                "election_id": 1,
                "candidate_id": 2,
                "name": "山田",
                "image_url": "http://img",
            },
        ),
    ],
)
def test_event_fields_and_dict(event: DomainEvent, expected: dict) -> None:
    assert event.to_dict() == expected
    assert event.event_name == type(event).__name__


def test_event_field_called_name_is_plain_data() -> None:
    """nameフィールドを持つイベントでもイベント種別名とは衝突しない."""
    event = ElectionCreated(election_id=7, name="委員長選挙")

    assert event.name == "委員長選挙"
    assert event.event_name == "ElectionCreated"


def test_events_are_immutable() -> None:
    event = Whitelisted(election_id=1, wallet_address="0xv")

    with pytest.raises(dataclasses.FrozenInstanceError):
        event.wallet_address = "0xother"  # type: ignore[misc]
