"""Electionエンティティのテスト."""

from ballot_ledger.domain.entities.election import Election
from ballot_ledger.domain.value_objects.election_phase import ElectionPhase


def _make_election(**overrides) -> Election:
    values = {
        "name": "生徒会選挙",
        "whitelist_start": 0,
        "whitelist_end": 100,
        "voting_start": 100,
        "voting_end": 200,
    }
    values.update(overrides)
    return Election(**values)


class TestElection:
    def test_defaults(self) -> None:
        election = _make_election()
        assert election.candidate_count == 0
        assert election.voter_count == 0
        assert election.is_active is True

    def test_has_valid_windows(self) -> None:
        assert _make_election().has_valid_windows()
        assert not _make_election(whitelist_end=0).has_valid_windows()
        assert not _make_election(voting_start=300).has_valid_windows()

    def test_voting_window_includes_end(self) -> None:
        election = _make_election()
        assert election.is_voting_at(200)
        assert not election.is_voting_at(201)

    def test_phase_at(self) -> None:
        election = _make_election(whitelist_start=10)
        assert election.phase_at(5) is ElectionPhase.PRE_WHITELIST
        assert election.phase_at(50) is ElectionPhase.WHITELISTING
        assert election.phase_at(150) is ElectionPhase.VOTING
        assert election.phase_at(500) is ElectionPhase.CLOSED

    def test_candidate_ids_are_one_based(self) -> None:
        election = _make_election(candidate_count=3)
        assert not election.is_valid_candidate_id(0)
        assert election.is_valid_candidate_id(1)
        assert election.is_valid_candidate_id(3)
        assert not election.is_valid_candidate_id(4)
        assert election.next_candidate_id() == 4

    def test_str(self) -> None:
        assert str(_make_election(id=7)) == "生徒会選挙 (#7)"
