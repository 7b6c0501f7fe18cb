"""Domain value objects."""

from ballot_ledger.domain.value_objects.election_phase import (
    ElectionPhase,
    TimeWindow,
    derive_phase,
)
from ballot_ledger.domain.value_objects.reserve_policy import ReservePolicy


__all__ = [
    "ElectionPhase",
    "TimeWindow",
    "derive_phase",
    "ReservePolicy",
]
