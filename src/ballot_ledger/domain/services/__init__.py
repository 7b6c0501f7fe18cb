"""Domain services."""

from ballot_ledger.domain.services.access_registry import AccessRegistry
from ballot_ledger.domain.services.candidate_registry import CandidateRegistry
from ballot_ledger.domain.services.election_registry import ElectionRegistry
from ballot_ledger.domain.services.reserve_account import ReserveAccount
from ballot_ledger.domain.services.vote_ledger import VoteLedger
from ballot_ledger.domain.services.whitelist_ledger import WhitelistLedger


__all__ = [
    "AccessRegistry",
    "CandidateRegistry",
    "ElectionRegistry",
    "ReserveAccount",
    "VoteLedger",
    "WhitelistLedger",
]
