"""Domain entities."""

from ballot_ledger.domain.entities.base import BaseEntity
from ballot_ledger.domain.entities.candidate import Candidate
from ballot_ledger.domain.entities.deposit import Deposit
from ballot_ledger.domain.entities.election import Election
from ballot_ledger.domain.entities.election_creator import ElectionCreator
from ballot_ledger.domain.entities.vote_record import VoteRecord
from ballot_ledger.domain.entities.whitelist_entry import WhitelistEntry


__all__ = [
    "BaseEntity",
    "Candidate",
    "Deposit",
    "Election",
    "ElectionCreator",
    "VoteRecord",
    "WhitelistEntry",
]
