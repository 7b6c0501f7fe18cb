"""Unit of Work からドメインサービス一式を組み立てる."""

from dataclasses import dataclass

from ballot_ledger.domain.services.access_registry import AccessRegistry
from ballot_ledger.domain.services.candidate_registry import CandidateRegistry
from ballot_ledger.domain.services.election_registry import ElectionRegistry
from ballot_ledger.domain.services.interfaces.unit_of_work import IUnitOfWork
from ballot_ledger.domain.services.reserve_account import ReserveAccount
from ballot_ledger.domain.services.vote_ledger import VoteLedger
from ballot_ledger.domain.services.whitelist_ledger import WhitelistLedger
from ballot_ledger.domain.value_objects.reserve_policy import ReservePolicy


@dataclass(frozen=True)
class LedgerPolicy:
    """ドメインサービスの組み立てに必要な設定値."""

    owner_address: str
    reserve_policy: ReservePolicy
    open_creator_management: bool = False


@dataclass(frozen=True)
class LedgerComponents:
    """1つの Unit of Work に束縛されたドメインサービス群."""

    access_registry: AccessRegistry
    reserve_account: ReserveAccount
    candidate_registry: CandidateRegistry
    whitelist_ledger: WhitelistLedger
    vote_ledger: VoteLedger
    election_registry: ElectionRegistry


def build_ledger_components(uow: IUnitOfWork, policy: LedgerPolicy) -> LedgerComponents:
    """Unit of Work のリポジトリとイベントバッファでサービスを組み立てる."""
    access_registry = AccessRegistry(
        owner_address=policy.owner_address,
        creator_repository=uow.election_creator_repository,
        events=uow,
        open_creator_management=policy.open_creator_management,
    )
    reserve_account = ReserveAccount(
        reserve_repository=uow.reserve_repository,
        access_registry=access_registry,
        policy=policy.reserve_policy,
        events=uow,
    )
    candidate_registry = CandidateRegistry(
        candidate_repository=uow.candidate_repository,
        election_repository=uow.election_repository,
        access_registry=access_registry,
        events=uow,
    )
    whitelist_ledger = WhitelistLedger(
        whitelist_repository=uow.whitelist_repository,
        election_repository=uow.election_repository,
        events=uow,
    )
    vote_ledger = VoteLedger(uow.vote_record_repository)
    election_registry = ElectionRegistry(
        election_repository=uow.election_repository,
        access_registry=access_registry,
        reserve_account=reserve_account,
        candidate_registry=candidate_registry,
        whitelist_ledger=whitelist_ledger,
        vote_ledger=vote_ledger,
        events=uow,
    )
    return LedgerComponents(
        access_registry=access_registry,
        reserve_account=reserve_account,
        candidate_registry=candidate_registry,
        whitelist_ledger=whitelist_ledger,
        vote_ledger=vote_ledger,
        election_registry=election_registry,
    )
