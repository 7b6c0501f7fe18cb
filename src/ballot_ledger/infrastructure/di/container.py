"""Dependency injection container for the ballot ledger.

Services are grouped the way the CLI consumes them: ``container.services``
for infrastructure singletons and ``container.use_cases`` for the
application layer.
"""

from dependency_injector import containers, providers

from ballot_ledger.application.services.ledger_components import LedgerPolicy
from ballot_ledger.application.usecases.cast_vote_usecase import CastVoteUseCase
from ballot_ledger.application.usecases.manage_candidates_usecase import (
    ManageCandidatesUseCase,
)
from ballot_ledger.application.usecases.manage_election_creators_usecase import (
    ManageElectionCreatorsUseCase,
)
from ballot_ledger.application.usecases.manage_election_reserve_usecase import (
    ManageElectionReserveUseCase,
)
from ballot_ledger.application.usecases.manage_elections_usecase import (
    ManageElectionsUseCase,
)
from ballot_ledger.application.usecases.register_voter_usecase import (
    RegisterVoterUseCase,
)
from ballot_ledger.infrastructure.concurrency.ledger_lock import LedgerLock
from ballot_ledger.infrastructure.config.async_database import AsyncDatabase
from ballot_ledger.infrastructure.config.settings import Settings, get_settings
from ballot_ledger.infrastructure.external.logging_event_publisher import (
    LoggingEventPublisher,
)
from ballot_ledger.infrastructure.external.system_clock import SystemClock
from ballot_ledger.infrastructure.persistence.unit_of_work_impl import (
    UnitOfWorkFactory,
)


def _build_policy(settings: Settings) -> LedgerPolicy:
    return LedgerPolicy(
        owner_address=settings.platform_owner_address,
        reserve_policy=settings.get_reserve_policy(),
        open_creator_management=settings.open_creator_management,
    )


class ServiceContainer(containers.DeclarativeContainer):
    """Infrastructure singletons."""

    settings = providers.Dependency(instance_of=Settings)

    database = providers.Singleton(AsyncDatabase, settings=settings)
    ledger_lock = providers.Singleton(LedgerLock)
    clock = providers.Singleton(SystemClock)
    event_publisher = providers.Singleton(LoggingEventPublisher)

    uow_factory = providers.Singleton(
        UnitOfWorkFactory,
        database=database,
        lock=ledger_lock,
        event_publisher=event_publisher,
    )
    policy = providers.Singleton(_build_policy, settings=settings)


class UseCaseContainer(containers.DeclarativeContainer):
    """Application use cases."""

    services = providers.DependenciesContainer()

    manage_election_creators_usecase = providers.Factory(
        ManageElectionCreatorsUseCase,
        uow_factory=services.uow_factory,
        clock=services.clock,
        policy=services.policy,
    )
    manage_election_reserve_usecase = providers.Factory(
        ManageElectionReserveUseCase,
        uow_factory=services.uow_factory,
        clock=services.clock,
        policy=services.policy,
    )
    manage_elections_usecase = providers.Factory(
        ManageElectionsUseCase,
        uow_factory=services.uow_factory,
        clock=services.clock,
        policy=services.policy,
    )
    manage_candidates_usecase = providers.Factory(
        ManageCandidatesUseCase,
        uow_factory=services.uow_factory,
        clock=services.clock,
        policy=services.policy,
    )
    register_voter_usecase = providers.Factory(
        RegisterVoterUseCase,
        uow_factory=services.uow_factory,
        clock=services.clock,
        policy=services.policy,
    )
    cast_vote_usecase = providers.Factory(
        CastVoteUseCase,
        uow_factory=services.uow_factory,
        clock=services.clock,
        policy=services.policy,
    )


class ApplicationContainer(containers.DeclarativeContainer):
    """Root container."""

    settings = providers.Dependency(instance_of=Settings)

    services = providers.Container(ServiceContainer, settings=settings)
    use_cases = providers.Container(UseCaseContainer, services=services)


_container: ApplicationContainer | None = None


def init_container(settings: Settings | None = None) -> ApplicationContainer:
    """Create the global container.

    Args:
        settings: Settings to wire in. Loaded from the environment if omitted.
    """
    global _container
    _container = ApplicationContainer(settings=settings or get_settings())
    return _container


def get_container() -> ApplicationContainer:
    """Return the global container.

    Raises:
        RuntimeError: init_container() has not been called
    """
    if _container is None:
        raise RuntimeError("Container not initialized. Call init_container() first.")
    return _container


def reset_container() -> None:
    global _container
    _container = None
