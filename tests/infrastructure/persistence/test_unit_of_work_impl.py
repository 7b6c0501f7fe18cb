"""UnitOfWorkImplの統合テスト."""

import pytest

from ballot_ledger.domain.entities.election import Election
from ballot_ledger.domain.events import ElectionCreated
from ballot_ledger.infrastructure.concurrency.ledger_lock import LedgerLock
from ballot_ledger.infrastructure.external.logging_event_publisher import (
    InMemoryEventPublisher,
)
from ballot_ledger.infrastructure.persistence.unit_of_work_impl import (
    UnitOfWorkFactory,
)


@pytest.mark.integration
class TestUnitOfWorkImpl:
    @pytest.mark.asyncio
    async def test_commit_persists_and_publishes(
        self, uow_factory: UnitOfWorkFactory, event_publisher: InMemoryEventPublisher
    ) -> None:
        async with uow_factory() as uow:
            created = await uow.election_repository.create(
                Election("生徒会", 0, 100, 100, 200)
            )
            uow.publish(ElectionCreated(election_id=created.id or 0, name="生徒会"))
            assert event_publisher.events == []
            await uow.commit()

        assert event_publisher.events == [
            ElectionCreated(election_id=1, name="生徒会")
        ]
        async with uow_factory() as uow:
            assert await uow.election_repository.count() == 1

    @pytest.mark.asyncio
    async def test_exit_without_commit_rolls_back(
        self, uow_factory: UnitOfWorkFactory, event_publisher: InMemoryEventPublisher
    ) -> None:
        async with uow_factory() as uow:
            await uow.election_repository.create(
                Election("生徒会", 0, 100, 100, 200)
            )
            uow.publish(ElectionCreated(election_id=1, name="生徒会"))

        assert event_publisher.events == []
        async with uow_factory() as uow:
            assert await uow.election_repository.count() == 0

    @pytest.mark.asyncio
    async def test_exception_rolls_back_and_releases_lock(
        self, uow_factory: UnitOfWorkFactory
    ) -> None:
        with pytest.raises(RuntimeError):
            async with uow_factory() as uow:
                await uow.reserve_repository.set_balance(1, 500)
                raise RuntimeError("abort")

        assert uow_factory.lock.locked() is False
        async with uow_factory() as uow:
            assert await uow.reserve_repository.get_balance(1) == 0

    @pytest.mark.asyncio
    async def test_publisher_failure_does_not_undo_commit(self, database) -> None:
        class FailingPublisher:
            def publish(self, event) -> None:
                raise RuntimeError("sink down")

        factory = UnitOfWorkFactory(database, LedgerLock(), FailingPublisher())
        async with factory() as uow:
            await uow.reserve_repository.set_balance(1, 500)
            uow.publish(ElectionCreated(election_id=1, name="x"))
            await uow.commit()

        async with factory() as uow:
            assert await uow.reserve_repository.get_balance(1) == 500
