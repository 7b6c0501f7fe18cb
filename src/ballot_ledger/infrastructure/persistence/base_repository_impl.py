"""Shared plumbing for repositories whose rows carry an integer ``id``."""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any, TypeVar

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ballot_ledger.common.logging import get_logger
from ballot_ledger.domain.entities.base import BaseEntity
from ballot_ledger.domain.repositories.base import BaseRepository
from ballot_ledger.domain.repositories.session_adapter import ISessionAdapter
from ballot_ledger.infrastructure.exceptions import DatabaseError


logger = get_logger(__name__)

T = TypeVar("T", bound=BaseEntity)


class BaseRepositoryImpl(BaseRepository[T]):
    """Generic id-keyed repository on top of ISessionAdapter.

    Every SQLAlchemy failure surfaces as DatabaseError so callers above the
    persistence layer never see driver exceptions. Writes are flushed but
    never committed; the Unit of Work decides that.

    Subclasses provide _to_entity(), _to_model() and _update_model().
    """

    def __init__(
        self,
        session: AsyncSession | ISessionAdapter,
        entity_class: type[T],
        model_class: type[Any],
    ):
        self.session = session
        self.entity_class = entity_class
        self.model_class = model_class

    @property
    def _label(self) -> str:
        return self.entity_class.__name__.lower()

    @contextmanager
    def _translate_errors(self, action: str, **details: Any) -> Iterator[None]:
        try:
            yield
        except SQLAlchemyError as e:
            logger.error(f"Database error on {action} {self._label}: {e}")
            raise DatabaseError(
                f"Failed to {action} {self._label}", {**details, "error": str(e)}
            ) from e

    async def _load(self, entity_id: int, *, lock: bool) -> T | None:
        with self._translate_errors("get", id=entity_id):
            model = await self.session.get(
                self.model_class, entity_id, with_for_update=lock
            )
        return self._to_entity(model) if model else None

    async def get_by_id(self, entity_id: int) -> T | None:
        return await self._load(entity_id, lock=False)

    async def get_all(
        self, limit: int | None = None, offset: int | None = None
    ) -> list[T]:
        """Entities in id order, optionally paged."""
        query = select(self.model_class).order_by(self.model_class.id)
        if offset:
            query = query.offset(offset)
        if limit:
            query = query.limit(limit)

        with self._translate_errors("list", limit=limit, offset=offset):
            result = await self.session.execute(query)
            models = result.scalars().all()
        return [self._to_entity(model) for model in models]

    async def create(self, entity: T) -> T:
        model = self._to_model(entity)
        with self._translate_errors("create", entity=str(entity)):
            self.session.add(model)
            await self.session.flush()
            await self.session.refresh(model)
        return self._to_entity(model)

    async def update(self, entity: T) -> T:
        if not entity.id:
            raise ValueError("Entity must have an ID to update")

        with self._translate_errors("update", entity=str(entity)):
            model = await self.session.get(self.model_class, entity.id)
            if not model:
                raise DatabaseError(
                    f"{self.entity_class.__name__} {entity.id} not found",
                    {"id": entity.id},
                )
            self._update_model(model, entity)
            await self.session.flush()
            await self.session.refresh(model)
        return self._to_entity(model)

    async def count(self) -> int:
        query = select(func.count()).select_from(self.model_class)
        with self._translate_errors("count"):
            result = await self.session.execute(query)
            count = result.scalar()
        return count if count is not None else 0

    def _to_entity(self, model: Any) -> T:
        raise NotImplementedError("Subclass must implement _to_entity")

    def _to_model(self, entity: T) -> Any:
        raise NotImplementedError("Subclass must implement _to_model")

    def _update_model(self, model: Any, entity: T) -> None:
        raise NotImplementedError("Subclass must implement _update_model")
