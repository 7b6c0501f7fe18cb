"""Election creator repository implementation using SQLAlchemy."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ballot_ledger.domain.entities.election_creator import ElectionCreator
from ballot_ledger.domain.repositories.election_creator_repository import (
    ElectionCreatorRepository,
)
from ballot_ledger.domain.repositories.session_adapter import ISessionAdapter
from ballot_ledger.infrastructure.persistence.sqlalchemy_models import (
    ElectionCreatorModel,
)


class ElectionCreatorRepositoryImpl(ElectionCreatorRepository):
    """Election creator repository implementation using SQLAlchemy."""

    def __init__(self, session: AsyncSession | ISessionAdapter):
        self.session = session

    async def get_by_address(self, address: str) -> ElectionCreator | None:
        model = await self.session.get(ElectionCreatorModel, address)
        return self._to_entity(model) if model else None

    async def get_active(self) -> list[ElectionCreator]:
        query = (
            select(ElectionCreatorModel)
            .where(ElectionCreatorModel.is_active.is_(True))
            .order_by(ElectionCreatorModel.address)
        )
        result = await self.session.execute(query)
        return [self._to_entity(m) for m in result.scalars().all()]

    async def save(self, creator: ElectionCreator) -> ElectionCreator:
        model = await self.session.get(ElectionCreatorModel, creator.address)
        if model is None:
            model = ElectionCreatorModel(address=creator.address)
            self.session.add(model)
        model.is_active = creator.is_active
        model.updated_at = creator.updated_at
        await self.session.flush()
        return self._to_entity(model)

    def _to_entity(self, model: ElectionCreatorModel) -> ElectionCreator:
        return ElectionCreator(
            address=model.address,
            is_active=model.is_active,
            updated_at=model.updated_at,
        )
