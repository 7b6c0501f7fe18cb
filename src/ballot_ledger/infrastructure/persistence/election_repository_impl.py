"""Election repository implementation using SQLAlchemy."""

from sqlalchemy.ext.asyncio import AsyncSession

from ballot_ledger.domain.entities.election import Election
from ballot_ledger.domain.repositories.election_repository import ElectionRepository
from ballot_ledger.domain.repositories.session_adapter import ISessionAdapter
from ballot_ledger.infrastructure.persistence.base_repository_impl import (
    BaseRepositoryImpl,
)
from ballot_ledger.infrastructure.persistence.sqlalchemy_models import ElectionModel


class ElectionRepositoryImpl(BaseRepositoryImpl[Election], ElectionRepository):
    """Election repository implementation using SQLAlchemy."""

    def __init__(self, session: AsyncSession | ISessionAdapter):
        super().__init__(
            session=session,
            entity_class=Election,
            model_class=ElectionModel,
        )

    async def get_for_update(self, election_id: int) -> Election | None:
        """Get an election row locked for the rest of the transaction.

        SQLiteでは行ロックが無視されるため、直列化は台帳ロックが担う。
        """
        return await self._load(election_id, lock=True)

    def _to_entity(self, model: ElectionModel) -> Election:
        """Convert database model to domain entity.

        Args:
            model: Database model

        Returns:
            Domain entity
        """
        return Election(
            id=model.id,
            name=model.name,
            whitelist_start=model.whitelist_start,
            whitelist_end=model.whitelist_end,
            voting_start=model.voting_start,
            voting_end=model.voting_end,
            candidate_count=model.candidate_count,
            voter_count=model.voter_count,
            is_active=model.is_active,
            created_by=model.created_by,
            created_at=model.created_at,
        )

    def _to_model(self, entity: Election) -> ElectionModel:
        """Convert domain entity to database model.

        Args:
            entity: Domain entity

        Returns:
            Database model
        """
        return ElectionModel(
            id=entity.id,
            name=entity.name,
            whitelist_start=entity.whitelist_start,
            whitelist_end=entity.whitelist_end,
            voting_start=entity.voting_start,
            voting_end=entity.voting_end,
            candidate_count=entity.candidate_count,
            voter_count=entity.voter_count,
            is_active=entity.is_active,
            created_by=entity.created_by,
            created_at=entity.created_at,
        )

    def _update_model(self, model: ElectionModel, entity: Election) -> None:
        """Update model from entity.

        時間窓は作成後に変更しないため、カウンタとフラグのみ更新する。

        Args:
            model: Database model to update
            entity: Source entity
        """
        model.name = entity.name
        model.candidate_count = entity.candidate_count
        model.voter_count = entity.voter_count
        model.is_active = entity.is_active
