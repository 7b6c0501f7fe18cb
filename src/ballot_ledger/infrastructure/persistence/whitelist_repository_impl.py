"""Whitelist repository implementation using SQLAlchemy."""

import logging

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ballot_ledger.domain.entities.whitelist_entry import WhitelistEntry
from ballot_ledger.domain.repositories.session_adapter import ISessionAdapter
from ballot_ledger.domain.repositories.whitelist_repository import WhitelistRepository
from ballot_ledger.infrastructure.exceptions import DatabaseError
from ballot_ledger.infrastructure.persistence.sqlalchemy_models import (
    WhitelistEntryModel,
)


logger = logging.getLogger(__name__)


class WhitelistRepositoryImpl(WhitelistRepository):
    """Whitelist repository implementation using SQLAlchemy."""

    def __init__(self, session: AsyncSession | ISessionAdapter):
        self.session = session

    async def get_by_wallet(
        self, election_id: int, wallet_address: str
    ) -> WhitelistEntry | None:
        model = await self.session.get(
            WhitelistEntryModel, (election_id, wallet_address)
        )
        return self._to_entity(model) if model else None

    async def get_by_registration_number(
        self, election_id: int, registration_number: int
    ) -> WhitelistEntry | None:
        query = select(WhitelistEntryModel).where(
            WhitelistEntryModel.election_id == election_id,
            WhitelistEntryModel.registration_number == registration_number,
        )
        result = await self.session.execute(query)
        model = result.scalars().first()
        return self._to_entity(model) if model else None

    async def create(self, entry: WhitelistEntry) -> WhitelistEntry:
        try:
            model = WhitelistEntryModel(
                election_id=entry.election_id,
                wallet_address=entry.wallet_address,
                registration_number=entry.registration_number,
                registered_at=entry.registered_at,
            )
            self.session.add(model)
            await self.session.flush()
            return self._to_entity(model)
        except SQLAlchemyError as e:
            logger.error(f"Database error creating whitelist entry: {e}")
            raise DatabaseError(
                "Failed to create whitelist entry",
                {
                    "election_id": entry.election_id,
                    "registration_number": entry.registration_number,
                    "error": str(e),
                },
            ) from e

    async def count_by_election(self, election_id: int) -> int:
        query = (
            select(func.count())
            .select_from(WhitelistEntryModel)
            .where(WhitelistEntryModel.election_id == election_id)
        )
        result = await self.session.execute(query)
        count = result.scalar()
        return count if count is not None else 0

    def _to_entity(self, model: WhitelistEntryModel) -> WhitelistEntry:
        return WhitelistEntry(
            election_id=model.election_id,
            registration_number=model.registration_number,
            wallet_address=model.wallet_address,
            registered_at=model.registered_at,
        )
