"""Vote record repository implementation using SQLAlchemy."""

import logging

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ballot_ledger.domain.entities.vote_record import VoteRecord
from ballot_ledger.domain.repositories.session_adapter import ISessionAdapter
from ballot_ledger.domain.repositories.vote_record_repository import (
    VoteRecordRepository,
)
from ballot_ledger.infrastructure.exceptions import DatabaseError
from ballot_ledger.infrastructure.persistence.sqlalchemy_models import VoteRecordModel


logger = logging.getLogger(__name__)


class VoteRecordRepositoryImpl(VoteRecordRepository):
    """Vote record repository implementation using SQLAlchemy."""

    def __init__(self, session: AsyncSession | ISessionAdapter):
        self.session = session

    async def exists(self, election_id: int, voter_address: str) -> bool:
        model = await self.session.get(VoteRecordModel, (election_id, voter_address))
        return model is not None

    async def create(self, record: VoteRecord) -> VoteRecord:
        try:
            self.session.add(
                VoteRecordModel(
                    election_id=record.election_id,
                    voter_address=record.voter_address,
                    voted_at=record.voted_at,
                )
            )
            await self.session.flush()
            return record
        except SQLAlchemyError as e:
            logger.error(f"Database error recording vote: {e}")
            raise DatabaseError(
                "Failed to record vote",
                {
                    "election_id": record.election_id,
                    "voter_address": record.voter_address,
                    "error": str(e),
                },
            ) from e

    async def count_by_election(self, election_id: int) -> int:
        query = (
            select(func.count())
            .select_from(VoteRecordModel)
            .where(VoteRecordModel.election_id == election_id)
        )
        result = await self.session.execute(query)
        count = result.scalar()
        return count if count is not None else 0
