"""Candidate repository implementation using SQLAlchemy."""

import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ballot_ledger.domain.entities.candidate import Candidate
from ballot_ledger.domain.repositories.candidate_repository import CandidateRepository
from ballot_ledger.domain.repositories.session_adapter import ISessionAdapter
from ballot_ledger.infrastructure.exceptions import DatabaseError
from ballot_ledger.infrastructure.persistence.sqlalchemy_models import CandidateModel


logger = logging.getLogger(__name__)


class CandidateRepositoryImpl(CandidateRepository):
    """Candidate repository implementation using SQLAlchemy."""

    def __init__(self, session: AsyncSession | ISessionAdapter):
        self.session = session

    async def get(self, election_id: int, candidate_id: int) -> Candidate | None:
        model = await self.session.get(CandidateModel, (election_id, candidate_id))
        return self._to_entity(model) if model else None

    async def get_by_election(self, election_id: int) -> list[Candidate]:
        query = (
            select(CandidateModel)
            .where(CandidateModel.election_id == election_id)
            .order_by(CandidateModel.candidate_id)
        )
        result = await self.session.execute(query)
        return [self._to_entity(m) for m in result.scalars().all()]

    async def create(self, candidate: Candidate) -> Candidate:
        """Create a candidate whose ID was assigned by the caller."""
        if not candidate.id:
            raise ValueError("Candidate must have an ID before it is stored")
        try:
            model = CandidateModel(
                election_id=candidate.election_id,
                candidate_id=candidate.id,
                name=candidate.name,
                image_url=candidate.image_url,
                vote_count=candidate.vote_count,
            )
            self.session.add(model)
            await self.session.flush()
            return self._to_entity(model)
        except SQLAlchemyError as e:
            logger.error(f"Database error creating candidate: {e}")
            raise DatabaseError(
                "Failed to create candidate",
                {
                    "election_id": candidate.election_id,
                    "candidate_id": candidate.id,
                    "error": str(e),
                },
            ) from e

    async def increment_vote_count(self, election_id: int, candidate_id: int) -> int:
        model = await self.session.get(CandidateModel, (election_id, candidate_id))
        if model is None:
            raise ValueError(
                f"Candidate {candidate_id} of election {election_id} not found"
            )
        model.vote_count += 1
        await self.session.flush()
        return model.vote_count

    def _to_entity(self, model: CandidateModel) -> Candidate:
        return Candidate(
            id=model.candidate_id,
            election_id=model.election_id,
            name=model.name,
            image_url=model.image_url,
            vote_count=model.vote_count,
        )
