"""Reserve repository implementation using SQLAlchemy."""

import logging

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ballot_ledger.domain.entities.deposit import Deposit
from ballot_ledger.domain.repositories.reserve_repository import ReserveRepository
from ballot_ledger.domain.repositories.session_adapter import ISessionAdapter
from ballot_ledger.infrastructure.exceptions import DatabaseError
from ballot_ledger.infrastructure.persistence.sqlalchemy_models import (
    DepositModel,
    ReserveBalanceModel,
)


logger = logging.getLogger(__name__)


class ReserveRepositoryImpl(ReserveRepository):
    """Reserve repository implementation using SQLAlchemy."""

    def __init__(self, session: AsyncSession | ISessionAdapter):
        self.session = session

    async def get_balance(self, election_id: int, for_update: bool = False) -> int:
        query = select(ReserveBalanceModel).where(
            ReserveBalanceModel.election_id == election_id
        )
        if for_update:
            query = query.with_for_update()
        result = await self.session.execute(query)
        model = result.scalars().first()
        return model.balance if model else 0

    async def set_balance(self, election_id: int, balance: int) -> None:
        if balance < 0:
            raise ValueError(f"Reserve balance cannot be negative: {balance}")
        try:
            model = await self.session.get(ReserveBalanceModel, election_id)
            if model is None:
                self.session.add(
                    ReserveBalanceModel(election_id=election_id, balance=balance)
                )
            else:
                model.balance = balance
            await self.session.flush()
        except SQLAlchemyError as e:
            logger.error(f"Database error updating reserve: {e}")
            raise DatabaseError(
                "Failed to update reserve balance",
                {"election_id": election_id, "error": str(e)},
            ) from e

    async def add_deposit(self, deposit: Deposit) -> Deposit:
        model = DepositModel(
            election_id=deposit.election_id,
            depositor=deposit.depositor,
            amount=deposit.amount,
            fee=deposit.fee,
            created_at=deposit.created_at,
        )
        self.session.add(model)
        await self.session.flush()
        await self.session.refresh(model)
        return self._to_entity(model)

    async def get_deposits(self, election_id: int) -> list[Deposit]:
        query = (
            select(DepositModel)
            .where(DepositModel.election_id == election_id)
            .order_by(DepositModel.id)
        )
        result = await self.session.execute(query)
        return [self._to_entity(m) for m in result.scalars().all()]

    async def get_total_fees(self) -> int:
        query = select(func.coalesce(func.sum(DepositModel.fee), 0))
        result = await self.session.execute(query)
        total = result.scalar()
        return int(total) if total is not None else 0

    def _to_entity(self, model: DepositModel) -> Deposit:
        return Deposit(
            id=model.id,
            election_id=model.election_id,
            depositor=model.depositor,
            amount=model.amount,
            fee=model.fee,
            created_at=model.created_at,
        )
