"""SQLAlchemy ORM models."""

from sqlalchemy import BigInteger, Boolean, Integer, String, UniqueConstraint
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Declarative base for all ledger tables."""


class ElectionModel(Base):
    """Election table."""

    __tablename__ = "elections"
    # SQLite: never reuse a rowid
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    whitelist_start: Mapped[int] = mapped_column(BigInteger, nullable=False)
    whitelist_end: Mapped[int] = mapped_column(BigInteger, nullable=False)
    voting_start: Mapped[int] = mapped_column(BigInteger, nullable=False)
    voting_end: Mapped[int] = mapped_column(BigInteger, nullable=False)
    candidate_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    voter_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    created_by: Mapped[str | None] = mapped_column(String(255), nullable=True)
    created_at: Mapped[int | None] = mapped_column(BigInteger, nullable=True)


class CandidateModel(Base):
    """Candidate table keyed by (election_id, candidate_id)."""

    __tablename__ = "candidates"

    election_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    candidate_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    image_url: Mapped[str] = mapped_column(String(2048), nullable=False, default="")
    vote_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)


class WhitelistEntryModel(Base):
    """Registration-number binding table."""

    __tablename__ = "whitelist_entries"
    __table_args__ = (
        UniqueConstraint(
            "election_id",
            "registration_number",
            name="uq_whitelist_entries_election_registration_number",
        ),
    )

    election_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    wallet_address: Mapped[str] = mapped_column(String(255), primary_key=True)
    registration_number: Mapped[int] = mapped_column(BigInteger, nullable=False)
    registered_at: Mapped[int | None] = mapped_column(BigInteger, nullable=True)


class VoteRecordModel(Base):
    """Voted-flag table. A row means the address has voted."""

    __tablename__ = "vote_records"

    election_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    voter_address: Mapped[str] = mapped_column(String(255), primary_key=True)
    voted_at: Mapped[int | None] = mapped_column(BigInteger, nullable=True)


class ElectionCreatorModel(Base):
    """Creator role table."""

    __tablename__ = "election_creators"

    address: Mapped[str] = mapped_column(String(255), primary_key=True)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    updated_at: Mapped[int | None] = mapped_column(BigInteger, nullable=True)


class ReserveBalanceModel(Base):
    """Per-election reserve balance. No FK: deposits may precede creation."""

    __tablename__ = "election_reserves"

    election_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    balance: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)


class DepositModel(Base):
    """Append-only deposit journal."""

    __tablename__ = "deposits"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    election_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    depositor: Mapped[str] = mapped_column(String(255), nullable=False)
    amount: Mapped[int] = mapped_column(BigInteger, nullable=False)
    fee: Mapped[int] = mapped_column(BigInteger, nullable=False)
    created_at: Mapped[int | None] = mapped_column(BigInteger, nullable=True)
