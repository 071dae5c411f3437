"""SQLAlchemy ORM models."""
import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer, Numeric, String, Text, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from exchange_office.infrastructure.database.base import Base


def generate_uuid() -> str:
    return str(uuid.uuid4())


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Client(Base):
    __tablename__ = "clients"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    username = Column(String(50), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    name = Column(String(100), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    accounts = relationship("Account", back_populates="client")


class Account(Base):
    __tablename__ = "accounts"
    __table_args__ = (
        UniqueConstraint("client_id", "currency", name="uq_accounts_client_currency"),
    )

    id = Column(String(36), primary_key=True, default=generate_uuid)
    client_id = Column(String(36), ForeignKey("clients.id"), nullable=False, index=True)
    currency = Column(String(3), nullable=False)
    balance = Column(Numeric(15, 2), nullable=False, default=0)
    version = Column(Integer, nullable=False)
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # concurrent writers to the same row fail with StaleDataError on flush
    __mapper_args__ = {"version_id_col": version}

    client = relationship("Client", back_populates="accounts")


class Transaction(Base):
    __tablename__ = "transactions"
    __table_args__ = (
        Index("ix_transactions_client_created", "client_id", "created_at"),
    )

    id = Column(String(36), primary_key=True, default=generate_uuid)
    client_id = Column(String(36), ForeignKey("clients.id"), nullable=False)
    type = Column(String(20), nullable=False, index=True)  # exchange, transfer, received
    amount = Column(Numeric(15, 2), nullable=False)
    currency_from = Column(String(3))
    currency_to = Column(String(3))
    receiver_id = Column(String(36), ForeignKey("clients.id"), nullable=True, index=True)
    exchange_rate = Column(Numeric(10, 6), nullable=True)
    message = Column(Text)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    client = relationship("Client", foreign_keys=[client_id])
    receiver = relationship("Client", foreign_keys=[receiver_id])


class ExchangeRate(Base):
    __tablename__ = "exchange_rates"
    __table_args__ = (
        UniqueConstraint("base_currency", "target_currency", name="uq_exchange_rates_pair"),
    )

    id = Column(String(36), primary_key=True, default=generate_uuid)
    base_currency = Column(String(3), nullable=False)
    target_currency = Column(String(3), nullable=False)
    rate = Column(Numeric(10, 6), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)
