"""create clients, accounts, transactions and exchange rates

Revision ID: 5e0c1a7d2b40
Revises: 
Create Date: 2026-10-19 09:00:00.000000
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "5e0c1a7d2b40"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "clients",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("username", sa.String(length=50), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index("ix_clients_username", "clients", ["username"], unique=True)

    op.create_table(
        "accounts",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("client_id", sa.String(length=36), sa.ForeignKey("clients.id"), nullable=False),
        sa.Column("currency", sa.String(length=3), nullable=False),
        sa.Column("balance", sa.Numeric(15, 2), nullable=False),
        sa.Column("version", sa.Integer(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True)),
        sa.UniqueConstraint("client_id", "currency", name="uq_accounts_client_currency"),
    )
    op.create_index("ix_accounts_client_id", "accounts", ["client_id"])

    op.create_table(
        "transactions",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("client_id", sa.String(length=36), sa.ForeignKey("clients.id"), nullable=False),
        sa.Column("type", sa.String(length=20), nullable=False),
        sa.Column("amount", sa.Numeric(15, 2), nullable=False),
        sa.Column("currency_from", sa.String(length=3)),
        sa.Column("currency_to", sa.String(length=3)),
        sa.Column("receiver_id", sa.String(length=36), sa.ForeignKey("clients.id")),
        sa.Column("exchange_rate", sa.Numeric(10, 6)),
        sa.Column("message", sa.Text()),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_transactions_client_created", "transactions", ["client_id", "created_at"])
    op.create_index("ix_transactions_receiver_id", "transactions", ["receiver_id"])
    op.create_index("ix_transactions_type", "transactions", ["type"])

    op.create_table(
        "exchange_rates",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("base_currency", sa.String(length=3), nullable=False),
        sa.Column("target_currency", sa.String(length=3), nullable=False),
        sa.Column("rate", sa.Numeric(10, 6), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.UniqueConstraint("base_currency", "target_currency", name="uq_exchange_rates_pair"),
    )


def downgrade() -> None:
    op.drop_table("exchange_rates")
    op.drop_index("ix_transactions_type", table_name="transactions")
    op.drop_index("ix_transactions_receiver_id", table_name="transactions")
    op.drop_index("ix_transactions_client_created", table_name="transactions")
    op.drop_table("transactions")
    op.drop_index("ix_accounts_client_id", table_name="accounts")
    op.drop_table("accounts")
    op.drop_index("ix_clients_username", table_name="clients")
    op.drop_table("clients")
