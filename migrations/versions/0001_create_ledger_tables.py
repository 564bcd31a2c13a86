"""Create customers, accounts, transactions and loans.

Revision ID: 0001
Revises:
Create Date: 2026-10-19
"""
from alembic import op
import sqlalchemy as sa

revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


account_type_enum = sa.Enum(
    "SAVINGS", "CURRENT", name="account_type_enum", create_constraint=True
)
account_status_enum = sa.Enum(
    "ACTIVE", "INACTIVE", "FROZEN", "CLOSED",
    name="account_status_enum", create_constraint=True,
)
transaction_type_enum = sa.Enum(
    "DEPOSIT", "WITHDRAWAL", "TRANSFER",
    name="transaction_type_enum", create_constraint=True,
)


def upgrade() -> None:
    op.create_table(
        "customers",
        sa.Column("customer_id", sa.String(20), primary_key=True),
        sa.Column("cnic", sa.String(20), nullable=False, unique=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("contact", sa.String(50), nullable=True),
        sa.Column("have_account", sa.Boolean(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
    )

    op.create_table(
        "accounts",
        sa.Column("account_no", sa.String(20), primary_key=True),
        sa.Column(
            "customer_id",
            sa.String(20),
            sa.ForeignKey("customers.customer_id"),
            nullable=False,
        ),
        sa.Column("account_type", account_type_enum, nullable=False),
        sa.Column("balance", sa.Numeric(19, 4), nullable=False),
        sa.Column("status", account_status_enum, nullable=False),
        sa.Column("opening_date", sa.DateTime(), nullable=False),
    )
    op.create_index("ix_accounts_customer_id", "accounts", ["customer_id"])

    op.create_table(
        "transactions",
        sa.Column("transaction_id", sa.String(20), primary_key=True),
        sa.Column(
            "from_account",
            sa.String(20),
            sa.ForeignKey("accounts.account_no"),
            nullable=True,
        ),
        sa.Column(
            "to_account",
            sa.String(20),
            sa.ForeignKey("accounts.account_no"),
            nullable=True,
        ),
        sa.Column("transaction_type", transaction_type_enum, nullable=False),
        sa.Column("amount", sa.Numeric(19, 4), nullable=False),
        sa.Column("date_time", sa.DateTime(), nullable=False),
        sa.Column("status", sa.String(20), nullable=False),
        sa.Column("fee", sa.Numeric(19, 4), nullable=False),
    )
    op.create_index(
        "ix_transactions_from_account", "transactions", ["from_account"]
    )
    op.create_index("ix_transactions_to_account", "transactions", ["to_account"])
    op.create_index("ix_transactions_date_time", "transactions", ["date_time"])

    op.create_table(
        "loans",
        sa.Column("loan_id", sa.String(20), primary_key=True),
        sa.Column(
            "customer_id",
            sa.String(20),
            sa.ForeignKey("customers.customer_id"),
            nullable=False,
        ),
        sa.Column("loan_amount", sa.Numeric(19, 4), nullable=False),
        sa.Column("time_period", sa.Integer(), nullable=False),
        sa.Column("interest_rate", sa.Numeric(7, 4), nullable=False),
        sa.Column("loan_type", sa.String(30), nullable=False),
        sa.Column("remaining_amount", sa.Numeric(19, 4), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
    )
    op.create_index("ix_loans_customer_id", "loans", ["customer_id"])


def downgrade() -> None:
    op.drop_index("ix_loans_customer_id", table_name="loans")
    op.drop_table("loans")
    op.drop_index("ix_transactions_date_time", table_name="transactions")
    op.drop_index("ix_transactions_to_account", table_name="transactions")
    op.drop_index("ix_transactions_from_account", table_name="transactions")
    op.drop_table("transactions")
    op.drop_index("ix_accounts_customer_id", table_name="accounts")
    op.drop_table("accounts")
    op.drop_table("customers")
    account_type_enum.drop(op.get_bind(), checkfirst=True)
    account_status_enum.drop(op.get_bind(), checkfirst=True)
    transaction_type_enum.drop(op.get_bind(), checkfirst=True)
