"""
Database models package.

All models must be imported here so that Alembic can discover
them through Base.metadata when generating migrations.
"""

from banking_api.models.base import Base
from banking_api.models.enums import (
    AccountType,
    AccountStatus,
    TransactionType,
)
from banking_api.models.customer import Customer
from banking_api.models.account import Account
from banking_api.models.transaction import Transaction
from banking_api.models.loan import Loan

__all__ = [
    "Base",
    "AccountType",
    "AccountStatus",
    "TransactionType",
    "Customer",
    "Account",
    "Transaction",
    "Loan",
]
