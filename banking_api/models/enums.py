"""
Shared enumerations for database models.

Python enums mapped to database enums mean only valid
values can be stored.
"""

import enum


class AccountType(str, enum.Enum):
    """Kinds of customer account the bank offers."""
    SAVINGS = "SAVINGS"
    CURRENT = "CURRENT"


class AccountStatus(str, enum.Enum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    FROZEN = "FROZEN"
    CLOSED = "CLOSED"


class TransactionType(str, enum.Enum):
    DEPOSIT = "DEPOSIT"
    WITHDRAWAL = "WITHDRAWAL"
    TRANSFER = "TRANSFER"
