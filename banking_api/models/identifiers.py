"""
Identifier allocation for ledger records.

Identifiers are assigned by the ledger when a row is first
flushed, never by the client. Uniqueness is backed by the
primary key constraint on each table.
"""

import uuid


def _token(length: int) -> str:
    return uuid.uuid4().hex[:length].upper()


def new_customer_id() -> str:
    return f"CUS{_token(9)}"


def new_account_no() -> str:
    """Twelve digit account number."""
    return f"{uuid.uuid4().int % 10**12:012d}"


def new_transaction_id() -> str:
    return f"TXN{_token(12)}"


def new_loan_id() -> str:
    return f"LN{_token(10)}"
