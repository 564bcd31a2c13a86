"""
Typed results of ledger gateway calls.

Each write operation hands back the identifier the ledger
allocated, instead of filling in out-parameters.
"""

from decimal import Decimal

from pydantic import BaseModel


class CustomerCreated(BaseModel):
    customer_id: str


class AccountCreated(BaseModel):
    account_no: str


class TransactionPosted(BaseModel):
    transaction_id: str


class LoanCreated(BaseModel):
    loan_id: str
    monthly_emi: Decimal
