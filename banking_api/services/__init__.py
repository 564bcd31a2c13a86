"""Ledger operations and the gateway in front of them."""

from banking_api.services.account_service import AccountService
from banking_api.services.transaction_service import TransactionService
from banking_api.services.loan_service import LoanService, calculate_emi
from banking_api.services.gateway import LedgerGateway

__all__ = [
    "AccountService",
    "TransactionService",
    "LoanService",
    "calculate_emi",
    "LedgerGateway",
]
