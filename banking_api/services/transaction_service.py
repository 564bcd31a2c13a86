"""
Transaction service — deposits, withdrawals, and transfers.

Each operation:
1. Applies the balance change as one conditional UPDATE
   (the row must exist, be ACTIVE and, for debits, hold
   enough money)
2. Explains a rejected UPDATE by reading the row
3. Appends the transaction record

Balances are changed in SQL (balance = balance + :amount)
rather than read-modify-write in Python, so concurrent
operations on one account serialize on the row lock.

Nothing here commits. If any step raises, the caller rolls
back and neither the balance change nor the record survives.
"""

import logging
from decimal import Decimal

from sqlalchemy import update
from sqlalchemy.orm import Session

from banking_api.errors import LedgerError
from banking_api.models.account import Account
from banking_api.models.enums import AccountStatus, TransactionType
from banking_api.models.transaction import Transaction, TRANSACTION_COMPLETED

logger = logging.getLogger(__name__)

# The bank charges nothing for counter or account-to-account movements.
TRANSACTION_FEE = Decimal("0")


class TransactionService:

    def __init__(self, db: Session):
        self.db = db

    def _explain_rejection(
        self, account_no: str, requested: Decimal
    ) -> LedgerError:
        """Work out why a conditional UPDATE matched no row."""
        account = self.db.get(Account, account_no)
        if not account:
            return LedgerError(f"Account {account_no} not found")
        if account.status != AccountStatus.ACTIVE:
            return LedgerError(
                f"Account {account_no} is not active "
                f"(status: {account.status.value})"
            )
        return LedgerError(
            f"Insufficient balance: available={account.balance}, "
            f"requested={requested}"
        )

    def _credit(self, account_no: str, amount: Decimal) -> None:
        result = self.db.execute(
            update(Account)
            .where(
                Account.account_no == account_no,
                Account.status == AccountStatus.ACTIVE,
            )
            .values(balance=Account.balance + amount)
        )
        if result.rowcount == 0:
            raise self._explain_rejection(account_no, amount)

    def _debit(self, account_no: str, amount: Decimal) -> None:
        result = self.db.execute(
            update(Account)
            .where(
                Account.account_no == account_no,
                Account.status == AccountStatus.ACTIVE,
                Account.balance >= amount,
            )
            .values(balance=Account.balance - amount)
        )
        if result.rowcount == 0:
            raise self._explain_rejection(account_no, amount)

    def _record(
        self,
        transaction_type: TransactionType,
        amount: Decimal,
        from_account: str | None = None,
        to_account: str | None = None,
    ) -> Transaction:
        txn = Transaction(
            transaction_type=transaction_type,
            from_account=from_account,
            to_account=to_account,
            amount=amount,
            status=TRANSACTION_COMPLETED,
            fee=TRANSACTION_FEE,
        )
        self.db.add(txn)
        self.db.flush()
        logger.debug(
            "Transaction recorded",
            extra={
                "transaction_id": txn.transaction_id,
                "type": transaction_type.value,
            },
        )
        return txn

    def deposit(self, account_no: str, amount: Decimal) -> Transaction:
        """Credit an active account."""
        self._credit(account_no, amount)
        return self._record(
            TransactionType.DEPOSIT, amount, to_account=account_no
        )

    def withdraw(self, account_no: str, amount: Decimal) -> Transaction:
        """Debit an active account that holds at least ``amount``."""
        self._debit(account_no, amount)
        return self._record(
            TransactionType.WITHDRAWAL, amount, from_account=account_no
        )

    def transfer(
        self, from_account: str, to_account: str, amount: Decimal
    ) -> Transaction:
        """
        Move money between two active accounts.

        Both rows are updated in account-number order so two
        opposite transfers cannot deadlock each other.
        """
        if from_account == to_account:
            raise LedgerError("Cannot transfer to the same account")

        steps = sorted(
            [(from_account, self._debit), (to_account, self._credit)],
            key=lambda step: step[0],
        )
        for account_no, apply in steps:
            apply(account_no, amount)

        return self._record(
            TransactionType.TRANSFER,
            amount,
            from_account=from_account,
            to_account=to_account,
        )
