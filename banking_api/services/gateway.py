"""
Ledger gateway — the only way the API layer reaches the ledger.

One method per ledger operation, with no business logic of
its own:

- writes run as one atomic unit: commit on success, roll
  back on any failure, return a typed result
- reads are pass-through projections and never commit
- zero rows returned or affected raises ResourceNotFound
- anything else the ledger or the database raises becomes a
  LedgerFault carrying the original message
"""

import logging
from contextlib import contextmanager
from decimal import Decimal

from sqlalchemy import func, select, update
from sqlalchemy.exc import DBAPIError, SQLAlchemyError
from sqlalchemy.orm import Session

from banking_api.errors import LedgerError, LedgerFault, ResourceNotFound
from banking_api.models.account import Account
from banking_api.models.customer import Customer
from banking_api.models.enums import AccountStatus, AccountType
from banking_api.models.loan import Loan
from banking_api.models.transaction import Transaction
from banking_api.schemas.ledger import (
    AccountCreated,
    CustomerCreated,
    LoanCreated,
    TransactionPosted,
)
from banking_api.services.account_service import AccountService
from banking_api.services.loan_service import LoanService, calculate_emi
from banking_api.services.transaction_service import TransactionService

logger = logging.getLogger(__name__)


def _raw_message(exc: Exception) -> str:
    """The driver's own error text, without SQLAlchemy's wrapping."""
    if isinstance(exc, DBAPIError) and exc.orig is not None:
        return str(exc.orig)
    return str(exc)


class LedgerGateway:
    """
    Binds validated requests to ledger calls on one session.

    The session comes from the request's pool checkout; the
    gateway never closes it.
    """

    def __init__(self, db: Session):
        self.db = db

    @contextmanager
    def _ledger_call(self, operation: str, commit: bool = True):
        try:
            yield
            if commit:
                self.db.commit()
        except ResourceNotFound:
            self.db.rollback()
            raise
        except (LedgerError, SQLAlchemyError) as e:
            self.db.rollback()
            message = _raw_message(e)
            logger.error(
                "Ledger call failed",
                extra={"operation": operation, "error": message},
            )
            raise LedgerFault(message) from e
        else:
            logger.info("Ledger call completed", extra={"operation": operation})

    # --- Customers ---

    def create_customer(
        self, cnic: str, name: str, contact: str | None = None
    ) -> CustomerCreated:
        with self._ledger_call("create_customer"):
            customer = AccountService(self.db).create_customer(cnic, name, contact)
            result = CustomerCreated(customer_id=customer.customer_id)
        return result

    def list_customers(self) -> list[dict]:
        with self._ledger_call("list_customers", commit=False):
            rows = self.db.execute(
                select(
                    Customer.customer_id,
                    Customer.cnic,
                    Customer.name,
                    Customer.contact,
                    Customer.have_account,
                ).order_by(Customer.customer_id.desc())
            ).mappings().all()
        return [dict(row) for row in rows]

    def get_customer(self, customer_id: str) -> dict:
        """Customer row plus the count and summed balance of its accounts."""
        with self._ledger_call("get_customer", commit=False):
            row = self.db.execute(
                select(
                    Customer.customer_id,
                    Customer.cnic,
                    Customer.name,
                    Customer.contact,
                    Customer.have_account,
                    func.count(Account.account_no).label("total_accounts"),
                    func.coalesce(func.sum(Account.balance), 0).label(
                        "total_balance"
                    ),
                )
                .select_from(Customer)
                .outerjoin(Account, Account.customer_id == Customer.customer_id)
                .where(Customer.customer_id == customer_id)
                .group_by(
                    Customer.customer_id,
                    Customer.cnic,
                    Customer.name,
                    Customer.contact,
                    Customer.have_account,
                )
            ).mappings().one_or_none()
            if row is None:
                raise ResourceNotFound("Customer")
        return dict(row)

    def update_customer(
        self, customer_id: str, name: str, contact: str | None
    ) -> None:
        with self._ledger_call("update_customer"):
            result = self.db.execute(
                update(Customer)
                .where(Customer.customer_id == customer_id)
                .values(name=name, contact=contact)
            )
            if result.rowcount == 0:
                raise ResourceNotFound("Customer")

    def delete_customer(self, customer_id: str) -> None:
        """Fails with a constraint violation while accounts or loans remain."""
        with self._ledger_call("delete_customer"):
            customer = self.db.get(Customer, customer_id)
            if customer is None:
                raise ResourceNotFound("Customer")
            self.db.delete(customer)
            self.db.flush()

    # --- Accounts ---

    def create_account(
        self,
        customer_id: str,
        account_type: AccountType,
        initial_balance: Decimal,
    ) -> AccountCreated:
        with self._ledger_call("create_account"):
            account = AccountService(self.db).create_account(
                customer_id, account_type, initial_balance
            )
            result = AccountCreated(account_no=account.account_no)
        return result

    def list_accounts(self) -> list[dict]:
        with self._ledger_call("list_accounts", commit=False):
            rows = self.db.execute(
                select(
                    Account.account_no,
                    Account.customer_id,
                    Customer.name.label("customer_name"),
                    Account.account_type.label("type"),
                    Account.balance,
                    Account.status,
                    Account.opening_date,
                )
                .join(Customer, Account.customer_id == Customer.customer_id)
                .order_by(Account.account_no.desc())
            ).mappings().all()
        return [dict(row) for row in rows]

    def get_account(self, account_no: str) -> dict:
        with self._ledger_call("get_account", commit=False):
            row = self.db.execute(
                select(
                    Account.account_no,
                    Account.customer_id,
                    Account.account_type.label("type"),
                    Account.balance,
                    Account.status,
                    Account.opening_date,
                    Customer.name.label("customer_name"),
                    Customer.cnic,
                    Customer.contact,
                )
                .join(Customer, Account.customer_id == Customer.customer_id)
                .where(Account.account_no == account_no)
            ).mappings().one_or_none()
            if row is None:
                raise ResourceNotFound("Account")
        return dict(row)

    def get_balance(self, account_no: str) -> dict:
        with self._ledger_call("get_balance", commit=False):
            row = self.db.execute(
                select(Account.account_no, Account.balance).where(
                    Account.account_no == account_no
                )
            ).mappings().one_or_none()
            if row is None:
                raise ResourceNotFound("Account")
        return dict(row)

    def update_account_status(
        self, account_no: str, status: AccountStatus
    ) -> None:
        with self._ledger_call("update_account_status"):
            result = self.db.execute(
                update(Account)
                .where(Account.account_no == account_no)
                .values(status=status)
            )
            if result.rowcount == 0:
                raise ResourceNotFound("Account")

    # --- Transactions ---

    def deposit(self, account_no: str, amount: Decimal) -> TransactionPosted:
        with self._ledger_call("deposit"):
            txn = TransactionService(self.db).deposit(account_no, amount)
            result = TransactionPosted(transaction_id=txn.transaction_id)
        return result

    def withdraw(self, account_no: str, amount: Decimal) -> TransactionPosted:
        with self._ledger_call("withdraw"):
            txn = TransactionService(self.db).withdraw(account_no, amount)
            result = TransactionPosted(transaction_id=txn.transaction_id)
        return result

    def transfer(
        self, from_account: str, to_account: str, amount: Decimal
    ) -> TransactionPosted:
        with self._ledger_call("transfer"):
            txn = TransactionService(self.db).transfer(
                from_account, to_account, amount
            )
            result = TransactionPosted(transaction_id=txn.transaction_id)
        return result

    def _transaction_columns(self):
        return (
            Transaction.transaction_id,
            Transaction.from_account,
            Transaction.to_account,
            Transaction.transaction_type.label("type"),
            Transaction.amount,
            Transaction.date_time,
            Transaction.status,
            Transaction.fee,
        )

    def list_transactions(self) -> list[dict]:
        """Newest first."""
        with self._ledger_call("list_transactions", commit=False):
            rows = self.db.execute(
                select(*self._transaction_columns()).order_by(
                    Transaction.date_time.desc()
                )
            ).mappings().all()
        return [dict(row) for row in rows]

    def get_transaction(self, transaction_id: str) -> dict:
        with self._ledger_call("get_transaction", commit=False):
            row = self.db.execute(
                select(*self._transaction_columns()).where(
                    Transaction.transaction_id == transaction_id
                )
            ).mappings().one_or_none()
            if row is None:
                raise ResourceNotFound("Transaction")
        return dict(row)

    # --- Loans ---

    def create_loan(
        self,
        customer_id: str,
        loan_amount: Decimal,
        time_period: int,
        interest_rate: Decimal,
        loan_type: str,
    ) -> LoanCreated:
        with self._ledger_call("create_loan"):
            loan = LoanService(self.db).create_loan(
                customer_id, loan_amount, time_period, interest_rate, loan_type
            )
            result = LoanCreated(
                loan_id=loan.loan_id,
                monthly_emi=calculate_emi(
                    loan_amount, interest_rate, time_period
                ),
            )
        return result

    def _with_emi(self, row) -> dict:
        loan = dict(row)
        loan["monthly_emi"] = calculate_emi(
            loan["loan_amount"], loan["interest_rate"], loan["time_period"]
        )
        return loan

    def list_loans(self) -> list[dict]:
        with self._ledger_call("list_loans", commit=False):
            rows = self.db.execute(
                select(
                    Loan.loan_id,
                    Loan.customer_id,
                    Customer.name.label("customer_name"),
                    Loan.loan_amount,
                    Loan.time_period,
                    Loan.interest_rate,
                    Loan.loan_type,
                    Loan.remaining_amount,
                    Loan.created_at,
                )
                .join(Customer, Loan.customer_id == Customer.customer_id)
                .order_by(Loan.loan_id.desc())
            ).mappings().all()
        return [self._with_emi(row) for row in rows]

    def get_loan(self, loan_id: str) -> dict:
        with self._ledger_call("get_loan", commit=False):
            row = self.db.execute(
                select(
                    Loan.loan_id,
                    Loan.customer_id,
                    Loan.loan_amount,
                    Loan.time_period,
                    Loan.interest_rate,
                    Loan.loan_type,
                    Loan.remaining_amount,
                    Loan.created_at,
                    Customer.name.label("customer_name"),
                    Customer.cnic,
                    Customer.contact,
                )
                .join(Customer, Loan.customer_id == Customer.customer_id)
                .where(Loan.loan_id == loan_id)
            ).mappings().one_or_none()
            if row is None:
                raise ResourceNotFound("Loan")
        return self._with_emi(row)
