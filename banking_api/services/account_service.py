"""
Account service — the customer and account ledger operations.

Opening an account marks its owner as an account holder.
Every method only flushes; the caller controls the commit.
"""

from decimal import Decimal

from sqlalchemy import select
from sqlalchemy.orm import Session

from banking_api.errors import LedgerError
from banking_api.models.account import Account
from banking_api.models.customer import Customer
from banking_api.models.enums import AccountStatus, AccountType


class AccountService:

    def __init__(self, db: Session):
        self.db = db

    def create_customer(
        self, cnic: str, name: str, contact: str | None = None
    ) -> Customer:
        """Register a customer. The CNIC must not be on file yet."""
        existing = self.db.execute(
            select(Customer).where(Customer.cnic == cnic)
        ).scalar_one_or_none()

        if existing:
            raise LedgerError(f"Customer with CNIC '{cnic}' already exists")

        customer = Customer(cnic=cnic, name=name, contact=contact)
        self.db.add(customer)
        self.db.flush()
        return customer

    def create_account(
        self,
        customer_id: str,
        account_type: AccountType,
        initial_balance: Decimal,
    ) -> Account:
        """
        Open an ACTIVE account holding the opening balance.

        Raises LedgerError if the customer does not exist or
        the opening balance is negative.
        """
        customer = self.db.get(Customer, customer_id)
        if not customer:
            raise LedgerError(f"Customer {customer_id} not found")

        if initial_balance < 0:
            raise LedgerError("Initial balance cannot be negative")

        account = Account(
            customer_id=customer.customer_id,
            account_type=account_type,
            balance=initial_balance,
            status=AccountStatus.ACTIVE,
        )
        customer.have_account = True
        self.db.add(account)
        self.db.flush()
        return account
