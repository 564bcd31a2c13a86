"""
Tests for the AccountService.
"""

from decimal import Decimal

import pytest

from banking_api.errors import LedgerError
from banking_api.models.enums import AccountStatus, AccountType
from banking_api.services.account_service import AccountService


def register(db_session, cnic="35202-1234567-1", name="Ayesha Khan"):
    customer = AccountService(db_session).create_customer(cnic, name)
    db_session.commit()
    return customer


# --- Customer Tests ---

class TestCreateCustomer:

    def test_create_customer(self, db_session):
        customer = register(db_session)

        assert customer.customer_id.startswith("CUS")
        assert len(customer.customer_id) == 12
        assert customer.name == "Ayesha Khan"
        assert customer.contact is None
        assert customer.have_account is False

    def test_duplicate_cnic_fails(self, db_session):
        register(db_session)

        with pytest.raises(LedgerError, match="already exists"):
            AccountService(db_session).create_customer("35202-1234567-1", "Other")


# --- Account Tests ---

class TestCreateAccount:

    def test_open_account(self, db_session):
        customer = register(db_session)
        service = AccountService(db_session)

        account = service.create_account(
            customer.customer_id, AccountType.CURRENT, Decimal("500.00")
        )
        db_session.commit()

        assert len(account.account_no) == 12
        assert account.account_no.isdigit()
        assert account.status == AccountStatus.ACTIVE
        assert account.balance == Decimal("500.00")
        assert account.account_type == AccountType.CURRENT

    def test_opening_marks_customer_as_holder(self, db_session):
        customer = register(db_session)
        AccountService(db_session).create_account(
            customer.customer_id, AccountType.SAVINGS, Decimal("0")
        )
        db_session.commit()

        db_session.refresh(customer)
        assert customer.have_account is True

    def test_unknown_customer_fails(self, db_session):
        with pytest.raises(LedgerError, match="Customer CUS000000000 not found"):
            AccountService(db_session).create_account(
                "CUS000000000", AccountType.SAVINGS, Decimal("10")
            )

    def test_negative_opening_balance_fails(self, db_session):
        customer = register(db_session)

        with pytest.raises(LedgerError, match="cannot be negative"):
            AccountService(db_session).create_account(
                customer.customer_id, AccountType.SAVINGS, Decimal("-1")
            )

    def test_account_numbers_are_unique(self, db_session):
        customer = register(db_session)
        service = AccountService(db_session)

        numbers = {
            service.create_account(
                customer.customer_id, AccountType.SAVINGS, Decimal("0")
            ).account_no
            for _ in range(20)
        }
        assert len(numbers) == 20
