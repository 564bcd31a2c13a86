"""
Shared test fixtures.

Sets up an isolated SQLite database so tests never touch
the real ledger. Tables are created before each test and
dropped after it, so no test data persists.
"""

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from banking_api.main import app
from banking_api.models import Base
from banking_api.models.base import enforce_sqlite_foreign_keys, get_db
from banking_api.models.enums import AccountType
from banking_api.services.gateway import LedgerGateway


# SQLite file database, no external infrastructure needed.
TEST_DATABASE_URL = "sqlite:///./test.db"

engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
)
enforce_sqlite_foreign_keys(engine)

TestSessionLocal = sessionmaker(
    bind=engine,
    autoflush=False,
)


@pytest.fixture(autouse=True)
def setup_database():
    """Create all tables before each test, drop them after."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db_session():
    """Provide a database session for direct service testing."""
    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture
def gateway(db_session):
    return LedgerGateway(db_session)


@pytest.fixture
def client(db_session):
    """
    Provide a test client wired to the test database.

    get_db is overridden so the app uses the test session
    instead of the pool the lifespan would create.
    """
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def customer_id(gateway):
    """A registered customer with no accounts."""
    return gateway.create_customer("35202-1234567-1", "Ayesha Khan", "0300-1234567").customer_id


@pytest.fixture
def funded_account(gateway, customer_id):
    """An active savings account holding 1000."""
    return gateway.create_account(
        customer_id, AccountType.SAVINGS, Decimal("1000.00")
    ).account_no
