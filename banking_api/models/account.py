"""
Customer account model.

The balance is stored on the row and only ever changed by
the deposit, withdraw and transfer operations, each of which
applies a single conditional UPDATE.
"""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import (
    String, DateTime, Numeric, ForeignKey,
    Enum as SAEnum,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from banking_api.models.base import Base
from banking_api.models.enums import AccountType, AccountStatus
from banking_api.models.identifiers import new_account_no


class Account(Base):
    __tablename__ = "accounts"

    account_no: Mapped[str] = mapped_column(
        String(20), primary_key=True, default=new_account_no
    )
    customer_id: Mapped[str] = mapped_column(
        ForeignKey("customers.customer_id"), nullable=False, index=True
    )
    account_type: Mapped[AccountType] = mapped_column(
        SAEnum(
            AccountType,
            name="account_type_enum",
            create_constraint=True,
        ),
        nullable=False,
    )
    balance: Mapped[Decimal] = mapped_column(
        Numeric(19, 4), nullable=False, default=Decimal("0")
    )
    status: Mapped[AccountStatus] = mapped_column(
        SAEnum(
            AccountStatus,
            name="account_status_enum",
            create_constraint=True,
        ),
        nullable=False,
        default=AccountStatus.ACTIVE,
    )
    opening_date: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=datetime.utcnow
    )

    customer: Mapped["Customer"] = relationship(back_populates="accounts")

    def __repr__(self) -> str:
        return (
            f"<Account {self.account_no} "
            f"{self.account_type.value} ({self.status.value})>"
        )
