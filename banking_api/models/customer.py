"""
Customer model.

Represents an account holder. A customer can have
multiple accounts and loans.
"""

from datetime import datetime

from sqlalchemy import String, Boolean, DateTime
from sqlalchemy.orm import Mapped, mapped_column, relationship

from banking_api.models.base import Base
from banking_api.models.identifiers import new_customer_id


class Customer(Base):
    __tablename__ = "customers"

    customer_id: Mapped[str] = mapped_column(
        String(20), primary_key=True, default=new_customer_id
    )
    cnic: Mapped[str] = mapped_column(String(20), unique=True, nullable=False)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    contact: Mapped[str | None] = mapped_column(String(50), nullable=True)
    have_account: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=datetime.utcnow
    )

    # Child rows are never touched on delete; the database rejects
    # deleting a customer who still owns accounts or loans.
    accounts: Mapped[list["Account"]] = relationship(
        back_populates="customer", passive_deletes="all"
    )
    loans: Mapped[list["Loan"]] = relationship(
        back_populates="customer", passive_deletes="all"
    )

    def __repr__(self) -> str:
        return f"<Customer {self.customer_id} {self.name}>"
