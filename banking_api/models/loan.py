"""
Loan model.

The monthly installment is not stored; it is derived from
loan_amount, interest_rate and time_period whenever a loan
is read.
"""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import String, DateTime, Numeric, Integer, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from banking_api.models.base import Base
from banking_api.models.identifiers import new_loan_id


class Loan(Base):
    __tablename__ = "loans"

    loan_id: Mapped[str] = mapped_column(
        String(20), primary_key=True, default=new_loan_id
    )
    customer_id: Mapped[str] = mapped_column(
        ForeignKey("customers.customer_id"), nullable=False, index=True
    )
    loan_amount: Mapped[Decimal] = mapped_column(
        Numeric(19, 4), nullable=False
    )
    # Term in months
    time_period: Mapped[int] = mapped_column(Integer, nullable=False)
    # Annual rate, in percent
    interest_rate: Mapped[Decimal] = mapped_column(
        Numeric(7, 4), nullable=False
    )
    loan_type: Mapped[str] = mapped_column(String(30), nullable=False)
    remaining_amount: Mapped[Decimal] = mapped_column(
        Numeric(19, 4), nullable=False
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=datetime.utcnow
    )

    customer: Mapped["Customer"] = relationship(back_populates="loans")

    def __repr__(self) -> str:
        return f"<Loan {self.loan_id} {self.loan_type} {self.loan_amount}>"
