"""
Transaction model.

An append-only log entry written by deposit, withdraw and
transfer. The row is added in the same database transaction
as the balance change, so it exists if and only if that
change commits.
"""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import (
    String, DateTime, Numeric, ForeignKey,
    Enum as SAEnum,
)
from sqlalchemy.orm import Mapped, mapped_column

from banking_api.models.base import Base
from banking_api.models.enums import TransactionType
from banking_api.models.identifiers import new_transaction_id

TRANSACTION_COMPLETED = "COMPLETED"


class Transaction(Base):
    __tablename__ = "transactions"

    transaction_id: Mapped[str] = mapped_column(
        String(20), primary_key=True, default=new_transaction_id
    )
    from_account: Mapped[str | None] = mapped_column(
        ForeignKey("accounts.account_no"), nullable=True, index=True
    )
    to_account: Mapped[str | None] = mapped_column(
        ForeignKey("accounts.account_no"), nullable=True, index=True
    )
    transaction_type: Mapped[TransactionType] = mapped_column(
        SAEnum(
            TransactionType,
            name="transaction_type_enum",
            create_constraint=True,
        ),
        nullable=False,
    )
    amount: Mapped[Decimal] = mapped_column(
        Numeric(19, 4), nullable=False
    )
    date_time: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=datetime.utcnow, index=True
    )
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default=TRANSACTION_COMPLETED
    )
    fee: Mapped[Decimal] = mapped_column(
        Numeric(19, 4), nullable=False, default=Decimal("0")
    )

    def __repr__(self) -> str:
        return (
            f"<Transaction {self.transaction_id} "
            f"{self.transaction_type.value} {self.amount}>"
        )
