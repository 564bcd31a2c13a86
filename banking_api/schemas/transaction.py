"""
Pydantic schemas for transaction operations.
"""

from decimal import Decimal

from pydantic import BaseModel, Field


class DepositRequest(BaseModel):
    account_no: str = Field(min_length=1, max_length=20)
    amount: Decimal = Field(gt=0, decimal_places=4)


class WithdrawalRequest(BaseModel):
    account_no: str = Field(min_length=1, max_length=20)
    amount: Decimal = Field(gt=0, decimal_places=4)


class TransferRequest(BaseModel):
    """
    Same-account transfers are not rejected here; that
    decision belongs to the ledger.
    """
    from_account: str = Field(min_length=1, max_length=20)
    to_account: str = Field(min_length=1, max_length=20)
    amount: Decimal = Field(gt=0, decimal_places=4)
