"""
Pydantic schemas for account operations.
"""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from banking_api.models.enums import AccountType, AccountStatus


def _upper(value):
    if isinstance(value, str):
        return value.strip().upper()
    return value


class AccountCreate(BaseModel):
    """Request to open a new account. Zero is a valid opening balance."""
    model_config = ConfigDict(populate_by_name=True)

    customer_id: str = Field(min_length=1, max_length=20)
    account_type: AccountType = Field(alias="type")
    initial_balance: Decimal = Field(ge=0, decimal_places=4)

    @field_validator("account_type", mode="before")
    @classmethod
    def normalise_type(cls, v):
        return _upper(v)


class AccountStatusUpdate(BaseModel):
    status: AccountStatus

    @field_validator("status", mode="before")
    @classmethod
    def normalise_status(cls, v):
        return _upper(v)
