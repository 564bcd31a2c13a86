"""
Pydantic schemas for loan operations.

Clients often send numeric fields as JSON strings;
pydantic coerces "5000" and "12" before the positivity
checks run.
"""

from decimal import Decimal

from pydantic import BaseModel, Field


class LoanCreate(BaseModel):
    customer_id: str = Field(min_length=1, max_length=20)
    loan_amount: Decimal = Field(gt=0, decimal_places=4)
    time_period: int = Field(gt=0)
    interest_rate: Decimal = Field(gt=0, decimal_places=4)
    loan_type: str = Field(min_length=1, max_length=30)
