"""
Pydantic schemas for customer operations.
"""

from pydantic import BaseModel, Field


class CustomerCreate(BaseModel):
    cnic: str = Field(min_length=1, max_length=20)
    name: str = Field(min_length=1, max_length=100)
    contact: str | None = Field(default=None, max_length=50)


class CustomerUpdate(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    contact: str | None = Field(default=None, max_length=50)
