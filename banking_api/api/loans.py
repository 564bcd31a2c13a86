"""
Loan API endpoints.
"""

from fastapi import APIRouter, Depends

from banking_api.api.dependencies import get_gateway
from banking_api.api.responses import success
from banking_api.schemas.loan import LoanCreate
from banking_api.services.gateway import LedgerGateway

router = APIRouter(prefix="/loans", tags=["Loans"])


@router.post("", status_code=201)
def create_loan(
    request: LoanCreate,
    gateway: LedgerGateway = Depends(get_gateway),
):
    """Issue a loan and quote its monthly installment."""
    created = gateway.create_loan(
        request.customer_id,
        request.loan_amount,
        request.time_period,
        request.interest_rate,
        request.loan_type,
    )
    return success(
        "Loan created successfully",
        {"loan_id": created.loan_id, "monthly_emi": created.monthly_emi},
    )


@router.get("")
def list_loans(gateway: LedgerGateway = Depends(get_gateway)):
    return success(data=gateway.list_loans())


@router.get("/{loan_id}")
def get_loan(
    loan_id: str,
    gateway: LedgerGateway = Depends(get_gateway),
):
    """Get a loan with its holder's details and monthly installment."""
    return success(data=gateway.get_loan(loan_id))
