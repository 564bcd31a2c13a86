"""
Transaction API endpoints.
"""

from fastapi import APIRouter, Depends

from banking_api.api.dependencies import get_gateway
from banking_api.api.responses import success
from banking_api.schemas.transaction import (
    DepositRequest,
    WithdrawalRequest,
    TransferRequest,
)
from banking_api.services.gateway import LedgerGateway

router = APIRouter(prefix="/transactions", tags=["Transactions"])


@router.post("/deposit", status_code=201)
def deposit(
    request: DepositRequest,
    gateway: LedgerGateway = Depends(get_gateway),
):
    """Deposit money into an account."""
    posted = gateway.deposit(request.account_no, request.amount)
    return success(
        "Deposit successful",
        {"transaction_id": posted.transaction_id, "amount": request.amount},
    )


@router.post("/withdraw", status_code=201)
def withdraw(
    request: WithdrawalRequest,
    gateway: LedgerGateway = Depends(get_gateway),
):
    """Withdraw money from an account."""
    posted = gateway.withdraw(request.account_no, request.amount)
    return success(
        "Withdrawal successful",
        {"transaction_id": posted.transaction_id, "amount": request.amount},
    )


@router.post("/transfer", status_code=201)
def transfer(
    request: TransferRequest,
    gateway: LedgerGateway = Depends(get_gateway),
):
    """Transfer money between two accounts."""
    posted = gateway.transfer(
        request.from_account, request.to_account, request.amount
    )
    return success(
        "Transfer successful",
        {
            "transaction_id": posted.transaction_id,
            "from_account": request.from_account,
            "to_account": request.to_account,
            "amount": request.amount,
        },
    )


@router.get("")
def list_transactions(gateway: LedgerGateway = Depends(get_gateway)):
    """List all transactions, newest first."""
    return success(data=gateway.list_transactions())


@router.get("/{transaction_id}")
def get_transaction(
    transaction_id: str,
    gateway: LedgerGateway = Depends(get_gateway),
):
    """Get transaction details."""
    return success(data=gateway.get_transaction(transaction_id))
