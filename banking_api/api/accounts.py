"""
Account API endpoints.
"""

from fastapi import APIRouter, Depends

from banking_api.api.dependencies import get_gateway
from banking_api.api.responses import success
from banking_api.schemas.account import AccountCreate, AccountStatusUpdate
from banking_api.services.gateway import LedgerGateway

router = APIRouter(prefix="/accounts", tags=["Accounts"])


@router.post("", status_code=201)
@router.post("/create", status_code=201)
def create_account(
    request: AccountCreate,
    gateway: LedgerGateway = Depends(get_gateway),
):
    """
    Open a new account for an existing customer.

    Also served at /accounts/create, which older clients
    still call.
    """
    created = gateway.create_account(
        request.customer_id, request.account_type, request.initial_balance
    )
    return success(
        "Account created successfully",
        {"account_no": created.account_no},
    )


@router.get("")
def list_accounts(gateway: LedgerGateway = Depends(get_gateway)):
    """List all accounts with their holder's name."""
    return success(data=gateway.list_accounts())


@router.get("/{account_no}")
def get_account(
    account_no: str,
    gateway: LedgerGateway = Depends(get_gateway),
):
    """Get account details along with the holder's CNIC and contact."""
    return success(data=gateway.get_account(account_no))


@router.get("/{account_no}/balance")
def get_account_balance(
    account_no: str,
    gateway: LedgerGateway = Depends(get_gateway),
):
    """Get the current balance of an account."""
    return success(data=gateway.get_balance(account_no))


@router.put("/{account_no}/status")
def update_account_status(
    account_no: str,
    request: AccountStatusUpdate,
    gateway: LedgerGateway = Depends(get_gateway),
):
    """Set an account's status."""
    gateway.update_account_status(account_no, request.status)
    return success("Account status updated successfully")
