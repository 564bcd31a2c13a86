"""
Customer API endpoints.
"""

from fastapi import APIRouter, Depends

from banking_api.api.dependencies import get_gateway
from banking_api.api.responses import success
from banking_api.schemas.customer import CustomerCreate, CustomerUpdate
from banking_api.services.gateway import LedgerGateway

router = APIRouter(prefix="/customers", tags=["Customers"])


@router.post("", status_code=201)
def create_customer(
    request: CustomerCreate,
    gateway: LedgerGateway = Depends(get_gateway),
):
    """Register a customer. The ledger allocates the customer ID."""
    created = gateway.create_customer(request.cnic, request.name, request.contact)
    return success(
        "Customer created successfully",
        {"customer_id": created.customer_id},
    )


@router.get("")
def list_customers(gateway: LedgerGateway = Depends(get_gateway)):
    """List all customers, newest first."""
    return success(data=gateway.list_customers())


@router.get("/{customer_id}")
def get_customer(
    customer_id: str,
    gateway: LedgerGateway = Depends(get_gateway),
):
    """
    Get a customer with a summary of their accounts.

    The response includes total_accounts and total_balance
    across every account the customer holds.
    """
    return success(data=gateway.get_customer(customer_id))


@router.put("/{customer_id}")
def update_customer(
    customer_id: str,
    request: CustomerUpdate,
    gateway: LedgerGateway = Depends(get_gateway),
):
    """Change a customer's name and contact."""
    gateway.update_customer(customer_id, request.name, request.contact)
    return success("Customer updated successfully")


@router.delete("/{customer_id}")
def delete_customer(
    customer_id: str,
    gateway: LedgerGateway = Depends(get_gateway),
):
    """Remove a customer who holds no accounts or loans."""
    gateway.delete_customer(customer_id)
    return success("Customer deleted successfully")
