"""FastAPI dependencies"""

from fastapi import Depends
from sqlalchemy.orm import Session

from banking_api.models.base import get_db
from banking_api.services.gateway import LedgerGateway


def get_gateway(db: Session = Depends(get_db)) -> LedgerGateway:
    """Ledger gateway bound to this request's session."""
    return LedgerGateway(db)
