"""
Health check endpoints.

/health is a liveness probe and never touches the database.
/health/ready additionally checks that the ledger answers.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from banking_api.models.base import get_db

router = APIRouter(prefix="/health", tags=["Health"])


@router.get("")
def health_check():
    """Static liveness payload."""
    return {"status": "OK", "message": "Core Banking API is running"}


@router.get("/ready")
def readiness_check(db: Session = Depends(get_db)):
    """
    Report whether a pooled connection can run a query.

    Returns 503 when the database is unreachable, telling
    the load balancer to stop routing to this instance.
    """
    try:
        db.execute(text("SELECT 1"))
        database = "healthy"
    except SQLAlchemyError:
        database = "unhealthy"

    return JSONResponse(
        status_code=200 if database == "healthy" else 503,
        content={
            "status": "OK" if database == "healthy" else "DEGRADED",
            "database": database,
        },
    )
