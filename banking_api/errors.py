"""
Error taxonomy and the single error-to-HTTP mapping.

Three kinds of failure reach the client:

- validation errors (400): a required field is missing or invalid;
  the ledger is never called
- not found (404): a read returned no row, or an update/delete
  affected none
- ledger faults (500): anything the ledger raised, passed through
  verbatim

Every handler below goes through ``status_for`` so the mapping
lives in one place.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class BankingError(Exception):
    """Base exception for the service."""


class ResourceNotFound(BankingError):
    """A lookup returned zero rows, or a write affected zero rows."""

    def __init__(self, entity: str):
        self.entity = entity
        super().__init__(f"{entity} not found")


class LedgerError(BankingError):
    """Business rule failure raised by a ledger operation."""


class LedgerFault(BankingError):
    """Any failure of a gateway call. The message is the raw ledger text."""


def status_for(exc: Exception) -> int:
    """Map an exception to the HTTP status the client receives."""
    if isinstance(exc, RequestValidationError):
        return 400
    if isinstance(exc, ResourceNotFound):
        return 404
    if isinstance(exc, StarletteHTTPException):
        return exc.status_code
    return 500


def describe_validation_error(exc: RequestValidationError) -> str:
    """Render pydantic errors as ``field: problem; field: problem``."""
    problems = []
    for error in exc.errors():
        location = [str(part) for part in error.get("loc", ()) if part != "body"]
        field = ".".join(location) or "body"
        problems.append(f"{field}: {error.get('msg', 'invalid value')}")
    return "; ".join(problems) or "Invalid request"


def error_body(exc: Exception) -> dict:
    """Build the failure envelope for an exception."""
    if isinstance(exc, RequestValidationError):
        return {"success": False, "message": describe_validation_error(exc)}
    if isinstance(exc, ResourceNotFound):
        return {"success": False, "message": str(exc)}
    if isinstance(exc, StarletteHTTPException):
        return {"success": False, "message": str(exc.detail)}
    if isinstance(exc, LedgerFault):
        return {
            "success": False,
            "message": "Ledger operation failed",
            "error": str(exc),
        }
    return {
        "success": False,
        "message": "Internal Server Error",
        "error": str(exc),
    }


async def _handle(request: Request, exc: Exception) -> JSONResponse:
    status_code = status_for(exc)
    if status_code >= 500:
        logger.error(
            "Request failed",
            extra={
                "method": request.method,
                "path": request.url.path,
                "error": str(exc),
            },
        )
    return JSONResponse(status_code=status_code, content=error_body(exc))


def register_error_handlers(app: FastAPI) -> None:
    """Install the envelope-producing handlers on the app."""
    app.add_exception_handler(RequestValidationError, _handle)
    app.add_exception_handler(StarletteHTTPException, _handle)
    app.add_exception_handler(BankingError, _handle)
    app.add_exception_handler(Exception, _handle)
