# smartbarber/errors.py
"""
Domain errors for the booking core.

Each error maps to exactly one HTTP response; routes never build
HTTPExceptions for domain outcomes themselves.
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class DomainError(Exception):
    """Base class for errors raised by the booking core."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, errors: Optional[List[Dict[str, Any]]] = None):
        self.message = message
        self.code = self.__class__.__name__
        self.errors = errors
        super().__init__(message)

    def to_http_exception(self) -> HTTPException:
        detail: Dict[str, Any] = {"error": self.message, "code": self.code}
        if self.errors:
            detail["errors"] = self.errors
        return HTTPException(status_code=self.status_code, detail=detail)


class ValidationError(DomainError):
    """Missing or malformed input."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(DomainError):
    """Referenced barber, service or booking does not exist."""

    status_code = status.HTTP_404_NOT_FOUND


class ForbiddenError(DomainError):
    """The caller does not own the booking.

    Reported as a plain 404 so non-owners cannot probe for booking ids.
    """

    status_code = status.HTTP_404_NOT_FOUND

    def to_http_exception(self) -> HTTPException:
        return HTTPException(
            status_code=self.status_code,
            detail={"error": "Booking not found", "code": NotFoundError.__name__},
        )


class SlotTakenError(DomainError):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str = "This time slot is already booked"):
        super().__init__(message)


class InfrastructureError(DomainError):
    """Storage or network failure. The whole request may be retried."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


def _field_errors(exc: RequestValidationError) -> List[Dict[str, Any]]:
    # Request schemas are flat. Anything after the field name is a union
    # member tag such as "datetime" and is dropped, one entry per field.
    out = []
    seen = set()
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ()) if part not in ("body", "path", "query")]
        field = loc[0] if loc else ""
        if field in seen:
            continue
        seen.add(field)
        out.append({"field": field, "message": err.get("msg", "")})
    return out


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
        if isinstance(exc, InfrastructureError):
            logger.error(
                "Infrastructure error on %s %s: %s",
                request.method,
                request.url.path,
                exc.message,
                exc_info=exc.__cause__ or exc,
            )
        http_exc = exc.to_http_exception()
        return JSONResponse(status_code=http_exc.status_code, content=http_exc.detail)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        errors = _field_errors(exc)
        fields = ", ".join(e["field"] for e in errors if e["field"])
        message = f"Invalid or missing fields: {fields}" if fields else "Invalid request"
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=jsonable_encoder({"error": message, "code": ValidationError.__name__, "errors": errors}),
        )
