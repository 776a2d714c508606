"""Turn request validation failures into per-field messages."""
from collections.abc import Sequence
from typing import Any

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from src.app.logging import get_logger

logger = get_logger(__name__)

# Request locations that prefix the field path in validation errors
_LOCATION_PREFIXES = {"body", "query", "path", "header", "cookie"}


def _field_name(loc: Sequence[Any]) -> str:
    parts = [str(part) for part in loc]
    if parts and parts[0] in _LOCATION_PREFIXES:
        parts = parts[1:]
    return ".".join(parts) or "request"


def _message(error: dict[str, Any], field: str) -> str:
    if error.get("type") == "missing":
        return f"{field[:1].upper()}{field[1:]} is required"
    if error.get("type") == "value_error" and "email" in field.lower():
        return "Invalid email format"
    message = str(error.get("msg", "Invalid value"))
    return message.removeprefix("Value error, ")


def collect_field_errors(errors: Sequence[dict[str, Any]]) -> dict[str, str]:
    """
    Map validation errors to ``{field: message}``.

    Field names are the ones the client sent (camelCase aliases). The first
    error reported for a field wins.

    Args:
        errors: Errors as returned by ``ValidationError.errors()``

    Returns:
        One human-readable message per offending field
    """
    field_errors: dict[str, str] = {}
    for error in errors:
        field = _field_name(error.get("loc", ()))
        field_errors.setdefault(field, _message(error, field))
    return field_errors


async def request_validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report invalid requests as 400 with one message per field."""
    field_errors = collect_field_errors(exc.errors())
    logger.warning("Rejected %s %s: %s", request.method, request.url.path, field_errors)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Validation failed", "errors": field_errors},
    )
