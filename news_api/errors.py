"""
Error taxonomy and the exception handlers that render it.

Every error response has the same shape, ``{"msg": "<status phrase>"}``:
``Bad request`` (400), ``Not found`` (404) and ``Internal server error``
(500).  The reason behind a 400 is tracked internally as a
:class:`ValidationFailure` and only ever reaches the logs.
"""
import logging
from enum import Enum
from http import HTTPStatus
from typing import Any, Iterable

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class ValidationFailure(str, Enum):
    MISSING_FIELD = "missing_field"
    WRONG_TYPE = "wrong_type"
    INVALID_VALUE = "invalid_value"
    MALFORMED_BODY = "malformed_body"
    MALFORMED_ID = "malformed_id"


class BadRequest(HTTPException):
    """A 400 raised by our own code, tagged with the reason it was rejected."""

    def __init__(self, failure: ValidationFailure, detail: str | None = None) -> None:
        super().__init__(status_code=400, detail=detail or failure.value)
        self.failure = failure


def classify_validation_errors(errors: Iterable[dict[str, Any]]) -> ValidationFailure:
    """
    Reduce pydantic error entries to a single :class:`ValidationFailure`.

    A missing field wins over everything else, then a body that was not
    valid JSON, then type mismatches.  Anything left over (range checks and
    the like) is an invalid value.
    """
    types = {err.get("type", "") for err in errors}
    if "missing" in types:
        return ValidationFailure.MISSING_FIELD
    if "json_invalid" in types:
        return ValidationFailure.MALFORMED_BODY
    if any(t.endswith("_type") or t.endswith("_parsing") for t in types):
        return ValidationFailure.WRONG_TYPE
    return ValidationFailure.INVALID_VALUE


def status_message(status_code: int) -> str:
    """``404`` -> ``"Not found"``; unknown codes fall back to ``"Error"``."""
    try:
        return HTTPStatus(status_code).phrase.capitalize()
    except ValueError:
        return "Error"


def error_response(status_code: int, headers: dict[str, str] | None = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"msg": status_message(status_code)},
        headers=headers,
    )


# ---------------------------------------------------------------------------
# Handlers
# ---------------------------------------------------------------------------

async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    failure = classify_validation_errors(exc.errors())
    logger.info(
        "Bad request on %s %s: %s (%d error(s))",
        request.method,
        request.url.path,
        failure.value,
        len(exc.errors()),
    )
    return error_response(400)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if isinstance(exc, BadRequest):
        logger.info(
            "Bad request on %s %s: %s (%s)",
            request.method,
            request.url.path,
            exc.failure.value,
            exc.detail,
        )
    elif exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.detail)
    else:
        logger.info(
            "%d on %s %s: %s", exc.status_code, request.method, request.url.path, exc.detail
        )
    return error_response(exc.status_code, headers=exc.headers)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return error_response(500)


def install_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
