"""Translate domain and credential errors into JSON error responses.

Every error response has the body::

    {"success": false, "detail": "<message>", "code": "<ErrorCode value>"}

The ``details`` of a DomainException go to the log only.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from roster.domain.shared.exceptions import DomainException, ErrorCode
from roster_auth import WeakPasswordError

logger = logging.getLogger(__name__)

ERROR_CODE_TO_STATUS: dict[ErrorCode, int] = {
    **dict.fromkeys(
        (
            ErrorCode.VALIDATION_ERROR,
            ErrorCode.INVALID_FORMAT,
            ErrorCode.INVALID_USER_DATA,
            ErrorCode.INVALID_ROLE_DATA,
            ErrorCode.USERS_NOT_FOUND,
            ErrorCode.ROLES_NOT_FOUND,
            ErrorCode.EMPTY_ASSIGNMENT,
            ErrorCode.NO_USERS_TO_TRANSFER,
            ErrorCode.INVALID_ROLE_TRANSFER,
            ErrorCode.INVALID_REPLACEMENT_ROLE,
            ErrorCode.WEAK_PASSWORD,
        ),
        status.HTTP_400_BAD_REQUEST,
    ),
    **dict.fromkeys(
        (
            ErrorCode.ENTITY_NOT_FOUND,
            ErrorCode.USER_NOT_FOUND,
            ErrorCode.ROLE_NOT_FOUND,
        ),
        status.HTTP_404_NOT_FOUND,
    ),
    **dict.fromkeys(
        (
            ErrorCode.CONFLICT,
            ErrorCode.DUPLICATE_EMAIL,
            ErrorCode.DUPLICATE_ROLE_NAME,
            ErrorCode.DUPLICATE_ASSIGNMENT,
            ErrorCode.ROLE_IN_USE,
        ),
        status.HTTP_409_CONFLICT,
    ),
    **dict.fromkeys(
        (ErrorCode.PERSISTENCE_FAILURE, ErrorCode.INTERNAL_ERROR),
        status.HTTP_500_INTERNAL_SERVER_ERROR,
    ),
}


def status_for(exc: DomainException) -> int:
    return ERROR_CODE_TO_STATUS.get(exc.code, status.HTTP_500_INTERNAL_SERVER_ERROR)


def error_response(status_code: int, detail: str, code: ErrorCode) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "detail": detail, "code": code.value},
    )


async def _on_domain_error(request: Request, exc: DomainException) -> JSONResponse:
    status_code = status_for(exc)
    log = logger.error if status_code >= 500 else logger.warning
    log(
        "%s %s failed with %s: %s (details=%s)",
        request.method,
        request.url.path,
        exc.code.value,
        exc.message,
        exc.details,
    )
    return error_response(status_code, exc.message, exc.code)


async def _on_weak_password(request: Request, exc: WeakPasswordError) -> JSONResponse:
    logger.warning("%s %s rejected a weak password", request.method, request.url.path)
    return error_response(
        status.HTTP_400_BAD_REQUEST,
        exc.message,
        ErrorCode.WEAK_PASSWORD,
    )


async def _on_unexpected(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "An internal error occurred",
        ErrorCode.INTERNAL_ERROR,
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register the error handlers on ``app``.

    Parameters
    ----------
    app
        The FastAPI application instance
    """
    app.add_exception_handler(DomainException, _on_domain_error)
    app.add_exception_handler(WeakPasswordError, _on_weak_password)
    app.add_exception_handler(Exception, _on_unexpected)
