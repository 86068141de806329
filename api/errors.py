"""
Error handling for the API.

Every HireHubError is rendered as its ``to_dict()`` with a status code
chosen by exception type.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from shared.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ExternalServiceError,
    HireHubError,
    NotFoundError,
    ValidationError,
)
from modules.applications.exceptions import AlreadyAppliedError
from modules.auth.exceptions import MalformedProfileError

logger = logging.getLogger(__name__)

# First match wins, so subclasses come before their bases
STATUS_CODES: tuple[tuple[type[HireHubError], int], ...] = (
    (AlreadyAppliedError, 409),
    (MalformedProfileError, 500),
    (NotFoundError, 404),
    (ValidationError, 400),
    (AuthenticationError, 401),
    (AuthorizationError, 403),
    (ExternalServiceError, 502),
)


def status_code_for(exc: HireHubError) -> int:
    for error_type, status_code in STATUS_CODES:
        if isinstance(exc, error_type):
            return status_code
    return 500


async def hire_hub_error_handler(request: Request, exc: HireHubError) -> JSONResponse:
    status_code = status_code_for(exc)
    if status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)

    headers = {"WWW-Authenticate": "Bearer"} if status_code == 401 else None
    return JSONResponse(status_code=status_code, content=exc.to_dict(), headers=headers)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(HireHubError, hire_hub_error_handler)
