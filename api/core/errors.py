"""
API error types and their HTTP mapping.

Raise these from services/repositories; `register_exception_handlers` turns
them into JSON responses of the form:

    {"error": {"message": "...", "status": 404}}
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ApiError(Exception):
    status_code = 500
    default_message = "Internal server error."

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class BadRequestError(ApiError):
    status_code = 400
    default_message = "Bad request."


class InvalidInputError(BadRequestError):
    default_message = "No data to update."


class InvalidRangeError(BadRequestError):
    default_message = "Lower bound must not exceed upper bound."


class UnauthorizedError(ApiError):
    status_code = 401
    default_message = "Unauthorized"


class NotFoundError(ApiError):
    status_code = 404
    default_message = "Not found."


async def _api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("api_error path=%s status=%s", request.url.path, exc.status_code)
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": {"message": exc.message, "status": exc.status_code}},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, _api_error_handler)
