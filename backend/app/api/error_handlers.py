"""Global exception handlers rendering every failure as an ErrorEnvelope."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from http import HTTPStatus

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.errors import EmployeeApiError, UnexpectedFailure, ValidationFailure
from app.models.errors import ErrorEnvelope

logger = logging.getLogger(__name__)


def error_response(status_code: int, summary: str, detail: str) -> JSONResponse:
    envelope = ErrorEnvelope(
        status=status_code,
        summary=summary,
        detail=detail,
        timestamp=datetime.now(timezone.utc),
    )
    return JSONResponse(status_code=status_code, content=envelope.model_dump(mode="json"))


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(EmployeeApiError)
    async def employee_api_error_handler(request: Request, exc: EmployeeApiError) -> JSONResponse:
        logger.error("%s on %s %s: %s", exc.summary, request.method, request.url.path, exc.message)
        return error_response(exc.status_code, exc.summary, exc.message)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        summary = HTTPStatus(exc.status_code).phrase.replace(" ", "")
        return error_response(exc.status_code, summary, str(exc.detail))

    @app.exception_handler(RequestValidationError)
    async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        detail = "; ".join(
            f"{'.'.join(str(loc) for loc in e['loc'])}: {e['msg']}" for e in exc.errors()
        )
        logger.warning("Invalid request on %s: %s", request.url.path, detail)
        return error_response(status.HTTP_400_BAD_REQUEST, ValidationFailure.summary, detail)

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error("Unexpected error on %s", request.url.path, exc_info=exc)
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            UnexpectedFailure.summary,
            str(exc) or "An unexpected error occurred",
        )
