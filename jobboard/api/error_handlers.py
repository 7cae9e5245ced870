"""Translate exceptions into `{error, issues?}` / `{error, details?}` JSON bodies."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from jobboard.config import Settings
from jobboard.errors import InternalError, InvalidTokenError, Issue, JobBoardError, UnauthenticatedError, ValidationError


logger = logging.getLogger(__name__)


def _issue_path(loc: tuple | list) -> str:
    # Drop the "body"/"query"/"path" prefix FastAPI puts in front of the field location.
    parts = [str(p) for p in loc]
    if parts and parts[0] in ("body", "query", "path", "header"):
        parts = parts[1:]
    return ".".join(parts)


async def job_board_error_handler(request: Request, exc: JobBoardError) -> JSONResponse:
    headers = None
    if isinstance(exc, (UnauthenticatedError, InvalidTokenError)):
        headers = {"WWW-Authenticate": "Bearer"}
    return JSONResponse(status_code=exc.status_code, content=exc.to_body(), headers=headers)


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    issues = [Issue(path=_issue_path(err.get("loc", ())), message=str(err.get("msg", ""))) for err in exc.errors()]
    error = ValidationError("Validation error", issues)
    return JSONResponse(status_code=error.status_code, content=error.to_body())


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


def register_error_handlers(app: FastAPI, settings: Settings) -> None:
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        error = InternalError(details=None if settings.is_production else str(exc))
        return JSONResponse(status_code=error.status_code, content=error.to_body())

    app.add_exception_handler(JobBoardError, job_board_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
