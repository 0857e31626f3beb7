"""Global error handling utilities for the CRM analytics service."""

from __future__ import annotations

import logging
import uuid

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette.exceptions import HTTPException

logger = logging.getLogger("crm_analytics")


class ErrorResponse(BaseModel):
    """Standardized error response envelope."""

    detail: str
    error_code: str
    request_id: str | None = None


def _error_code_from_status(status_code: int) -> str:
    if status_code == 404:
        return "not_found"
    if status_code == 400:
        return "bad_request"
    if status_code == 405:
        return "method_not_allowed"
    if status_code == 422:
        return "validation_error"
    return "http_error"


def _envelope(request: Request, status_code: int, detail: str, error_code: str) -> JSONResponse:
    request_id = getattr(request.state, "request_id", None)
    error = ErrorResponse(detail=detail, error_code=error_code, request_id=request_id)
    headers = {"X-Request-ID": request_id} if request_id else None
    return JSONResponse(status_code=status_code, content=error.model_dump(), headers=headers)


def register_exception_handlers(app: FastAPI) -> None:
    """Register global exception handlers for standardized responses."""

    @app.exception_handler(HTTPException)
    async def _handle_http_exception(request: Request, exc: HTTPException) -> JSONResponse:
        detail = exc.detail if exc.detail else "HTTP error"
        if not isinstance(detail, str):
            detail = str(detail)
        logger.warning("HTTPException: status=%s detail=%s", exc.status_code, detail, extra={"request_id": getattr(request.state, "request_id", None)})
        return _envelope(request, exc.status_code, detail, _error_code_from_status(exc.status_code))

    @app.exception_handler(RequestValidationError)
    async def _handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        messages = [f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg')}" for err in exc.errors()]
        detail = "; ".join(messages) or "Invalid request"
        logger.warning("Validation error: %s", detail, extra={"request_id": getattr(request.state, "request_id", None)})
        return _envelope(request, 422, detail, "validation_error")

    @app.exception_handler(ValueError)
    async def _handle_value_error(request: Request, exc: ValueError) -> JSONResponse:
        logger.warning("Rejected analytics input: %s", exc, extra={"request_id": getattr(request.state, "request_id", None)})
        return _envelope(request, 400, str(exc) or "Invalid input", "bad_request")

    @app.exception_handler(Exception)
    async def _handle_generic_exception(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled exception", extra={"request_id": getattr(request.state, "request_id", None)})
        return _envelope(request, 500, "Internal server error", "internal_error")


def get_request_id(request: Request) -> str:
    """Generate or retrieve a request correlation id."""

    if getattr(request.state, "request_id", None):
        return request.state.request_id
    request_id = str(uuid.uuid4())
    request.state.request_id = request_id
    return request_id


__all__ = ["ErrorResponse", "register_exception_handlers", "get_request_id"]
