"""FastAPI entrypoint for the CRM analytics service."""

from __future__ import annotations

import logging
import time

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from crm_analytics.app.api import api_router
from crm_analytics.app.errors import ErrorResponse, get_request_id, register_exception_handlers
from crm_analytics.app.logging_config import configure_logging
from crm_analytics.settings import get_settings

configure_logging(get_settings().log_level)
logger = logging.getLogger("crm_analytics")

app = FastAPI(title="CRM Analytics Engine", version="0.1.0")


@app.middleware("http")
async def request_context_middleware(request: Request, call_next):
    request_id = get_request_id(request)
    start = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception:
        logger.exception("Unhandled exception during request", extra={"request_id": request_id})
        error = ErrorResponse(detail="Internal server error", error_code="internal_error", request_id=request_id)
        return JSONResponse(status_code=500, content=error.model_dump(), headers={"X-Request-ID": request_id})
    duration_ms = (time.perf_counter() - start) * 1000
    logger.info(
        "request completed | request_id=%s method=%s path=%s status=%s duration_ms=%.2f",
        request_id,
        request.method,
        request.url.path,
        response.status_code,
        duration_ms,
    )
    response.headers["X-Request-ID"] = request_id
    return response


register_exception_handlers(app)
app.include_router(api_router, prefix="/api")

__all__ = ["app"]
