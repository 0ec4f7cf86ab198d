"""
Centralized Error Handling and Logging System
Every non-2xx response is rendered as {"error": "<message>"} and every
response carries an X-Trace-ID header for log correlation.
"""

import json
import logging
import traceback
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Optional
from contextvars import ContextVar

from fastapi import Request, HTTPException
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from models.enums import ErrorType
from services.base_service import ServiceResult

# Context variables for request tracing
request_id_var: ContextVar[str] = ContextVar('request_id', default='')

logger = logging.getLogger(__name__)

INVALID_PAYLOAD_MESSAGE = "Invalid car data"
INTERNAL_ERROR_MESSAGE = "Internal server error"

STATUS_BY_ERROR_TYPE = {
    ErrorType.VALIDATION_ERROR: 400,
    ErrorType.NOT_FOUND: 404,
    ErrorType.STORAGE_ERROR: 500,
}


class ErrorHandlingConfig:
    """Centralized configuration for error handling behavior"""

    LOG_REQUEST_BODIES = True
    LOG_CLIENT_ERRORS = True
    MAX_BODY_LOG_SIZE = 5000  # Truncate large bodies

    @classmethod
    def truncate(cls, body: Optional[str]) -> Optional[str]:
        if body is not None and len(body) > cls.MAX_BODY_LOG_SIZE:
            return body[:cls.MAX_BODY_LOG_SIZE] + "...[TRUNCATED]"
        return body


class StructuredLogger:
    """Structured logging with consistent format and context"""

    @staticmethod
    def log_error(
        error_type: str,
        message: str,
        request: Optional[Request] = None,
        exception: Optional[Exception] = None,
        extra_context: Optional[Dict[str, Any]] = None,
        include_traceback: bool = True
    ) -> str:
        """Log structured error with full context, returning its trace ID"""
        trace_id = request_id_var.get() or str(uuid.uuid4())[:8]

        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "trace_id": trace_id,
            "error_type": error_type,
            "message": message,
            "level": "ERROR"
        }

        if request:
            log_entry["request"] = {
                "method": request.method,
                "path": request.url.path,
                "query_params": dict(request.query_params),
                "client_ip": request.client.host if request.client else None,
            }

        if exception:
            log_entry["exception"] = {
                "type": type(exception).__name__,
                "details": str(exception),
            }
            if include_traceback:
                log_entry["exception"]["traceback"] = "".join(
                    traceback.format_exception(type(exception), exception, exception.__traceback__)
                )

        if extra_context:
            log_entry["context"] = extra_context

        logger.error(json.dumps(log_entry, indent=2, default=str))
        return trace_id


def _captured_body(request: Request) -> Optional[str]:
    body = getattr(request.state, "captured_body", None)
    if not body:
        return None
    try:
        return ErrorHandlingConfig.truncate(body.decode("utf-8"))
    except UnicodeDecodeError:
        return "DECODE_ERROR"


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Middleware to capture request context and add request IDs"""

    async def dispatch(self, request: Request, call_next):
        trace_id = str(uuid.uuid4())[:8]
        request_id_var.set(trace_id)

        body = None
        if ErrorHandlingConfig.LOG_REQUEST_BODIES and request.method in ("POST", "PUT"):
            body = await request.body()

        request.state.captured_body = body
        request.state.trace_id = trace_id

        response = await call_next(request)
        response.headers["X-Trace-ID"] = trace_id
        return response


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def raise_for_result(result: ServiceResult) -> None:
    """Translate a failed ServiceResult into the matching HTTPException"""
    if result.success:
        return
    status_code = STATUS_BY_ERROR_TYPE.get(result.error_type, 500)
    raise HTTPException(status_code=status_code, detail=result.error or INTERNAL_ERROR_MESSAGE)


# Global Exception Handlers
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Handle HTTP exceptions with logging"""
    should_log = exc.status_code >= 500 or (exc.status_code >= 400 and ErrorHandlingConfig.LOG_CLIENT_ERRORS)

    if should_log:
        StructuredLogger.log_error(
            f"http_{exc.status_code}",
            f"HTTP {exc.status_code}: {exc.detail}",
            request=request,
            extra_context={
                "status_code": exc.status_code,
                "request_body": _captured_body(request)
            },
            include_traceback=False
        )

    response = error_response(exc.status_code, str(exc.detail))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report an undecodable request body as a client error (HTTP 400)"""
    validation_details = [
        {
            "field": " -> ".join(str(loc) for loc in error.get("loc", [])),
            "message": error.get("msg", "Unknown validation error"),
            "type": error.get("type", "unknown"),
        }
        for error in exc.errors()
    ]

    StructuredLogger.log_error(
        "validation_error_400",
        f"Request validation failed: {len(validation_details)} validation errors",
        request=request,
        extra_context={
            "validation_errors": validation_details,
            "request_body": _captured_body(request)
        },
        include_traceback=False
    )

    return error_response(400, INVALID_PAYLOAD_MESSAGE)


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle all other exceptions without exposing internal details

    Rendered outside RequestContextMiddleware, so the trace ID header is
    attached here.
    """
    trace_id = StructuredLogger.log_error(
        "internal_server_error",
        f"Unhandled exception: {exc}",
        request=request,
        exception=exc,
        extra_context={"request_body": _captured_body(request)},
        include_traceback=True
    )

    response = error_response(500, INTERNAL_ERROR_MESSAGE)
    response.headers["X-Trace-ID"] = getattr(request.state, "trace_id", None) or trace_id
    return response


def setup_error_handling(app):
    """Setup comprehensive error handling for FastAPI app"""
    app.add_middleware(RequestContextMiddleware)

    # Order matters - most specific first
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    logger.info("Centralized error handling system initialized")
