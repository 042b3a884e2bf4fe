from fastapi import HTTPException, Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from app.core.exceptions import (
    CBTError, NotFoundError, UnavailableError, InvalidStateError, InvalidInputError, PermissionDeniedError
)
from app.core.security import InvalidTokenError
from app.schemas.response import ErrorResponse, ErrorDetail
from app.utils.clock import utcnow
import logging
import uuid

logger = logging.getLogger(__name__)

_DOMAIN_STATUS = (
    (InvalidTokenError, 401),
    (NotFoundError, 404),
    (PermissionDeniedError, 403),
    (UnavailableError, 409),
    (InvalidStateError, 409),
    (InvalidInputError, 400),
)

def _get_error_code(status_code: int) -> str:
    code_map = {
        400: "BAD_REQUEST",
        401: "UNAUTHORIZED",
        403: "FORBIDDEN",
        404: "NOT_FOUND",
        405: "METHOD_NOT_ALLOWED",
        409: "CONFLICT",
        422: "VALIDATION_ERROR",
        500: "INTERNAL_SERVER_ERROR",
    }
    return code_map.get(status_code, f"HTTP_{status_code}")

def _get_request_id(request: Request) -> str:
    return getattr(request.state, "request_id", None) or str(uuid.uuid4())

def _error_response(request: Request, request_id: str, status_code: int, detail: ErrorDetail) -> JSONResponse:
    error_response = ErrorResponse(
        error=detail,
        timestamp=utcnow().isoformat(),
        path=str(request.url),
        request_id=request_id
    )
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(error_response),
        headers={"X-Request-ID": request_id}
    )

def _status_for(exc: CBTError) -> int:
    for exc_type, status_code in _DOMAIN_STATUS:
        if isinstance(exc, exc_type):
            return status_code
    return 500

async def cbt_exception_handler(request: Request, exc: CBTError):
    request_id = _get_request_id(request)
    status_code = _status_for(exc)
    logger.warning(f"[{request_id}] {exc.code} ({status_code}): {exc.message}", extra={"request_id": request_id})
    return _error_response(
        request, request_id, status_code,
        ErrorDetail(code=exc.code, message=exc.message, details=exc.details)
    )

async def validation_exception_handler(request: Request, exc: RequestValidationError):
    request_id = _get_request_id(request)
    logger.warning(f"[{request_id}] Validation error: {exc.errors()}", extra={"request_id": request_id})
    return _error_response(
        request, request_id, 422,
        ErrorDetail(
            code="VALIDATION_ERROR",
            message="Request validation failed",
            details={"validation_errors": jsonable_encoder(exc.errors())}
        )
    )

async def global_exception_handler(request: Request, exc: Exception):
    request_id = _get_request_id(request)

    if isinstance(exc, HTTPException):
        logger.warning(f"[{request_id}] HTTP {exc.status_code}: {exc.detail}", extra={"request_id": request_id})
        return _error_response(
            request, request_id, exc.status_code,
            ErrorDetail(
                code=_get_error_code(exc.status_code),
                message=exc.detail if isinstance(exc.detail, str) else str(exc.detail)
            )
        )

    logger.error(f"[{request_id}] Unhandled exception: {exc}", exc_info=True, extra={"request_id": request_id})
    return _error_response(
        request, request_id, 500,
        ErrorDetail(
            code="INTERNAL_SERVER_ERROR",
            message="An unexpected error occurred",
            details={"error_type": type(exc).__name__}
        )
    )
