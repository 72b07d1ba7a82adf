"""Global exception handlers that map errors to the standard JSON envelope."""

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from goodschain.errors import AppError, ErrorCode, invalid_input
from goodschain.schemas.error import ErrorResponse

# Status codes Starlette raises itself (routing, method checks) mapped to our codes
_HTTP_EXCEPTION_CODES = {
    400: ErrorCode.INVALID_INPUT,
    401: ErrorCode.UNAUTHORIZED,
    403: ErrorCode.FORBIDDEN,
    404: ErrorCode.NOT_FOUND,
    408: ErrorCode.TIMEOUT,
    409: ErrorCode.ALREADY_EXISTS,
}


def error_response(error: AppError, headers: dict[str, str] | None = None) -> JSONResponse:
    """Render an AppError as the standard envelope. Details and cause stay server-side."""
    body = ErrorResponse(code=error.code.value, message=error.message)
    return JSONResponse(status_code=error.http_status, content=body.model_dump(), headers=headers)


def _record(request: Request, error: AppError) -> None:
    # Read back by the error-handling middleware for the request log line
    request.state.app_error = error


def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    _record(request, exc)
    return error_response(exc)


def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    error = invalid_input(format_validation_errors(exc)).with_details(errors=exc.errors())
    _record(request, error)
    return error_response(error)


def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    fallback = ErrorCode.INVALID_INPUT if exc.status_code < 500 else ErrorCode.INTERNAL_ERROR
    code = _HTTP_EXCEPTION_CODES.get(exc.status_code, fallback)
    if exc.status_code == 404:
        message = "Resource not found"
    elif exc.status_code >= 500:
        message = "Internal server error"
    else:
        message = str(exc.detail)
    error = AppError(code, message)
    _record(request, error)
    # Keep the status Starlette chose (e.g. 405) even when it has no code of its own
    body = ErrorResponse(code=error.code.value, message=error.message)
    return JSONResponse(
        status_code=exc.status_code,
        content=body.model_dump(),
        headers=getattr(exc, "headers", None),
    )


def format_validation_errors(exc: RequestValidationError) -> str:
    """Flatten pydantic errors into one readable line, e.g. "body.email: Field required"."""
    parts = []
    for err in exc.errors():
        location = ".".join(str(item) for item in err.get("loc", ()))
        parts.append(f"{location}: {err.get('msg', 'invalid value')}" if location else err.get("msg", ""))
    return "; ".join(parts) or "Invalid request"


def register_exception_handlers(app):
    """Register error handlers on the FastAPI app."""
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
