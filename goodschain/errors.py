"""Application error taxonomy.

Every failure that reaches the HTTP boundary is rendered from an ``AppError``:
a machine-readable code, the HTTP status derived from it, a human message and
an optional wrapped cause.
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Stable, machine-readable error codes for API consumers."""

    INVALID_INPUT = "INVALID_INPUT"
    NOT_FOUND = "NOT_FOUND"
    INTERNAL_ERROR = "INTERNAL_ERROR"
    UNAUTHORIZED = "UNAUTHORIZED"
    FORBIDDEN = "FORBIDDEN"
    ALREADY_EXISTS = "ALREADY_EXISTS"
    TIMEOUT = "TIMEOUT"

    # Business logic errors
    INVALID_TRANSACTION = "INVALID_TRANSACTION"
    INSUFFICIENT_FUNDS = "INSUFFICIENT_FUNDS"
    INVALID_STATUS = "INVALID_STATUS"


_HTTP_STATUS = {
    ErrorCode.INVALID_INPUT: 400,
    ErrorCode.NOT_FOUND: 404,
    ErrorCode.UNAUTHORIZED: 401,
    ErrorCode.FORBIDDEN: 403,
    ErrorCode.ALREADY_EXISTS: 409,
    ErrorCode.TIMEOUT: 408,
    ErrorCode.INVALID_TRANSACTION: 400,
    ErrorCode.INSUFFICIENT_FUNDS: 400,
    ErrorCode.INVALID_STATUS: 400,
}


def http_status_for(code: ErrorCode) -> int:
    """Map an error code to its HTTP status. Unknown codes map to 500."""
    return _HTTP_STATUS.get(code, 500)


class AppError(Exception):
    """Base exception for every error the API knows how to render."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        cause: BaseException | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.code = ErrorCode(code)
        self.message = message
        self.cause = cause
        self.details = details
        self._http_status = http_status_for(self.code)
        if cause is not None:
            self.__cause__ = cause

    @property
    def http_status(self) -> int:
        return self._http_status

    @staticmethod
    def wrap(cause: BaseException, code: ErrorCode, message: str) -> "AppError":
        """Wrap an underlying exception, keeping it reachable through unwrap()."""
        return AppError(code, message, cause=cause)

    def unwrap(self) -> BaseException | None:
        return self.cause

    def with_details(self, **details: Any) -> "AppError":
        """Attach server-side diagnostics. Details are logged, never sent to clients."""
        self.details = {**(self.details or {}), **details}
        return self

    def __str__(self) -> str:
        if self.cause is not None:
            return f"[{self.code.value}] {self.message}: {self.cause}"
        return f"[{self.code.value}] {self.message}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code.value!r}, message={self.message!r})"


class NotFoundError(AppError):
    """Raised when a requested row does not exist or an update/delete matched nothing."""

    def __init__(self, message: str = "Resource not found", cause: BaseException | None = None):
        super().__init__(ErrorCode.NOT_FOUND, message, cause=cause)


def not_found(resource: str, resource_id: Any) -> NotFoundError:
    return NotFoundError(f"{resource} with ID '{resource_id}' not found")


def invalid_input(message: str) -> AppError:
    return AppError(ErrorCode.INVALID_INPUT, message)


def internal_error(cause: BaseException) -> AppError:
    return AppError.wrap(cause, ErrorCode.INTERNAL_ERROR, "Internal server error")


def unauthorized(message: str = "") -> AppError:
    return AppError(ErrorCode.UNAUTHORIZED, message or "Unauthorized access")


def forbidden(message: str = "") -> AppError:
    return AppError(ErrorCode.FORBIDDEN, message or "Access forbidden")


def already_exists(resource: str, resource_id: Any) -> AppError:
    return AppError(
        ErrorCode.ALREADY_EXISTS, f"{resource} with ID '{resource_id}' already exists"
    )


def find_app_error(exc: BaseException | None) -> AppError | None:
    """Return the first AppError along the explicit `raise ... from` chain, or None."""
    seen: set[int] = set()
    while exc is not None and id(exc) not in seen:
        if isinstance(exc, AppError):
            return exc
        seen.add(id(exc))
        exc = exc.__cause__
    return None


def to_app_error(exc: BaseException) -> AppError:
    """Classify any exception as an AppError. Unknown errors become INTERNAL_ERROR."""
    app_error = find_app_error(exc)
    if app_error is not None:
        return app_error
    return internal_error(exc)
