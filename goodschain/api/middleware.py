"""
Centralized error handling and request logging.

Every request passes through ErrorHandlingMiddleware once. It:
1. reuses the inbound X-Request-ID or generates one, and echoes it back
2. turns any exception the exception handlers did not render into the
   standard 500 envelope, unless the response has already started
3. writes one log line per request with method, path, client IP, status,
   latency, user agent and, on error, the error code and message
"""

import logging
import time
import uuid

from starlette.datastructures import MutableHeaders
from starlette.requests import Request
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from goodschain.api.exception_handlers import error_response
from goodschain.core.logging_config import request_id_var
from goodschain.errors import AppError, to_app_error


class ErrorHandlingMiddleware:
    HEADER_NAME = "X-Request-ID"

    def __init__(self, app: ASGIApp, logger: logging.Logger | None = None):
        self.app = app
        self.logger = logger or logging.getLogger(__name__)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        request = Request(scope)
        request_id = request.headers.get(self.HEADER_NAME) or str(uuid.uuid4())
        request.state.request_id = request_id
        token = request_id_var.set(request_id)

        start = time.perf_counter()
        status_code = 500
        response_started = False

        async def send_wrapper(message: Message) -> None:
            nonlocal status_code, response_started
            if message["type"] == "http.response.start":
                response_started = True
                status_code = message["status"]
                MutableHeaders(scope=message)[self.HEADER_NAME] = request_id
            await send(message)

        try:
            try:
                await self.app(scope, receive, send_wrapper)
            except Exception as exc:
                error = to_app_error(exc)
                request.state.app_error = error
                if response_started:
                    # Headers are already on the wire; a second response would corrupt it
                    self._log(request, status_code, start, error, exc)
                    raise
                await error_response(error)(scope, receive, send_wrapper)
                self._log(request, status_code, start, error, exc)
                return
            self._log(request, status_code, start, getattr(request.state, "app_error", None))
        finally:
            request_id_var.reset(token)

    def _log(
        self,
        request: Request,
        status_code: int,
        start: float,
        error: AppError | None,
        exc: BaseException | None = None,
    ) -> None:
        latency_ms = (time.perf_counter() - start) * 1000
        fields = {
            "method": request.method,
            "path": request.url.path,
            "client_ip": request.client.host if request.client else "unknown",
            "status_code": status_code,
            "latency_ms": round(latency_ms, 2),
            "user_agent": request.headers.get("user-agent", ""),
        }
        if error is not None:
            fields["error_code"] = error.code.value
            fields["error_message"] = error.message
            if error.details:
                fields["error_details"] = error.details

        # A failure after the headers were sent still carries its own severity
        severity = max(status_code, error.http_status) if error is not None else status_code
        if severity >= 500:
            level = logging.ERROR
        elif severity >= 400:
            level = logging.WARNING
        else:
            level = logging.INFO

        self.logger.log(
            level,
            "%s %s",
            "Request failed" if error is not None else "Request processed",
            " ".join(f"{key}={value}" for key, value in fields.items()),
            extra=fields,
            exc_info=exc,
        )
