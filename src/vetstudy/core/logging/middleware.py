"""Request logging middleware.

One ``request_started`` and one ``request_completed`` event per request.
The completion event names the caller's user id and role when
PrincipalContextMiddleware accepted their token, so a 403 in the logs
shows which role was turned away.
"""

import time
from typing import Any

import structlog
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint


logger = structlog.get_logger()

# Probes are polled constantly and carry no caller
QUIET_PATHS = ("/health/live", "/health/ready")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log each request with its status, duration and caller.

    Completion is logged at error level for 5xx, warning for 4xx
    (guard denials included) and info otherwise.
    """

    def __init__(self, app: Any, quiet_paths: tuple[str, ...] = QUIET_PATHS) -> None:
        super().__init__(app)
        self.quiet_paths = quiet_paths

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        if request.url.path in self.quiet_paths:
            return await call_next(request)

        started = time.perf_counter()
        request_fields: dict[str, Any] = {
            "method": request.method,
            "path": request.url.path,
            "client_ip": get_client_ip(request),
        }
        if request.url.query:
            request_fields["query"] = str(request.url.query)

        logger.info("request_started", **request_fields)

        try:
            response = await call_next(request)
        except Exception:
            logger.exception(
                "request_failed",
                method=request.method,
                path=request.url.path,
                duration_ms=_elapsed_ms(started),
            )
            raise

        completed = {
            "method": request.method,
            "path": request.url.path,
            "status_code": response.status_code,
            "duration_ms": _elapsed_ms(started),
            **_caller_fields(request),
        }
        if response.status_code >= 500:
            logger.error("request_completed", **completed)
        elif response.status_code >= 400:
            logger.warning("request_completed", **completed)
        else:
            logger.info("request_completed", **completed)

        return response


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)


def _caller_fields(request: Request) -> dict[str, str]:
    fields: dict[str, str] = {}
    request_id = getattr(request.state, "request_id", None)
    user_id = getattr(request.state, "user_id", None)
    role = getattr(request.state, "role", None)
    if request_id:
        fields["request_id"] = request_id
    if user_id:
        fields["user_id"] = str(user_id)
    if role:
        fields["role"] = str(role)
    return fields


def get_client_ip(request: Request) -> str | None:
    """Client address, preferring the first X-Forwarded-For hop."""
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.client.host if request.client else None
