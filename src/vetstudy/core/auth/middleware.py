"""Request context middleware.

This module provides middleware for:
- Request tracing with unique IDs
- Recording the caller's user id and role for logging
"""

import uuid
from typing import TYPE_CHECKING

import structlog
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from vetstudy.core.auth.backend import decode_token
from vetstudy.core.constants import (
    PUBLIC_PATH_PREFIXES,
    REQUEST_ID_HEADER,
    TOKEN_TYPE_ACCESS,
)


if TYPE_CHECKING:
    from starlette.types import ASGIApp


class PrincipalContextMiddleware(BaseHTTPMiddleware):
    """Middleware that records who is calling.

    Decodes the bearer token (if present) and stores user_id and role
    on request.state and in the structlog context. It never rejects a
    request; route guards decide access.

    Attributes:
        exclude_paths: Paths that never carry a principal
    """

    def __init__(
        self,
        app: "ASGIApp",
        exclude_paths: list[str] | None = None,
    ) -> None:
        super().__init__(app)
        self.exclude_paths = exclude_paths or list(PUBLIC_PATH_PREFIXES)

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        if any(request.url.path.startswith(path) for path in self.exclude_paths):
            return await call_next(request)

        scheme, _, credentials = request.headers.get("Authorization", "").partition(" ")
        if scheme.lower() == "bearer" and credentials:
            token_data = decode_token(credentials.strip())

            # Same acceptance rule as get_optional_principal
            if token_data and token_data.type == TOKEN_TYPE_ACCESS:
                request.state.user_id = token_data.user_id
                request.state.role = token_data.role
                structlog.contextvars.bind_contextvars(
                    user_id=token_data.user_id,
                    role=token_data.role.value,
                )

        return await call_next(request)


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Middleware that adds a unique request ID to each request.

    The request ID is added to:
    - request.state.request_id
    - Response header X-Request-ID
    - Structlog context
    """

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())

        request.state.request_id = request_id
        request.state.trace_id = request_id  # Alias for error handler

        structlog.contextvars.bind_contextvars(request_id=request_id)

        try:
            response = await call_next(request)
        finally:
            structlog.contextvars.unbind_contextvars("request_id", "user_id", "role")

        response.headers[REQUEST_ID_HEADER] = request_id
        return response
