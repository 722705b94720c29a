"""Authentication module: bearer tokens carrying the caller's role."""

from vetstudy.core.auth.backend import create_access_token, decode_token
from vetstudy.core.auth.dependencies import (
    CurrentPrincipal,
    OptionalPrincipal,
    get_current_principal,
    get_optional_principal,
)
from vetstudy.core.auth.middleware import PrincipalContextMiddleware, RequestIdMiddleware
from vetstudy.core.auth.schemas import Principal, TokenData


__all__ = [
    # Dependencies
    "CurrentPrincipal",
    "OptionalPrincipal",
    # Schemas
    "Principal",
    # Middleware
    "PrincipalContextMiddleware",
    "RequestIdMiddleware",
    "TokenData",
    # Token utilities
    "create_access_token",
    "decode_token",
    "get_current_principal",
    "get_optional_principal",
]
