"""JWT handling for the role claim.

Tokens are issued by the account service; this module signs them for
development and tests and verifies them on every request. A token whose
role claim is not a known Role never produces TokenData, so downstream
permission checks only ever see valid roles.
"""

import secrets
from datetime import UTC, datetime, timedelta
from typing import Any

import structlog
from jose import JWTError, jwt

from vetstudy.config import settings
from vetstudy.core.auth.schemas import TokenData
from vetstudy.core.constants import ACCESS_TOKEN_JTI_LENGTH, TOKEN_TYPE_ACCESS
from vetstudy.core.permissions.models import Role


logger = structlog.get_logger()


def create_access_token(
    user_id: str,
    role: Role,
    practice_id: str | None = None,
    expires_delta: timedelta | None = None,
    additional_claims: dict[str, Any] | None = None,
) -> str:
    """Create a signed JWT access token.

    Args:
        user_id: The user's identifier
        role: The user's role
        practice_id: The user's practice, if any
        expires_delta: Optional custom expiration time
        additional_claims: Optional extra claims to include

    Returns:
        Encoded JWT access token
    """
    now = datetime.now(UTC)
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.access_token_expire_minutes)

    to_encode: dict[str, Any] = {
        "sub": str(user_id),
        "role": Role(role).value,
        "exp": now + expires_delta,
        "type": TOKEN_TYPE_ACCESS,
        "iat": now,
        "jti": secrets.token_urlsafe(ACCESS_TOKEN_JTI_LENGTH),
    }
    if practice_id is not None:
        to_encode["practice_id"] = str(practice_id)

    if additional_claims:
        to_encode.update(additional_claims)

    return jwt.encode(
        to_encode,
        settings.secret_key,
        algorithm=settings.jwt_algorithm,
    )


def decode_token(token: str) -> TokenData | None:
    """Decode and validate a JWT token.

    Args:
        token: The JWT token to decode

    Returns:
        TokenData if valid, None if invalid, expired or carrying an
        unknown role
    """
    try:
        payload = jwt.decode(
            token,
            settings.secret_key,
            algorithms=[settings.jwt_algorithm],
        )
    except JWTError:
        return None

    user_id = payload.get("sub")
    raw_role = payload.get("role")
    exp = payload.get("exp")

    if not user_id or not raw_role or exp is None:
        return None

    try:
        role = Role(raw_role)
    except ValueError:
        logger.warning("token_unknown_role", user_id=user_id, role=raw_role)
        return None

    return TokenData(
        user_id=user_id,
        role=role,
        practice_id=payload.get("practice_id"),
        exp=datetime.fromtimestamp(exp, tz=UTC),
        type=payload.get("type", TOKEN_TYPE_ACCESS),
    )
