"""Authentication schemas for token handling."""

from datetime import datetime

from pydantic import BaseModel

from vetstudy.core.constants import TOKEN_TYPE_ACCESS
from vetstudy.core.permissions.models import Role


class TokenData(BaseModel):
    """Data extracted from a JWT token.

    Attributes:
        user_id: The user's identifier
        role: The user's role, already validated against Role
        practice_id: The practice the user belongs to, if any
        exp: Token expiration time
        type: Token type
    """

    user_id: str
    role: Role
    practice_id: str | None = None
    exp: datetime
    type: str = TOKEN_TYPE_ACCESS


class Principal(BaseModel):
    """The authenticated caller as seen by route guards."""

    user_id: str
    role: Role
    practice_id: str | None = None

    model_config = {"frozen": True}

    @classmethod
    def from_token(cls, token_data: TokenData) -> "Principal":
        return cls(
            user_id=token_data.user_id,
            role=token_data.role,
            practice_id=token_data.practice_id,
        )
