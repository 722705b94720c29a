"""Pydantic schemas for access endpoints."""

from pydantic import BaseModel, Field, field_validator

from vetstudy.core.permissions.guard import DenialReason, GuardKind
from vetstudy.core.permissions.models import Permission, Role


class RoleSummary(BaseModel):
    """A role and how many permissions it holds."""

    role: Role
    permission_count: int


class RoleHierarchyResponse(BaseModel):
    """Roles ordered from most to fewest permissions.

    Ranking is by permission count only; roles with equal counts keep
    their declaration order.
    """

    items: list[RoleSummary]


class RolePermissionsResponse(BaseModel):
    role: Role
    permissions: list[Permission]


class PermissionRolesResponse(BaseModel):
    permission: Permission
    roles: list[Role]


class PermissionListResponse(BaseModel):
    items: list[Permission]


class RoleComparisonResponse(BaseModel):
    """Whether ``role`` outranks ``other`` by permission count."""

    role: Role
    other: Role
    is_higher: bool
    role_permission_count: int
    other_permission_count: int


class CurrentAccessResponse(BaseModel):
    """The caller's role and everything it allows."""

    user_id: str
    role: Role
    practice_id: str | None = None
    permissions: list[Permission]


class AccessCheckRequest(BaseModel):
    """Guard parameters to evaluate for the caller.

    Omit a field to skip that check. Empty lists are rejected.
    """

    required_roles: list[Role] | None = None
    required_permissions: list[Permission] | None = None
    require_all: bool = Field(
        default=True,
        description="Require all permissions (true) or any one of them (false)",
    )

    @field_validator("required_roles", "required_permissions")
    @classmethod
    def reject_empty(cls, v: list | None) -> list | None:
        if v is not None and not v:
            raise ValueError("Must contain at least one item; omit the field to skip")
        return v


class AccessCheckResponse(BaseModel):
    allowed: bool
    reason: DenialReason | None = None
    kind: GuardKind
