"""Route protection by role and permission.

One guard covers every protected endpoint. It is parameterized by the
roles that may enter, the permissions they need, and whether all or
any of those permissions are required:

    @router.delete(
        "/patients/{patient_id}",
        dependencies=[require_access(permissions=Permission.DELETE_PATIENT)],
    )
    async def delete_patient(patient_id: str): ...

    @router.get("/settings")
    async def settings(
        principal: Annotated[Principal, require_access(roles=Role.PRACTICE_MANAGER)],
    ): ...
"""

from collections.abc import Iterable
from enum import Enum
from typing import Annotated, Any, cast

import structlog
from fastapi import Depends, Request
from pydantic import BaseModel

from vetstudy.core.auth.dependencies import OptionalPrincipal
from vetstudy.core.auth.schemas import Principal
from vetstudy.core.errors import ForbiddenError, UnauthorizedError
from vetstudy.core.permissions.models import Permission, Role
from vetstudy.core.permissions.policy import PermissionPolicy, get_permission_policy


logger = structlog.get_logger()


class GuardKind(str, Enum):
    """Which checks a guard performs beyond authentication."""

    AUTHENTICATED = "authenticated"
    BY_ROLE = "by_role"
    BY_PERMISSION = "by_permission"
    BY_BOTH = "by_both"


class DenialReason(str, Enum):
    NOT_AUTHENTICATED = "auth_required"
    ROLE_NOT_ALLOWED = "role_not_allowed"
    PERMISSION_DENIED = "permission_denied"


class AccessDecision(BaseModel):
    """Outcome of evaluating a guard for one role."""

    allowed: bool
    reason: DenialReason | None = None

    model_config = {"frozen": True}

    def __bool__(self) -> bool:
        return self.allowed


def _normalize(value: Any, enum_type: type[Enum]) -> tuple[Any, ...] | None:
    if value is None:
        return None
    if isinstance(value, str):
        items = (value,)
    else:
        items = tuple(value)
    if not items:
        raise ValueError(
            f"Empty {enum_type.__name__.lower()} requirement; pass None to skip the check"
        )
    return tuple(dict.fromkeys(enum_type(item) for item in items))


class RouteGuard:
    """Allow or deny a request based on the caller's role.

    Checks run in a fixed order: authentication, then roles, then
    permissions. A single required permission is tested on its own;
    several are combined with all-of when ``require_all`` is true and
    any-of otherwise.

    Instances are FastAPI dependencies. On success they return the
    principal; on failure they raise UnauthorizedError or ForbiddenError.
    Missing, expired, malformed and non-access tokens all answer
    ``auth_required`` here; only ``CurrentPrincipal`` routes report the
    specific ``missing_token``, ``invalid_token`` or ``invalid_token_type``.
    """

    def __init__(
        self,
        required_roles: Role | Iterable[Role] | None = None,
        required_permissions: Permission | Iterable[Permission] | None = None,
        require_all: bool = True,
    ) -> None:
        self.required_roles: tuple[Role, ...] | None = _normalize(required_roles, Role)
        self.required_permissions: tuple[Permission, ...] | None = _normalize(
            required_permissions, Permission
        )
        self.require_all = require_all

    @property
    def kind(self) -> GuardKind:
        if self.required_roles and self.required_permissions:
            return GuardKind.BY_BOTH
        if self.required_roles:
            return GuardKind.BY_ROLE
        if self.required_permissions:
            return GuardKind.BY_PERMISSION
        return GuardKind.AUTHENTICATED

    def evaluate(
        self,
        role: Role | None,
        policy: PermissionPolicy,
    ) -> AccessDecision:
        """Decide access for a role without raising.

        Args:
            role: The caller's role, or None when unauthenticated
            policy: Permission policy to consult

        Returns:
            The decision, with the first failing check as its reason
        """
        if role is None:
            return AccessDecision(allowed=False, reason=DenialReason.NOT_AUTHENTICATED)

        if self.required_roles and role not in self.required_roles:
            return AccessDecision(allowed=False, reason=DenialReason.ROLE_NOT_ALLOWED)

        if self.required_permissions:
            if len(self.required_permissions) == 1:
                granted = policy.has_permission(role, self.required_permissions[0])
            elif self.require_all:
                granted = policy.has_all_permissions(role, self.required_permissions)
            else:
                granted = policy.has_any_permission(role, self.required_permissions)

            if not granted:
                return AccessDecision(allowed=False, reason=DenialReason.PERMISSION_DENIED)

        return AccessDecision(allowed=True)

    def _raise_for(self, decision: AccessDecision) -> None:
        if decision.reason is DenialReason.NOT_AUTHENTICATED:
            raise UnauthorizedError(
                "Authentication required",
                error_code=DenialReason.NOT_AUTHENTICATED.value,
            )

        if decision.reason is DenialReason.ROLE_NOT_ALLOWED:
            raise ForbiddenError(
                "You don't have permission to access this resource",
                error_code=DenialReason.ROLE_NOT_ALLOWED.value,
                details={"required_roles": [r.value for r in self.required_roles or ()]},
            )

        perm_strs = [p.value for p in self.required_permissions or ()]
        if self.require_all or len(perm_strs) == 1:
            message = f"Missing required permissions: {', '.join(perm_strs)}"
        else:
            message = f"Missing required permission. Need one of: {', '.join(perm_strs)}"
        raise ForbiddenError(
            message,
            error_code=DenialReason.PERMISSION_DENIED.value,
            details={"required_permissions": perm_strs},
        )

    async def __call__(
        self,
        request: Request,
        principal: OptionalPrincipal,
        policy: Annotated[PermissionPolicy, Depends(get_permission_policy)],
    ) -> Principal:
        decision = self.evaluate(principal.role if principal else None, policy)

        if not decision:
            logger.warning(
                "access_denied",
                reason=decision.reason.value if decision.reason else None,
                guard=self.kind.value,
                user_id=principal.user_id if principal else None,
                role=principal.role.value if principal else None,
                required_roles=[r.value for r in self.required_roles or ()],
                required_permissions=[p.value for p in self.required_permissions or ()],
                endpoint=request.url.path,
            )
            self._raise_for(decision)

        return cast("Principal", principal)

    def __repr__(self) -> str:
        return (
            f"<RouteGuard(kind={self.kind.value}, roles={self.required_roles}, "
            f"permissions={self.required_permissions}, require_all={self.require_all})>"
        )


def require_access(
    roles: Role | Iterable[Role] | None = None,
    permissions: Permission | Iterable[Permission] | None = None,
    require_all: bool = True,
) -> Any:
    """Build a ``Depends`` marker for a RouteGuard.

    Args:
        roles: Roles allowed through; None skips the role check
        permissions: Permissions required; None skips the permission check
        require_all: All-of (True) or any-of (False) for several permissions

    Returns:
        A FastAPI dependency resolving to the authenticated Principal
    """
    return Depends(RouteGuard(roles, permissions, require_all))
