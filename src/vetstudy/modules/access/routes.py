"""Access API routes.

Expose the permission model so the web client can gate navigation
and controls with the same rules the API enforces.
"""

from typing import Annotated

from vetstudy.api.dependencies import Policy
from vetstudy.core.auth.dependencies import CurrentPrincipal
from vetstudy.core.auth.schemas import Principal
from vetstudy.core.permissions.guard import RouteGuard, require_access
from vetstudy.core.permissions.models import Permission, Role
from vetstudy.modules.access import router
from vetstudy.modules.access.schemas import (
    AccessCheckRequest,
    AccessCheckResponse,
    CurrentAccessResponse,
    PermissionListResponse,
    PermissionRolesResponse,
    RoleComparisonResponse,
    RoleHierarchyResponse,
    RolePermissionsResponse,
    RoleSummary,
)


TeamViewer = Annotated[Principal, require_access(permissions=Permission.VIEW_TEAM_MEMBERS)]
RoleManager = Annotated[Principal, require_access(permissions=Permission.MANAGE_TEAM_ROLES)]


def _sorted_permissions(permissions: set[Permission]) -> list[Permission]:
    order = {permission: index for index, permission in enumerate(Permission)}
    return sorted(permissions, key=order.__getitem__)


# ============================================================
# Caller Routes
# ============================================================


@router.get(
    "/me",
    response_model=CurrentAccessResponse,
    summary="Get current access",
    description="Returns the caller's role and every permission it grants.",
)
async def get_my_access(
    principal: CurrentPrincipal,
    policy: Policy,
) -> CurrentAccessResponse:
    """Get the caller's role and permissions."""
    return CurrentAccessResponse(
        user_id=principal.user_id,
        role=principal.role,
        practice_id=principal.practice_id,
        permissions=_sorted_permissions(policy.get_permissions_for_role(principal.role)),
    )


@router.post(
    "/check",
    response_model=AccessCheckResponse,
    summary="Check access",
    description=(
        "Evaluate guard parameters for the caller without enforcing them. "
        "Used by the client to show or hide controls."
    ),
)
async def check_access(
    data: AccessCheckRequest,
    principal: CurrentPrincipal,
    policy: Policy,
) -> AccessCheckResponse:
    """Evaluate a guard for the caller."""
    guard = RouteGuard(
        required_roles=data.required_roles,
        required_permissions=data.required_permissions,
        require_all=data.require_all,
    )
    decision = guard.evaluate(principal.role, policy)
    return AccessCheckResponse(
        allowed=decision.allowed,
        reason=decision.reason,
        kind=guard.kind,
    )


# ============================================================
# Role Routes
# ============================================================


@router.get(
    "/roles",
    response_model=RoleHierarchyResponse,
    summary="List roles",
    description="Roles ordered from most to fewest permissions.",
)
async def list_roles(
    _principal: TeamViewer,
    policy: Policy,
) -> RoleHierarchyResponse:
    """List the role hierarchy."""
    return RoleHierarchyResponse(
        items=[
            RoleSummary(role=role, permission_count=policy.permission_count(role))
            for role in policy.get_role_hierarchy()
        ]
    )


@router.get(
    "/roles/{role}/permissions",
    response_model=RolePermissionsResponse,
    summary="Get role permissions",
)
async def get_role_permissions(
    role: Role,
    _principal: TeamViewer,
    policy: Policy,
) -> RolePermissionsResponse:
    """List the permissions a role grants."""
    return RolePermissionsResponse(
        role=role,
        permissions=_sorted_permissions(policy.get_permissions_for_role(role)),
    )


@router.get(
    "/roles/{role}/compare/{other}",
    response_model=RoleComparisonResponse,
    summary="Compare roles",
    description=(
        "Whether one role outranks another. Rank is the number of "
        "permissions held, not a curated seniority."
    ),
)
async def compare_roles(
    role: Role,
    other: Role,
    _principal: RoleManager,
    policy: Policy,
) -> RoleComparisonResponse:
    """Compare two roles by permission count."""
    return RoleComparisonResponse(
        role=role,
        other=other,
        is_higher=policy.is_role_higher_than(role, other),
        role_permission_count=policy.permission_count(role),
        other_permission_count=policy.permission_count(other),
    )


# ============================================================
# Permission Routes
# ============================================================


@router.get(
    "/permissions",
    response_model=PermissionListResponse,
    summary="List permissions",
)
async def list_permissions(
    _principal: CurrentPrincipal,
    policy: Policy,
) -> PermissionListResponse:
    """List every permission identifier."""
    return PermissionListResponse(items=policy.permissions)


@router.get(
    "/permissions/{permission}/roles",
    response_model=PermissionRolesResponse,
    summary="Get roles with permission",
)
async def get_permission_roles(
    permission: Permission,
    _principal: TeamViewer,
    policy: Policy,
) -> PermissionRolesResponse:
    """List the roles holding a permission."""
    return PermissionRolesResponse(
        permission=permission,
        roles=policy.get_roles_with_permission(permission),
    )
