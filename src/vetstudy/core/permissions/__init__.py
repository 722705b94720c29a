"""Role-based access control for MyVetStudy.

Route guards live in ``vetstudy.core.permissions.guard``; they depend on
the auth layer, which itself imports the enumerations exported here.
"""

from vetstudy.core.permissions.matrix import (
    ROLE_PERMISSIONS,
    RolePermissionMap,
    build_role_permission_map,
)
from vetstudy.core.permissions.models import Permission, Role
from vetstudy.core.permissions.policy import (
    PermissionPolicy,
    default_policy,
    get_permission_policy,
)


__all__ = [
    # Models
    "Permission",
    # Policy
    "PermissionPolicy",
    # Matrix
    "ROLE_PERMISSIONS",
    "Role",
    "RolePermissionMap",
    "build_role_permission_map",
    "default_policy",
    "get_permission_policy",
]
