"""Permission queries over the role table.

This module provides the read-only query surface that route guards,
the access API and the CLI use to answer "may this role do that".
Nothing here touches the network or a database.
"""

from collections.abc import Iterable

from vetstudy.core.permissions.matrix import ROLE_PERMISSIONS, RolePermissionMap
from vetstudy.core.permissions.models import Permission, Role


class PermissionPolicy:
    """Answers authorization queries for a role.

    The policy wraps a RolePermissionMap and never modifies it. Callers
    are expected to pass roles that were validated at authentication;
    an unknown role raises ``KeyError``.

    Known limitation: ``is_role_higher_than`` and ``get_role_hierarchy``
    rank roles by how many permissions they hold. Two roles with equal
    counts rank equally regardless of real-world seniority.
    """

    def __init__(self, role_permissions: RolePermissionMap = ROLE_PERMISSIONS) -> None:
        self._role_permissions = role_permissions

    @property
    def roles(self) -> list[Role]:
        """Roles covered by this policy, in enumeration order."""
        return [role for role in Role if role in self._role_permissions]

    @property
    def permissions(self) -> list[Permission]:
        """Every permission identifier, in enumeration order."""
        return list(Permission)

    def has_permission(self, role: Role, permission: Permission) -> bool:
        """Check if a role has a specific permission.

        Args:
            role: The role to check
            permission: The permission to check

        Returns:
            True if the role holds the permission
        """
        return permission in self._role_permissions[role]

    def has_all_permissions(
        self, role: Role, permissions: Iterable[Permission]
    ) -> bool:
        """Check if a role has every one of the given permissions.

        An empty collection is vacuously satisfied.
        """
        return all(self.has_permission(role, permission) for permission in permissions)

    def has_any_permission(
        self, role: Role, permissions: Iterable[Permission]
    ) -> bool:
        """Check if a role has at least one of the given permissions.

        An empty collection is never satisfied.
        """
        return any(self.has_permission(role, permission) for permission in permissions)

    def get_permissions_for_role(self, role: Role) -> set[Permission]:
        """Get all permissions for a role.

        Returns:
            A new set; changing it does not affect the policy
        """
        return set(self._role_permissions[role])

    def get_roles_with_permission(self, permission: Permission) -> list[Role]:
        """Get every role holding a permission, in enumeration order."""
        return [
            role for role in self.roles if permission in self._role_permissions[role]
        ]

    def permission_count(self, role: Role) -> int:
        return len(self._role_permissions[role])

    def is_role_higher_than(self, role: Role, other: Role) -> bool:
        """Check if ``role`` holds strictly more permissions than ``other``."""
        return self.permission_count(role) > self.permission_count(other)

    def get_role_hierarchy(self) -> list[Role]:
        """Get roles ordered from most to fewest permissions.

        Ties keep enumeration order.
        """
        return sorted(self.roles, key=self.permission_count, reverse=True)


# Built once from the static table and shared by every consumer
default_policy = PermissionPolicy()


def get_permission_policy() -> PermissionPolicy:
    """FastAPI dependency returning the process-wide policy.

    Override it in ``app.dependency_overrides`` to test against
    another table.
    """
    return default_policy
