"""The role to permission table.

Built once at import and exposed read-only. Changing who may do what
is a code change, never a runtime mutation.
"""

from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Final

from vetstudy.core.permissions.models import Permission, Role


RolePermissionMap = Mapping[Role, frozenset[Permission]]


def build_role_permission_map(
    table: Mapping[Role, Iterable[Permission]],
) -> RolePermissionMap:
    """Freeze a role table after checking it is well formed.

    Args:
        table: Permissions granted to each role

    Returns:
        Read-only mapping of role to frozen permission set

    Raises:
        ValueError: If a role is missing, has no permissions, or is
            granted something that is not a Permission
    """
    missing = [role.value for role in Role if role not in table]
    if missing:
        raise ValueError(f"Role table is missing roles: {', '.join(missing)}")

    frozen: dict[Role, frozenset[Permission]] = {}
    for role in Role:
        granted = frozenset(table[role])
        if not granted:
            raise ValueError(f"Role '{role.value}' has no permissions")
        unknown = [p for p in granted if not isinstance(p, Permission)]
        if unknown:
            raise ValueError(
                f"Role '{role.value}' is granted unknown permissions: {unknown!r}"
            )
        frozen[role] = granted

    return MappingProxyType(frozen)


ROLE_PERMISSIONS: Final[RolePermissionMap] = build_role_permission_map(
    {
        # Practice manager holds every permission
        Role.PRACTICE_MANAGER: list(Permission),
        # Everything clinical; no practice, team-admin or subscription management
        Role.VETERINARIAN: [
            Permission.VIEW_PRACTICE_STATISTICS,
            Permission.VIEW_TEAM_MEMBERS,
            Permission.CREATE_MONITORING_PLAN,
            Permission.EDIT_MONITORING_PLAN,
            Permission.VIEW_MONITORING_PLAN,
            Permission.SHARE_MONITORING_PLAN,
            Permission.CREATE_PATIENT,
            Permission.EDIT_PATIENT,
            Permission.VIEW_PATIENT,
            Permission.CREATE_SYMPTOM,
            Permission.EDIT_SYMPTOM,
            Permission.VIEW_SYMPTOM,
            Permission.DELETE_SYMPTOM,
            Permission.RECORD_OBSERVATION,
            Permission.VIEW_REPORTS,
            Permission.EXPORT_REPORTS,
        ],
        Role.VET_TECHNICIAN: [
            Permission.VIEW_TEAM_MEMBERS,
            Permission.VIEW_MONITORING_PLAN,
            Permission.SHARE_MONITORING_PLAN,
            Permission.VIEW_PATIENT,
            Permission.EDIT_PATIENT,
            Permission.VIEW_SYMPTOM,
            Permission.RECORD_OBSERVATION,
            Permission.VIEW_REPORTS,
            Permission.EXPORT_REPORTS,
        ],
        Role.VET_ASSISTANT: [
            Permission.VIEW_TEAM_MEMBERS,
            Permission.VIEW_MONITORING_PLAN,
            Permission.VIEW_PATIENT,
            Permission.VIEW_SYMPTOM,
            Permission.RECORD_OBSERVATION,
            Permission.VIEW_REPORTS,
        ],
        # Front desk: patient registration plus read access
        Role.RECEPTIONIST: [
            Permission.VIEW_TEAM_MEMBERS,
            Permission.VIEW_MONITORING_PLAN,
            Permission.CREATE_PATIENT,
            Permission.EDIT_PATIENT,
            Permission.VIEW_PATIENT,
            Permission.VIEW_SYMPTOM,
            Permission.VIEW_REPORTS,
        ],
        Role.PET_OWNER: [
            Permission.VIEW_MONITORING_PLAN,
            Permission.VIEW_PATIENT,
            Permission.RECORD_OBSERVATION,
        ],
    }
)
