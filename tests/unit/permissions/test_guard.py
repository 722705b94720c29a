"""Unit tests for RouteGuard evaluation.

These tests exercise the guard without HTTP: requirement normalization,
the derived guard kind, and the order in which checks deny access.
"""

import pytest

from vetstudy.core.permissions.guard import (
    AccessDecision,
    DenialReason,
    GuardKind,
    RouteGuard,
)
from vetstudy.core.permissions.models import Permission, Role
from vetstudy.core.permissions.policy import PermissionPolicy


pytestmark = pytest.mark.unit


class TestGuardConstruction:
    """Tests for requirement normalization and kind."""

    def test_no_requirements_is_authentication_only(self):
        guard = RouteGuard()

        assert guard.kind is GuardKind.AUTHENTICATED
        assert guard.required_roles is None
        assert guard.required_permissions is None

    def test_single_values_become_tuples(self):
        guard = RouteGuard(
            required_roles=Role.VETERINARIAN,
            required_permissions=Permission.VIEW_PATIENT,
        )

        assert guard.required_roles == (Role.VETERINARIAN,)
        assert guard.required_permissions == (Permission.VIEW_PATIENT,)
        assert guard.kind is GuardKind.BY_BOTH

    def test_role_only_kind(self):
        assert RouteGuard(required_roles=[Role.PRACTICE_MANAGER]).kind is GuardKind.BY_ROLE

    def test_permission_only_kind(self):
        guard = RouteGuard(required_permissions=[Permission.VIEW_REPORTS])

        assert guard.kind is GuardKind.BY_PERMISSION

    def test_string_values_are_coerced(self):
        guard = RouteGuard(
            required_roles=["RECEPTIONIST"],
            required_permissions="view_patient",
        )

        assert guard.required_roles == (Role.RECEPTIONIST,)
        assert guard.required_permissions == (Permission.VIEW_PATIENT,)

    def test_duplicates_are_dropped_in_order(self):
        guard = RouteGuard(
            required_permissions=[
                Permission.EDIT_PATIENT,
                Permission.VIEW_PATIENT,
                Permission.EDIT_PATIENT,
            ]
        )

        assert guard.required_permissions == (
            Permission.EDIT_PATIENT,
            Permission.VIEW_PATIENT,
        )

    def test_empty_roles_rejected(self):
        with pytest.raises(ValueError, match="Empty role requirement"):
            RouteGuard(required_roles=[])

    def test_empty_permissions_rejected(self):
        with pytest.raises(ValueError, match="Empty permission requirement"):
            RouteGuard(required_permissions=())

    def test_unknown_permission_rejected(self):
        with pytest.raises(ValueError):
            RouteGuard(required_permissions=["fly_helicopter"])


class TestGuardEvaluation:
    """Tests for RouteGuard.evaluate."""

    def test_unauthenticated_denied_first(self, policy: PermissionPolicy):
        guard = RouteGuard(
            required_roles=[Role.PRACTICE_MANAGER],
            required_permissions=[Permission.VIEW_PATIENT],
        )

        decision = guard.evaluate(None, policy)

        assert decision == AccessDecision(
            allowed=False, reason=DenialReason.NOT_AUTHENTICATED
        )
        assert not decision

    def test_authentication_only_allows_any_role(self, policy: PermissionPolicy):
        guard = RouteGuard()

        for role in Role:
            assert guard.evaluate(role, policy)

    def test_role_check_before_permission_check(self, policy: PermissionPolicy):
        guard = RouteGuard(
            required_roles=[Role.PRACTICE_MANAGER],
            required_permissions=[Permission.MANAGE_SUBSCRIPTIONS],
        )

        decision = guard.evaluate(Role.PET_OWNER, policy)

        assert decision.reason is DenialReason.ROLE_NOT_ALLOWED

    def test_allowed_role_still_needs_permission(self, policy: PermissionPolicy):
        guard = RouteGuard(
            required_roles=[Role.VETERINARIAN, Role.RECEPTIONIST],
            required_permissions=[Permission.EXPORT_REPORTS],
        )

        assert guard.evaluate(Role.VETERINARIAN, policy)
        assert guard.evaluate(Role.RECEPTIONIST, policy).reason is (
            DenialReason.PERMISSION_DENIED
        )

    def test_single_permission(self, policy: PermissionPolicy):
        guard = RouteGuard(required_permissions=Permission.DELETE_PATIENT)

        assert guard.evaluate(Role.PRACTICE_MANAGER, policy)
        assert not guard.evaluate(Role.RECEPTIONIST, policy)

    def test_require_all(self, policy: PermissionPolicy):
        guard = RouteGuard(
            required_permissions=[Permission.DELETE_PATIENT, Permission.VIEW_PATIENT],
        )

        assert guard.evaluate(Role.RECEPTIONIST, policy).reason is (
            DenialReason.PERMISSION_DENIED
        )

    def test_require_any(self, policy: PermissionPolicy):
        guard = RouteGuard(
            required_permissions=[Permission.DELETE_PATIENT, Permission.VIEW_PATIENT],
            require_all=False,
        )

        assert guard.evaluate(Role.RECEPTIONIST, policy)
        assert not RouteGuard(
            required_permissions=[Permission.DELETE_PATIENT, Permission.EXPORT_REPORTS],
            require_all=False,
        ).evaluate(Role.RECEPTIONIST, policy)

    def test_role_only_guard(self, policy: PermissionPolicy):
        guard = RouteGuard(required_roles=Role.PRACTICE_MANAGER)

        assert guard.evaluate(Role.PRACTICE_MANAGER, policy)
        assert guard.evaluate(Role.VETERINARIAN, policy).reason is (
            DenialReason.ROLE_NOT_ALLOWED
        )

    def test_uses_given_policy(self):
        """A guard consults whichever policy it is handed."""
        from vetstudy.core.permissions.matrix import build_role_permission_map

        table = {role: [Permission.VIEW_PATIENT] for role in Role}
        table[Role.PET_OWNER] = [Permission.DELETE_PATIENT]
        custom = PermissionPolicy(build_role_permission_map(table))
        guard = RouteGuard(required_permissions=Permission.DELETE_PATIENT)

        assert guard.evaluate(Role.PET_OWNER, custom)
        assert not guard.evaluate(Role.PRACTICE_MANAGER, custom)
