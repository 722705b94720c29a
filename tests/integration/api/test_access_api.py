"""Integration tests for the access API."""

from collections.abc import Callable

import pytest
from httpx import AsyncClient

from vetstudy.core.auth.backend import create_access_token
from vetstudy.core.permissions.models import Permission, Role


pytestmark = pytest.mark.integration

Headers = Callable[[Role], dict[str, str]]

BASE = "/api/v1/access"


class TestMyAccess:
    """Tests for GET /access/me."""

    async def test_requires_token(self, client: AsyncClient):
        response = await client.get(f"{BASE}/me")

        assert response.status_code == 401
        assert "missing_token" in response.json()["type"]

    async def test_invalid_token(self, client: AsyncClient):
        response = await client.get(
            f"{BASE}/me", headers={"Authorization": "Bearer not.a.token"}
        )

        assert response.status_code == 401
        assert "invalid_token" in response.json()["type"]

    async def test_refresh_token_rejected(self, client: AsyncClient):
        token = create_access_token(
            "user-1", Role.PRACTICE_MANAGER, additional_claims={"type": "refresh"}
        )

        response = await client.get(
            f"{BASE}/me", headers={"Authorization": f"Bearer {token}"}
        )

        assert response.status_code == 401
        assert "invalid_token_type" in response.json()["type"]

    async def test_returns_role_permissions(
        self, client: AsyncClient, auth_headers: Headers
    ):
        response = await client.get(f"{BASE}/me", headers=auth_headers(Role.PET_OWNER))

        assert response.status_code == 200
        data = response.json()
        assert data["role"] == "PET_OWNER"
        assert data["practice_id"] == "practice-test"
        assert data["permissions"] == [
            "view_monitoring_plan",
            "view_patient",
            "record_observation",
        ]


class TestAccessCheck:
    """Tests for POST /access/check."""

    async def test_receptionist_any_of(self, client: AsyncClient, auth_headers: Headers):
        response = await client.post(
            f"{BASE}/check",
            json={
                "required_permissions": ["delete_patient", "view_patient"],
                "require_all": False,
            },
            headers=auth_headers(Role.RECEPTIONIST),
        )

        assert response.status_code == 200
        assert response.json() == {
            "allowed": True,
            "reason": None,
            "kind": "by_permission",
        }

    async def test_receptionist_all_of(self, client: AsyncClient, auth_headers: Headers):
        response = await client.post(
            f"{BASE}/check",
            json={"required_permissions": ["delete_patient", "view_patient"]},
            headers=auth_headers(Role.RECEPTIONIST),
        )

        assert response.json() == {
            "allowed": False,
            "reason": "permission_denied",
            "kind": "by_permission",
        }

    async def test_role_requirement(self, client: AsyncClient, auth_headers: Headers):
        response = await client.post(
            f"{BASE}/check",
            json={
                "required_roles": ["PRACTICE_MANAGER"],
                "required_permissions": ["view_reports"],
            },
            headers=auth_headers(Role.VETERINARIAN),
        )

        assert response.json() == {
            "allowed": False,
            "reason": "role_not_allowed",
            "kind": "by_both",
        }

    async def test_authentication_only(self, client: AsyncClient, auth_headers: Headers):
        response = await client.post(
            f"{BASE}/check", json={}, headers=auth_headers(Role.PET_OWNER)
        )

        assert response.json()["allowed"] is True
        assert response.json()["kind"] == "authenticated"

    async def test_empty_list_rejected(self, client: AsyncClient, auth_headers: Headers):
        response = await client.post(
            f"{BASE}/check",
            json={"required_permissions": []},
            headers=auth_headers(Role.PET_OWNER),
        )

        assert response.status_code == 422
        assert response.json()["errors"][0]["field"] == "required_permissions"

    async def test_unknown_permission_rejected(
        self, client: AsyncClient, auth_headers: Headers
    ):
        response = await client.post(
            f"{BASE}/check",
            json={"required_permissions": ["fly_helicopter"]},
            headers=auth_headers(Role.PET_OWNER),
        )

        assert response.status_code == 422


class TestRoles:
    """Tests for role endpoints."""

    async def test_hierarchy(self, client: AsyncClient, auth_headers: Headers):
        response = await client.get(f"{BASE}/roles", headers=auth_headers(Role.VET_ASSISTANT))

        assert response.status_code == 200
        items = response.json()["items"]
        assert [item["role"] for item in items] == [
            "PRACTICE_MANAGER",
            "VETERINARIAN",
            "VET_TECHNICIAN",
            "RECEPTIONIST",
            "VET_ASSISTANT",
            "PET_OWNER",
        ]
        assert items[0]["permission_count"] == len(Permission)

    async def test_hierarchy_requires_team_view(
        self, client: AsyncClient, auth_headers: Headers
    ):
        response = await client.get(f"{BASE}/roles", headers=auth_headers(Role.PET_OWNER))

        assert response.status_code == 403
        assert response.json()["required_permissions"] == ["view_team_members"]

    async def test_role_permissions(self, client: AsyncClient, auth_headers: Headers):
        response = await client.get(
            f"{BASE}/roles/RECEPTIONIST/permissions",
            headers=auth_headers(Role.VETERINARIAN),
        )

        assert response.status_code == 200
        permissions = response.json()["permissions"]
        assert "view_patient" in permissions
        assert "delete_patient" not in permissions
        assert len(permissions) == 7

    async def test_unknown_role_is_422(self, client: AsyncClient, auth_headers: Headers):
        response = await client.get(
            f"{BASE}/roles/OWNER/permissions",
            headers=auth_headers(Role.VETERINARIAN),
        )

        assert response.status_code == 422

    async def test_compare(self, client: AsyncClient, auth_headers: Headers):
        response = await client.get(
            f"{BASE}/roles/PRACTICE_MANAGER/compare/RECEPTIONIST",
            headers=auth_headers(Role.PRACTICE_MANAGER),
        )

        assert response.status_code == 200
        assert response.json() == {
            "role": "PRACTICE_MANAGER",
            "other": "RECEPTIONIST",
            "is_higher": True,
            "role_permission_count": 22,
            "other_permission_count": 7,
        }

    async def test_compare_requires_role_management(
        self, client: AsyncClient, auth_headers: Headers
    ):
        response = await client.get(
            f"{BASE}/roles/PRACTICE_MANAGER/compare/RECEPTIONIST",
            headers=auth_headers(Role.VETERINARIAN),
        )

        assert response.status_code == 403


class TestPermissions:
    """Tests for permission endpoints."""

    async def test_list(self, client: AsyncClient, auth_headers: Headers):
        response = await client.get(
            f"{BASE}/permissions", headers=auth_headers(Role.PET_OWNER)
        )

        assert response.status_code == 200
        assert response.json()["items"] == [p.value for p in Permission]

    async def test_list_requires_token(self, client: AsyncClient):
        response = await client.get(f"{BASE}/permissions")

        assert response.status_code == 401

    async def test_roles_with_permission(
        self, client: AsyncClient, auth_headers: Headers
    ):
        response = await client.get(
            f"{BASE}/permissions/export_reports/roles",
            headers=auth_headers(Role.RECEPTIONIST),
        )

        assert response.status_code == 200
        assert response.json() == {
            "permission": "export_reports",
            "roles": ["PRACTICE_MANAGER", "VETERINARIAN", "VET_TECHNICIAN"],
        }
