"""Pytest configuration and shared fixtures."""

from collections.abc import AsyncGenerator, Callable

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from vetstudy.core.auth.backend import create_access_token
from vetstudy.core.auth.schemas import Principal
from vetstudy.core.permissions.models import Role
from vetstudy.core.permissions.policy import PermissionPolicy
from vetstudy.main import create_app
from tests.factories import PrincipalFactory


@pytest.fixture
def policy() -> PermissionPolicy:
    """Policy over the built-in role table."""
    return PermissionPolicy()


@pytest.fixture
def app() -> FastAPI:
    """Create test application instance."""
    application = create_app()
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Provide async HTTP client for API testing."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client


@pytest.fixture
def anyio_backend() -> str:
    """Specify the async backend for anyio."""
    return "asyncio"


# ============================================================
# Principal and Token Fixtures
# ============================================================


@pytest.fixture
def make_principal() -> Callable[[Role], Principal]:
    """Build a principal holding the given role."""

    def _make(role: Role) -> Principal:
        return PrincipalFactory.build(role=role)

    return _make


@pytest.fixture
def auth_headers(
    make_principal: Callable[[Role], Principal],
) -> Callable[[Role], dict[str, str]]:
    """Build Authorization headers for a fresh principal with the given role."""

    def _headers(role: Role) -> dict[str, str]:
        principal = make_principal(role)
        token = create_access_token(
            principal.user_id,
            principal.role,
            practice_id=principal.practice_id,
        )
        return {"Authorization": f"Bearer {token}"}

    return _headers
