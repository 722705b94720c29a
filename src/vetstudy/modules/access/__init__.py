"""Access module: the permission model over HTTP."""

from fastapi import APIRouter


router = APIRouter(prefix="/access", tags=["access"])

# Import routes to register them (must be after router is defined)
from vetstudy.modules.access import routes  # noqa: F401, E402


# Module metadata
__module__ = {
    "name": "access",
    "version": "1.0.0",
    "description": "Role hierarchy, role permissions and access checks",
    "dependencies": [],
}
