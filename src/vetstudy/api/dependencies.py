"""Shared API dependencies."""

from typing import Annotated

from fastapi import Depends

from vetstudy.core.permissions.policy import PermissionPolicy, get_permission_policy


# Type alias for the permission policy dependency
Policy = Annotated[PermissionPolicy, Depends(get_permission_policy)]
