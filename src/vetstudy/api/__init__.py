"""HTTP API routers."""

from vetstudy.api.router import api_router


__all__ = ["api_router"]
