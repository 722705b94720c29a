"""Application-wide constants.

This module defines constants used throughout the application
to avoid magic numbers and ensure consistency.
"""

# Token settings
ACCESS_TOKEN_JTI_LENGTH = 32
TOKEN_TYPE_ACCESS = "access"

# Secret key requirements
MIN_SECRET_KEY_LENGTH = 32
DEFAULT_INSECURE_SECRET = "change-me-in-production"

# Request tracing
REQUEST_ID_HEADER = "X-Request-ID"

# Paths that never carry a principal
PUBLIC_PATH_PREFIXES = (
    "/health",
    "/info",
    "/docs",
    "/redoc",
    "/openapi.json",
)
