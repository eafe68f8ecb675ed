# ---------------------------------------------------------------------------
# Author  : Kyle <kyle@hacking-linux.com>
# Version : 20260206v1
# ---------------------------------------------------------------------------
"""
Domain error taxonomy.

Services raise these instead of ``HTTPException`` so that they stay usable
outside a request (seed script, tests).  ``main.py`` registers a single
handler that renders any :class:`VaultError` as ``{"error": <message>}``
with the class's ``status_code``.
"""

from fastapi import status


class VaultError(Exception):
    """Base class for every error that maps onto a client-visible response."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(VaultError):
    """Missing or malformed required field."""

    status_code = status.HTTP_400_BAD_REQUEST


class Unauthenticated(VaultError):
    """Bearer token absent, malformed, expired, or its user is gone."""

    status_code = status.HTTP_401_UNAUTHORIZED


class InvalidCredentials(VaultError):
    """Login failed.  Never says which of email / password was wrong."""

    status_code = status.HTTP_401_UNAUTHORIZED


class NotFound(VaultError):
    status_code = status.HTTP_404_NOT_FOUND


class Conflict(VaultError):
    status_code = status.HTTP_409_CONFLICT
