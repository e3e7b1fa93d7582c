"""
Shared FastAPI dependencies.
"""
import logging
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from buffalo_dashboard.core.config import Settings, get_settings
from buffalo_dashboard.core.exceptions import ForbiddenError, UnauthorizedError
from buffalo_dashboard.db.base import get_db
from buffalo_dashboard.services.auth import verify_access_token

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


def get_bearer_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Optional[str]:
    """Token from an `Authorization: Bearer <token>` header, if any."""
    if credentials is None:
        return None
    return credentials.credentials or None


async def require_admin(
    token: Optional[str] = Depends(get_bearer_token),
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> None:
    """
    Auth gate for mutating routes.

    Does nothing in open mode. In restricted mode rejects requests with a
    missing or invalid bearer token before the route runs.
    """
    if not settings.RESTRICTED_MODE:
        return
    if not token:
        raise UnauthorizedError("No token provided")
    if not await verify_access_token(db, token, settings):
        logger.warning("Rejected request with invalid token")
        raise UnauthorizedError("Invalid token")


def forbid_in_restricted_mode(settings: Settings = Depends(get_settings)) -> None:
    """Reject link creation/deletion in restricted mode, whatever the request carries."""
    if settings.RESTRICTED_MODE:
        raise ForbiddenError("Adding or deleting links is disabled. Only the existing links can be edited.")
