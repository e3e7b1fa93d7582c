"""
Admin authentication service.

Passwords are stored as passlib hashes and compared with
verify_password. Tokens are signed JWTs whose subject is the admin id.
"""
import logging
from datetime import timedelta
from typing import Optional, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from buffalo_dashboard.core.config import Settings
from buffalo_dashboard.core.exceptions import UnauthorizedError, ValidationError
from buffalo_dashboard.core.security import (
    create_access_token,
    get_password_hash,
    is_service_token,
    verify_password,
    verify_token,
)
from buffalo_dashboard.models.admin import Admin
from buffalo_dashboard.models.base import utcnow

logger = logging.getLogger(__name__)


async def get_admin_by_username(db: AsyncSession, username: str) -> Optional[Admin]:
    result = await db.execute(select(Admin).where(Admin.username == username.strip()))
    return result.scalar_one_or_none()


async def list_admins(db: AsyncSession) -> Sequence[Admin]:
    result = await db.execute(select(Admin).order_by(Admin.username))
    return result.scalars().all()


async def create_admin(db: AsyncSession, username: str, password: str) -> Admin:
    """Create an admin with a hashed password."""
    username = username.strip()
    if not username or not password:
        raise ValidationError("username and password are required")
    if await get_admin_by_username(db, username) is not None:
        raise ValidationError(f"Admin '{username}' already exists")

    admin = Admin(username=username, password_hash=get_password_hash(password))
    db.add(admin)
    await db.flush()
    await db.refresh(admin)

    logger.info(f"Admin created: {admin.username}")
    return admin


async def authenticate_admin(
    db: AsyncSession,
    username: str,
    password: str,
    settings: Settings,
) -> tuple[Admin, str]:
    """
    Check credentials and issue an access token.

    Raises UnauthorizedError without saying which of the two was wrong.
    """
    admin = await get_admin_by_username(db, username)
    if admin is None or not verify_password(password, admin.password_hash):
        logger.warning(f"Failed login attempt for username={username!r}")
        raise UnauthorizedError("Invalid username or password")

    admin.last_login = utcnow()
    await db.flush()
    await db.refresh(admin)

    token = create_access_token(
        subject=admin.id,
        expires_delta=timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
        additional_claims={"username": admin.username},
    )
    logger.info(f"Admin logged in: {admin.username}")
    return admin, token


async def verify_access_token(
    db: AsyncSession,
    token: Optional[str],
    settings: Settings,
) -> bool:
    """True for the static service token or a valid JWT of an existing admin."""
    if not token:
        return False
    if is_service_token(token, settings.AUTH_SECRET):
        return True

    admin_id = verify_token(token)
    if admin_id is None:
        return False

    result = await db.execute(select(Admin.id).where(Admin.id == admin_id))
    return result.scalar_one_or_none() is not None
