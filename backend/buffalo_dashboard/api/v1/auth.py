"""
Authentication endpoints.

Endpoints:
- POST /api/auth/login - Exchange admin credentials for a bearer token
- POST /api/auth/verify - Check the bearer token in the Authorization header

Logout is handled client-side by discarding the token.
"""
from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from buffalo_dashboard.core.config import Settings, get_settings
from buffalo_dashboard.core.deps import get_bearer_token
from buffalo_dashboard.db.base import get_db
from buffalo_dashboard.schemas.auth import LoginRequest, TokenData, VerifyData, admin_to_response
from buffalo_dashboard.schemas.common import Envelope
from buffalo_dashboard.services.auth import authenticate_admin, verify_access_token

router = APIRouter()


@router.post("/login", response_model=Envelope[TokenData], response_model_exclude_none=True)
async def login(
    credentials: LoginRequest,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """Authenticate an admin with username/password."""
    admin, token = await authenticate_admin(
        db, credentials.username, credentials.password, settings
    )
    return Envelope(
        success=True,
        data=TokenData(
            token=token,
            expiresIn=settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
            admin=admin_to_response(admin),
        ),
        message="Login successful",
    )


@router.post("/verify", response_model=Envelope[VerifyData], response_model_exclude_none=True)
async def verify(
    token: Optional[str] = Depends(get_bearer_token),
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """Report whether the bearer token is valid. Never fails with 401."""
    authenticated = await verify_access_token(db, token, settings)
    return Envelope(success=authenticated, data=VerifyData(authenticated=authenticated))
