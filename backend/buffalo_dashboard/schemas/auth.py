"""
Authentication schemas.
"""
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field

from buffalo_dashboard.models.admin import Admin


class LoginRequest(BaseModel):
    """Schema for admin login."""
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class AdminResponse(BaseModel):
    """Public admin info. The password hash is never exposed."""
    id: str
    username: str
    lastLogin: Optional[datetime] = None


class TokenData(BaseModel):
    """Issued access token."""
    token: str
    tokenType: str = "bearer"
    expiresIn: int
    admin: AdminResponse


class VerifyData(BaseModel):
    authenticated: bool


def admin_to_response(admin: Admin) -> AdminResponse:
    return AdminResponse(
        id=admin.id,
        username=admin.username,
        lastLogin=admin.last_login,
    )
