"""
API v1 routers.
"""
from fastapi import APIRouter

from buffalo_dashboard.api.v1.app_config import router as app_config_router
from buffalo_dashboard.api.v1.auth import router as auth_router
from buffalo_dashboard.api.v1.buttons import router as buttons_router

api_router = APIRouter()

api_router.include_router(app_config_router, prefix="/config", tags=["config"])
api_router.include_router(buttons_router, prefix="/buttons", tags=["buttons"])
api_router.include_router(auth_router, prefix="/auth", tags=["auth"])

__all__ = ["api_router"]
