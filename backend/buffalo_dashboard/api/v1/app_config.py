"""
App configuration endpoints.
"""
from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from buffalo_dashboard.core.config import Settings, get_settings
from buffalo_dashboard.core.deps import require_admin
from buffalo_dashboard.db.base import get_db
from buffalo_dashboard.schemas.app_config import (
    AppConfigResponse,
    AppConfigUpdate,
    app_config_to_response,
)
from buffalo_dashboard.schemas.common import Envelope
from buffalo_dashboard.services import app_config as service

router = APIRouter()


@router.get("", response_model=Envelope[AppConfigResponse], response_model_exclude_none=True)
async def get_config(
    request: Request,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """Get the app configuration, creating it with defaults on first access."""
    config = await service.get_app_config(db, settings, host=request.url.hostname)
    return Envelope(success=True, data=app_config_to_response(config))


@router.put(
    "",
    response_model=Envelope[AppConfigResponse],
    response_model_exclude_none=True,
    dependencies=[Depends(require_admin)],
)
async def update_config(
    data: AppConfigUpdate,
    request: Request,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """Update the app name (and optionally API URL) in place."""
    config = await service.update_app_config(
        db, data.to_fields(), settings, host=request.url.hostname
    )
    return Envelope(success=True, data=app_config_to_response(config))
