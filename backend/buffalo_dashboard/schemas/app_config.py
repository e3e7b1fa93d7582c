"""
App configuration schemas.
"""
from datetime import datetime
from typing import Any, Optional
from pydantic import BaseModel

from buffalo_dashboard.models.app_config import AppConfig


class AppConfigUpdate(BaseModel):
    """Schema for updating the app configuration."""
    appName: Optional[str] = None
    apiUrl: Optional[str] = None

    def to_fields(self) -> dict[str, Any]:
        return {
            "app_name": self.appName,
            "api_url": self.apiUrl,
        }


class AppConfigResponse(BaseModel):
    """Schema for app configuration response."""
    id: str
    appName: str
    apiUrl: str
    lastUpdated: datetime
    createdAt: datetime
    updatedAt: datetime


def app_config_to_response(config: AppConfig) -> AppConfigResponse:
    return AppConfigResponse(
        id=config.id,
        appName=config.app_name,
        apiUrl=config.api_url,
        lastUpdated=config.last_updated,
        createdAt=config.created_at,
        updatedAt=config.updated_at,
    )
