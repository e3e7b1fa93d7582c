"""
SQLAlchemy models for the dashboard.
"""
from buffalo_dashboard.models.button_link import ButtonLink, LinkType
from buffalo_dashboard.models.app_config import AppConfig, APP_CONFIG_ID, DEFAULT_APP_NAME
from buffalo_dashboard.models.admin import Admin

__all__ = [
    "ButtonLink",
    "LinkType",
    "AppConfig",
    "APP_CONFIG_ID",
    "DEFAULT_APP_NAME",
    "Admin",
]
