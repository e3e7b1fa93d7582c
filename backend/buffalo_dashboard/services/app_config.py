"""
App configuration service.

AppConfig is a single row keyed by APP_CONFIG_ID: reads create it with
defaults when missing, writes update it in place.
"""
import logging
from typing import Any, Optional

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.ext.asyncio import AsyncSession

from buffalo_dashboard.core.config import Settings
from buffalo_dashboard.models.app_config import AppConfig, APP_CONFIG_ID, DEFAULT_APP_NAME
from buffalo_dashboard.models.base import utcnow

logger = logging.getLogger(__name__)


def default_api_url(settings: Settings, host: Optional[str] = None) -> str:
    """Buttons endpoint as seen from `host` (the configured HOSTNAME by default)."""
    return f"http://{host or settings.HOSTNAME}:{settings.PORT}{settings.API_PREFIX}/buttons"


async def _find_app_config(db: AsyncSession) -> Optional[AppConfig]:
    result = await db.execute(select(AppConfig).where(AppConfig.id == APP_CONFIG_ID))
    return result.scalar_one_or_none()


async def ensure_app_config_row(
    db: AsyncSession,
    settings: Settings,
    host: Optional[str] = None,
) -> None:
    """
    Insert the default AppConfig row unless one already exists.

    Uses INSERT ... ON CONFLICT DO NOTHING on the primary key, so
    concurrent first reads never collide.
    """
    now = utcnow()
    values = {
        "id": APP_CONFIG_ID,
        "app_name": DEFAULT_APP_NAME,
        "api_url": default_api_url(settings, host),
        "last_updated": now,
        "created_at": now,
        "updated_at": now,
    }
    dialect = db.get_bind().dialect.name
    if dialect == "postgresql":
        stmt = pg_insert(AppConfig).values(**values).on_conflict_do_nothing(index_elements=["id"])
    elif dialect == "sqlite":
        stmt = sqlite_insert(AppConfig).values(**values).on_conflict_do_nothing(index_elements=["id"])
    else:
        raise NotImplementedError(f"Unsupported database dialect: {dialect}")

    result = await db.execute(stmt)
    if result.rowcount:
        logger.info(f"App configuration initialized: api_url={values['api_url']}")


async def get_app_config(
    db: AsyncSession,
    settings: Settings,
    host: Optional[str] = None,
) -> AppConfig:
    """Return the app config, creating it with defaults if absent."""
    config = await _find_app_config(db)
    if config is None:
        await ensure_app_config_row(db, settings, host)
        config = await _find_app_config(db)
    return config


async def update_app_config(
    db: AsyncSession,
    fields: dict[str, Any],
    settings: Settings,
    host: Optional[str] = None,
) -> AppConfig:
    """
    Update the app config in place.

    `app_name` is applied only when non-empty, `api_url` whenever given.
    `last_updated` is refreshed on every call.
    """
    config = await get_app_config(db, settings, host)

    app_name = (fields.get("app_name") or "").strip()
    if app_name:
        config.app_name = app_name
    if fields.get("api_url") is not None:
        config.api_url = fields["api_url"].strip()
    config.last_updated = utcnow()

    await db.flush()
    await db.refresh(config)

    logger.info(f"App configuration updated: app_name={config.app_name}")
    return config
