"""
Initial data for the dashboard.

seed_defaults() fills in whatever is missing and runs at startup;
reseed() wipes links, config and admins and recreates them.
"""
import logging

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from buffalo_dashboard.core.config import Settings
from buffalo_dashboard.models.admin import Admin
from buffalo_dashboard.models.app_config import AppConfig
from buffalo_dashboard.models.button_link import ButtonLink, LinkType
from buffalo_dashboard.services.app_config import get_app_config
from buffalo_dashboard.services.auth import create_admin

logger = logging.getLogger(__name__)

DEMO_BUTTONS = [
    {
        "name": "Telegram Link",
        "url": "https://t.me/blahblah",
        "icon": "send",
        "link_type": LinkType.REDIRECT,
        "is_active": True,
        "order": 1,
    },
    {
        "name": "Viber Link",
        "url": "viber://chat?number=%2B959956252246",
        "icon": "phone",
        "link_type": LinkType.REDIRECT,
        "is_active": True,
        "order": 2,
    },
    {
        "name": "Website Link",
        "url": "https://youtube.com",
        "icon": "language",
        "link_type": LinkType.REDIRECT,
        "is_active": True,
        "order": 3,
    },
    {
        "name": "Display Text",
        "url": "",
        "description": "Welcome to our service!",
        "icon": "info",
        "link_type": LinkType.TEXT,
        "is_active": True,
        "order": 4,
    },
]


async def _count(db: AsyncSession, model) -> int:
    result = await db.execute(select(func.count()).select_from(model))
    return result.scalar_one()


async def seed_demo_buttons(db: AsyncSession) -> list[ButtonLink]:
    buttons = [ButtonLink(**fields) for fields in DEMO_BUTTONS]
    db.add_all(buttons)
    await db.flush()
    logger.info(f"Demo links created ({len(buttons)})")
    return buttons


async def seed_defaults(db: AsyncSession, settings: Settings) -> None:
    """Create the app config, demo links and admin if they do not exist yet."""
    await get_app_config(db, settings)

    if await _count(db, ButtonLink) == 0:
        await seed_demo_buttons(db)

    if await _count(db, Admin) == 0:
        await create_admin(db, settings.ADMIN_USERNAME, settings.ADMIN_PASSWORD)


async def reseed(db: AsyncSession, settings: Settings) -> None:
    """Delete all links, config and admins, then seed from scratch."""
    await db.execute(delete(ButtonLink))
    await db.execute(delete(AppConfig))
    await db.execute(delete(Admin))
    await db.flush()
    logger.info("Cleared existing data")

    await seed_defaults(db, settings)
    logger.info("Database reseeded")
