"""
Button link service.

CRUD over ButtonLink records. In restricted mode creation and deletion are
disabled and updates only touch RESTRICTED_UPDATE_FIELDS.
"""
import logging
from typing import Any, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from buffalo_dashboard.core.exceptions import ForbiddenError, NotFoundError, ValidationError
from buffalo_dashboard.models.button_link import ButtonLink, LinkType

logger = logging.getLogger(__name__)

RESTRICTED_UPDATE_FIELDS = ("url", "description")

UPDATABLE_FIELDS = ("name", "url", "icon", "description", "link_type", "is_active", "order")

DEFAULTS: dict[str, Any] = {
    "url": "",
    "icon": "",
    "description": "",
    "link_type": LinkType.REDIRECT,
    "is_active": True,
    "order": 0,
}


def _normalize(fields: dict[str, Any]) -> dict[str, Any]:
    """Trim text fields that are stored trimmed."""
    result = dict(fields)
    for key in ("name", "url"):
        if isinstance(result.get(key), str):
            result[key] = result[key].strip()
    return result


def validate_button_link(fields: dict[str, Any]) -> None:
    """
    Check a complete set of button link fields.

    Raises ValidationError when name is blank, or when a redirect link
    has no url.
    """
    if not fields.get("name"):
        raise ValidationError("name is required")
    link_type = fields.get("link_type", LinkType.REDIRECT)
    if link_type == LinkType.REDIRECT and not fields.get("url"):
        raise ValidationError("url is required for redirect links")


async def list_button_links(db: AsyncSession) -> Sequence[ButtonLink]:
    """All button links ordered by `order`, then creation time."""
    result = await db.execute(
        select(ButtonLink).order_by(ButtonLink.order.asc(), ButtonLink.created_at.asc())
    )
    return result.scalars().all()


async def get_button_link(db: AsyncSession, button_id: str) -> ButtonLink:
    result = await db.execute(select(ButtonLink).where(ButtonLink.id == button_id))
    button = result.scalar_one_or_none()
    if button is None:
        raise NotFoundError("Button not found")
    return button


async def create_button_link(
    db: AsyncSession,
    fields: dict[str, Any],
    restricted: bool = False,
) -> ButtonLink:
    if restricted:
        raise ForbiddenError("Adding new links is disabled. Only the existing links can be edited.")

    values = {**DEFAULTS, **_normalize(fields)}
    values = {k: v for k, v in values.items() if k in UPDATABLE_FIELDS}
    validate_button_link(values)

    button = ButtonLink(**values)
    db.add(button)
    await db.flush()
    await db.refresh(button)

    logger.info(f"Button link created: id={button.id}, name={button.name}")
    return button


async def update_button_link(
    db: AsyncSession,
    button_id: str,
    fields: dict[str, Any],
    restricted: bool = False,
) -> ButtonLink:
    button = await get_button_link(db, button_id)

    allowed = RESTRICTED_UPDATE_FIELDS if restricted else UPDATABLE_FIELDS
    changes = {k: v for k, v in _normalize(fields).items() if k in allowed}
    ignored = set(fields) - set(changes)
    if ignored:
        logger.debug(f"Ignoring non-editable fields for button {button_id}: {sorted(ignored)}")

    merged = {key: getattr(button, key) for key in UPDATABLE_FIELDS}
    merged.update(changes)
    validate_button_link(merged)

    for key, value in changes.items():
        setattr(button, key, value)

    await db.flush()
    await db.refresh(button)

    logger.info(f"Button link updated: id={button.id}, fields={sorted(changes)}")
    return button


async def delete_button_link(
    db: AsyncSession,
    button_id: str,
    restricted: bool = False,
) -> None:
    if restricted:
        raise ForbiddenError("Deleting links is disabled. Only the existing links can be edited.")

    button = await get_button_link(db, button_id)
    await db.delete(button)
    await db.flush()

    logger.info(f"Button link deleted: id={button_id}")
