"""
Button link endpoints.

Endpoints:
- GET /api/buttons - List links ordered by `order`
- GET /api/buttons/{button_id} - Get a link
- POST /api/buttons - Create a link (disabled in restricted mode)
- PUT /api/buttons/{button_id} - Update a link
- DELETE /api/buttons/{button_id} - Delete a link (disabled in restricted mode)
"""
from fastapi import APIRouter, Depends, Request, status
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from buffalo_dashboard.core.config import Settings, get_settings
from buffalo_dashboard.core.deps import forbid_in_restricted_mode, require_admin
from buffalo_dashboard.core.exceptions import ValidationError
from buffalo_dashboard.db.base import get_db
from buffalo_dashboard.schemas.button_link import (
    ButtonLinkCreate,
    ButtonLinkResponse,
    ButtonLinkUpdate,
    button_link_to_response,
)
from buffalo_dashboard.schemas.common import Envelope
from buffalo_dashboard.services import button_links as service

router = APIRouter()


async def _parse_create_body(request: Request) -> ButtonLinkCreate:
    """Read the create payload after the restricted-mode check has passed."""
    try:
        payload = await request.json()
    except ValueError:
        raise ValidationError("Request body must be a JSON object")
    try:
        return ButtonLinkCreate.model_validate(payload)
    except PydanticValidationError as exc:
        raise RequestValidationError(exc.errors())


@router.get(
    "",
    response_model=Envelope[list[ButtonLinkResponse]],
    response_model_exclude_none=True,
)
async def list_buttons(db: AsyncSession = Depends(get_db)):
    """List all button links, ascending by order."""
    buttons = await service.list_button_links(db)
    return Envelope(success=True, data=[button_link_to_response(b) for b in buttons])


@router.get(
    "/{button_id}",
    response_model=Envelope[ButtonLinkResponse],
    response_model_exclude_none=True,
)
async def get_button(button_id: str, db: AsyncSession = Depends(get_db)):
    button = await service.get_button_link(db, button_id)
    return Envelope(success=True, data=button_link_to_response(button))


@router.post(
    "",
    response_model=Envelope[ButtonLinkResponse],
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(forbid_in_restricted_mode)],
)
async def create_button(
    request: Request,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """
    Create a button link.

    Always 403 in restricted mode; the body is only read once creation
    is known to be allowed.
    """
    data = await _parse_create_body(request)
    button = await service.create_button_link(
        db, data.to_fields(), restricted=settings.RESTRICTED_MODE
    )
    return Envelope(success=True, data=button_link_to_response(button))


@router.put(
    "/{button_id}",
    response_model=Envelope[ButtonLinkResponse],
    response_model_exclude_none=True,
    dependencies=[Depends(require_admin)],
)
async def update_button(
    button_id: str,
    data: ButtonLinkUpdate,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """
    Update a button link.

    In restricted mode only url and description are applied; other
    submitted fields are ignored.
    """
    button = await service.update_button_link(
        db, button_id, data.to_fields(), restricted=settings.RESTRICTED_MODE
    )
    return Envelope(success=True, data=button_link_to_response(button))


@router.delete(
    "/{button_id}",
    response_model=Envelope[None],
    response_model_exclude_none=True,
    dependencies=[Depends(forbid_in_restricted_mode)],
)
async def delete_button(
    button_id: str,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """Delete a button link. Always 403 in restricted mode."""
    await service.delete_button_link(db, button_id, restricted=settings.RESTRICTED_MODE)
    return Envelope(success=True, message="Button deleted successfully")
