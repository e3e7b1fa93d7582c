"""
Button link schemas.

Field names are camelCase on the wire, matching the admin UI and the
managed app.
"""
from datetime import datetime
from typing import Any, Optional
from pydantic import AliasChoices, BaseModel, Field

from buffalo_dashboard.models.button_link import ButtonLink, LinkType

# Wire name -> model attribute
_ATTRIBUTE_NAMES = {
    "linkType": "link_type",
    "isActive": "is_active",
}


class _ButtonLinkFields(BaseModel):
    name: Optional[str] = None
    url: Optional[str] = None
    icon: Optional[str] = None
    description: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("description", "displayText"),
        description="Display text; also accepted as displayText",
    )
    linkType: Optional[LinkType] = None
    isActive: Optional[bool] = None
    order: Optional[int] = None

    def to_fields(self) -> dict[str, Any]:
        """Submitted, non-null values keyed by model attribute name."""
        data = self.model_dump(exclude_unset=True, exclude_none=True)
        return {_ATTRIBUTE_NAMES.get(k, k): v for k, v in data.items()}


class ButtonLinkCreate(_ButtonLinkFields):
    """Schema for creating a button link."""


class ButtonLinkUpdate(_ButtonLinkFields):
    """Schema for updating a button link. Only submitted fields change."""


class ButtonLinkResponse(BaseModel):
    """Schema for button link response."""
    id: str
    name: str
    url: str
    icon: str
    description: str
    linkType: LinkType
    isActive: bool
    order: int
    createdAt: datetime
    updatedAt: datetime


def button_link_to_response(button: ButtonLink) -> ButtonLinkResponse:
    """Convert ButtonLink model to ButtonLinkResponse schema."""
    return ButtonLinkResponse(
        id=button.id,
        name=button.name,
        url=button.url,
        icon=button.icon,
        description=button.description,
        linkType=button.link_type,
        isActive=button.is_active,
        order=button.order,
        createdAt=button.created_at,
        updatedAt=button.updated_at,
    )
