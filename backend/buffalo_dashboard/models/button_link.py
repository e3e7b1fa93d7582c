"""
Button link model.
"""
import enum
from sqlalchemy import String, Boolean, Integer, Text, Enum as SQLEnum
from sqlalchemy.orm import Mapped, mapped_column
from buffalo_dashboard.models.base import BaseModel


class LinkType(str, enum.Enum):
    """How the managed app renders a link."""
    REDIRECT = "redirect"
    TEXT = "text"


class ButtonLink(BaseModel):
    """A single entry shown in the managed app: a URL redirect or static text."""
    __tablename__ = "button_links"

    name: Mapped[str] = mapped_column(String(200), nullable=False)
    url: Mapped[str] = mapped_column(String(2048), nullable=False, default="")
    icon: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    # Shown for text links; stored as "displayText" by older clients
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    link_type: Mapped[LinkType] = mapped_column(
        SQLEnum(LinkType, values_callable=lambda x: [e.value for e in x]),
        nullable=False,
        default=LinkType.REDIRECT
    )
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    order: Mapped[int] = mapped_column(Integer, nullable=False, default=0, index=True)

    def __repr__(self) -> str:
        return f"<ButtonLink {self.name} ({self.order})>"
