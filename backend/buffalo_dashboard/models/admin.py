"""
Admin model.
"""
from datetime import datetime
from typing import Optional
from sqlalchemy import String, DateTime
from sqlalchemy.orm import Mapped, mapped_column
from buffalo_dashboard.models.base import BaseModel


class Admin(BaseModel):
    """Dashboard administrator allowed to log in and edit links."""
    __tablename__ = "admins"

    username: Mapped[str] = mapped_column(String(150), unique=True, nullable=False, index=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    last_login: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)

    def __repr__(self) -> str:
        return f"<Admin {self.username}>"
