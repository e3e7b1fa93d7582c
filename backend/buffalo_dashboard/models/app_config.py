"""
App configuration model - a single-row table.
"""
from datetime import datetime
from sqlalchemy import String, DateTime
from sqlalchemy.orm import Mapped, mapped_column
from buffalo_dashboard.db.base import Base
from buffalo_dashboard.models.base import TimestampMixin, utcnow

# Primary key of the only AppConfig row
APP_CONFIG_ID = "default"

DEFAULT_APP_NAME = "My Flutter App"


class AppConfig(Base, TimestampMixin):
    """
    Display name and API endpoint of the managed app.

    Exactly one row exists, keyed by APP_CONFIG_ID. Reads create it on
    demand and writes update it in place.
    """
    __tablename__ = "app_config"

    id: Mapped[str] = mapped_column(String(15), primary_key=True, default=APP_CONFIG_ID)
    app_name: Mapped[str] = mapped_column(String(200), nullable=False, default=DEFAULT_APP_NAME)
    api_url: Mapped[str] = mapped_column(String(2048), nullable=False, default="")
    last_updated: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow
    )

    def __repr__(self) -> str:
        return f"<AppConfig {self.app_name}>"
