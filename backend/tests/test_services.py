"""
Tests for the service layer, without the HTTP transport.
"""
import pytest
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from buffalo_dashboard.core.config import Settings
from buffalo_dashboard.core.exceptions import ForbiddenError, NotFoundError, ValidationError
from buffalo_dashboard.models import AppConfig, ButtonLink, LinkType
from buffalo_dashboard.services import button_links
from buffalo_dashboard.services.app_config import (
    default_api_url,
    ensure_app_config_row,
    get_app_config,
    update_app_config,
)


class TestButtonLinkService:

    @pytest.mark.asyncio
    async def test_create_and_get(self, db_session: AsyncSession):
        button = await button_links.create_button_link(
            db_session, {"name": "Profile", "url": "https://example.com/profile", "order": 2}
        )
        fetched = await button_links.get_button_link(db_session, button.id)
        assert fetched.id == button.id
        assert fetched.link_type == LinkType.REDIRECT

    @pytest.mark.asyncio
    async def test_create_ignores_unknown_fields(self, db_session: AsyncSession):
        button = await button_links.create_button_link(
            db_session, {"name": "Profile", "url": "https://x.y", "id": "forced-id", "created_at": None}
        )
        assert button.id != "forced-id"

    @pytest.mark.asyncio
    async def test_restricted_create_forbidden(self, db_session: AsyncSession):
        with pytest.raises(ForbiddenError):
            await button_links.create_button_link(
                db_session, {"name": "Profile", "url": "https://x.y"}, restricted=True
            )

    @pytest.mark.asyncio
    async def test_restricted_update_allow_list(
        self, db_session: AsyncSession, telegram_button: ButtonLink
    ):
        updated = await button_links.update_button_link(
            db_session,
            telegram_button.id,
            {"url": "https://t.me/new", "name": "hacked", "link_type": LinkType.TEXT},
            restricted=True,
        )
        assert updated.url == "https://t.me/new"
        assert updated.name == "Telegram Link"
        assert updated.link_type == LinkType.REDIRECT

    @pytest.mark.asyncio
    async def test_restricted_update_still_validates(
        self, db_session: AsyncSession, telegram_button: ButtonLink
    ):
        with pytest.raises(ValidationError):
            await button_links.update_button_link(
                db_session, telegram_button.id, {"url": "   "}, restricted=True
            )

    @pytest.mark.asyncio
    async def test_switch_to_text_allows_empty_url(
        self, db_session: AsyncSession, telegram_button: ButtonLink
    ):
        updated = await button_links.update_button_link(
            db_session, telegram_button.id, {"link_type": LinkType.TEXT, "url": ""}
        )
        assert updated.url == ""
        assert updated.link_type == LinkType.TEXT

    @pytest.mark.asyncio
    async def test_delete_then_get(self, db_session: AsyncSession, telegram_button: ButtonLink):
        await button_links.delete_button_link(db_session, telegram_button.id)
        with pytest.raises(NotFoundError):
            await button_links.get_button_link(db_session, telegram_button.id)

    @pytest.mark.asyncio
    async def test_restricted_delete_forbidden(
        self, db_session: AsyncSession, telegram_button: ButtonLink
    ):
        with pytest.raises(ForbiddenError):
            await button_links.delete_button_link(db_session, telegram_button.id, restricted=True)


class TestAppConfigService:

    def test_default_api_url(self):
        settings = Settings(HOSTNAME="dash.local", PORT=8080)
        assert default_api_url(settings) == "http://dash.local:8080/api/buttons"
        assert default_api_url(settings, "example.org") == "http://example.org:8080/api/buttons"

    @pytest.mark.asyncio
    async def test_get_uses_configured_hostname(self, db_session: AsyncSession):
        config = await get_app_config(db_session, Settings(HOSTNAME="dash.local", PORT=3000))
        assert config.api_url == "http://dash.local:3000/api/buttons"

    @pytest.mark.asyncio
    async def test_update_refreshes_last_updated(self, db_session: AsyncSession):
        settings = Settings()
        config = await get_app_config(db_session, settings)
        before = config.last_updated

        updated = await update_app_config(db_session, {"app_name": "Buffalo"}, settings)
        assert updated.id == config.id
        assert updated.app_name == "Buffalo"
        assert updated.last_updated >= before

    @pytest.mark.asyncio
    async def test_ensure_row_never_duplicates(self, db_session: AsyncSession):
        """A second insert of the default row is a no-op and keeps existing values."""
        settings = Settings()
        await update_app_config(db_session, {"app_name": "Buffalo"}, settings)

        await ensure_app_config_row(db_session, settings)
        await ensure_app_config_row(db_session, settings, host="other.host")

        count = await db_session.execute(select(func.count()).select_from(AppConfig))
        assert count.scalar_one() == 1
        config = await get_app_config(db_session, settings)
        assert config.app_name == "Buffalo"
