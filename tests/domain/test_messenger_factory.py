"""
Tests for MessengerFactory and open_messenger.
"""

import pytest

from tests.conftest import TEST_PHONE_ID, TEST_TOKEN
from wasend.core.config.settings import settings
from wasend.domain.factories.messenger_factory import MessengerFactory, open_messenger
from wasend.messaging.whatsapp.handlers.whatsapp_media_handler import (
    WhatsAppMediaHandler,
)
from wasend.messaging.whatsapp.messenger.whatsapp_messenger import WhatsAppMessenger


class TestMessengerFactory:
    def test_create_messenger_wiring(self, fake_session):
        factory = MessengerFactory(
            fake_session, base_url="https://graph.test", api_version="v20.0"
        )

        messenger = factory.create_messenger(TEST_TOKEN, TEST_PHONE_ID)

        assert isinstance(messenger, WhatsAppMessenger)
        assert isinstance(messenger.media_handler, WhatsAppMediaHandler)
        assert messenger.media_handler.client is messenger.client
        assert messenger.client.session is fake_session
        assert messenger.tenant_id == TEST_PHONE_ID
        assert messenger.client.url_builder.get_messages_url() == (
            f"https://graph.test/v20.0/{TEST_PHONE_ID}/messages"
        )

    def test_defaults_come_from_settings(self, fake_session, monkeypatch):
        monkeypatch.setattr(settings, "base_url", "https://graph.example/")
        monkeypatch.setattr(settings, "api_version", "v19.0")

        factory = MessengerFactory(fake_session)

        assert factory.base_url == "https://graph.example/"
        assert factory.api_version == "v19.0"

    def test_messengers_share_the_session(self, fake_session):
        factory = MessengerFactory(fake_session)

        first = factory.create_messenger("token-a", "111")
        second = factory.create_messenger("token-b", "222")

        assert first.client.session is second.client.session
        assert first.tenant_id != second.tenant_id


@pytest.mark.asyncio
class TestOpenMessenger:
    async def test_explicit_credentials_and_session_closed(self):
        async with open_messenger(
            TEST_TOKEN, TEST_PHONE_ID, base_url="https://graph.test", timeout=5
        ) as messenger:
            session = messenger.client.session
            assert not session.closed
            assert session.timeout.total == 5
            assert messenger.client.access_token == TEST_TOKEN

        assert session.closed

    async def test_credentials_from_settings(self, monkeypatch):
        monkeypatch.setattr(settings, "wp_access_token", "env-token")
        monkeypatch.setattr(settings, "wp_phone_id", "999")

        async with open_messenger() as messenger:
            assert messenger.client.access_token == "env-token"
            assert messenger.tenant_id == "999"

    async def test_missing_token(self, monkeypatch):
        monkeypatch.setattr(settings, "wp_access_token", None)
        monkeypatch.setattr(settings, "wp_phone_id", "999")

        with pytest.raises(ValueError, match="WP_ACCESS_TOKEN"):
            async with open_messenger():
                pass

    async def test_missing_phone_id(self, monkeypatch):
        monkeypatch.setattr(settings, "wp_access_token", "env-token")
        monkeypatch.setattr(settings, "wp_phone_id", None)

        with pytest.raises(ValueError, match="WP_PHONE_ID"):
            async with open_messenger():
                pass

    async def test_explicit_token_with_phone_id_from_settings(self, monkeypatch):
        monkeypatch.setattr(settings, "wp_access_token", None)
        monkeypatch.setattr(settings, "wp_phone_id", "123")

        async with open_messenger(access_token="explicit-token") as messenger:
            assert messenger.client.access_token == "explicit-token"
            assert messenger.tenant_id == "123"

    async def test_explicit_phone_id_still_needs_a_token(self, monkeypatch):
        monkeypatch.setattr(settings, "wp_access_token", None)
        monkeypatch.setattr(settings, "wp_phone_id", None)

        with pytest.raises(ValueError, match="WP_ACCESS_TOKEN"):
            async with open_messenger(phone_number_id="123"):
                pass
