"""
Tests for the WhatsApp HTTP client, URL builder and form builder.
"""

import asyncio
import io

import aiohttp
import pytest

from tests.conftest import MESSAGES_URL, TEST_PHONE_ID, TEST_TOKEN, UPLOAD_URL
from wasend.core.exceptions import TransportError
from wasend.messaging.whatsapp.client.whatsapp_client import (
    RawResponse,
    WhatsAppFormDataBuilder,
    WhatsAppUrlBuilder,
)


def form_parts(form: aiohttp.FormData) -> dict[str, dict]:
    """Index the parts of a FormData by field name."""
    parts = {}
    for type_options, headers, value in form._fields:
        parts[type_options["name"]] = {
            "filename": type_options.get("filename"),
            "content_type": headers.get("Content-Type"),
            "value": value,
        }
    return parts


class TestWhatsAppUrlBuilder:
    def test_trailing_slash_is_stripped(self):
        builder = WhatsAppUrlBuilder("https://graph.facebook.com/", "v21.0", "42")

        assert builder.get_messages_url() == "https://graph.facebook.com/v21.0/42/messages"

    def test_media_urls(self):
        builder = WhatsAppUrlBuilder("https://graph.facebook.com", "v21.0", "42")

        assert builder.get_media_url() == "https://graph.facebook.com/v21.0/42/media"
        assert builder.get_media_url("987") == "https://graph.facebook.com/v21.0/987"

    def test_empty_media_id_never_targets_upload_endpoint(self):
        builder = WhatsAppUrlBuilder("https://graph.facebook.com", "v21.0", "42")

        assert builder.get_media_url("") == "https://graph.facebook.com/v21.0/"


class TestWhatsAppFormDataBuilder:
    def test_fields_and_file_handle(self):
        form = WhatsAppFormDataBuilder.build_form_data(
            {"messaging_product": "whatsapp", "type": "audio/ogg"},
            {"file": ("voice.ogg", io.BytesIO(b"abc"), "audio/ogg")},
        )
        parts = form_parts(form)

        assert parts["messaging_product"]["value"] == "whatsapp"
        assert parts["type"]["value"] == "audio/ogg"
        assert parts["file"]["filename"] == "voice.ogg"
        assert parts["file"]["content_type"] == "audio/ogg"
        assert parts["file"]["value"] == b"abc"

    def test_raw_bytes_are_accepted(self):
        form = WhatsAppFormDataBuilder.build_form_data(
            {}, {"file": ("a.jpg", b"\xff\xd8", "image/jpeg")}
        )

        assert form_parts(form)["file"]["value"] == b"\xff\xd8"

    def test_invalid_file_tuple(self):
        with pytest.raises(ValueError, match="Invalid file format"):
            WhatsAppFormDataBuilder.build_form_data({}, {"file": b"abc"})


def test_client_tenant_id_is_phone_number_id(client):
    assert client.tenant_id == TEST_PHONE_ID


class TestRawResponse:
    @pytest.mark.parametrize("status, ok", [(200, True), (204, True), (302, False), (500, False)])
    def test_ok(self, status, ok):
        assert RawResponse(status=status, body=b"").ok is ok

    def test_text_tolerates_invalid_utf8(self):
        assert RawResponse(status=200, body=b"\xffok").text.endswith("ok")


@pytest.mark.asyncio
class TestWhatsAppClient:
    async def test_post_json_defaults_to_messages_url(self, client, fake_session):
        fake_session.queue(status=200, json_body={"ok": True})

        raw = await client.post_json({"hello": "world"})

        request = fake_session.last_request
        assert request.method == "POST"
        assert request.url == MESSAGES_URL
        assert request.json == {"hello": "world"}
        assert request.headers == {
            "Authorization": f"Bearer {TEST_TOKEN}",
            "Content-Type": "application/json",
        }
        assert raw.status == 200
        assert raw.body == b'{"ok": true}'

    async def test_post_multipart_lets_aiohttp_set_content_type(self, client, fake_session):
        fake_session.queue(status=200, json_body={"id": "1"})
        form = aiohttp.FormData()
        form.add_field("type", "image/jpeg")

        await client.post_multipart(UPLOAD_URL, form)

        request = fake_session.last_request
        assert request.url == UPLOAD_URL
        assert request.kwargs["data"] is form
        assert request.headers == {"Authorization": f"Bearer {TEST_TOKEN}"}

    async def test_get_sends_bearer_token(self, client, fake_session):
        fake_session.queue(status=200, body=b"bytes")

        raw = await client.get("https://cdn.test/file")

        assert fake_session.last_request.method == "GET"
        assert fake_session.last_request.headers["Authorization"] == f"Bearer {TEST_TOKEN}"
        assert raw.body == b"bytes"
        assert set(fake_session.last_request.kwargs) == {"headers"}

    async def test_error_status_is_returned_not_raised(self, client, fake_session):
        fake_session.queue(status=401, json_body={"error": {"code": 190}})

        raw = await client.post_json({})

        assert raw.status == 401
        assert not raw.ok

    @pytest.mark.parametrize(
        "error",
        [
            aiohttp.ClientConnectionError("connection refused"),
            asyncio.TimeoutError(),
        ],
    )
    async def test_connection_failures_become_transport_errors(
        self, client, fake_session, error
    ):
        fake_session.queue(error=error)

        with pytest.raises(TransportError) as exc_info:
            await client.post_json({})

        assert exc_info.value.url == MESSAGES_URL
        assert exc_info.value.__cause__ is error
