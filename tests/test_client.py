"""Tests for opengraphio.client - request/response round-trip (no network)."""

from __future__ import annotations

import asyncio
import logging
from unittest.mock import patch
from urllib.parse import parse_qsl, unquote, urlparse

import pytest

from opengraphio.client import OpenGraphClient, fetch_site_info, fetch_site_info_sync
from opengraphio.errors import DecodeError, EmptyResponseError, OpenGraphError, TransportError
from opengraphio.models import ExtractInfo, ScrapeInfo, SiteInfo
from opengraphio.options import ClientOptions
from opengraphio.transport import HttpxTransport

TARGET = "https://www.example.com/blog/remote-work?ref=home"


# ---------------------------------------------------------------------------
# Success paths
# ---------------------------------------------------------------------------

class TestGetSiteInfo:
    @pytest.mark.asyncio
    async def test_site_response(self, options, make_transport, site_body):
        transport = make_transport(body=site_body)
        result = await OpenGraphClient(options, transport).get_site_info(TARGET)
        assert isinstance(result, SiteInfo)
        assert result.hybrid_graph.site_name == "Example Blog"

    @pytest.mark.asyncio
    async def test_extract_response(self, make_transport, extract_body):
        opts = ClientOptions(app_id="abc", service="extract", html_elements="h1, h2")
        transport = make_transport(body=extract_body)
        result = await fetch_site_info(TARGET, opts, transport=transport)
        assert isinstance(result, ExtractInfo)
        assert result.tags[0].tag_name == "h1"

    @pytest.mark.asyncio
    async def test_scrape_plain_text_response(self, make_transport):
        opts = ClientOptions(app_id="abc", service="scrape")
        transport = make_transport(body=b"<html>page</html>", content_type="text/plain; charset=utf-8")
        result = await fetch_site_info(TARGET, opts, transport=transport)
        assert result == ScrapeInfo(text="<html>page</html>")

    @pytest.mark.asyncio
    async def test_scrape_json_string_response(self, make_transport):
        opts = ClientOptions(app_id="abc", service="scrape")
        transport = make_transport(body=b'"some scraped text"')
        result = await fetch_site_info(TARGET, opts, transport=transport)
        assert result == ScrapeInfo(text="some scraped text")

    @pytest.mark.asyncio
    async def test_requested_url_is_built_from_options(self, make_transport, site_body):
        opts = ClientOptions(app_id="abc", full_render=True, max_cache_age=60)
        transport = make_transport(body=site_body)
        await fetch_site_info(TARGET, opts, transport=transport)

        assert len(transport.requested) == 1
        parsed = urlparse(transport.requested[0])
        assert parsed.scheme == "https"
        assert parsed.netloc == "opengraph.io"
        assert parsed.path.startswith("/api/1.1/site/")
        assert unquote(parsed.path.rsplit("/", 1)[-1]) == TARGET
        assert dict(parse_qsl(parsed.query)) == {
            "app_id": "abc",
            "cache_ok": "true",
            "full_render": "true",
            "max_cache_age": "60",
        }

    @pytest.mark.asyncio
    async def test_each_call_returns_fresh_result(self, options, make_transport, site_body):
        client = OpenGraphClient(options, make_transport(body=site_body))
        first = await client.get_site_info(TARGET)
        second = await client.get_site_info(TARGET)
        assert first == second
        assert first is not second

    @pytest.mark.asyncio
    async def test_concurrent_calls_are_isolated(self, make_transport, site_body, extract_body):
        site_opts = ClientOptions(app_id="abc")
        extract_opts = ClientOptions(app_id="abc", service="extract")
        site, extract = await asyncio.gather(
            fetch_site_info(TARGET, site_opts, transport=make_transport(body=site_body)),
            fetch_site_info(TARGET, extract_opts, transport=make_transport(body=extract_body)),
        )
        assert isinstance(site, SiteInfo)
        assert isinstance(extract, ExtractInfo)

    def test_default_transport_is_httpx(self, options):
        assert isinstance(OpenGraphClient(options).transport, HttpxTransport)

    @pytest.mark.asyncio
    async def test_request_log_is_redacted(self, options, make_transport, site_body, caplog):
        caplog.set_level(logging.DEBUG, logger="opengraphio.client")
        await fetch_site_info(TARGET, options, transport=make_transport(body=site_body))

        info = [r.getMessage() for r in caplog.records if r.levelno == logging.INFO]
        assert len(info) == 1
        assert "app_id=***" in info[0]
        assert "opengraph.io/api/1.1/site/" in info[0]
        assert all("test-app-id" not in r.getMessage() for r in caplog.records)


# ---------------------------------------------------------------------------
# Failure paths
# ---------------------------------------------------------------------------

class TestFailures:
    @pytest.mark.asyncio
    async def test_empty_body_raises_empty_response_error(self, options, make_transport):
        transport = make_transport(body=b"")
        with pytest.raises(EmptyResponseError) as exc_info:
            await fetch_site_info(TARGET, options, transport=transport)
        assert not isinstance(exc_info.value, DecodeError)
        assert exc_info.value.status == 200

    @pytest.mark.asyncio
    async def test_empty_text_plain_body_raises_empty_response_error(self, options, make_transport):
        transport = make_transport(body=b"", content_type="text/plain")
        with pytest.raises(EmptyResponseError):
            await fetch_site_info(TARGET, options, transport=transport)

    @pytest.mark.asyncio
    async def test_transport_error_propagates(self, options, failing_transport):
        with pytest.raises(TransportError, match="Connection refused"):
            await fetch_site_info(TARGET, options, transport=failing_transport)

    @pytest.mark.asyncio
    async def test_unmatched_body_raises_decode_error(self, options, make_transport):
        transport = make_transport(
            body=b'{"error": {"code": 401, "message": "Invalid app_id"}}', status_code=401,
        )
        with pytest.raises(DecodeError, match="no matching response schema") as exc_info:
            await fetch_site_info(TARGET, options, transport=transport)
        assert exc_info.value.status == 401
        assert "test-app-id" not in exc_info.value.url
        assert exc_info.value.url.startswith("https://opengraph.io/api/1.1/site/")

    @pytest.mark.asyncio
    async def test_invalid_utf8_plain_text_raises_decode_error(self, options, make_transport):
        transport = make_transport(body=b"\xff\xfe", content_type="text/plain")
        with pytest.raises(DecodeError, match="invalid text encoding"):
            await fetch_site_info(TARGET, options, transport=transport)

    @pytest.mark.asyncio
    async def test_errors_share_base_class(self, options, make_transport):
        with pytest.raises(OpenGraphError):
            await fetch_site_info(TARGET, options, transport=make_transport(body=b""))

    @pytest.mark.asyncio
    async def test_app_id_not_in_empty_response_message(self, options, make_transport):
        with pytest.raises(EmptyResponseError) as exc_info:
            await fetch_site_info(TARGET, options, transport=make_transport(body=b""))
        assert "test-app-id" not in str(exc_info.value)


# ---------------------------------------------------------------------------
# Synchronous wrapper
# ---------------------------------------------------------------------------

class TestFetchSiteInfoSync:
    def test_returns_result(self, options, make_transport, extract_body):
        result = fetch_site_info_sync(TARGET, options, transport=make_transport(body=extract_body))
        assert isinstance(result, ExtractInfo)

    def test_error_propagates(self, options, make_transport):
        with pytest.raises(EmptyResponseError):
            fetch_site_info_sync(TARGET, options, transport=make_transport(body=b""))

    def test_delegates_to_async_api(self, options, make_transport, site_body):
        transport = make_transport(body=site_body)
        with patch("opengraphio.client.fetch_site_info", wraps=fetch_site_info) as spy:
            fetch_site_info_sync(TARGET, options, transport=transport)
        spy.assert_called_once_with(TARGET, options, transport=transport)


# ---------------------------------------------------------------------------
# Top-level import convenience
# ---------------------------------------------------------------------------

class TestTopLevelImport:
    def test_public_api_importable_from_package(self):
        from opengraphio import ClientOptions as TopOptions
        from opengraphio import fetch_site_info as top_fetch

        assert callable(top_fetch)
        assert TopOptions is ClientOptions
