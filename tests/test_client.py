"""Tests for the outbound QuickChart client."""

import json

import httpx
import pytest
from mcp.types import INTERNAL_ERROR

from quickchart_mcp.config import Settings
from quickchart_mcp.errors import InternalError
from quickchart_mcp.render import RenderRequest

from .conftest import PNG_BYTES, SVG_TEXT


class TestFetch:
    @pytest.mark.asyncio
    async def test_binary_for_png(self, client, backend):
        request = RenderRequest(method="POST", url="https://quickchart.io/chart", body={"format": "png"})
        payload = await client.fetch(request)
        assert payload == PNG_BYTES
        assert backend.requests[0].method == "POST"
        assert json.loads(backend.requests[0].content) == {"format": "png"}

    @pytest.mark.asyncio
    async def test_text_for_svg(self, client):
        request = RenderRequest(
            method="POST", url="https://quickchart.io/graphviz", body={"format": "svg"}, format="svg"
        )
        payload = await client.fetch(request)
        assert isinstance(payload, str)
        assert payload == SVG_TEXT

    @pytest.mark.asyncio
    async def test_get_sends_query(self, client, backend):
        request = RenderRequest(method="GET", url="https://quickchart.io/qr", params={"text": "hello world"})
        await client.fetch(request)
        sent = backend.requests[0]
        assert sent.method == "GET"
        assert sent.url.params["text"] == "hello world"

    @pytest.mark.asyncio
    async def test_browser_headers(self, client, backend):
        await client.fetch(RenderRequest(method="POST", url="https://quickchart.io/chart", body={}))
        headers = backend.requests[0].headers
        assert headers["User-Agent"].startswith("Mozilla/5.0")
        assert headers["Content-Type"] == "application/json"
        assert "X-QuickChart-Api-Key" not in headers

    @pytest.mark.asyncio
    async def test_api_key_header(self, backend, make_client):
        client = make_client(backend, Settings(api_key="secret"))
        await client.fetch(RenderRequest(method="GET", url="https://quickchart.io/qr", params={"text": "x"}))
        assert backend.requests[0].headers["X-QuickChart-Api-Key"] == "secret"


class TestFetchErrors:
    @pytest.mark.asyncio
    async def test_status_error_carries_status(self, make_client):
        client = make_client(lambda request: httpx.Response(500, text="boom"))
        with pytest.raises(InternalError) as excinfo:
            await client.fetch(RenderRequest(method="GET", url="https://quickchart.io/qr"), "QR code")
        assert excinfo.value.message == "Failed to fetch QR code content from QuickChart - Status: 500"
        assert excinfo.value.error.code == INTERNAL_ERROR

    @pytest.mark.asyncio
    async def test_network_error_carries_transport_message(self, make_client):
        def refuse(request):
            raise httpx.ConnectError("connection refused", request=request)

        client = make_client(refuse)
        with pytest.raises(InternalError) as excinfo:
            await client.fetch(RenderRequest(method="GET", url="https://quickchart.io/qr"))
        assert "connection refused" in excinfo.value.message

    @pytest.mark.asyncio
    async def test_single_attempt(self, make_client):
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(503)

        client = make_client(handler)
        with pytest.raises(InternalError):
            await client.fetch(RenderRequest(method="GET", url="https://quickchart.io/qr"))
        assert len(calls) == 1
