"""Shared fixtures: a fake QuickChart backend behind httpx.MockTransport."""

import json

import httpx
import pytest

from quickchart_mcp.client import QuickChartClient
from quickchart_mcp.config import Settings
from quickchart_mcp.registry import ToolRegistry

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + bytes(range(64))
SVG_TEXT = '<svg xmlns="http://www.w3.org/2000/svg"><text>größe</text></svg>'


class FakeQuickChart:
    """Records every request and answers with SVG or PNG depending on the requested format."""

    def __init__(self, status=200, failing_formats=()):
        self.status = status
        self.failing_formats = set(failing_formats)
        self.requests = []

    def requested_format(self, request):
        if request.method == "POST" and request.content:
            return json.loads(request.content).get("format")
        return request.url.params.get("format")

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        fmt = self.requested_format(request)
        if self.status != 200 or fmt in self.failing_formats:
            status = self.status if self.status != 200 else 500
            return httpx.Response(status, text="Internal Server Error")
        if fmt == "svg":
            return httpx.Response(200, text=SVG_TEXT, headers={"Content-Type": "image/svg+xml"})
        return httpx.Response(200, content=PNG_BYTES, headers={"Content-Type": "image/png"})

    def bodies(self):
        return [json.loads(request.content) for request in self.requests if request.method == "POST"]


@pytest.fixture
def backend():
    return FakeQuickChart()


@pytest.fixture
def settings(tmp_path):
    return Settings(output_dir=str(tmp_path))


@pytest.fixture
def client(settings, backend):
    return QuickChartClient(settings, transport=httpx.MockTransport(backend))


@pytest.fixture
def registry(settings, client):
    return ToolRegistry(settings=settings, client=client)


@pytest.fixture
def make_client(settings):
    def factory(handler, custom_settings=None):
        return QuickChartClient(custom_settings or settings, transport=httpx.MockTransport(handler))

    return factory


@pytest.fixture
def bar_chart():
    return {
        "type": "bar",
        "data": {
            "labels": ["Q1", "Q2", "Q3"],
            "datasets": [{"label": "Sales", "data": [1, 2, 3]}],
        },
    }
