"""End-to-end tool calls against a mocked QuickChart backend."""

import pytest

from quickchart_mcp.errors import InternalError, InvalidParams, MethodNotFound
from quickchart_mcp.registry import ToolRegistry

from .conftest import PNG_BYTES, FakeQuickChart


@pytest.mark.asyncio
async def test_chart_url(registry):
    result = await registry.call_tool(
        "create-chart-using-chartjs",
        {"action": "get_url", "chart": {"type": "bar", "data": {"datasets": [{"data": [1, 2, 3]}]}}},
    )
    assert any(text.startswith("https://quickchart.io/chart?c=") for text in result.texts())


@pytest.mark.asyncio
async def test_chart_with_empty_datasets(registry):
    with pytest.raises(InvalidParams) as excinfo:
        await registry.call_tool(
            "create-chart-using-chartjs",
            {"action": "get_url", "chart": {"type": "pie", "data": {"datasets": []}}},
        )
    assert "non-empty array" in excinfo.value.message


@pytest.mark.asyncio
async def test_qr_code_saved(registry, tmp_path):
    target = str(tmp_path / "qr.png")
    result = await registry.call_tool("create-qr-code", {"action": "save_file", "text": "hello", "outputPath": target})
    with open(target, "rb") as handle:
        assert handle.read() == PNG_BYTES
    assert target in result.texts()


@pytest.mark.asyncio
async def test_unregistered_tool(registry):
    with pytest.raises(MethodNotFound):
        await registry.call_tool("create-pivot-table", {})


@pytest.mark.asyncio
async def test_backend_500(settings, make_client, tmp_path):
    registry = ToolRegistry(settings=settings, client=make_client(FakeQuickChart(status=500)))
    with pytest.raises(InternalError) as excinfo:
        await registry.call_tool(
            "create-wordcloud",
            {"text": "alpha beta gamma", "action": "save_file", "outputPath": "cloud.svg"},
        )
    assert "500" in excinfo.value.message
    assert not (tmp_path / "cloud.svg").exists()


@pytest.mark.asyncio
async def test_get_url_never_writes(registry, tmp_path):
    await registry.call_tool("create-barcode", {"type": "ean13", "text": "5901234123457"})
    await registry.call_tool("create-diagram-using-graphviz", {"graph": "graph { a -- b }"})
    assert list(tmp_path.iterdir()) == []
