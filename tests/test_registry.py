"""Tests for tool listing, enablement and dispatch."""

import json

import pytest
from mcp.types import INTERNAL_ERROR, METHOD_NOT_FOUND

from quickchart_mcp.config import Settings
from quickchart_mcp.errors import InternalError, InvalidParams, MethodNotFound
from quickchart_mcp.registry import ToolRegistry
from quickchart_mcp.tools import ToolDefinition

ALL_TOOLS = [
    "create-chart-using-chartjs",
    "create-chart-using-apexcharts",
    "create-chart-using-googlecharts",
    "create-chart-using-natural-language",
    "create-sparkline-using-chartjs",
    "create-diagram-using-graphviz",
    "create-wordcloud",
    "create-barcode",
    "create-qr-code",
    "create-table",
    "create-watermark",
    "get-visualization-tool-help",
]


class ExplodingTool:
    name = "explode"
    key = "explode"

    def definition(self):
        return ToolDefinition(name=self.name, description="always fails", input_schema={"type": "object"})

    async def call(self, args, client, settings):
        raise RuntimeError("kaboom")


class TestListing:
    def test_lists_every_tool_in_order(self, registry):
        assert [definition.name for definition in registry.list_tools()] == ALL_TOOLS

    def test_rendering_tools_share_action_fields(self, registry):
        for definition in registry.list_tools()[:-1]:
            schema = definition.input_schema
            assert schema["type"] == "object"
            assert schema["properties"]["action"]["enum"] == ["get_url", "save_file"]
            assert "outputPath" in schema["properties"]

    def test_required_fields_declared(self, registry):
        schemas = {definition.name: definition.input_schema for definition in registry.list_tools()}
        assert schemas["create-chart-using-chartjs"]["required"] == ["chart"]
        assert schemas["create-watermark"]["required"] == ["mainImageUrl", "markImageUrl"]

    def test_mcp_tool_conversion(self, registry):
        tool = registry.list_tools()[0].to_mcp()
        assert tool.name == "create-chart-using-chartjs"
        assert tool.inputSchema["properties"]["chart"]["type"] == "object"


class TestEnablement:
    def test_disabled_tool_is_hidden_and_rejected(self, client, tmp_path):
        settings = Settings.from_env(
            {"QUICKCHART_ENABLE_WORDCLOUD": "false", "QUICKCHART_DEFAULT_OUTPUT_DIR": str(tmp_path)}
        )
        registry = ToolRegistry(settings=settings, client=client)
        assert "create-wordcloud" not in registry.get_tool_names()
        assert not registry.has_tool("create-wordcloud")
        assert len(registry.list_tools()) == len(ALL_TOOLS) - 1

    @pytest.mark.asyncio
    async def test_calling_disabled_tool_is_method_not_found(self, client):
        registry = ToolRegistry(settings=Settings(disabled_tools=frozenset({"qrcode"})), client=client)
        with pytest.raises(MethodNotFound):
            await registry.call_tool("create-qr-code", {"text": "hello"})


class TestDispatch:
    @pytest.mark.asyncio
    async def test_unknown_tool(self, registry):
        with pytest.raises(MethodNotFound) as excinfo:
            await registry.call_tool("create-hologram", {})
        assert excinfo.value.message == "Unknown tool: create-hologram"
        assert excinfo.value.error.code == METHOD_NOT_FOUND

    @pytest.mark.asyncio
    async def test_missing_arguments(self, registry):
        with pytest.raises(InvalidParams):
            await registry.call_tool("create-barcode", None)

    @pytest.mark.asyncio
    async def test_non_object_arguments(self, registry):
        with pytest.raises(InvalidParams):
            await registry.call_tool("create-barcode", ["code128"])

    @pytest.mark.asyncio
    async def test_validation_error_passes_through(self, registry):
        with pytest.raises(InvalidParams) as excinfo:
            await registry.call_tool("create-barcode", {"type": "code128", "text": "x", "action": "save_file"})
        assert excinfo.value.message == "outputPath is required for save_file action"

    @pytest.mark.asyncio
    async def test_unexpected_errors_become_internal(self, settings, client):
        registry = ToolRegistry(settings=settings, client=client, tools=[ExplodingTool()])
        with pytest.raises(InternalError) as excinfo:
            await registry.call_tool("explode", {})
        assert excinfo.value.message == "Error executing tool explode: kaboom"
        assert excinfo.value.error.code == INTERNAL_ERROR

    @pytest.mark.asyncio
    async def test_dispatches_to_adapter(self, registry, backend):
        result = await registry.call_tool("create-barcode", {"type": "code128", "text": "ABC"})
        assert result.texts()[1] == "https://quickchart.io/barcode?type=code128&text=ABC"
        assert len(backend.requests) == 1


class TestHelp:
    @pytest.mark.asyncio
    async def test_documents_enabled_tools(self, registry):
        result = await registry.call_tool("get-visualization-tool-help", {})
        docs = json.loads(result.texts()[0])
        assert list(docs) == ALL_TOOLS[:-1]
        assert docs["create-watermark"]["usageExample"]["markImageUrl"].endswith("logo.png")

    @pytest.mark.asyncio
    async def test_skips_disabled_tools(self, client):
        registry = ToolRegistry(settings=Settings(disabled_tools=frozenset({"table"})), client=client)
        result = await registry.call_tool("get-visualization-tool-help", {})
        assert "create-table" not in json.loads(result.texts()[0])

    @pytest.mark.asyncio
    async def test_single_tool(self, registry):
        result = await registry.call_tool("get-visualization-tool-help", {"tool": "create-qr-code"})
        docs = json.loads(result.texts()[0])
        assert list(docs) == ["create-qr-code"]
        assert docs["create-qr-code"]["name"] == "create-qr-code"

    @pytest.mark.asyncio
    async def test_unknown_tool_is_invalid(self, registry):
        with pytest.raises(InvalidParams) as excinfo:
            await registry.call_tool("get-visualization-tool-help", {"tool": "create-hologram"})
        assert excinfo.value.message.startswith("Unknown tool: create-hologram")

    @pytest.mark.asyncio
    async def test_usage_examples_validate(self, registry):
        result = await registry.call_tool("get-visualization-tool-help", {})
        docs = json.loads(result.texts()[0])
        for name, entry in docs.items():
            tool = registry._tools[name]
            error = tool.validate(entry["usageExample"])
            assert error is None, f"{name}: {error.message}"
