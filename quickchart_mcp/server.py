#!/usr/bin/env python3
"""QuickChart MCP Server - Render charts, diagrams and codes via QuickChart."""

import logging
import sys
from typing import Any, Dict, List, Optional

from mcp import types
from mcp.server.fastmcp import FastMCP

from .config import Settings, get_settings
from .registry import ToolRegistry

SERVER_NAME = "quickchart-server"

_settings = get_settings()
logging.basicConfig(
    level=getattr(logging, _settings.log_level, logging.WARNING),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    stream=sys.stderr,
)
logger = logging.getLogger("quickchart-server")


class QuickChartServer(FastMCP):
    """FastMCP server whose tool surface is the ``ToolRegistry``.

    FastMCP wires ``list_tools`` into the protocol handlers, so overriding it
    replaces decorator-registered tools entirely. Tool calls get their own
    ``CallToolRequest`` handler so a classified ``McpError`` reaches the client
    as a JSON-RPC error with its code instead of an ``isError`` result.
    """

    def __init__(self, registry: Optional[ToolRegistry] = None, **settings: Any):
        super().__init__(SERVER_NAME, **settings)
        self.registry = registry or ToolRegistry()
        # replaces the handler FastMCP registered in super().__init__
        self._mcp_server.request_handlers[types.CallToolRequest] = self._handle_call_tool

    async def list_tools(self) -> List[types.Tool]:
        return [definition.to_mcp() for definition in self.registry.list_tools()]

    async def call_tool(self, name: str, arguments: Dict[str, Any]) -> types.CallToolResult:
        result = await self.registry.call_tool(name, arguments)
        return result.to_call_tool_result()

    async def _handle_call_tool(self, req: types.CallToolRequest) -> types.ServerResult:
        result = await self.registry.call_tool(req.params.name, req.params.arguments)
        return types.ServerResult(result.to_call_tool_result())


def create_server(settings: Optional[Settings] = None, **kwargs: Any) -> QuickChartServer:
    registry = ToolRegistry(settings=settings) if settings is not None else None
    return QuickChartServer(registry=registry, stateless_http=True, **kwargs)


mcp = create_server()


def main() -> None:
    logger.info("Starting QuickChart MCP server on stdio with tools: %s", ", ".join(mcp.registry.get_tool_names()))
    try:
        mcp.run(transport="stdio")
    except Exception as exc:
        logger.error("Server error: %s", exc, exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
