"""Name-indexed catalogue of the enabled tools."""

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional

from .client import QuickChartClient
from .config import Settings, get_settings
from .errors import InternalError, InvalidParams, MethodNotFound, ToolError
from .results import ToolResult
from .tools import TOOLS, ToolDefinition

logger = logging.getLogger(__name__)


class ToolRegistry:
    """Lists and dispatches the tools enabled in ``settings``.

    Disabled tools are dropped at construction, so they are neither listed
    nor callable. Every failure leaving ``call_tool`` is a ``ToolError``.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        client: Optional[QuickChartClient] = None,
        tools: Iterable[Any] = TOOLS,
    ):
        self.settings = settings or get_settings()
        self.client = client or QuickChartClient(self.settings)
        self._tools: Dict[str, Any] = {}
        for tool in tools:
            if not self.settings.is_enabled(tool.key):
                logger.info("Tool %s disabled by configuration", tool.name)
                continue
            self._tools[tool.name] = tool

    def list_tools(self) -> List[ToolDefinition]:
        return [tool.definition() for tool in self._tools.values()]

    def get_tool_names(self) -> List[str]:
        return list(self._tools)

    def has_tool(self, name: str) -> bool:
        return name in self._tools

    async def call_tool(self, name: str, arguments: Optional[Mapping[str, Any]]) -> ToolResult:
        tool = self._tools.get(name)
        if tool is None:
            raise MethodNotFound(f"Unknown tool: {name}")
        if arguments is None:
            raise InvalidParams("Missing arguments")
        if not isinstance(arguments, Mapping):
            raise InvalidParams("Arguments must be an object")

        logger.debug("Calling tool %s", name)
        try:
            return await tool.call(arguments, self.client, self.settings)
        except ToolError:
            raise
        except Exception as exc:
            logger.exception("Tool %s failed", name)
            raise InternalError(f"Error executing tool {name}: {exc}") from exc
