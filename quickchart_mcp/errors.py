"""Classified errors surfaced to MCP clients."""

from mcp.shared.exceptions import McpError
from mcp.types import INTERNAL_ERROR, INVALID_PARAMS, METHOD_NOT_FOUND, ErrorData


class ToolError(McpError):
    """Base class; subclasses pin the JSON-RPC error code."""

    code = INTERNAL_ERROR

    def __init__(self, message: str):
        super().__init__(ErrorData(code=self.code, message=message))

    @property
    def message(self) -> str:
        return self.error.message


class InvalidParams(ToolError):
    code = INVALID_PARAMS


class MethodNotFound(ToolError):
    code = METHOD_NOT_FOUND


class InternalError(ToolError):
    code = INTERNAL_ERROR
