"""Adapter contract shared by every QuickChart rendering tool.

A tool is declared by subclassing ``ToolAdapter`` and filling in:

* class attributes: tool ``name``, enablement ``key``, ``endpoint`` (a key of
  ``config.ENDPOINTS``), transport ``method``, accepted ``formats`` and the
  payload field carrying the format;
* ``check_fields`` - tool-specific validation returning ``InvalidParams``;
* ``parse`` - projection of the raw argument mapping into a frozen options
  dataclass;
* ``build`` - the ``RenderRequest`` the endpoint expects.

``run_tool`` drives the rest: preview fetch, optional save and result
assembly are identical for all tools.
"""

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Sequence, Tuple

from mcp import types

from ..client import QuickChartClient
from ..config import Settings
from ..errors import InternalError, InvalidParams
from ..files import resolve_output_path, write_output
from ..render import RenderRequest, query_params, url_with_query
from ..results import ToolResult, assemble_result
from ..validation import ACTIONS, GET_URL, SAVE_FILE, check_common, first_error

logger = logging.getLogger(__name__)

PREVIEW_FORMAT = "png"

ACTION_SCHEMA = {
    "type": "string",
    "enum": list(ACTIONS),
    "description": "Whether to get the image URL only or also save the image to a file (default: get_url)",
}
OUTPUT_PATH_SCHEMA = {
    "type": "string",
    "description": "Path where to save the file (required with action=save_file)",
}


@dataclass(frozen=True)
class ToolDefinition:
    name: str
    description: str
    input_schema: Mapping[str, Any]

    def to_mcp(self) -> types.Tool:
        return types.Tool(name=self.name, description=self.description, inputSchema=dict(self.input_schema))


@dataclass(frozen=True)
class Invocation:
    action: str = GET_URL
    output_path: Optional[str] = None

    @classmethod
    def from_args(cls, args: Mapping[str, Any]) -> "Invocation":
        output_path = args.get("outputPath")
        return cls(
            action=args.get("action") or GET_URL,
            output_path=output_path.strip() if isinstance(output_path, str) and output_path.strip() else None,
        )


class ToolAdapter:
    name: str = ""
    key: str = ""
    endpoint: str = ""
    label: str = "chart"
    description: str = ""
    method: str = "POST"
    formats: Tuple[str, ...] = ()
    default_format: str = "png"
    format_field: Optional[str] = None
    properties: Mapping[str, Any] = {}
    required: Tuple[str, ...] = ()

    @property
    def input_schema(self) -> dict:
        properties = {"action": ACTION_SCHEMA, "outputPath": OUTPUT_PATH_SCHEMA}
        properties.update(self.properties)
        return {"type": "object", "properties": properties, "required": list(self.required)}

    def definition(self) -> ToolDefinition:
        return ToolDefinition(name=self.name, description=self.description, input_schema=self.input_schema)

    def validate(self, args: Mapping[str, Any]) -> Optional[InvalidParams]:
        return first_error(check_common(args, self.formats), self.check_fields(args))

    def check_fields(self, args: Mapping[str, Any]) -> Optional[InvalidParams]:
        raise NotImplementedError

    def parse(self, args: Mapping[str, Any]):
        raise NotImplementedError

    def build(self, options, url: str) -> RenderRequest:
        raise NotImplementedError

    def share_url(self, request: RenderRequest) -> str:
        """GET form of the request, usable as a link or an <img> source."""
        if request.method == "GET":
            return request.full_url()
        return url_with_query(request.url, query_params(request.body or {}))

    def links(self, request: RenderRequest, settings: Settings) -> Sequence[Tuple[str, str, str]]:
        return ()

    def kind(self, options) -> str:
        return self.key

    async def call(self, args: Mapping[str, Any], client: QuickChartClient, settings: Settings) -> ToolResult:
        return await run_tool(self, args, client, settings)


async def run_tool(
    adapter: ToolAdapter, args: Mapping[str, Any], client: QuickChartClient, settings: Settings
) -> ToolResult:
    error = adapter.validate(args)
    if error is not None:
        raise error

    invocation = Invocation.from_args(args)
    options = adapter.parse(args)
    request = adapter.build(options, settings.endpoint_url(adapter.endpoint))

    preview = None
    preview_error = None
    preview_request = request.with_format(PREVIEW_FORMAT)
    try:
        preview = await client.fetch(preview_request, adapter.label)
    except InternalError as exc:
        logger.warning("Preview for %s failed: %s", adapter.name, exc.message)
        preview_error = exc.message

    saved_path = None
    if invocation.action == SAVE_FILE:
        saved_path = resolve_output_path(invocation.output_path, request.format, settings)
        try:
            if preview is not None and preview_request is request:
                data = preview
            else:
                data = await client.fetch(request, adapter.label)
            write_output(saved_path, data)
        except (InternalError, OSError) as exc:
            raise InternalError(f"Failed to save {adapter.label}: {exc}") from exc

    return assemble_result(
        label=adapter.label,
        kind=adapter.kind(options),
        share_url=adapter.share_url(request),
        preview=preview,
        preview_error=preview_error,
        saved_path=saved_path,
        links=adapter.links(request, settings),
    )
