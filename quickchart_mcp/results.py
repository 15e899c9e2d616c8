"""MCP-shaped tool results."""

import base64
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Mapping, Optional, Sequence, Tuple, Union

from mcp import types

ContentBlock = Union[types.TextContent, types.ImageContent]


def iso_timestamp() -> str:
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def text_block(text: str) -> types.TextContent:
    return types.TextContent(type="text", text=text)


def image_block(data: bytes, mime: str = "image/png") -> types.ImageContent:
    return types.ImageContent(type="image", data=base64.b64encode(data).decode("ascii"), mimeType=mime)


@dataclass(frozen=True)
class ToolResult:
    content: Tuple[ContentBlock, ...]
    metadata: Mapping[str, Any] = field(default_factory=dict)

    def texts(self) -> list:
        return [block.text for block in self.content if isinstance(block, types.TextContent)]

    def to_call_tool_result(self) -> types.CallToolResult:
        return types.CallToolResult(content=list(self.content), _meta=dict(self.metadata))


def assemble_result(
    *,
    label: str,
    kind: str,
    share_url: str,
    preview: Optional[bytes] = None,
    preview_error: Optional[str] = None,
    saved_path: Optional[str] = None,
    links: Sequence[Tuple[str, str, str]] = (),
) -> ToolResult:
    """Build the result for one render.

    ``links`` holds extra ``(title, metadata key, url)`` triples listed after
    the shareable URL, e.g. the chart editor link. A failed preview adds a
    leading warning and a trailing error block instead of an image.
    """
    content = []
    metadata = {"chartType": kind, "generatedAt": iso_timestamp(), "chartUrl": share_url}

    if preview_error is not None:
        content.append(text_block(f"⚠️ Failed to fetch {label} image"))

    content.append(text_block(f"Below is the {label} URL:"))
    content.append(text_block(share_url))
    for title, key, url in links:
        content.append(text_block(f"Below is the {title}:"))
        content.append(text_block(url))
        metadata[key] = url

    if preview is not None:
        content.append(text_block("Below is the PNG image:"))
        content.append(image_block(preview))
    if preview_error is not None:
        content.append(text_block(f"Error: {preview_error}"))
        metadata["error"] = preview_error

    if saved_path is not None:
        content.append(text_block("Below is the saved file path:"))
        content.append(text_block(saved_path))
        metadata["savedPath"] = saved_path

    return ToolResult(content=tuple(content), metadata=metadata)
