#!/usr/bin/env python3
"""QuickChart MCP server served via streamable HTTP transport."""

import os

import uvicorn
from starlette.responses import JSONResponse
from starlette.routing import Route

from .server import mcp

app = mcp.streamable_http_app()


async def health(_request):
    return JSONResponse({"status": "ok", "service": "quickchart"})


app.router.routes.append(Route("/health", endpoint=health))


def main() -> None:
    port = int(os.environ.get("PORT", "8000"))
    uvicorn.run(app, host="0.0.0.0", port=port)


if __name__ == "__main__":
    main()
