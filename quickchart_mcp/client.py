"""Outbound calls to QuickChart."""

import logging
from typing import Optional, Union

import httpx

from .config import Settings
from .errors import InternalError
from .render import RenderRequest

logger = logging.getLogger(__name__)

# some QuickChart deployments sit behind bot filters that reject bare clients
BROWSER_HEADERS = {
    "User-Agent": "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36",
    "Accept-Language": "en-US,en;q=0.9",
}


class QuickChartClient:
    """Performs one GET or POST per render request. No retries."""

    def __init__(self, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None):
        self._settings = settings
        self._transport = transport

    def _headers(self, request: RenderRequest) -> dict:
        headers = dict(BROWSER_HEADERS)
        headers["Accept"] = "image/svg+xml,*/*" if request.is_text else "image/*,*/*"
        if request.method == "POST":
            headers["Content-Type"] = "application/json"
        if self._settings.api_key:
            headers["X-QuickChart-Api-Key"] = self._settings.api_key
        return headers

    async def fetch(self, request: RenderRequest, label: str = "image") -> Union[bytes, str]:
        """Return the rendered payload: ``str`` for SVG, ``bytes`` otherwise."""
        timeout = httpx.Timeout(self._settings.timeout)
        try:
            async with httpx.AsyncClient(
                timeout=timeout, transport=self._transport, follow_redirects=True
            ) as client:
                if request.method == "POST":
                    response = await client.post(request.url, headers=self._headers(request), json=request.body)
                else:
                    response = await client.get(request.full_url(), headers=self._headers(request))
                response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            logger.error("QuickChart %s call failed with status %s", label, status)
            raise InternalError(
                f"Failed to fetch {label} content from QuickChart - Status: {status}"
            ) from exc
        except httpx.HTTPError as exc:
            logger.error("QuickChart %s call failed: %s", label, exc)
            raise InternalError(
                f"Failed to fetch {label} content from QuickChart - {str(exc) or type(exc).__name__}"
            ) from exc

        if request.is_text:
            return response.text
        return response.content
