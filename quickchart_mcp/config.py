"""Environment-derived settings for the QuickChart MCP server.

Everything is resolved once into an immutable ``Settings`` value. Components
receive it explicitly, so tests can hand them a ``Settings`` built from a
plain dict instead of patching ``os.environ``.
"""

import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Mapping, Optional

DEFAULT_BASE_URL = "https://quickchart.io"
DEFAULT_API_BASE_URL = "https://api.quickchart.io"
DEFAULT_TIMEOUT_SECONDS = 30.0

# endpoint key -> path below the base URL
ENDPOINTS = {
    "chart": "/chart",
    "qrcode": "/qr",
    "sparkline": "/chart",
    "apexcharts": "/apex-charts/render",
    "googlecharts": "/google-charts/render",
    "barcode": "/barcode",
    "table": "/v1/table",
    "wordcloud": "/wordcloud",
    "graphviz": "/graphviz",
    "textchart": "/natural",
    "watermark": "/watermark",
}

# endpoints served from the api.* host unless a global base is configured
API_HOST_ENDPOINTS = frozenset({"table"})

TOOL_KEYS = (
    "chart",
    "apexcharts",
    "googlecharts",
    "textchart",
    "sparkline",
    "graphviz",
    "wordcloud",
    "barcode",
    "qrcode",
    "table",
    "watermark",
    "help",
)

_FALSE_VALUES = {"0", "false", "no", "off"}


def _enabled(raw: Optional[str], default: bool = True) -> bool:
    if raw is None:
        return default
    return str(raw).strip().lower() not in _FALSE_VALUES


def _clean_url(raw: Optional[str]) -> Optional[str]:
    if raw is None or not raw.strip():
        return None
    return raw.strip().rstrip("/")


@dataclass(frozen=True)
class Settings:
    base_url: Optional[str] = None
    endpoint_overrides: Mapping[str, str] = field(default_factory=dict)
    output_dir: Optional[str] = None
    disabled_tools: frozenset = frozenset()
    timeout: float = DEFAULT_TIMEOUT_SECONDS
    api_key: str = ""
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ

        base_url = _clean_url(env.get("QUICKCHART_BASE_URL")) or _clean_url(env.get("QUICKCHART_HOST"))
        overrides = {}
        for key in ENDPOINTS:
            override = _clean_url(env.get(f"QUICKCHART_{key.upper()}_URL"))
            if override:
                overrides[key] = override

        disabled = frozenset(
            key for key in TOOL_KEYS if not _enabled(env.get(f"QUICKCHART_ENABLE_{key.upper()}"))
        )
        output_dir = (env.get("QUICKCHART_DEFAULT_OUTPUT_DIR") or "").strip() or None

        return cls(
            base_url=base_url,
            endpoint_overrides=overrides,
            output_dir=output_dir,
            disabled_tools=disabled,
            timeout=float(env.get("QUICKCHART_TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS)),
            api_key=(env.get("QUICKCHART_API_KEY") or "").strip(),
            log_level=(env.get("MCP_LOG_LEVEL") or "WARNING").strip().upper(),
        )

    @property
    def site_url(self) -> str:
        return self.base_url or DEFAULT_BASE_URL

    def endpoint_url(self, endpoint: str) -> str:
        """Per-endpoint override, then the global base, then the hosted default."""
        override = self.endpoint_overrides.get(endpoint)
        if override:
            return override
        path = ENDPOINTS[endpoint]
        if self.base_url:
            return f"{self.base_url}{path}"
        default = DEFAULT_API_BASE_URL if endpoint in API_HOST_ENDPOINTS else DEFAULT_BASE_URL
        return f"{default}{path}"

    def is_enabled(self, tool_key: str) -> bool:
        return tool_key not in self.disabled_tools


@lru_cache(maxsize=None)
def get_settings() -> Settings:
    return Settings.from_env()
