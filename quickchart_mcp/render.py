"""The payload sent to a QuickChart endpoint, plus URL/JSON encoding helpers."""

import json
from dataclasses import dataclass, replace
from typing import Any, Dict, Optional
from urllib.parse import quote, urlencode

# characters encodeURIComponent leaves alone, so shared links match the ones
# QuickChart's own tooling produces
URI_SAFE = "!~*'()"

TEXT_FORMATS = frozenset({"svg"})


def compact_json(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def encode_component(text: str) -> str:
    return quote(text, safe=URI_SAFE)


def query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list)):
        return compact_json(value)
    return str(value)


def drop_unset(fields: Dict[str, Any]) -> Dict[str, Any]:
    return {key: value for key, value in fields.items() if value is not None}


def query_params(fields: Dict[str, Any]) -> Dict[str, str]:
    """Stringify a field mapping for a query string, dropping unset values."""
    return {key: query_value(value) for key, value in drop_unset(fields).items()}


def url_with_query(url: str, params: Dict[str, str]) -> str:
    if not params:
        return url
    return f"{url}?{urlencode(params, safe=URI_SAFE, quote_via=quote)}"


@dataclass(frozen=True)
class RenderRequest:
    method: str
    url: str
    params: Optional[Dict[str, str]] = None
    body: Optional[Dict[str, Any]] = None
    format: str = "png"
    format_field: Optional[str] = None

    @property
    def is_text(self) -> bool:
        return self.format in TEXT_FORMATS

    def full_url(self) -> str:
        return url_with_query(self.url, self.params or {})

    def with_format(self, fmt: str) -> "RenderRequest":
        """Copy of this request asking the backend for ``fmt`` instead."""
        if self.format_field is None or fmt == self.format:
            return self
        if self.method == "GET":
            return replace(self, params={**(self.params or {}), self.format_field: fmt}, format=fmt)
        return replace(self, body={**(self.body or {}), self.format_field: fmt}, format=fmt)
