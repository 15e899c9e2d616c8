"""Google Charts rendering via POST /google-charts/render."""

from dataclasses import dataclass
from typing import Optional

from ..render import RenderRequest
from ..validation import (
    check_dimension,
    check_optional_string,
    check_required_string,
    first_error,
    optional_int,
    optional_str,
)
from .base import ToolAdapter

DEFAULT_PACKAGES = "corechart"


@dataclass(frozen=True)
class GoogleChartsOptions:
    code: str
    packages: str = DEFAULT_PACKAGES
    width: Optional[int] = None
    height: Optional[int] = None
    maps_api_key: Optional[str] = None


class GoogleChartsAdapter(ToolAdapter):
    name = "create-chart-using-googlecharts"
    key = "googlecharts"
    endpoint = "googlecharts"
    label = "chart"
    description = "Create charts using Google Charts - get chart image URL or save chart image to file"
    required = ("code",)
    properties = {
        "code": {"type": "string", "description": "JavaScript drawChart function code"},
        "packages": {"type": "string", "description": f"Google Charts packages to load (default: '{DEFAULT_PACKAGES}')"},
        "width": {"type": "integer", "description": "Chart width in pixels"},
        "height": {"type": "integer", "description": "Chart height in pixels"},
        "mapsApiKey": {"type": "string", "description": "Google Maps API key (for geo charts)"},
    }

    def check_fields(self, args):
        return first_error(
            check_required_string(args, "code"),
            check_optional_string(args, "packages"),
            check_dimension(args, "width"),
            check_dimension(args, "height"),
            check_optional_string(args, "mapsApiKey"),
        )

    def parse(self, args):
        return GoogleChartsOptions(
            code=args["code"],
            packages=optional_str(args, "packages") or DEFAULT_PACKAGES,
            width=optional_int(args, "width"),
            height=optional_int(args, "height"),
            maps_api_key=optional_str(args, "mapsApiKey"),
        )

    def build(self, options, url):
        body = {"code": options.code, "packages": options.packages}
        if options.width is not None:
            body["width"] = options.width
        if options.height is not None:
            body["height"] = options.height
        if options.maps_api_key:
            body["mapsApiKey"] = options.maps_api_key
        return RenderRequest(method=self.method, url=url, body=body)

    def kind(self, options):
        return options.packages
