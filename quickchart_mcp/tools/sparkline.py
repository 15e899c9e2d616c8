"""Compact sparkline charts via GET /chart."""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..errors import InvalidParams
from ..render import RenderRequest, query_params
from ..validation import check_dimension, check_enum, check_optional_string, first_error, optional_int, optional_str
from .base import ToolAdapter


@dataclass(frozen=True)
class SparklineOptions:
    chart: Dict[str, Any]
    width: int = 100
    height: int = 30
    device_pixel_ratio: Optional[int] = None
    background_color: Optional[str] = None


class SparklineAdapter(ToolAdapter):
    name = "create-sparkline-using-chartjs"
    key = "sparkline"
    endpoint = "sparkline"
    label = "sparkline"
    description = "Create compact sparkline charts using Chart.js - get sparkline image URL or save sparkline image to file"
    method = "GET"
    required = ("chart",)
    properties = {
        "chart": {"type": "object", "additionalProperties": True, "description": "Chart.js configuration for the sparkline"},
        "width": {"type": "integer", "description": "Chart width in pixels (default: 100)"},
        "height": {"type": "integer", "description": "Chart height in pixels (default: 30)"},
        "devicePixelRatio": {"type": "integer", "enum": [1, 2], "description": "Device pixel ratio (default: 2)"},
        "backgroundColor": {"type": "string", "description": "Background color (default: transparent)"},
    }

    def check_fields(self, args):
        chart = args.get("chart")
        if not isinstance(chart, dict) or not chart:
            return InvalidParams("chart is required and must be a non-empty object")
        return first_error(
            check_dimension(args, "width"),
            check_dimension(args, "height"),
            check_enum(args, "devicePixelRatio", (1, 2)),
            check_optional_string(args, "backgroundColor"),
        )

    def parse(self, args):
        return SparklineOptions(
            chart=args["chart"],
            width=optional_int(args, "width") or 100,
            height=optional_int(args, "height") or 30,
            device_pixel_ratio=optional_int(args, "devicePixelRatio"),
            background_color=optional_str(args, "backgroundColor"),
        )

    def build(self, options, url):
        params = query_params(
            {
                "c": options.chart,
                "w": options.width,
                "h": options.height,
                "devicePixelRatio": options.device_pixel_ratio,
                "bkg": options.background_color,
            }
        )
        return RenderRequest(method=self.method, url=url, params=params)
