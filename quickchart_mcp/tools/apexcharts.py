"""ApexCharts rendering via POST /apex-charts/render."""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..render import RenderRequest
from ..validation import check_dimension, check_object, check_optional_string, first_error, optional_int, optional_str
from .base import ToolAdapter


@dataclass(frozen=True)
class ApexChartsOptions:
    config: Dict[str, Any]
    width: Optional[int] = None
    height: Optional[int] = None
    apex_charts_version: Optional[str] = None


class ApexChartsAdapter(ToolAdapter):
    name = "create-chart-using-apexcharts"
    key = "apexcharts"
    endpoint = "apexcharts"
    label = "chart"
    description = "Create charts using the ApexCharts library - get chart image URL or save chart image to file"
    required = ("config",)
    properties = {
        "config": {"type": "object", "additionalProperties": True, "description": "ApexCharts JSON configuration"},
        "width": {"type": "integer", "description": "Image width in pixels"},
        "height": {"type": "integer", "description": "Image height in pixels"},
        "apexChartsVersion": {"type": "string", "description": "ApexCharts version to use"},
    }

    def check_fields(self, args):
        return first_error(
            check_object(args, "config"),
            check_dimension(args, "width"),
            check_dimension(args, "height"),
            check_optional_string(args, "apexChartsVersion"),
        )

    def parse(self, args):
        return ApexChartsOptions(
            config=args["config"],
            width=optional_int(args, "width"),
            height=optional_int(args, "height"),
            apex_charts_version=optional_str(args, "apexChartsVersion"),
        )

    def build(self, options, url):
        body = {"config": options.config}
        if options.width is not None:
            body["width"] = options.width
        if options.height is not None:
            body["height"] = options.height
        if options.apex_charts_version:
            body["apexChartsVersion"] = options.apex_charts_version
        return RenderRequest(method=self.method, url=url, body=body)

    def kind(self, options):
        chart = options.config.get("chart")
        if isinstance(chart, dict) and isinstance(chart.get("type"), str):
            return chart["type"]
        return self.key
