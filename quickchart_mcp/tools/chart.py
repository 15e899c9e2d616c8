"""Chart.js charts via POST /chart."""

import copy
from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..errors import InvalidParams
from ..render import RenderRequest, compact_json, encode_component, url_with_query
from ..validation import (
    check_dimension,
    check_enum,
    check_optional_string,
    first_error,
    is_number,
    optional_int,
    optional_str,
)
from .base import ToolAdapter

CHART_TYPES = (
    "bar",
    "line",
    "pie",
    "doughnut",
    "radar",
    "polarArea",
    "scatter",
    "bubble",
    "radialGauge",
    "speedometer",
)
GAUGE_TYPES = frozenset({"radialGauge", "speedometer"})
GAUGE_RENDERER = "radialGauge"

FORMATS = ("png", "webp", "jpg", "svg", "pdf", "base64")
DEVICE_PIXEL_RATIOS = (1, 2)
ENCODINGS = ("url", "base64")
DEFAULT_VERSION = "2.9.4"


def _first_datum(chart: Dict[str, Any]) -> Optional[Any]:
    datasets = chart.get("data", {}).get("datasets") or []
    data = datasets[0].get("data") if datasets else None
    if isinstance(data, list) and data:
        return data[0]
    return data


def gauge_config(chart: Dict[str, Any]) -> Dict[str, Any]:
    """Render every gauge alias with the radial gauge plugin and a percent label.

    Options the caller already set are left alone.
    """
    config = copy.deepcopy(chart)
    config["type"] = GAUGE_RENDERER
    options = config.get("options")
    if not isinstance(options, dict):
        options = config["options"] = {}
    options.setdefault("domain", [0, 100])
    options.setdefault("centerPercentage", 80)
    center = options.setdefault("centerArea", {})
    value = _first_datum(chart)
    if isinstance(center, dict) and is_number(value):
        center.setdefault("text", f"{value:g}%")
    return config


@dataclass(frozen=True)
class ChartOptions:
    chart: Dict[str, Any]
    width: int = 500
    height: int = 300
    device_pixel_ratio: int = 2
    format: str = "png"
    background_color: str = "transparent"
    version: str = DEFAULT_VERSION
    encoding: Optional[str] = None
    key: Optional[str] = None


class ChartAdapter(ToolAdapter):
    name = "create-chart-using-chartjs"
    key = "chart"
    endpoint = "chart"
    label = "chart"
    description = "Create a chart using Chart.js and QuickChart.io - get chart image URL or save chart image to file"
    formats = FORMATS
    format_field = "format"
    required = ("chart",)
    properties = {
        "width": {"type": "integer", "description": "Pixel width (default: 500)"},
        "height": {"type": "integer", "description": "Pixel height (default: 300)"},
        "devicePixelRatio": {
            "type": "integer",
            "enum": list(DEVICE_PIXEL_RATIOS),
            "description": "Pixel ratio for Retina support (default: 2)",
        },
        "format": {"type": "string", "enum": list(FORMATS), "description": "Output format (default: png)"},
        "backgroundColor": {
            "type": "string",
            "description": "Canvas background color - rgb, hex, hsl, or color names (default: transparent)",
        },
        "version": {
            "type": "string",
            "description": f"Chart.js version - '2', '3', '4', or specific version (default: '{DEFAULT_VERSION}')",
        },
        "encoding": {
            "type": "string",
            "enum": list(ENCODINGS),
            "description": "Chart configuration encoding method (default: url)",
        },
        "key": {"type": "string", "description": "QuickChart API key (optional)"},
        "chart": {
            "type": "object",
            "additionalProperties": True,
            "description": "Chart.js configuration object",
            "properties": {
                "type": {"type": "string", "enum": list(CHART_TYPES), "description": "The type of chart to generate"},
                "data": {
                    "type": "object",
                    "additionalProperties": True,
                    "description": "Chart data",
                    "properties": {
                        "labels": {"type": "array", "items": {}, "description": "Labels for the data points"},
                        "datasets": {
                            "type": "array",
                            "description": "Datasets to display in the chart",
                            "items": {
                                "type": "object",
                                "additionalProperties": True,
                                "properties": {
                                    "data": {"description": "Data points"},
                                    "label": {"type": "string", "description": "Label for this dataset"},
                                    "backgroundColor": {"description": "Background color(s)"},
                                    "borderColor": {"description": "Border color(s)"},
                                },
                                "required": ["data"],
                            },
                        },
                    },
                    "required": ["datasets"],
                },
                "options": {"type": "object", "additionalProperties": True, "description": "Chart.js options"},
            },
            "required": ["type", "data"],
        },
    }

    def check_fields(self, args):
        chart = args.get("chart")
        if not isinstance(chart, dict) or not chart:
            return InvalidParams("chart is required and must be a non-empty object")
        chart_type = chart.get("type")
        if chart_type not in CHART_TYPES:
            return InvalidParams(f"Invalid chart type: {chart_type}. Valid types are: {', '.join(CHART_TYPES)}")
        data = chart.get("data")
        datasets = data.get("datasets") if isinstance(data, dict) else None
        if not isinstance(datasets, list) or not datasets:
            return InvalidParams("chart.data.datasets must be a non-empty array")
        for index, dataset in enumerate(datasets):
            if not isinstance(dataset, dict) or dataset.get("data") is None:
                return InvalidParams(f"Dataset at index {index} must have a 'data' property")
        return first_error(
            check_dimension(args, "width"),
            check_dimension(args, "height"),
            check_enum(args, "devicePixelRatio", DEVICE_PIXEL_RATIOS),
            check_optional_string(args, "backgroundColor"),
            check_optional_string(args, "version"),
            check_enum(args, "encoding", ENCODINGS),
            check_optional_string(args, "key"),
        )

    def parse(self, args):
        return ChartOptions(
            chart=args["chart"],
            width=optional_int(args, "width") or 500,
            height=optional_int(args, "height") or 300,
            device_pixel_ratio=optional_int(args, "devicePixelRatio") or 2,
            format=optional_str(args, "format") or "png",
            background_color=optional_str(args, "backgroundColor") or "transparent",
            version=optional_str(args, "version") or DEFAULT_VERSION,
            encoding=optional_str(args, "encoding"),
            key=optional_str(args, "key"),
        )

    def build(self, options, url):
        chart = options.chart
        if chart.get("type") in GAUGE_TYPES:
            chart = gauge_config(chart)
        body = {
            "width": options.width,
            "height": options.height,
            "devicePixelRatio": options.device_pixel_ratio,
            "format": options.format,
            "backgroundColor": options.background_color,
            "version": options.version,
        }
        if options.encoding:
            body["encoding"] = options.encoding
        if options.key:
            body["key"] = options.key
        body["chart"] = chart
        return RenderRequest(method=self.method, url=url, body=body, format=options.format, format_field="format")

    def share_url(self, request):
        return url_with_query(request.url, {"c": compact_json(request.body["chart"])})

    def links(self, request, settings):
        editor = f"{settings.site_url}/sandbox#{encode_component(compact_json(request.body['chart']))}"
        return (("editor URL", "editableUrl", editor),)

    def kind(self, options):
        return options.chart.get("type", self.key)
