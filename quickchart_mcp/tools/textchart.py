"""Charts from a natural language description via POST /natural."""

from dataclasses import dataclass
from typing import Optional

from ..render import RenderRequest, drop_unset, encode_component, query_params, url_with_query
from ..validation import (
    check_dimension,
    check_optional_string,
    check_required_string,
    first_error,
    optional_int,
    optional_str,
)
from .base import ToolAdapter

# optional string fields passed through unchanged
TEXT_FIELDS = ("backgroundColor", "data1", "data2", "labels", "title")


@dataclass(frozen=True)
class TextChartOptions:
    description: str
    width: Optional[int] = None
    height: Optional[int] = None
    background_color: Optional[str] = None
    data1: Optional[str] = None
    data2: Optional[str] = None
    labels: Optional[str] = None
    title: Optional[str] = None


class TextChartAdapter(ToolAdapter):
    name = "create-chart-using-natural-language"
    key = "textchart"
    endpoint = "textchart"
    label = "chart"
    description = "Create charts from natural language descriptions - get chart image URL or save chart image to file"
    required = ("description",)
    properties = {
        "description": {"type": "string", "description": "Natural language chart description"},
        "width": {"type": "integer", "description": "Chart width in pixels"},
        "height": {"type": "integer", "description": "Chart height in pixels"},
        "backgroundColor": {"type": "string", "description": "Background color"},
        "data1": {"type": "string", "description": "First dataset values (comma-separated)"},
        "data2": {"type": "string", "description": "Second dataset values (comma-separated)"},
        "labels": {"type": "string", "description": "Data labels (comma-separated)"},
        "title": {"type": "string", "description": "Chart title"},
    }

    def check_fields(self, args):
        return first_error(
            check_required_string(args, "description"),
            check_dimension(args, "width"),
            check_dimension(args, "height"),
            *(check_optional_string(args, field) for field in TEXT_FIELDS),
        )

    def parse(self, args):
        return TextChartOptions(
            description=args["description"],
            width=optional_int(args, "width"),
            height=optional_int(args, "height"),
            background_color=optional_str(args, "backgroundColor"),
            data1=optional_str(args, "data1"),
            data2=optional_str(args, "data2"),
            labels=optional_str(args, "labels"),
            title=optional_str(args, "title"),
        )

    def build(self, options, url):
        fields = {
            "description": options.description,
            "width": options.width,
            "height": options.height,
            "backgroundColor": options.background_color,
            "data1": options.data1,
            "data2": options.data2,
            "labels": options.labels,
            "title": options.title,
        }
        return RenderRequest(method=self.method, url=url, body=drop_unset(fields))

    def share_url(self, request):
        body = dict(request.body)
        description = body.pop("description")
        return url_with_query(f"{request.url}/{encode_component(description)}", query_params(body))

    def kind(self, options):
        return "natural-language"
