"""GraphViz (DOT language) diagrams via POST /graphviz."""

from dataclasses import dataclass
from typing import Optional

from ..render import RenderRequest, drop_unset
from ..validation import check_dimension, check_enum, check_required_string, first_error, optional_int, optional_str
from .base import ToolAdapter

LAYOUTS = ("dot", "fdp", "neato", "circo", "twopi", "osage", "patchwork")
FORMATS = ("svg", "png")


@dataclass(frozen=True)
class GraphvizOptions:
    graph: str
    layout: str = "dot"
    format: str = "svg"
    width: Optional[int] = None
    height: Optional[int] = None


class GraphvizAdapter(ToolAdapter):
    name = "create-diagram-using-graphviz"
    key = "graphviz"
    endpoint = "graphviz"
    label = "diagram"
    description = "Create graph diagrams using GraphViz - get diagram image URL or save diagram image to file"
    formats = FORMATS
    default_format = "svg"
    format_field = "format"
    required = ("graph",)
    properties = {
        "graph": {"type": "string", "description": "DOT graph description"},
        "layout": {"type": "string", "enum": list(LAYOUTS), "description": "Graph layout algorithm (default: dot)"},
        "format": {"type": "string", "enum": list(FORMATS), "description": "Output format (default: svg)"},
        "width": {"type": "integer", "description": "Image width in pixels"},
        "height": {"type": "integer", "description": "Image height in pixels"},
    }

    def check_fields(self, args):
        return first_error(
            check_required_string(args, "graph"),
            check_enum(args, "layout", LAYOUTS),
            check_dimension(args, "width"),
            check_dimension(args, "height"),
        )

    def parse(self, args):
        return GraphvizOptions(
            graph=args["graph"],
            layout=optional_str(args, "layout") or "dot",
            format=optional_str(args, "format") or self.default_format,
            width=optional_int(args, "width"),
            height=optional_int(args, "height"),
        )

    def build(self, options, url):
        body = drop_unset(
            {
                "graph": options.graph,
                "layout": options.layout,
                "format": options.format,
                "width": options.width,
                "height": options.height,
            }
        )
        return RenderRequest(method=self.method, url=url, body=body, format=options.format, format_field="format")

    def kind(self, options):
        return options.layout
