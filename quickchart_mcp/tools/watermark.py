"""Watermark or logo overlays via POST /watermark."""

from dataclasses import dataclass
from typing import Optional

from ..render import RenderRequest, drop_unset
from ..validation import (
    MAX_DIMENSION,
    check_dimension,
    check_enum,
    check_int_range,
    check_integer,
    check_ratio,
    check_required_string,
    first_error,
    optional_int,
    optional_str,
)
from .base import ToolAdapter

POSITIONS = ("center", "top-left", "top-right", "bottom-left", "bottom-right")
DIMENSION_FIELDS = ("imageWidth", "imageHeight", "markWidth", "markHeight")


@dataclass(frozen=True)
class WatermarkOptions:
    main_image_url: str
    mark_image_url: str
    opacity: Optional[float] = None
    image_width: Optional[int] = None
    image_height: Optional[int] = None
    mark_width: Optional[int] = None
    mark_height: Optional[int] = None
    mark_ratio: Optional[float] = None
    position: Optional[str] = None
    position_x: Optional[int] = None
    position_y: Optional[int] = None
    margin: Optional[int] = None


class WatermarkAdapter(ToolAdapter):
    name = "create-watermark"
    key = "watermark"
    endpoint = "watermark"
    label = "watermarked image"
    description = "Add watermarks/logos to images using QuickChart - get watermarked image URL or save image to file"
    required = ("mainImageUrl", "markImageUrl")
    properties = {
        "mainImageUrl": {"type": "string", "description": "URL of the main image to watermark"},
        "markImageUrl": {"type": "string", "description": "URL of the watermark/logo image"},
        "opacity": {"type": "number", "minimum": 0, "maximum": 1, "description": "Watermark opacity (0.0 to 1.0)"},
        "imageWidth": {"type": "integer", "description": "Main image width in pixels"},
        "imageHeight": {"type": "integer", "description": "Main image height in pixels"},
        "markWidth": {"type": "integer", "description": "Watermark width in pixels"},
        "markHeight": {"type": "integer", "description": "Watermark height in pixels"},
        "markRatio": {
            "type": "number",
            "minimum": 0,
            "maximum": 1,
            "description": "Watermark size ratio relative to main image",
        },
        "position": {"type": "string", "enum": list(POSITIONS), "description": "Watermark position"},
        "positionX": {"type": "integer", "description": "Custom X position in pixels"},
        "positionY": {"type": "integer", "description": "Custom Y position in pixels"},
        "margin": {"type": "integer", "description": "Margin from edges in pixels"},
    }

    def check_fields(self, args):
        return first_error(
            check_required_string(args, "mainImageUrl"),
            check_required_string(args, "markImageUrl"),
            check_ratio(args, "opacity"),
            *(check_dimension(args, field) for field in DIMENSION_FIELDS),
            check_ratio(args, "markRatio"),
            check_enum(args, "position", POSITIONS),
            check_integer(args, "positionX"),
            check_integer(args, "positionY"),
            check_int_range(args, "margin", 0, MAX_DIMENSION),
        )

    def parse(self, args):
        return WatermarkOptions(
            main_image_url=args["mainImageUrl"],
            mark_image_url=args["markImageUrl"],
            opacity=args.get("opacity"),
            image_width=optional_int(args, "imageWidth"),
            image_height=optional_int(args, "imageHeight"),
            mark_width=optional_int(args, "markWidth"),
            mark_height=optional_int(args, "markHeight"),
            mark_ratio=args.get("markRatio"),
            position=optional_str(args, "position"),
            position_x=optional_int(args, "positionX"),
            position_y=optional_int(args, "positionY"),
            margin=optional_int(args, "margin"),
        )

    def build(self, options, url):
        body = drop_unset(
            {
                "mainImageUrl": options.main_image_url,
                "markImageUrl": options.mark_image_url,
                "opacity": options.opacity,
                "imageWidth": options.image_width,
                "imageHeight": options.image_height,
                "markWidth": options.mark_width,
                "markHeight": options.mark_height,
                "markRatio": options.mark_ratio,
                "position": options.position,
                "positionX": options.position_x,
                "positionY": options.position_y,
                "margin": options.margin,
            }
        )
        return RenderRequest(method=self.method, url=url, body=body)

    def kind(self, options):
        return "watermark"
