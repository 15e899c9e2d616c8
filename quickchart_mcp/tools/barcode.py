"""1D/2D barcodes via GET /barcode."""

from dataclasses import dataclass
from typing import Optional

from ..render import RenderRequest, query_params
from ..validation import (
    check_boolean,
    check_dimension,
    check_enum,
    check_int_range,
    check_required_string,
    first_error,
    optional_int,
    optional_str,
)
from .base import ToolAdapter

ROTATIONS = ("N", "R", "L", "I")


@dataclass(frozen=True)
class BarcodeOptions:
    type: str
    text: str
    width: Optional[int] = None
    height: Optional[int] = None
    scale: Optional[int] = None
    include_text: Optional[bool] = None
    rotate: Optional[str] = None


class BarcodeAdapter(ToolAdapter):
    name = "create-barcode"
    key = "barcode"
    endpoint = "barcode"
    label = "barcode"
    description = "Create barcodes using QuickChart - get barcode image URL or save barcode image to file"
    method = "GET"
    required = ("type", "text")
    properties = {
        "type": {"type": "string", "description": "Barcode type (e.g., qr, code128, ean13, datamatrix, upca, etc.)"},
        "text": {"type": "string", "description": "Data to encode in the barcode"},
        "width": {"type": "integer", "description": "Barcode width"},
        "height": {"type": "integer", "description": "Barcode height"},
        "scale": {"type": "integer", "description": "Scale factor (1-10)"},
        "includeText": {"type": "boolean", "description": "Include human-readable text below barcode"},
        "rotate": {
            "type": "string",
            "enum": list(ROTATIONS),
            "description": "Rotation: N=Normal, R=Right 90°, L=Left 90°, I=Inverted 180°",
        },
    }

    def check_fields(self, args):
        return first_error(
            check_required_string(args, "type"),
            check_required_string(args, "text"),
            check_dimension(args, "width"),
            check_dimension(args, "height"),
            check_int_range(args, "scale", 1, 10),
            check_boolean(args, "includeText"),
            check_enum(args, "rotate", ROTATIONS),
        )

    def parse(self, args):
        return BarcodeOptions(
            type=args["type"],
            text=args["text"],
            width=optional_int(args, "width"),
            height=optional_int(args, "height"),
            scale=optional_int(args, "scale"),
            include_text=args.get("includeText"),
            rotate=optional_str(args, "rotate"),
        )

    def build(self, options, url):
        params = query_params(
            {
                "type": options.type,
                "text": options.text,
                "width": options.width,
                "height": options.height,
                "scale": options.scale,
                "includeText": options.include_text,
                "rotate": options.rotate,
            }
        )
        return RenderRequest(method=self.method, url=url, params=params)

    def kind(self, options):
        return "barcode"
