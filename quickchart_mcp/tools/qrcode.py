"""QR codes with logo and caption options via GET /qr."""

from dataclasses import dataclass
from typing import Optional

from ..render import RenderRequest, query_params
from ..validation import (
    check_dimension,
    check_enum,
    check_int_range,
    check_optional_string,
    check_ratio,
    check_required_string,
    first_error,
    optional_int,
    optional_str,
)
from .base import ToolAdapter

FORMATS = ("png", "svg", "base64")
EC_LEVELS = ("L", "M", "Q", "H")
STRING_FIELDS = ("dark", "light", "centerImageUrl", "caption", "captionFontFamily", "captionFontColor")


@dataclass(frozen=True)
class QRCodeOptions:
    text: str
    format: Optional[str] = None
    size: Optional[int] = None
    margin: Optional[int] = None
    dark: Optional[str] = None
    light: Optional[str] = None
    ec_level: Optional[str] = None
    center_image_url: Optional[str] = None
    center_image_size_ratio: Optional[float] = None
    caption: Optional[str] = None
    caption_font_family: Optional[str] = None
    caption_font_size: Optional[int] = None
    caption_font_color: Optional[str] = None


class QRCodeAdapter(ToolAdapter):
    name = "create-qr-code"
    key = "qrcode"
    endpoint = "qrcode"
    label = "QR code"
    description = "Create QR codes using QuickChart - get QR code image URL or save QR code image to file"
    method = "GET"
    formats = FORMATS
    format_field = "format"
    required = ("text",)
    properties = {
        "text": {"type": "string", "description": "Content of the QR code (URL, text, etc.)"},
        "format": {"type": "string", "enum": list(FORMATS), "description": "Output format (default: png)"},
        "size": {"type": "integer", "description": "Image dimensions in pixels (default: 150)"},
        "margin": {"type": "integer", "description": "Whitespace around QR image (default: 4)"},
        "dark": {"type": "string", "description": "Hex color for QR grid cells (default: black)"},
        "light": {"type": "string", "description": "Hex color for background (default: white, use '0000' for transparent)"},
        "ecLevel": {"type": "string", "enum": list(EC_LEVELS), "description": "Error correction level (default: M)"},
        "centerImageUrl": {"type": "string", "description": "URL of an image to place in the center"},
        "centerImageSizeRatio": {
            "type": "number",
            "minimum": 0,
            "maximum": 1,
            "description": "Center image size ratio (0.0-1.0, default: 0.3)",
        },
        "caption": {"type": "string", "description": "Text below QR code"},
        "captionFontFamily": {"type": "string", "description": "Caption font family (default: 'sans-serif')"},
        "captionFontSize": {"type": "integer", "description": "Caption font size (default: 10)"},
        "captionFontColor": {"type": "string", "description": "Caption text color (default: black)"},
    }

    def check_fields(self, args):
        return first_error(
            check_required_string(args, "text"),
            check_dimension(args, "size"),
            check_int_range(args, "margin", 0, 100),
            check_enum(args, "ecLevel", EC_LEVELS),
            check_ratio(args, "centerImageSizeRatio"),
            check_int_range(args, "captionFontSize", 1, 100),
            *(check_optional_string(args, field) for field in STRING_FIELDS),
        )

    def parse(self, args):
        return QRCodeOptions(
            text=args["text"],
            format=optional_str(args, "format"),
            size=optional_int(args, "size"),
            margin=optional_int(args, "margin"),
            dark=optional_str(args, "dark"),
            light=optional_str(args, "light"),
            ec_level=optional_str(args, "ecLevel"),
            center_image_url=optional_str(args, "centerImageUrl"),
            center_image_size_ratio=args.get("centerImageSizeRatio"),
            caption=optional_str(args, "caption"),
            caption_font_family=optional_str(args, "captionFontFamily"),
            caption_font_size=optional_int(args, "captionFontSize"),
            caption_font_color=optional_str(args, "captionFontColor"),
        )

    def build(self, options, url):
        params = query_params(
            {
                "text": options.text,
                "format": options.format,
                "size": options.size,
                "margin": options.margin,
                "dark": options.dark,
                "light": options.light,
                "ecLevel": options.ec_level,
                "centerImageUrl": options.center_image_url,
                "centerImageSizeRatio": options.center_image_size_ratio,
                "caption": options.caption,
                "captionFontFamily": options.caption_font_family,
                "captionFontSize": options.caption_font_size,
                "captionFontColor": options.caption_font_color,
            }
        )
        return RenderRequest(
            method=self.method, url=url, params=params, format=options.format or self.default_format, format_field="format"
        )

    def kind(self, options):
        return "qrcode"
