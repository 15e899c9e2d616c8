"""Word clouds via POST /wordcloud."""

from dataclasses import dataclass
from typing import Optional, Tuple

from ..render import RenderRequest, drop_unset
from ..validation import (
    MAX_DIMENSION,
    check_boolean,
    check_dimension,
    check_enum,
    check_int_range,
    check_number,
    check_optional_string,
    check_required_string,
    check_string_list,
    first_error,
    optional_int,
    optional_str,
)
from .base import ToolAdapter

FORMATS = ("svg", "png")
CASES = ("upper", "lower", "none")

STRING_FIELDS = ("backgroundColor", "fontFamily", "fontWeight", "loadGoogleFonts", "scale", "language")
NUMBER_FIELDS = ("fontScale", "padding", "rotation")
BOOLEAN_FIELDS = ("removeStopwords", "cleanWords", "useWordList")


@dataclass(frozen=True)
class WordCloudOptions:
    text: str
    format: str = "svg"
    width: Optional[int] = None
    height: Optional[int] = None
    background_color: Optional[str] = None
    font_family: Optional[str] = None
    font_weight: Optional[str] = None
    load_google_fonts: Optional[str] = None
    font_scale: Optional[float] = None
    scale: Optional[str] = None
    padding: Optional[float] = None
    rotation: Optional[float] = None
    max_num_words: Optional[int] = None
    min_word_length: Optional[int] = None
    case: Optional[str] = None
    colors: Optional[Tuple[str, ...]] = None
    remove_stopwords: Optional[bool] = None
    clean_words: Optional[bool] = None
    language: Optional[str] = None
    use_word_list: Optional[bool] = None


class WordCloudAdapter(ToolAdapter):
    name = "create-wordcloud"
    key = "wordcloud"
    endpoint = "wordcloud"
    label = "word cloud"
    description = "Create word cloud visualizations - get word cloud image URL or save word cloud image to file"
    formats = FORMATS
    default_format = "svg"
    format_field = "format"
    required = ("text",)
    properties = {
        "text": {"type": "string", "description": "Input text for word cloud generation"},
        "format": {"type": "string", "enum": list(FORMATS), "description": "Output format (default: svg)"},
        "width": {"type": "integer", "description": "Image width in pixels"},
        "height": {"type": "integer", "description": "Image height in pixels"},
        "backgroundColor": {"type": "string", "description": "Background color - rgb, hex, hsl, or color names"},
        "fontFamily": {"type": "string", "description": "Font family to use for words"},
        "fontWeight": {"type": "string", "description": "Font weight (normal, bold, etc.)"},
        "loadGoogleFonts": {"type": "string", "description": "Google Fonts to load (comma-separated)"},
        "fontScale": {"type": "number", "description": "Largest font size for most frequent words"},
        "scale": {"type": "string", "description": "Frequency scaling method (linear, sqrt, log)"},
        "padding": {"type": "number", "description": "Pixel spacing between words"},
        "rotation": {"type": "number", "description": "Maximum word rotation angle in degrees"},
        "maxNumWords": {"type": "integer", "description": "Maximum number of words to display"},
        "minWordLength": {"type": "integer", "description": "Minimum word character length"},
        "case": {"type": "string", "enum": list(CASES), "description": "Word case transformation"},
        "colors": {"type": "array", "items": {"type": "string"}, "description": "Array of color values for words"},
        "removeStopwords": {"type": "boolean", "description": "Remove common stopwords"},
        "cleanWords": {"type": "boolean", "description": "Remove symbols and extra characters from words"},
        "language": {"type": "string", "description": "Language code for stopword removal (e.g., 'en', 'es')"},
        "useWordList": {"type": "boolean", "description": "Treat input text as a list of words rather than sentences"},
    }

    def check_fields(self, args):
        return first_error(
            check_required_string(args, "text"),
            check_dimension(args, "width"),
            check_dimension(args, "height"),
            *(check_optional_string(args, field) for field in STRING_FIELDS),
            *(check_number(args, field) for field in NUMBER_FIELDS),
            *(check_boolean(args, field) for field in BOOLEAN_FIELDS),
            check_int_range(args, "maxNumWords", 1, MAX_DIMENSION),
            check_int_range(args, "minWordLength", 0, 100),
            check_enum(args, "case", CASES),
            check_string_list(args, "colors"),
        )

    def parse(self, args):
        colors = args.get("colors")
        return WordCloudOptions(
            text=args["text"],
            format=optional_str(args, "format") or self.default_format,
            width=optional_int(args, "width"),
            height=optional_int(args, "height"),
            background_color=optional_str(args, "backgroundColor"),
            font_family=optional_str(args, "fontFamily"),
            font_weight=optional_str(args, "fontWeight"),
            load_google_fonts=optional_str(args, "loadGoogleFonts"),
            font_scale=args.get("fontScale"),
            scale=optional_str(args, "scale"),
            padding=args.get("padding"),
            rotation=args.get("rotation"),
            max_num_words=optional_int(args, "maxNumWords"),
            min_word_length=optional_int(args, "minWordLength"),
            case=optional_str(args, "case"),
            colors=tuple(colors) if colors else None,
            remove_stopwords=args.get("removeStopwords"),
            clean_words=args.get("cleanWords"),
            language=optional_str(args, "language"),
            use_word_list=args.get("useWordList"),
        )

    def build(self, options, url):
        body = drop_unset(
            {
                "text": options.text,
                "format": options.format,
                "width": options.width,
                "height": options.height,
                "backgroundColor": options.background_color,
                "fontFamily": options.font_family,
                "fontWeight": options.font_weight,
                "loadGoogleFonts": options.load_google_fonts,
                "fontScale": options.font_scale,
                "scale": options.scale,
                "padding": options.padding,
                "rotation": options.rotation,
                "maxNumWords": options.max_num_words,
                "minWordLength": options.min_word_length,
                "case": options.case,
                "colors": list(options.colors) if options.colors else None,
                "removeStopwords": options.remove_stopwords,
                "cleanWords": options.clean_words,
                "language": options.language,
                "useWordList": options.use_word_list,
            }
        )
        return RenderRequest(method=self.method, url=url, body=body, format=options.format, format_field="format")

    def kind(self, options):
        return "wordcloud"
