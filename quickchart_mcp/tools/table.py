"""Table images via POST /v1/table on the api.quickchart.io host."""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..errors import InvalidParams
from ..render import RenderRequest
from ..validation import check_object, first_error
from .base import ToolAdapter


@dataclass(frozen=True)
class TableOptions:
    data: Dict[str, Any]
    options: Optional[Dict[str, Any]] = None


def check_table_data(data: Any) -> Optional[InvalidParams]:
    if not isinstance(data, dict):
        return InvalidParams("data is required and must be an object")
    columns = data.get("columns")
    if not isinstance(columns, list) or not columns:
        return InvalidParams("data.columns is required and must be a non-empty array")
    for index, column in enumerate(columns):
        if not isinstance(column, dict):
            return InvalidParams(f"Column at index {index} must be an object")
    if not isinstance(data.get("dataSource"), list):
        return InvalidParams("data.dataSource is required and must be an array")
    return None


class TableAdapter(ToolAdapter):
    name = "create-table"
    key = "table"
    endpoint = "table"
    label = "table"
    description = "Convert data to table images using QuickChart - get table image URL or save table image to file"
    required = ("data",)
    properties = {
        "data": {
            "type": "object",
            "description": "Table data with title, columns, and dataSource",
            "properties": {
                "title": {"type": "string", "description": "Table title"},
                "columns": {
                    "type": "array",
                    "description": "Column definitions",
                    "items": {
                        "type": "object",
                        "properties": {
                            "title": {"type": "string", "description": "Column header title"},
                            "dataIndex": {"type": "string", "description": "Data property key"},
                            "width": {"type": "integer", "description": "Column width"},
                            "align": {
                                "type": "string",
                                "enum": ["left", "center", "right"],
                                "description": "Text alignment",
                            },
                        },
                        "required": ["title", "dataIndex"],
                    },
                },
                "dataSource": {
                    "type": "array",
                    "description": "Table data rows",
                    "items": {
                        "type": "object",
                        "description": "Row data object with keys matching column dataIndex values",
                    },
                },
            },
            "required": ["columns", "dataSource"],
        },
        "options": {
            "type": "object",
            "description": "Table styling options",
            "properties": {
                "cellWidth": {"type": "integer", "description": "Cell width in pixels"},
                "cellHeight": {"type": "integer", "description": "Cell height in pixels"},
                "offsetLeft": {"type": "integer", "description": "Left offset in pixels"},
                "offsetRight": {"type": "integer", "description": "Right offset in pixels"},
                "fontFamily": {"type": "string", "description": "Font family"},
                "backgroundColor": {"type": "string", "description": "Background color"},
                "fontSize": {"type": "integer", "description": "Font size"},
                "borderColor": {"type": "string", "description": "Border color"},
                "headerColor": {"type": "string", "description": "Header background color"},
            },
        },
    }

    def check_fields(self, args):
        return first_error(check_table_data(args.get("data")), check_object(args, "options", required=False))

    def parse(self, args):
        return TableOptions(data=args["data"], options=args.get("options") or None)

    def build(self, options, url):
        body = {"data": options.data}
        if options.options:
            body["options"] = options.options
        return RenderRequest(method=self.method, url=url, body=body)

    def kind(self, options):
        return "table"
