"""Field checks shared by the tool adapters.

Every check returns ``None`` when the field is acceptable and an
``InvalidParams`` describing the problem otherwise. Nothing here raises;
the caller decides when an error becomes an exception. Absent fields and
JSON ``null`` are treated alike.
"""

from typing import Any, Mapping, Optional, Sequence

from .errors import InvalidParams

GET_URL = "get_url"
SAVE_FILE = "save_file"
ACTIONS = (GET_URL, SAVE_FILE)

MAX_DIMENSION = 10000


def first_error(*errors: Optional[InvalidParams]) -> Optional[InvalidParams]:
    for error in errors:
        if error is not None:
            return error
    return None


def is_integer(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and value.is_integer()


def is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_blank(value: Any) -> bool:
    return not isinstance(value, str) or not value.strip()


def _valid_values(choices: Sequence[Any]) -> str:
    return ", ".join(str(choice) for choice in choices)


def check_required_string(args: Mapping[str, Any], field: str) -> Optional[InvalidParams]:
    if is_blank(args.get(field)):
        return InvalidParams(f"{field} is required and must be a non-empty string")
    return None


def check_optional_string(args: Mapping[str, Any], field: str) -> Optional[InvalidParams]:
    if args.get(field) is None:
        return None
    if is_blank(args[field]):
        return InvalidParams(f"{field} must be a non-empty string")
    return None


def check_enum(args: Mapping[str, Any], field: str, choices: Sequence[Any]) -> Optional[InvalidParams]:
    value = args.get(field)
    if value is None:
        return None
    # bools compare equal to 0/1, so they never match a numeric choice
    if isinstance(value, bool) or value not in choices:
        return InvalidParams(f"Invalid {field}: {value}. Valid values are: {_valid_values(choices)}")
    return None


def check_int_range(
    args: Mapping[str, Any], field: str, minimum: int, maximum: int
) -> Optional[InvalidParams]:
    value = args.get(field)
    if value is None:
        return None
    if not is_integer(value) or not minimum <= value <= maximum:
        return InvalidParams(f"{field} must be an integer between {minimum} and {maximum}")
    return None


def check_dimension(args: Mapping[str, Any], field: str) -> Optional[InvalidParams]:
    return check_int_range(args, field, 1, MAX_DIMENSION)


def check_integer(args: Mapping[str, Any], field: str) -> Optional[InvalidParams]:
    value = args.get(field)
    if value is not None and not is_integer(value):
        return InvalidParams(f"{field} must be an integer")
    return None


def check_number(args: Mapping[str, Any], field: str) -> Optional[InvalidParams]:
    value = args.get(field)
    if value is not None and not is_number(value):
        return InvalidParams(f"{field} must be a number")
    return None


def check_ratio(args: Mapping[str, Any], field: str) -> Optional[InvalidParams]:
    value = args.get(field)
    if value is None:
        return None
    if not is_number(value) or not 0 <= value <= 1:
        return InvalidParams(f"{field} must be a number between 0.0 and 1.0")
    return None


def check_boolean(args: Mapping[str, Any], field: str) -> Optional[InvalidParams]:
    value = args.get(field)
    if value is not None and not isinstance(value, bool):
        return InvalidParams(f"{field} must be a boolean")
    return None


def check_object(args: Mapping[str, Any], field: str, required: bool = True) -> Optional[InvalidParams]:
    value = args.get(field)
    if value is None and not required:
        return None
    if not isinstance(value, dict):
        if required:
            return InvalidParams(f"{field} is required and must be an object")
        return InvalidParams(f"{field} must be an object")
    return None


def check_string_list(args: Mapping[str, Any], field: str) -> Optional[InvalidParams]:
    value = args.get(field)
    if value is None:
        return None
    if not isinstance(value, list) or any(not isinstance(item, str) for item in value):
        return InvalidParams(f"{field} must be an array of strings")
    return None


def check_action(args: Mapping[str, Any]) -> Optional[InvalidParams]:
    action = args.get("action")
    if action is None:
        return None
    if not isinstance(action, str) or action not in ACTIONS:
        return InvalidParams(f"Invalid action: {action}. Valid values are: {_valid_values(ACTIONS)}")
    return None


def check_output_path(args: Mapping[str, Any]) -> Optional[InvalidParams]:
    output_path = args.get("outputPath")
    if args.get("action") == SAVE_FILE and is_blank(output_path):
        return InvalidParams("outputPath is required for save_file action")
    if output_path is not None and not isinstance(output_path, str):
        return InvalidParams("outputPath must be a string")
    return None


def check_common(args: Mapping[str, Any], formats: Sequence[str] = ()) -> Optional[InvalidParams]:
    """Checks every rendering tool shares: action, outputPath and format."""
    return first_error(
        check_action(args),
        check_output_path(args),
        check_enum(args, "format", formats) if formats else None,
    )


def optional_int(args: Mapping[str, Any], field: str) -> Optional[int]:
    value = args.get(field)
    return None if value is None else int(value)


def optional_str(args: Mapping[str, Any], field: str) -> Optional[str]:
    value = args.get(field)
    return value if isinstance(value, str) and value else None
