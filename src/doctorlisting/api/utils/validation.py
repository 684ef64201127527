"""Render pydantic validation errors as single client-facing messages."""

from typing import Any, Dict, Sequence

_TYPE_MESSAGES = {
    "string_type": "must be a string",
    "float_type": "must be a number",
    "float_parsing": "must be a number",
    "finite_number": "must be a number",
    "int_type": "must be a number",
    "int_parsing": "must be a number",
    "int_parsing_size": "must be a safe number",
    "int_from_float": "must be an integer",
    "bool_type": "must be a boolean",
    "bool_parsing": "must be a boolean",
    "model_type": "must be of type object",
    "model_attributes_type": "must be of type object",
    "dict_type": "must be of type object",
}


def _field_name(loc: Sequence[Any]) -> str:
    # ("body", "rating") -> "rating"; ("query", "page") -> "page"; ("body",) -> "value"
    parts = [str(p) for p in loc if p not in ("body", "query", "path", "header")]
    return ".".join(parts) if parts else "value"


def _bound(value: Any) -> str:
    # 5.0 -> "5", 4.5 -> "4.5", 1000000 -> "1000000"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_validation_error(error: Dict[str, Any]) -> str:
    """Format one pydantic error dict, e.g. ``"rating" must be less than or equal to 5``."""
    field = _field_name(error.get("loc", ()))
    err_type = error.get("type", "")
    ctx = error.get("ctx") or {}

    if err_type == "missing":
        return f'"{field}" is required'
    if err_type == "extra_forbidden":
        return f'"{field}" is not allowed'
    if err_type == "string_too_short":
        return f'"{field}" is not allowed to be empty'
    if err_type == "greater_than_equal":
        return f'"{field}" must be greater than or equal to {_bound(ctx.get("ge"))}'
    if err_type == "less_than_equal":
        return f'"{field}" must be less than or equal to {_bound(ctx.get("le"))}'
    if err_type == "json_invalid":
        return "Request body is not valid JSON"
    if err_type in _TYPE_MESSAGES:
        return f'"{field}" {_TYPE_MESSAGES[err_type]}'
    return f'"{field}" {error.get("msg", "is invalid")}'


def first_validation_message(errors: Sequence[Dict[str, Any]]) -> str:
    """Message for the first violated constraint."""
    if not errors:
        return "Invalid request"
    return format_validation_error(errors[0])
