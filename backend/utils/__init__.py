from .parsing import extract_json_block, parse_numeric_value
from .validation import (
    clamp_number,
    optional_number,
    validate_enum,
    validate_bool,
    optional_bool,
    validate_string,
    optional_string,
    validate_sequence,
    validate_string_list,
)

__all__ = [
    "extract_json_block",
    "parse_numeric_value",
    "clamp_number",
    "optional_number",
    "validate_enum",
    "validate_bool",
    "optional_bool",
    "validate_string",
    "optional_string",
    "validate_sequence",
    "validate_string_list",
]
