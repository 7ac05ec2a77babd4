"""Small pure validators shared by every field of a verification result.

None of these raise. Each one either returns a value that satisfies its
contract or the caller-supplied default.
"""
from typing import Any, Callable, Iterable, List, Optional, TypeVar

from .parsing import parse_numeric_value

T = TypeVar("T")

_TRUE_STRINGS = {"true", "yes"}
_FALSE_STRINGS = {"false", "no"}


def clamp_number(
    value: Any,
    minimum: float,
    maximum: float,
    default: Optional[float],
    as_int: bool = True,
):
    """Clamp value into [minimum, maximum], or return default if it is not numeric."""
    number = parse_numeric_value(value)
    if number is None:
        return default
    number = min(maximum, max(minimum, number))
    if as_int:
        return int(round(number))
    return number


def optional_number(value: Any, minimum: float, maximum: float, as_int: bool = True):
    return clamp_number(value, minimum, maximum, None, as_int=as_int)


def validate_enum(value: Any, allowed: Iterable[str], default: str) -> str:
    """Exact, case-sensitive membership; anything else becomes default."""
    if isinstance(value, str) and value in allowed:
        return value
    return default


def validate_bool(value: Any, default: bool = False) -> bool:
    result = optional_bool(value)
    return default if result is None else result


def optional_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
    return None


def validate_string(value: Any, default: str = "") -> str:
    return value if isinstance(value, str) else default


def optional_string(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def validate_sequence(value: Any, item_validator: Callable[[Any], Optional[T]]) -> List[T]:
    """Validate every element of a list; items the validator rejects with None are dropped."""
    if not isinstance(value, list):
        return []
    items = []
    for raw in value:
        item = item_validator(raw)
        if item is not None:
            items.append(item)
    return items


def validate_string_list(value: Any) -> List[str]:
    return validate_sequence(value, optional_string)
