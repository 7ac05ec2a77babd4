import json
import math
import re
from typing import Any, Optional, Dict


def extract_json_block(text: Optional[str]) -> Optional[Dict[str, Any]]:
    """Extract the outer JSON object from model text.

    The model may wrap the object in prose or code fences, so the candidate
    spans from the first '{' to the last '}'.
    """
    if not text:
        return None

    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end <= start:
        return None

    candidate = text[start : end + 1]
    try:
        parsed = json.loads(candidate)
    except (ValueError, RecursionError):
        try:
            cleaned = re.sub(r"[\x00-\x1f]", "", candidate)
            parsed = json.loads(cleaned)
        except (ValueError, RecursionError):
            return None
    return parsed if isinstance(parsed, dict) else None

def parse_numeric_value(val: Any) -> Optional[float]:
    """Parse a numeric value from numbers or numeric strings like '85' or '85%'."""
    if val is None or isinstance(val, bool):
        return None
    if isinstance(val, (int, float)):
        try:
            number = float(val)
        except OverflowError:
            return None
    else:
        try:
            s = str(val).strip().replace(",", "").replace("%", "")
            m = re.match(r"^(-?\d+(?:\.\d+)?(?:[eE][+-]?\d+)?)", s)
            number = float(m.group(1)) if m else float(s)
        except (ValueError, TypeError, OverflowError):
            return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number
