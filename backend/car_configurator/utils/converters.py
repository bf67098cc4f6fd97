"""Lenient number parsing for values that arrive as JSON strings or form input.

Prices come back from the API as decimal strings ("5000.00") and form fields
are free text, so both are read the way a browser's parseFloat/parseInt would:
take the leading numeric prefix and ignore the rest.
"""

import math
import re
from collections.abc import Mapping
from decimal import Decimal
from typing import Any, Optional

_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


def parse_float(val: Any) -> Optional[float]:
    """Parse the leading float of ``val``; None when there is none.

    Examples:
        >>> parse_float("5000.00")
        5000.0
        >>> parse_float("12abc")
        12.0
        >>> parse_float("abc") is None
        True
    """
    if isinstance(val, bool) or val is None:
        return None
    if isinstance(val, (int, float, Decimal)):
        result = float(val)
        return None if math.isnan(result) else result
    if not isinstance(val, str):
        return None
    match = _FLOAT_PREFIX.match(val)
    if not match:
        return None
    return float(match.group(1))


def parse_int(val: Any) -> Optional[int]:
    """Parse the leading integer of ``val``; None when there is none."""
    if isinstance(val, bool) or val is None:
        return None
    if isinstance(val, (int, float, Decimal)):
        if isinstance(val, float) and not math.isfinite(val):
            return None
        return int(val)
    if not isinstance(val, str):
        return None
    match = _INT_PREFIX.match(val)
    if not match:
        return None
    return int(match.group(1))


def safe_float(val: Any, default: float = 0.0) -> float:
    """Like parse_float, falling back to ``default``."""
    result = parse_float(val)
    return default if result is None else result


def option_field(option: Any, name: str) -> Any:
    """Read ``name`` from an option given as a JSON dict or as an object (ORM row, schema)."""
    if isinstance(option, Mapping):
        return option.get(name)
    return getattr(option, name, None)
