"""Lenient conversion of form and stored values to numbers and flags."""

import logging
import math
import re
from typing import Any, Optional

logger = logging.getLogger(__name__)

_FLOAT_PREFIX = re.compile(r"^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?")
_INT_PREFIX = re.compile(r"^\s*[+-]?\d+")
_TRUTHY = {"1", "true", "on", "yes", "checked"}


def _clamp(value, minimum, maximum):
    if minimum is not None and value < minimum:
        logger.debug(f"Value {value} raised to {minimum}")
        value = minimum
    if maximum is not None and value > maximum:
        logger.debug(f"Value {value} lowered to {maximum}")
        value = maximum
    return value


def coerce_float(
    value: Any,
    default: float = 0.0,
    minimum: Optional[float] = 0.0,
    maximum: Optional[float] = None,
) -> float:
    """
    Convert a value to a float, parsing strings by their leading number.

    Missing, non-numeric and non-finite values become `default`; the
    result is then clamped to [minimum, maximum].
    """
    if isinstance(value, bool):
        parsed = float(value)
    elif isinstance(value, (int, float)):
        parsed = float(value)
    elif value is None:
        return default
    else:
        match = _FLOAT_PREFIX.match(str(value))
        if not match:
            logger.debug(f"Non-numeric value coerced to {default}: {value!r}")
            return default
        parsed = float(match.group(0))

    if not math.isfinite(parsed):
        return default
    return float(_clamp(parsed, minimum, maximum))


def coerce_int(
    value: Any,
    default: int = 0,
    minimum: Optional[int] = 0,
    maximum: Optional[int] = None,
) -> int:
    """Convert a value to an int the same way; floats and "12.7" truncate."""
    if isinstance(value, bool):
        parsed = int(value)
    elif isinstance(value, int):
        parsed = value
    elif isinstance(value, float):
        if not math.isfinite(value):
            return default
        parsed = int(value)
    elif value is None:
        return default
    else:
        match = _INT_PREFIX.match(str(value))
        if not match:
            logger.debug(f"Non-numeric value coerced to {default}: {value!r}")
            return default
        parsed = int(match.group(0))

    return _clamp(parsed, minimum, maximum)


def coerce_bool(value: Any) -> bool:
    """Checkbox-style flag: "on", "true", "1", "yes" and "checked" are true."""
    if isinstance(value, str):
        return value.strip().lower() in _TRUTHY
    return bool(value)
