"""
Numeric Helpers
===============

Real number classification shared by the variable and math validators.
"""

import math
import re
from typing import NamedTuple, Optional

from .settings import WHITESPACE_CHARS

REAL_NUMBER_PATTERN = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?$")


class RealNumberResult(NamedTuple):
    """Outcome of a real number conversion: a value, or the reason it failed."""

    value: Optional[float] = None
    error: str = ""

    @property
    def ok(self) -> bool:
        return not self.error


def convert_to_real(text: str) -> RealNumberResult:
    """
    Convert a string to a real number.

    Accepts an optional sign, digits with an optional decimal point and an
    optional exponent. Surrounding whitespace is ignored. Values that
    overflow a double are rejected.

    Args:
        text: String to convert

    Returns:
        RealNumberResult holding the value, or an error reason
    """
    if not isinstance(text, str):
        return RealNumberResult(error=f"expected a string, got {type(text).__name__}")

    candidate = text.strip(WHITESPACE_CHARS)
    if not candidate:
        return RealNumberResult(error="empty string")
    if not REAL_NUMBER_PATTERN.match(candidate):
        return RealNumberResult(error=f"'{text}' is not a real number")

    value = float(candidate)
    if math.isinf(value):
        return RealNumberResult(error=f"'{text}' is out of range for a real number")
    return RealNumberResult(value=value)


def is_invalid_real_number(text: str) -> bool:
    """Return True if text cannot be converted to a real number."""
    return not convert_to_real(text).ok


def is_not_whitespace(text: str) -> bool:
    """Return True if text contains at least one non-whitespace character."""
    return bool(text) and bool(text.strip(WHITESPACE_CHARS))
