"""Small numeric and formatting helpers."""

from __future__ import annotations

import math
import sys
from collections.abc import Iterable


def are_equal(x: float, y: float, ulp: int = 2) -> bool:
    """Return whether two floats are equal within ``ulp`` units of precision."""
    diff = abs(x - y)
    return diff <= sys.float_info.epsilon * abs(x + y) * ulp or diff < sys.float_info.min


def sgn(val: float) -> int:
    """Return -1, 0 or 1 according to the sign of ``val``."""
    return (val > 0) - (val < 0)


def center_align(s: str, width: int) -> str:
    """Center ``s`` in a field of ``width`` characters."""
    padding = width - len(s)
    side = " " * (padding // 2) if padding > 0 else ""
    extra = " " if padding > 0 and padding % 2 else ""
    return f"{side}{s}{side}{extra}"


def right_align(s: str, width: int) -> str:
    """Right-align ``s`` in a field of ``width`` characters."""
    return " " * max(width - len(s), 0) + s


def left_align(s: str, width: int) -> str:
    """Left-align ``s`` in a field of ``width`` characters."""
    return s + " " * max(width - len(s), 0)


def to_string_scientific(d: float) -> str:
    """Format a float in scientific notation with six decimals."""
    return f"{d:e}"


def magnitude(values: Iterable[float]) -> float:
    """Return the Euclidean norm of a vector."""
    return math.hypot(*values)