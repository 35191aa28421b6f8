"""Shape-checked projections over untyped response documents.

Each projection returns the value narrowed to the requested shape, or None
when the value has a different shape. Callers turn None into the error that
fits their nesting level.
"""

import math
from collections.abc import Mapping, Sequence
from typing import Any

# What json.loads can produce
RawDocument = None | bool | int | float | str | list[Any] | dict[str, Any]


def as_object(value: Any) -> Mapping[str, Any] | None:
    """Project value onto a string-keyed map."""
    if isinstance(value, Mapping):
        return value
    return None


def as_array(value: Any) -> Sequence[Any] | None:
    """Project value onto an array.

    Strings and bytes are sequences too but never count as arrays.
    """
    if isinstance(value, (list, tuple)):
        return value
    return None


def as_string(value: Any) -> str | None:
    """Project value onto a string."""
    if isinstance(value, str):
        return value
    return None


def as_number(value: Any) -> float | None:
    """Project value onto a finite number.

    Booleans are rejected even though they are ints in Python, and so are
    ints too large to be represented as a float.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    try:
        number = float(value)
    except OverflowError:
        return None
    if not math.isfinite(number):
        return None
    return number
