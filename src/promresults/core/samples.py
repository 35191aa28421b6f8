"""Parsing of individual ``[timestamp, "value"]`` data points."""

import math
from typing import Any

from promresults.core.dynamic import as_array, as_number, as_string
from promresults.core.errors import DataPointFormatError, SampleValueError
from promresults.core.models import INF_WARNING, NAN_WARNING, DecodeWarning, Sample
from promresults.core.ports import ValueParser

# Default scrape-grid alignment, in seconds
DEFAULT_TIMESTAMP_RESOLUTION = 10


def parse_float(text: str) -> float:
    """Parse an engine-encoded sample value.

    Accepts the engine's "+Inf", "-Inf" and "NaN" spellings. Surrounding
    whitespace and digit-grouping underscores are rejected although
    ``float()`` takes them.

    Raises:
        ValueError: If text is not a numeric literal.
    """
    if "_" in text or text != text.strip():
        raise ValueError(f"could not convert string to float: {text!r}")
    return float(text)


def quantize_timestamp(
    timestamp: float, resolution: float = DEFAULT_TIMESTAMP_RESOLUTION
) -> float:
    """Round a timestamp to the nearest multiple of resolution.

    Args:
        timestamp: Raw timestamp reported by the engine.
        resolution: Grid size (default: 10).

    Returns:
        The aligned timestamp. Aligning an aligned timestamp is a no-op.
    """
    return float(round(timestamp / resolution) * resolution)


def sanitize_value(value: float) -> tuple[float, DecodeWarning | None]:
    """Replace Inf and NaN with 0.0 and report which one was found."""
    if math.isinf(value):
        return 0.0, INF_WARNING
    if math.isnan(value):
        return 0.0, NAN_WARNING
    return value, None


def parse_sample(
    query: str,
    raw_pair: Any,
    value_parser: ValueParser = parse_float,
    timestamp_resolution: float = DEFAULT_TIMESTAMP_RESOLUTION,
) -> tuple[Sample, DecodeWarning | None]:
    """Parse one raw data point into a sanitized sample.

    Args:
        query: Query the data point belongs to (for error context).
        raw_pair: The raw ``[timestamp, "value"]`` pair.
        value_parser: Converts the value string to a float.
        timestamp_resolution: Grid the timestamp is aligned to.

    Returns:
        The sample and the warning raised while sanitizing it, if any.

    Raises:
        DataPointFormatError: If raw_pair is not a number/string pair.
        SampleValueError: If the value string cannot be parsed.
    """
    pair = as_array(raw_pair)
    if pair is None or len(pair) != 2:
        raise DataPointFormatError(query, raw_pair)

    timestamp = as_number(pair[0])
    raw_value = as_string(pair[1])
    if timestamp is None or raw_value is None:
        raise DataPointFormatError(query, raw_pair)

    try:
        parsed = value_parser(raw_value)
    except ValueError as exc:
        raise SampleValueError(query, raw_pair, str(exc)) from exc

    value, warning = sanitize_value(parsed)
    return (
        Sample(
            timestamp=quantize_timestamp(timestamp, timestamp_resolution),
            value=value,
        ),
        warning,
    )
