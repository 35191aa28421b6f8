"""Decoding of a single result entry into a series."""

from collections.abc import Mapping
from typing import Any

from promresults.core.dynamic import as_array, as_object
from promresults.core.errors import (
    MetricFieldFormatError,
    MetricFieldMissingError,
    ValueFieldMissingError,
    ValuesFieldFormatError,
)
from promresults.core.models import DecodedSeries, DecodeWarning, Sample
from promresults.core.ports import ValueParser, WarningSinkPort
from promresults.core.samples import (
    DEFAULT_TIMESTAMP_RESOLUTION,
    parse_float,
    parse_sample,
)


def render_labels(metric: Mapping[str, Any]) -> str:
    """Render a label map as ``{key: value, ...}`` with keys sorted."""
    pairs = [f"{key}: {metric[key]}" for key in sorted(metric)]
    return "{" + ", ".join(pairs) + "}"


def decode_series(
    query: str,
    entry: Mapping[str, Any],
    *,
    warning_sink: WarningSinkPort | None = None,
    value_parser: ValueParser = parse_float,
    timestamp_resolution: float = DEFAULT_TIMESTAMP_RESOLUTION,
) -> DecodedSeries:
    """Decode one entry of the ``result`` list.

    Entries carrying a ``values`` key are range series, all others must
    carry a single ``value`` pair.

    Each distinct warning is reported to warning_sink once per series, so a
    fully degenerate range series produces one line, not one per sample.

    Args:
        query: Query the entry belongs to.
        entry: The raw result entry.
        warning_sink: Receives sanitization warnings (optional).
        value_parser: Converts value strings to floats.
        timestamp_resolution: Grid timestamps are aligned to.

    Returns:
        The decoded series.

    Raises:
        DecodeError: On the first structural problem in the entry.
    """
    if "metric" not in entry:
        raise MetricFieldMissingError(query, entry)
    metric = as_object(entry["metric"])
    if metric is None:
        raise MetricFieldFormatError(query, entry["metric"])

    if "values" in entry:
        raw_pairs = as_array(entry["values"])
        if raw_pairs is None:
            raise ValuesFieldFormatError(query, entry["values"])
    elif "value" in entry:
        raw_pairs = [entry["value"]]
    else:
        raise ValueFieldMissingError(query, entry)

    samples: list[Sample] = []
    reported: set[DecodeWarning] = set()
    rendered: str | None = None
    for raw_pair in raw_pairs:
        sample, warning = parse_sample(
            query, raw_pair, value_parser, timestamp_resolution
        )
        samples.append(sample)
        if warning is None or warning in reported:
            continue
        reported.add(warning)
        if warning_sink is not None:
            if rendered is None:
                rendered = render_labels(metric)
            warning_sink.warn(warning.message, query, rendered)

    return DecodedSeries(labels=metric, samples=tuple(samples))
