"""Shared test fixtures for all test modules."""

from collections.abc import Callable
from typing import Any

import pytest

from promresults.adapters.sinks.in_memory import InMemoryWarningSink
from promresults.core.response import ResponseDecoder

QUERY = "avg(node_total_hourly_cost{}) by (node, cluster, provider_id)[24h:5m]"


@pytest.fixture
def query() -> str:
    """A realistic query string used for error context."""
    return QUERY


@pytest.fixture
def warning_sink() -> InMemoryWarningSink:
    """Provide an empty recording warning sink."""
    return InMemoryWarningSink()


@pytest.fixture
def decoder(warning_sink: InMemoryWarningSink) -> ResponseDecoder:
    """Decoder wired to the recording warning sink."""
    return ResponseDecoder(warning_sink=warning_sink)


# === Response document factories ===


@pytest.fixture
def instant_document() -> Callable[..., dict[str, Any]]:
    """Factory fixture for instant-vector response documents.

    Each positional argument is a (metric, timestamp, value) tuple.

    Usage:
        doc = instant_document(({"node": "a"}, 1000, "2.5"))
    """

    def _document(*entries: tuple[dict[str, Any], float, str]) -> dict[str, Any]:
        return {
            "status": "success",
            "data": {
                "resultType": "vector",
                "result": [
                    {"metric": metric, "value": [ts, value]}
                    for metric, ts, value in entries
                ],
            },
        }

    return _document


@pytest.fixture
def range_document() -> Callable[..., dict[str, Any]]:
    """Factory fixture for range-vector response documents.

    Each positional argument is a (metric, [(timestamp, value), ...]) tuple.
    """

    def _document(
        *entries: tuple[dict[str, Any], list[tuple[float, str]]],
    ) -> dict[str, Any]:
        return {
            "status": "success",
            "data": {
                "resultType": "matrix",
                "result": [
                    {"metric": metric, "values": [[ts, v] for ts, v in points]}
                    for metric, points in entries
                ],
            },
        }

    return _document
