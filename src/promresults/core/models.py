"""Core domain models for decoded query results."""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from promresults.core.metric import MetricAccessor


@dataclass(frozen=True)
class Sample:
    """A single decoded data point.

    Attributes:
        timestamp: Unix timestamp in seconds, aligned to the scrape grid.
        value: The sample value. Never Inf or NaN.
    """

    timestamp: float
    value: float


@dataclass(frozen=True)
class DecodedSeries:
    """One series of a query result.

    Attributes:
        labels: Metric labels exactly as returned by the engine (read-only).
        samples: Samples in the order the engine returned them.
    """

    labels: Mapping[str, Any] = field(default_factory=dict)
    samples: tuple[Sample, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "labels", MappingProxyType(dict(self.labels)))
        object.__setattr__(self, "samples", tuple(self.samples))

    @property
    def metric(self) -> "MetricAccessor":
        """Typed accessor over this series' labels."""
        from promresults.core.metric import MetricAccessor

        return MetricAccessor(self.labels)


@dataclass(frozen=True)
class ResultSet:
    """All series decoded from one query response.

    Attributes:
        query: The query string the response belongs to.
        series: Decoded series in response order.
    """

    query: str
    series: tuple[DecodedSeries, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "series", tuple(self.series))

    def __len__(self) -> int:
        return len(self.series)

    def __iter__(self) -> Iterator[DecodedSeries]:
        return iter(self.series)


@dataclass(frozen=True)
class DecodeWarning:
    """Advisory tag attached to a sample that had to be sanitized."""

    message: str


INF_WARNING = DecodeWarning("Found Inf value parsing vector data point for metric")
NAN_WARNING = DecodeWarning("Found NaN value parsing vector data point for metric")


@dataclass(frozen=True)
class WarningRecord:
    """A warning as received by a warning sink.

    Attributes:
        message: The warning message.
        query: Query the warning was raised for.
        labels: Rendered label set of the offending series.
    """

    message: str
    query: str
    labels: str
