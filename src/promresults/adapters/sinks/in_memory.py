"""In-memory warning sink."""

from collections.abc import Iterator

from promresults.core.models import WarningRecord


class InMemoryWarningSink:
    """In-memory implementation of WarningSinkPort.

    Keeps every warning in a list. Suitable for testing and for callers
    that want to inspect warnings after a decode.
    """

    def __init__(self) -> None:
        self._records: list[WarningRecord] = []

    def warn(self, message: str, query: str, labels: str) -> None:
        """Record a warning."""
        self._records.append(WarningRecord(message=message, query=query, labels=labels))

    def read(self) -> Iterator[WarningRecord]:
        """Iterate over recorded warnings in arrival order."""
        yield from list(self._records)

    def clear(self) -> None:
        self._records.clear()

    def __len__(self) -> int:
        return len(self._records)
