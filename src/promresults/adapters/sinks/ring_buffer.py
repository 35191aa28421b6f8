"""Ring buffer warning sink.

Provides bounded in-memory storage that automatically evicts the oldest
warnings when the buffer is full. Useful for long-running services that
want recent decode warnings at hand with predictable memory usage.
"""

from collections import deque
from collections.abc import Iterator

from promresults.core.models import WarningRecord


class RingBufferWarningSink:
    """Ring buffer implementation of WarningSinkPort.

    Args:
        max_size: Maximum number of warnings to keep.
    """

    def __init__(self, max_size: int) -> None:
        if max_size < 1:
            raise ValueError("max_size must be at least 1")
        self._buffer: deque[WarningRecord] = deque(maxlen=max_size)

    def warn(self, message: str, query: str, labels: str) -> None:
        """Record a warning, evicting the oldest one if the buffer is full."""
        self._buffer.append(WarningRecord(message=message, query=query, labels=labels))

    def read(self) -> Iterator[WarningRecord]:
        """Iterate over kept warnings, oldest first."""
        yield from list(self._buffer)

    def __len__(self) -> int:
        return len(self._buffer)
