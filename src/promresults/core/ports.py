"""Port interfaces for decoder collaborators.

These protocols define the contracts that adapters must implement.
The core depends only on these interfaces, not concrete implementations.
"""

from collections.abc import Callable
from typing import Protocol, runtime_checkable

# Parses an engine-encoded sample value, raising ValueError on failure.
ValueParser = Callable[[str], float]


@runtime_checkable
class WarningSinkPort(Protocol):
    """Port for advisory decode warnings.

    Adapters decide how repeated warnings are de-duplicated.
    Examples: LoggingWarningSink, InMemoryWarningSink, RingBufferWarningSink.
    """

    def warn(self, message: str, query: str, labels: str) -> None:
        """Record a warning.

        Args:
            message: The warning message.
            query: The query being decoded.
            labels: Rendered label set of the series that warned.
        """
        ...
