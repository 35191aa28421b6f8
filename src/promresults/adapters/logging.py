"""Python logging adapter for decode warnings.

This adapter bridges WarningSinkPort to Python's standard library logging
module, suppressing warnings that keep repeating for the same query and
label set.
"""

import logging
import threading
from collections import OrderedDict

ROOT_LOGGER_NAME = "promresults"

# Times the same (message, query, labels) triple is logged before suppression
DEFAULT_MAX_OCCURRENCES = 5

# Distinct triples tracked at once; the least recently seen is forgotten first
DEFAULT_MAX_TRACKED = 10_000


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger under the promresults namespace.

    Args:
        name: Dotted name. Names outside the namespace are nested below it.

    Returns:
        The logger.
    """
    if not name or name == ROOT_LOGGER_NAME:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


class LoggingWarningSink:
    """Warning sink that writes to a logging.Logger with de-duplication.

    Example:
        ```python
        from promresults import LoggingWarningSink, ResponseDecoder

        decoder = ResponseDecoder(warning_sink=LoggingWarningSink())
        ```
    """

    def __init__(
        self,
        logger: logging.Logger | None = None,
        max_occurrences: int = DEFAULT_MAX_OCCURRENCES,
        max_tracked: int = DEFAULT_MAX_TRACKED,
    ) -> None:
        """Initialize the sink.

        Args:
            logger: Logger to write to. Defaults to the "promresults.warnings"
                logger.
            max_occurrences: How many times an identical warning is logged
                before it is suppressed (default: 5).
            max_tracked: How many distinct warnings are counted at once
                (default: 10000). When full, the least recently seen warning
                is forgotten and logs again if it comes back.

        Raises:
            ValueError: If max_occurrences or max_tracked is not positive.
        """
        if max_occurrences < 1:
            raise ValueError("max_occurrences must be at least 1")
        if max_tracked < 1:
            raise ValueError("max_tracked must be at least 1")
        self._logger = logger or get_logger("warnings")
        self._max_occurrences = max_occurrences
        self._max_tracked = max_tracked
        self._seen: OrderedDict[tuple[str, str, str], int] = OrderedDict()
        self._lock = threading.Lock()

    def warn(self, message: str, query: str, labels: str) -> None:
        """Log a warning unless it has been logged max_occurrences times."""
        key = (message, query, labels)
        with self._lock:
            count = self._seen.pop(key, 0) + 1
            self._seen[key] = count
            if len(self._seen) > self._max_tracked:
                self._seen.popitem(last=False)
        if count > self._max_occurrences:
            return
        self._logger.warning(
            "%s\nQuery: %s\nLabels: %s",
            message,
            query,
            labels,
            extra={"query": query, "labels": labels, "occurrence": count},
        )

    def occurrences(self, message: str, query: str, labels: str) -> int:
        """Return how often a tracked warning was received.

        Suppressed warnings are included. Forgotten warnings count as 0.
        """
        with self._lock:
            return self._seen.get((message, query, labels), 0)

    def tracked(self) -> int:
        """Return how many distinct warnings are currently counted."""
        with self._lock:
            return len(self._seen)

    def reset(self) -> None:
        """Forget all seen warnings."""
        with self._lock:
            self._seen.clear()
