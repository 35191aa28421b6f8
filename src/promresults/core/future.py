"""One-shot handoff of a decoded result set to a waiting consumer.

A producer publishes exactly one outcome, either a ResultSet or an error, and
a single consumer collects it exactly once. Both rules are enforced at
runtime: publishing twice raises AlreadyPublishedError and collecting twice
raises AlreadyConsumedError.
"""

import asyncio
import threading
from typing import Any

from promresults.core.errors import AlreadyConsumedError, AlreadyPublishedError
from promresults.core.models import DecodedSeries, ResultSet
from promresults.core.response import ResponseDecoder


def _check_result_set(result_set: Any) -> None:
    if not isinstance(result_set, ResultSet):
        raise TypeError(
            f"expected a ResultSet, got {type(result_set).__name__}; "
            "use set_exception() to publish a failure"
        )


class _Outcome:
    """Write-once slot shared by both future flavours. Not thread-safe."""

    def __init__(self) -> None:
        self.published = False
        self.consumed = False
        self.result_set: ResultSet | None = None
        self.error: BaseException | None = None

    def publish(
        self, result_set: ResultSet | None, error: BaseException | None
    ) -> None:
        if self.published:
            raise AlreadyPublishedError("result already published to this future")
        self.published = True
        self.result_set = result_set
        self.error = error

    def check_consumable(self) -> None:
        if self.consumed:
            raise AlreadyConsumedError("result already collected from this future")

    def consume(self) -> tuple[DecodedSeries, ...]:
        self.consumed = True
        result_set, error = self.result_set, self.error
        # Release the payload so the future does not pin it.
        self.result_set = None
        self.error = None
        if error is not None:
            raise error
        if result_set is None:
            raise RuntimeError("future published neither a result nor an error")
        return result_set.series


class ResultFuture:
    """Thread-blocking one-shot future.

    Example:
        ```python
        future = ResultFuture()
        threading.Thread(
            target=publish_decoded, args=(future, query, fetch(query))
        ).start()
        series = future.result()
        ```
    """

    def __init__(self) -> None:
        self._outcome = _Outcome()
        self._cond = threading.Condition()

    def set_result(self, result_set: ResultSet) -> None:
        """Publish a successfully decoded result set.

        Raises:
            AlreadyPublishedError: If an outcome was already published.
            TypeError: If result_set is not a ResultSet.
        """
        _check_result_set(result_set)
        with self._cond:
            self._outcome.publish(result_set, None)
            self._cond.notify_all()

    def set_exception(self, error: BaseException) -> None:
        """Publish a failure.

        Raises:
            AlreadyPublishedError: If an outcome was already published.
        """
        with self._cond:
            self._outcome.publish(None, error)
            self._cond.notify_all()

    def done(self) -> bool:
        """Return True once an outcome has been published."""
        with self._cond:
            return self._outcome.published

    def result(self, timeout: float | None = None) -> tuple[DecodedSeries, ...]:
        """Block until the outcome is published and return its series.

        Args:
            timeout: Seconds to wait, or None to wait forever.

        Returns:
            The published series.

        Raises:
            TimeoutError: If nothing was published within timeout. The future
                can still be collected later.
            AlreadyConsumedError: If the result was already collected.
            Exception: The published error, if a failure was published.
        """
        with self._cond:
            self._outcome.check_consumable()
            if not self._cond.wait_for(lambda: self._outcome.published, timeout):
                raise TimeoutError("no result published before timeout")
            self._outcome.check_consumable()
            return self._outcome.consume()


class AsyncResultFuture:
    """Asyncio one-shot future.

    Must be published and awaited from the same event loop.
    """

    def __init__(self) -> None:
        self._outcome = _Outcome()
        self._event = asyncio.Event()

    def set_result(self, result_set: ResultSet) -> None:
        """Publish a successfully decoded result set."""
        _check_result_set(result_set)
        self._outcome.publish(result_set, None)
        self._event.set()

    def set_exception(self, error: BaseException) -> None:
        """Publish a failure."""
        self._outcome.publish(None, error)
        self._event.set()

    def done(self) -> bool:
        return self._outcome.published

    async def result(self, timeout: float | None = None) -> tuple[DecodedSeries, ...]:
        """Wait until the outcome is published and return its series.

        Raises:
            TimeoutError: If nothing was published within timeout.
            AlreadyConsumedError: If the result was already collected.
            Exception: The published error, if a failure was published.
        """
        self._outcome.check_consumable()
        try:
            await asyncio.wait_for(self._event.wait(), timeout)
        except asyncio.TimeoutError as exc:
            raise TimeoutError("no result published before timeout") from exc
        self._outcome.check_consumable()
        return self._outcome.consume()


def publish_decoded(
    future: ResultFuture | AsyncResultFuture,
    query: str,
    raw_response: Any,
    decoder: ResponseDecoder | None = None,
) -> None:
    """Decode a response and publish the outcome to future.

    Any exception raised while decoding is published instead of propagated,
    so the consumer always wakes up.

    Args:
        future: The future to resolve.
        query: The query the response answers.
        raw_response: The parsed response document.
        decoder: Decoder to use (default: ResponseDecoder()).
    """
    decoder = decoder or ResponseDecoder()
    try:
        result_set = decoder.decode(query, raw_response)
    except Exception as exc:
        future.set_exception(exc)
        return
    future.set_result(result_set)
