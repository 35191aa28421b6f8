"""Exception taxonomy for decoding query engine responses.

Every structural failure is a ``DecodeError`` subclass carrying the query and
the offending raw value, so a failure can be reproduced from the log line
alone.
"""

from typing import Any

_PREFIX = "Error parsing Prometheus response"


class PromResultsError(Exception):
    """Base class for all promresults errors."""


class DecodeError(PromResultsError):
    """A response could not be decoded.

    Attributes:
        query: The query whose response failed to decode.
        response: The raw value at the point of failure.
        field: Name of the offending field, if any.
    """

    field: str | None = None
    detail = "unexpected response"

    def __init__(self, query: str, response: Any = None) -> None:
        self.query = query
        self.response = response
        super().__init__(self._format())

    def _format(self) -> str:
        return (
            f"{_PREFIX}: {self.detail}. "
            f"Query: '{self.query}'. Response: '{self.response!r}'"
        )


class NoDataError(DecodeError):
    """The query produced no response at all."""

    detail = "no response"

    def __init__(self, query: str) -> None:
        super().__init__(query, None)

    def _format(self) -> str:
        return f"No data returned for query: '{self.query}'"


class QueryEngineError(DecodeError):
    """The query engine reported an error instead of data.

    Attributes:
        message: The error string reported by the engine.
    """

    def __init__(self, query: str, message: str, response: Any = None) -> None:
        self.message = message
        super().__init__(query, response)

    def _format(self) -> str:
        return f"'{self.message}' parsing query '{self.query}'"


class UnexpectedResponseError(DecodeError):
    """The response matches neither the data nor the error shape."""


class ResponseBodyError(DecodeError):
    """The response body is not valid JSON."""

    detail = "response body is not valid JSON"


class DataFieldFormatError(DecodeError):
    field = "data"
    detail = "'data' field improperly formatted"


class ResultFieldMissingError(DecodeError):
    field = "result"
    detail = "'result' field does not exist"


class ResultFieldFormatError(DecodeError):
    field = "result"
    detail = "'result' field improperly formatted"


class ResultEntryFormatError(DecodeError):
    field = "result"
    detail = "'result' entry improperly formatted"


class MetricFieldMissingError(DecodeError):
    field = "metric"
    detail = "'metric' field does not exist in data result vector"


class MetricFieldFormatError(DecodeError):
    field = "metric"
    detail = "'metric' field improperly formatted"


class ValueFieldMissingError(DecodeError):
    field = "value"
    detail = "'value' field does not exist in data result vector"


class ValuesFieldFormatError(DecodeError):
    field = "values"
    detail = "'values' field improperly formatted"


class DataPointFormatError(DecodeError):
    field = "value"
    detail = "improperly formatted datapoint"


class SampleValueError(DecodeError, ValueError):
    """A sample value string could not be parsed as a float.

    Raised from the underlying parse failure, which stays available as
    ``__cause__``.
    """

    field = "value"

    def __init__(self, query: str, response: Any, reason: str) -> None:
        self.reason = reason
        self.detail = f"invalid sample value ({reason})"
        super().__init__(query, response)


class LabelLookupError(PromResultsError, LookupError):
    """A label lookup on a decoded series failed.

    Attributes:
        field: The label that was looked up.
    """

    reason = "cannot be read"

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"'{field}' field {self.reason}")


class FieldMissingError(LabelLookupError):
    reason = "does not exist in data result vector"


class FieldFormatError(LabelLookupError):
    reason = "is improperly formatted and cannot be converted to string"


class ResultFutureError(PromResultsError, RuntimeError):
    """A result future was used outside its one-shot contract."""


class AlreadyPublishedError(ResultFutureError):
    """A result was published to a future that already holds one."""


class AlreadyConsumedError(ResultFutureError):
    """A future's result was awaited more than once."""
