"""Decoding of whole query engine responses."""

import json
from typing import Any

from promresults.core.dynamic import RawDocument, as_array, as_object, as_string
from promresults.core.errors import (
    DataFieldFormatError,
    DecodeError,
    NoDataError,
    QueryEngineError,
    ResponseBodyError,
    ResultEntryFormatError,
    ResultFieldFormatError,
    ResultFieldMissingError,
    UnexpectedResponseError,
)
from promresults.core.models import DecodedSeries, ResultSet
from promresults.core.ports import ValueParser, WarningSinkPort
from promresults.core.samples import DEFAULT_TIMESTAMP_RESOLUTION, parse_float
from promresults.core.series import decode_series


class ResponseDecoder:
    """Turns raw query responses into result sets.

    The decoder holds no per-response state and can be shared between
    threads as long as its warning sink can.

    Example:
        ```python
        from promresults import LoggingWarningSink, ResponseDecoder

        decoder = ResponseDecoder(warning_sink=LoggingWarningSink())
        results = decoder.decode(query, response)
        for series in results:
            namespace = series.metric.get_string("namespace")
        ```
    """

    def __init__(
        self,
        warning_sink: WarningSinkPort | None = None,
        value_parser: ValueParser = parse_float,
        timestamp_resolution: float = DEFAULT_TIMESTAMP_RESOLUTION,
    ) -> None:
        """Initialize the decoder.

        Args:
            warning_sink: Receives sanitization warnings. Warnings are
                dropped when None.
            value_parser: Converts sample value strings to floats.
            timestamp_resolution: Grid sample timestamps are aligned to
                (default: 10).

        Raises:
            ValueError: If timestamp_resolution is not positive.
        """
        if timestamp_resolution <= 0:
            raise ValueError("timestamp_resolution must be positive")
        self.warning_sink = warning_sink
        self.value_parser = value_parser
        self.timestamp_resolution = timestamp_resolution

    def decode(self, query: str, raw_response: RawDocument) -> ResultSet:
        """Decode a parsed response document.

        Args:
            query: The query the response answers.
            raw_response: The document as produced by ``json.loads``, or
                None when the query produced no response.

        Returns:
            ResultSet with one series per result entry, in response order.

        Raises:
            DecodeError: On the first structural problem found. No partial
                result is ever returned.
        """
        # @tra: Decode.Response.NoData
        if raw_response is None:
            raise NoDataError(query)

        document = as_object(raw_response)
        if document is None:
            raise UnexpectedResponseError(query, raw_response)

        # @tra: Decode.Response.EngineError
        if "data" not in document:
            raise _engine_error(query, document)

        data = as_object(document["data"])
        if data is None:
            raise DataFieldFormatError(query, document["data"])

        if "result" not in data:
            raise ResultFieldMissingError(query, data)
        entries = as_array(data["result"])
        if entries is None:
            raise ResultFieldFormatError(query, data["result"])

        series: list[DecodedSeries] = []
        for raw_entry in entries:
            entry = as_object(raw_entry)
            if entry is None:
                raise ResultEntryFormatError(query, raw_entry)
            series.append(
                decode_series(
                    query,
                    entry,
                    warning_sink=self.warning_sink,
                    value_parser=self.value_parser,
                    timestamp_resolution=self.timestamp_resolution,
                )
            )

        return ResultSet(query=query, series=tuple(series))

    def decode_body(self, query: str, body: str | bytes | None) -> ResultSet:
        """Decode a raw JSON response body.

        Args:
            query: The query the response answers.
            body: The HTTP response body. None or empty means no response.

        Returns:
            The decoded ResultSet.

        Raises:
            NoDataError: If body is None or empty.
            ResponseBodyError: If body is not valid JSON.
            DecodeError: If the document does not decode.
        """
        if not body:
            raise NoDataError(query)
        try:
            document = json.loads(body)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise ResponseBodyError(query, body) from exc
        return self.decode(query, document)


def _engine_error(query: str, document: Any) -> DecodeError:
    """Build the error for a document without a ``data`` field."""
    message = as_string(document.get("error"))
    if message is None:
        return UnexpectedResponseError(query, document)
    return QueryEngineError(query, message, document)


def decode_response(
    query: str,
    raw_response: Any,
    *,
    warning_sink: WarningSinkPort | None = None,
    value_parser: ValueParser = parse_float,
    timestamp_resolution: float = DEFAULT_TIMESTAMP_RESOLUTION,
) -> ResultSet:
    """Decode a parsed response document with a one-off decoder.

    See ResponseDecoder.decode for the decoding rules.
    """
    decoder = ResponseDecoder(
        warning_sink=warning_sink,
        value_parser=value_parser,
        timestamp_resolution=timestamp_resolution,
    )
    return decoder.decode(query, raw_response)
