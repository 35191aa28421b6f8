"""promresults - defensive decoding of Prometheus-style query responses."""

from promresults.adapters.logging import LoggingWarningSink, get_logger
from promresults.adapters.sinks import InMemoryWarningSink, RingBufferWarningSink
from promresults.core.errors import (
    AlreadyConsumedError,
    AlreadyPublishedError,
    DataFieldFormatError,
    DataPointFormatError,
    DecodeError,
    FieldFormatError,
    FieldMissingError,
    LabelLookupError,
    MetricFieldFormatError,
    MetricFieldMissingError,
    NoDataError,
    PromResultsError,
    QueryEngineError,
    ResponseBodyError,
    ResultEntryFormatError,
    ResultFieldFormatError,
    ResultFieldMissingError,
    ResultFutureError,
    SampleValueError,
    UnexpectedResponseError,
    ValueFieldMissingError,
    ValuesFieldFormatError,
)
from promresults.core.future import AsyncResultFuture, ResultFuture, publish_decoded
from promresults.core.metric import ANNOTATION_PREFIX, LABEL_PREFIX, MetricAccessor
from promresults.core.models import (
    INF_WARNING,
    NAN_WARNING,
    DecodedSeries,
    DecodeWarning,
    ResultSet,
    Sample,
    WarningRecord,
)
from promresults.core.ports import ValueParser, WarningSinkPort
from promresults.core.response import ResponseDecoder, decode_response
from promresults.core.samples import (
    DEFAULT_TIMESTAMP_RESOLUTION,
    parse_float,
    parse_sample,
    quantize_timestamp,
)
from promresults.core.series import decode_series, render_labels

__all__ = [
    # Decoding
    "ResponseDecoder",
    "decode_response",
    "decode_series",
    "parse_sample",
    "parse_float",
    "quantize_timestamp",
    "render_labels",
    "DEFAULT_TIMESTAMP_RESOLUTION",
    # Models
    "DecodedSeries",
    "DecodeWarning",
    "ResultSet",
    "Sample",
    "WarningRecord",
    "INF_WARNING",
    "NAN_WARNING",
    # Accessor
    "MetricAccessor",
    "LABEL_PREFIX",
    "ANNOTATION_PREFIX",
    # Handoff
    "AsyncResultFuture",
    "ResultFuture",
    "publish_decoded",
    # Ports
    "ValueParser",
    "WarningSinkPort",
    # Adapters
    "InMemoryWarningSink",
    "LoggingWarningSink",
    "RingBufferWarningSink",
    "get_logger",
    # Errors
    "PromResultsError",
    "DecodeError",
    "NoDataError",
    "QueryEngineError",
    "UnexpectedResponseError",
    "ResponseBodyError",
    "DataFieldFormatError",
    "ResultFieldMissingError",
    "ResultFieldFormatError",
    "ResultEntryFormatError",
    "MetricFieldMissingError",
    "MetricFieldFormatError",
    "ValueFieldMissingError",
    "ValuesFieldFormatError",
    "DataPointFormatError",
    "SampleValueError",
    "LabelLookupError",
    "FieldMissingError",
    "FieldFormatError",
    "ResultFutureError",
    "AlreadyPublishedError",
    "AlreadyConsumedError",
]
