"""BDD step definitions for response decoding features."""

from dataclasses import dataclass, field
from typing import Any

import pytest
from pytest_bdd import given, parsers, then, when

from promresults.adapters.sinks.in_memory import InMemoryWarningSink
from promresults.core.errors import DecodeError
from promresults.core.models import ResultSet
from promresults.core.response import ResponseDecoder

# Named response documents referenced by the feature files
RESPONSES: dict[str, Any] = {
    "instant_api": {
        "data": {"result": [{"metric": {"label_app": "api"}, "value": [1000, "2.5"]}]}
    },
    "instant_inf": {"data": {"result": [{"metric": {}, "value": [1000, "Inf"]}]}},
    "range_jitter": {
        "data": {
            "result": [
                {
                    "metric": {"node": "n1"},
                    "values": [
                        [1700000004, "1"],
                        [1700000011, "2"],
                        [1700000019, "3"],
                    ],
                },
                {"metric": {"node": "n2"}, "values": [[1700000006, "4"]]},
            ]
        }
    },
    "engine_error": {
        "status": "error",
        "errorType": "bad_data",
        "error": "bad_data: unknown function",
    },
    "status_only": {"status": "success"},
    "second_entry_malformed": {
        "data": {"result": [{"metric": {}, "value": [1000, "1"]}, ["not", "a", "map"]]}
    },
}


@dataclass
class DecodingScenarioContext:
    """State shared between the steps of one scenario."""

    document: Any = None
    warning_sink: InMemoryWarningSink = field(default_factory=InMemoryWarningSink)
    results: ResultSet | None = None
    error: DecodeError | None = None


@pytest.fixture
def ctx() -> DecodingScenarioContext:
    """Fresh scenario context for each test."""
    return DecodingScenarioContext()


@given(parsers.parse('the "{name}" response'))
def given_named_response(ctx: DecodingScenarioContext, name: str) -> None:
    """Select one of the canned response documents."""
    ctx.document = RESPONSES[name]


@given("no response")
def given_no_response(ctx: DecodingScenarioContext) -> None:
    ctx.document = None


@when(parsers.parse('the response is decoded for query "{query}"'))
def when_decoded(ctx: DecodingScenarioContext, query: str) -> None:
    """Decode, keeping either the result set or the error."""
    decoder = ResponseDecoder(warning_sink=ctx.warning_sink)
    try:
        ctx.results = decoder.decode(query, ctx.document)
    except DecodeError as e:
        ctx.error = e


@then(parsers.parse("{n:d} series is returned"))
@then(parsers.parse("{n:d} series are returned"))
def then_series_count(ctx: DecodingScenarioContext, n: int) -> None:
    assert ctx.error is None, f"Unexpected error: {ctx.error}"
    assert ctx.results is not None
    assert len(ctx.results) == n


@then("no series are returned")
def then_no_series(ctx: DecodingScenarioContext) -> None:
    assert ctx.results is None


@then(parsers.parse('series {index:d} has label "{name}" set to "{value}"'))
def then_series_label(
    ctx: DecodingScenarioContext, index: int, name: str, value: str
) -> None:
    assert ctx.results is not None
    assert ctx.results.series[index - 1].labels[name] == value


@then(parsers.parse("series {index:d} has {count:d} samples"))
def then_sample_count(ctx: DecodingScenarioContext, index: int, count: int) -> None:
    assert ctx.results is not None
    assert len(ctx.results.series[index - 1].samples) == count


@then(
    parsers.parse(
        "series {index:d} has {count:d} sample at {timestamp:d} with value {value:g}"
    )
)
def then_single_sample(
    ctx: DecodingScenarioContext,
    index: int,
    count: int,
    timestamp: int,
    value: float,
) -> None:
    assert ctx.results is not None
    samples = ctx.results.series[index - 1].samples
    assert len(samples) == count
    assert samples[-1].timestamp == timestamp
    assert samples[-1].value == value


@then(parsers.parse("{n:d} warnings are recorded"))
def then_warning_count(ctx: DecodingScenarioContext, n: int) -> None:
    assert len(ctx.warning_sink) == n


@then(parsers.parse('decoding fails with "{error_name}"'))
def then_decoding_fails(ctx: DecodingScenarioContext, error_name: str) -> None:
    assert ctx.error is not None, "Expected decoding to fail"
    assert type(ctx.error).__name__ == error_name


@then(parsers.parse('the error message contains "{text}"'))
def then_error_message_contains(ctx: DecodingScenarioContext, text: str) -> None:
    assert ctx.error is not None
    assert text in str(ctx.error)
