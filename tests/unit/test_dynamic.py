"""Tests for shape-checked document projections."""

import pytest

from promresults.core.dynamic import as_array, as_number, as_object, as_string

pytestmark = [
    pytest.mark.unit,
    pytest.mark.tier(0),
    pytest.mark.tra("Core.Dynamic.Projections"),
]


class TestAsObject:
    """Tests for as_object()."""

    def test_returns_dict_unchanged(self) -> None:
        value = {"a": 1}
        assert as_object(value) is value

    @pytest.mark.parametrize("value", [None, [], "x", 1, 1.5, True])
    def test_rejects_non_maps(self, value: object) -> None:
        """Anything that is not a map projects to None."""
        assert as_object(value) is None


class TestAsArray:
    """Tests for as_array()."""

    def test_accepts_list_and_tuple(self) -> None:
        assert as_array([1, 2]) == [1, 2]
        assert as_array((1, 2)) == (1, 2)

    @pytest.mark.parametrize("value", [None, "ab", b"ab", {"a": 1}, 3])
    def test_rejects_strings_and_scalars(self, value: object) -> None:
        """Strings are sequences but never arrays."""
        assert as_array(value) is None


class TestAsString:
    """Tests for as_string()."""

    def test_returns_string(self) -> None:
        assert as_string("1.5") == "1.5"

    @pytest.mark.parametrize("value", [None, 1.5, ["1.5"], b"1.5"])
    def test_rejects_non_strings(self, value: object) -> None:
        assert as_string(value) is None


class TestAsNumber:
    """Tests for as_number()."""

    @pytest.mark.parametrize(
        ("value", "expected"), [(1000, 1000.0), (1000.5, 1000.5), (0, 0.0)]
    )
    def test_returns_float(self, value: object, expected: float) -> None:
        result = as_number(value)
        assert result == expected
        assert isinstance(result, float)

    @pytest.mark.parametrize("value", [True, False])
    def test_rejects_booleans(self, value: bool) -> None:
        """Booleans are ints in Python but not numbers on the wire."""
        assert as_number(value) is None

    @pytest.mark.parametrize(
        "value", [float("inf"), float("-inf"), float("nan"), "1000", None]
    )
    def test_rejects_non_finite_and_non_numeric(self, value: object) -> None:
        assert as_number(value) is None

    def test_rejects_ints_too_large_for_float(self) -> None:
        """JSON ints are unbounded; ones past the float range are not numbers."""
        assert as_number(10**400) is None
        assert as_number(-(10**400)) is None
