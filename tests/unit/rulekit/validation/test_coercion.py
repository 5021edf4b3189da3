"""Unit tests for numeric coercion and deferred literal unwrapping."""

from datetime import UTC, date, datetime
from decimal import Decimal
from fractions import Fraction

import numpy as np
import pytest

from rulekit.errors import ConversionError
from rulekit.validation import (
    JSONNumber,
    ThresholdKind,
    to_decimal,
    to_float,
    to_int,
    to_uint,
    unwrap_number,
)


class TestToInt:
    """Test suite for to_int()."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (5, 5),
            (-5, -5),
            (np.int8(-3), -3),
            (np.uint32(7), 7),
            (2.0, 2),
            (np.float32(4.0), 4),
            (Decimal("3"), 3),
            (Fraction(6, 3), 2),
            (2**63 - 1, 2**63 - 1),
            (-(2**63), -(2**63)),
            (JSONNumber("12"), 12),
        ],
    )
    def test_supported(self, value, expected):
        result = to_int(value)
        assert result == expected
        assert type(result) is int

    @pytest.mark.parametrize(
        "value, message",
        [
            ("1", "cannot convert str to int64"),
            ([1], "cannot convert list to int64"),
            (object(), "cannot convert object to int64"),
            (True, "cannot convert bool to int64"),
            (2.5, "without truncation"),
            (float("inf"), "cannot convert float to int64"),
            (float("nan"), "cannot convert float to int64"),
            (2**63, "overflows int64"),
            (-(2**63) - 1, "overflows int64"),
        ],
    )
    def test_unsupported(self, value, message):
        with pytest.raises(ConversionError, match=message):
            to_int(value)

    def test_strings_when_enabled(self):
        assert to_int(" 42 ", parse_strings=True) == 42
        with pytest.raises(ConversionError, match="cannot convert str to int64"):
            to_int("4.2", parse_strings=True)

    def test_error_context(self):
        with pytest.raises(ConversionError) as exc_info:
            to_int("x")
        assert exc_info.value.error_code == "CONVERSION_ERROR"
        assert exc_info.value.context == {"source_type": "str", "target": "int64"}


class TestToUint:
    """Test suite for to_uint()."""

    @pytest.mark.parametrize(
        "value, expected",
        [(0, 0), (7, 7), (np.uint64(2**64 - 1), 2**64 - 1), (3.0, 3), (JSONNumber("9"), 9)],
    )
    def test_supported(self, value, expected):
        assert to_uint(value) == expected

    @pytest.mark.parametrize(
        "value, message",
        [
            ("1", "cannot convert str to uint64"),
            (-1, "negative"),
            (2**64, "overflows uint64"),
            (JSONNumber("-1"), "negative"),
        ],
    )
    def test_unsupported(self, value, message):
        with pytest.raises(ConversionError, match=message):
            to_uint(value)


class TestToFloat:
    """Test suite for to_float()."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (1.5, 1.5),
            (np.float32(0.5), 0.5),
            (3, 3.0),
            (np.int64(-2), -2.0),
            (Decimal("0.25"), 0.25),
            (Fraction(1, 4), 0.25),
            (JSONNumber("1e3"), 1000.0),
        ],
    )
    def test_supported(self, value, expected):
        result = to_float(value)
        assert result == expected
        assert type(result) is float

    @pytest.mark.parametrize(
        "value, message",
        [
            ("1", "cannot convert str to float64"),
            (False, "cannot convert bool to float64"),
            (2**53 + 1, "without losing precision"),
            (10**400, "cannot convert int to float64"),
            (Decimal("1e400"), "overflows float64"),
            ({}, "cannot convert dict to float64"),
        ],
    )
    def test_unsupported(self, value, message):
        with pytest.raises(ConversionError, match=message):
            to_float(value)

    def test_strings_when_enabled(self):
        assert to_float("2.5", parse_strings=True) == 2.5


class TestToDecimal:
    """Test suite for to_decimal()."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (Decimal("1.10"), Decimal("1.10")),
            (3, Decimal(3)),
            (0.1, Decimal("0.1")),
            (Fraction(1, 2), Decimal("0.5")),
            (JSONNumber("2.50"), Decimal("2.50")),
        ],
    )
    def test_supported(self, value, expected):
        assert to_decimal(value) == expected

    def test_strings(self):
        with pytest.raises(ConversionError, match="cannot convert str to Decimal"):
            to_decimal("1.5")
        assert to_decimal("1.5", parse_strings=True) == Decimal("1.5")
        with pytest.raises(ConversionError):
            to_decimal("abc", parse_strings=True)


class TestUnwrapNumber:
    """Deferred literals resolve according to the threshold kind."""

    def test_int(self):
        assert unwrap_number(JSONNumber("-4"), ThresholdKind.INT) == -4

    def test_uint(self):
        assert unwrap_number(JSONNumber("4"), ThresholdKind.UINT) == 4
        with pytest.raises(ConversionError):
            unwrap_number(JSONNumber("-4"), ThresholdKind.UINT)

    def test_float(self):
        assert unwrap_number(JSONNumber("4"), ThresholdKind.FLOAT) == 4.0
        assert isinstance(unwrap_number(JSONNumber("4"), ThresholdKind.FLOAT), float)

    def test_decimal(self):
        assert unwrap_number(JSONNumber("0.10"), ThresholdKind.DECIMAL) == Decimal("0.10")

    def test_time_from_unix_seconds(self):
        assert unwrap_number(JSONNumber("0"), ThresholdKind.TIME) == datetime(1970, 1, 1, tzinfo=UTC)
        assert unwrap_number(JSONNumber("86400"), ThresholdKind.TIME, as_date=True) == date(1970, 1, 2)

    def test_time_naive(self):
        resolved = unwrap_number(JSONNumber("86400"), ThresholdKind.TIME, naive=True)
        assert resolved == datetime(1970, 1, 2)
        assert resolved.tzinfo is None

    def test_time_rejects_fractional_seconds(self):
        with pytest.raises(ConversionError):
            unwrap_number(JSONNumber("1.5"), ThresholdKind.TIME)

    def test_time_out_of_range(self):
        with pytest.raises(ConversionError, match="out of range"):
            unwrap_number(JSONNumber(str(2**62)), ThresholdKind.TIME)

    def test_unsupported_kind_keeps_literal(self):
        literal = JSONNumber("7")
        assert unwrap_number(literal, ThresholdKind.UNSUPPORTED) is literal
