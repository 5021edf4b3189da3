"""
Numeric coercion helpers used by threshold comparisons.

Each helper takes an arbitrary concrete value and returns the canonical
Python representation for one comparable kind, or raises
:class:`~rulekit.errors.ConversionError`. Nothing is truncated silently:
``2.0`` converts to the integer ``2`` but ``2.5`` does not, and values
outside the 64-bit range of the target are rejected.
"""

from __future__ import annotations

import math
import numbers
from datetime import UTC, date, datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from fractions import Fraction
from typing import Any

import numpy as np

from rulekit.errors import ConversionError, cannot_convert
from rulekit.utilities.logging_patterns import get_logger

from .json_number import INT64_MAX, INT64_MIN, UINT64_MAX, JSONNumber

logger = get_logger(__name__, component="coercion")


class ThresholdKind(Enum):
    """Comparable kind of a threshold, resolved once when a rule is built."""

    INT = "int64"
    UINT = "uint64"
    FLOAT = "float64"
    DECIMAL = "Decimal"
    TIME = "datetime"
    UNSUPPORTED = "unsupported"

    @classmethod
    def of(cls, threshold: Any) -> ThresholdKind:
        if isinstance(threshold, (bool, np.bool_)):
            return cls.UNSUPPORTED
        if isinstance(threshold, np.unsignedinteger):
            return cls.UINT
        if isinstance(threshold, (numbers.Integral, np.integer)):
            return cls.INT
        if isinstance(threshold, (numbers.Real, np.floating)):
            return cls.FLOAT
        if isinstance(threshold, Decimal):
            return cls.DECIMAL
        if isinstance(threshold, date):
            return cls.TIME
        return cls.UNSUPPORTED


def _is_bool(value: Any) -> bool:
    return isinstance(value, (bool, np.bool_))


def _exact_int(value: Any, target: str) -> int:
    if _is_bool(value):
        raise cannot_convert(value, target)
    if isinstance(value, (numbers.Integral, np.integer)):
        return int(value)
    if isinstance(value, (float, np.floating, Decimal, Fraction)):
        try:
            as_int = int(value)
        except (OverflowError, ValueError) as exc:
            raise cannot_convert(value, target, original_error=exc) from exc
        if as_int != value:
            raise ConversionError(
                f"cannot convert {type(value).__name__} {value} to {target} without truncation",
                source_type=type(value).__name__,
                target=target,
            )
        return as_int
    raise cannot_convert(value, target)


def _parse_string(value: str, target: str, parser: Any) -> Any:
    try:
        return parser(value.strip())
    except (ValueError, InvalidOperation) as exc:
        raise cannot_convert(value, target, original_error=exc) from exc


def to_int(value: Any, *, parse_strings: bool = False) -> int:
    """Convert ``value`` to a signed 64-bit integer."""

    if isinstance(value, JSONNumber):
        return value.int64()
    if isinstance(value, str):
        if not parse_strings:
            raise cannot_convert(value, "int64")
        value = _parse_string(value, "int64", int)

    number = _exact_int(value, "int64")
    if not INT64_MIN <= number <= INT64_MAX:
        raise ConversionError(
            f"value {number} overflows int64", source_type=type(value).__name__, target="int64"
        )
    return number


def to_uint(value: Any, *, parse_strings: bool = False) -> int:
    """Convert ``value`` to an unsigned 64-bit integer."""

    if isinstance(value, JSONNumber):
        value = value.int64()
    elif isinstance(value, str):
        if not parse_strings:
            raise cannot_convert(value, "uint64")
        value = _parse_string(value, "uint64", int)

    number = _exact_int(value, "uint64")
    if number < 0:
        raise ConversionError(
            f"cannot convert negative value {number} to uint64",
            source_type=type(value).__name__,
            target="uint64",
        )
    if number > UINT64_MAX:
        raise ConversionError(
            f"value {number} overflows uint64", source_type=type(value).__name__, target="uint64"
        )
    return number


def to_float(value: Any, *, parse_strings: bool = False) -> float:
    """Convert ``value`` to a 64-bit float.

    Integers must be exactly representable; ``Decimal`` and ``Fraction``
    round to the nearest float but may not overflow to infinity.
    """

    if isinstance(value, JSONNumber):
        return value.float64()
    if isinstance(value, str):
        if not parse_strings:
            raise cannot_convert(value, "float64")
        return _parse_string(value, "float64", float)
    if _is_bool(value):
        raise cannot_convert(value, "float64")
    if isinstance(value, (float, np.floating)):
        return float(value)
    if isinstance(value, (numbers.Integral, np.integer)):
        exact = int(value)
        try:
            converted = float(exact)
        except OverflowError as exc:
            raise cannot_convert(value, "float64", original_error=exc) from exc
        if int(converted) != exact:
            raise ConversionError(
                f"cannot convert {type(value).__name__} {exact} to float64 without losing precision",
                source_type=type(value).__name__,
                target="float64",
            )
        return converted
    if isinstance(value, (Decimal, numbers.Real)):
        try:
            converted = float(value)
        except (OverflowError, ValueError) as exc:
            raise cannot_convert(value, "float64", original_error=exc) from exc
        if math.isinf(converted) and not (isinstance(value, Decimal) and value.is_infinite()):
            raise ConversionError(
                f"value {value} overflows float64",
                source_type=type(value).__name__,
                target="float64",
            )
        return converted
    raise cannot_convert(value, "float64")


def to_decimal(value: Any, *, parse_strings: bool = False) -> Decimal:
    """Convert ``value`` to a :class:`~decimal.Decimal`."""

    if isinstance(value, JSONNumber):
        return value.decimal()
    if isinstance(value, str):
        if not parse_strings:
            raise cannot_convert(value, "Decimal")
        return _parse_string(value, "Decimal", Decimal)
    if _is_bool(value):
        raise cannot_convert(value, "Decimal")
    if isinstance(value, Decimal):
        return value
    if isinstance(value, (numbers.Integral, np.integer)):
        return Decimal(int(value))
    if isinstance(value, (float, np.floating)):
        return Decimal(str(float(value)))
    if isinstance(value, Fraction):
        return Decimal(value.numerator) / Decimal(value.denominator)
    raise cannot_convert(value, "Decimal")


def unwrap_number(
    literal: JSONNumber, kind: ThresholdKind, *, as_date: bool = False, naive: bool = False
) -> Any:
    """Resolve a deferred literal into the native type ``kind`` compares with.

    Integer kinds parse the literal as int64 (unsigned kinds then reject
    negatives), float kinds as float64, and time kinds read it as Unix epoch
    seconds in UTC. ``as_date`` yields a ``date`` and ``naive`` a naive UTC
    ``datetime``, matching the threshold being compared against. Parse
    failures raise; an unsupported kind leaves the literal untouched.
    """

    if kind is ThresholdKind.INT:
        resolved: Any = literal.int64()
    elif kind is ThresholdKind.UINT:
        # negative literals are rejected, never reinterpreted as two's complement
        resolved = to_uint(literal.int64())
    elif kind is ThresholdKind.FLOAT:
        resolved = literal.float64()
    elif kind is ThresholdKind.DECIMAL:
        resolved = literal.decimal()
    elif kind is ThresholdKind.TIME:
        seconds = literal.int64()
        try:
            resolved = datetime.fromtimestamp(seconds, tz=UTC)
        except (OverflowError, OSError, ValueError) as exc:
            raise ConversionError(
                f"value {literal} is out of range for a Unix timestamp",
                source_type="JSONNumber",
                target="datetime",
                original_error=exc,
            ) from exc
        if as_date:
            resolved = resolved.date()
        elif naive:
            resolved = resolved.replace(tzinfo=None)
    else:
        return literal

    logger.debug("Unwrapped JSON number literal", literal=str(literal), kind=kind.value)
    return resolved


__all__ = [
    "ThresholdKind",
    "to_decimal",
    "to_float",
    "to_int",
    "to_uint",
    "unwrap_number",
]
