"""
Threshold rules: ``min_`` and ``max_``.

A threshold rule compares a value against a fixed bound. The bound's
comparable kind (signed or unsigned 64-bit integer, float, ``Decimal`` or
time instant) is resolved when the rule is built, and the value is coerced
into that kind before comparing. The value and the threshold must be of
compatible types: ``min_(1).validate("1")`` raises a
:class:`~rulekit.errors.ConversionError` rather than reporting a
validation failure.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field, replace
from datetime import date, datetime
from enum import Enum
from typing import Any

from rulekit.errors import ConversionError, RuleKitError, UnsupportedTypeError, cannot_convert, log_error

from .coercion import ThresholdKind, to_decimal, to_float, to_int, to_uint, unwrap_number
from .error_value import (
    ERR_MAX_LESS_EQUAL_THAN_REQUIRED,
    ERR_MAX_LESS_THAN_REQUIRED,
    ERR_MIN_GREATER_EQUAL_THAN_REQUIRED,
    ERR_MIN_GREATER_THAN_REQUIRED,
    ValidationError,
)
from .json_number import JSONNumber
from .normalize import indirect, is_empty, is_zero_time
from .rules import BaseValidationRule


class Operator(Enum):
    GREATER_THAN = ">"
    GREATER_EQUAL_THAN = ">="
    LESS_THAN = "<"
    LESS_EQUAL_THAN = "<="

    def compare(self, threshold: Any, value: Any) -> bool:
        if self is Operator.GREATER_THAN:
            return value > threshold
        if self is Operator.GREATER_EQUAL_THAN:
            return value >= threshold
        if self is Operator.LESS_THAN:
            return value < threshold
        return value <= threshold


# inclusive operator -> (exclusive operator, its default error)
_EXCLUSIVE: dict[Operator, tuple[Operator, ValidationError]] = {
    Operator.GREATER_EQUAL_THAN: (Operator.GREATER_THAN, ERR_MIN_GREATER_THAN_REQUIRED),
    Operator.LESS_EQUAL_THAN: (Operator.LESS_THAN, ERR_MAX_LESS_THAN_REQUIRED),
}

_COERCERS: dict[ThresholdKind, Callable[[Any], Any]] = {
    ThresholdKind.INT: to_int,
    ThresholdKind.UINT: to_uint,
    ThresholdKind.FLOAT: to_float,
    ThresholdKind.DECIMAL: to_decimal,
}


@dataclass(frozen=True)
class ThresholdRule(BaseValidationRule):
    """Check that a value satisfies a threshold requirement.

    An empty value is considered valid; combine with ``required`` to reject it.
    """

    threshold: Any
    operator: Operator
    err: ValidationError
    kind: ThresholdKind = field(default=None)  # type: ignore[assignment]

    def __post_init__(self) -> None:
        inferred = ThresholdKind.of(self.threshold)
        if self.kind is None:
            object.__setattr__(self, "kind", inferred)
        elif self.kind is not inferred and not (
            inferred is ThresholdKind.INT and self.kind is ThresholdKind.UINT
        ):
            raise UnsupportedTypeError(
                f"threshold of type {type(self.threshold).__name__} cannot be compared as {self.kind.value}",
                type_name=type(self.threshold).__name__,
            )

    def exclusive(self) -> ThresholdRule:
        """Return a copy that excludes the boundary value.

        Already exclusive rules are returned unchanged.
        """
        if self.operator not in _EXCLUSIVE:
            return self
        operator, err = _EXCLUSIVE[self.operator]
        return replace(self, operator=operator, err=err)

    def validate(self, value: Any) -> ValidationError | None:
        value, nil = indirect(value)
        if nil or is_empty(value):
            return None

        try:
            if isinstance(value, JSONNumber):
                value = unwrap_number(
                    value, self.kind, as_date=self._date_only, naive=self._naive_time
                )
                # "0" becomes 0, which counts as empty even when below the threshold
                if is_empty(value):
                    return None
            passed = self._passes(value)
        except RuleKitError as exc:
            log_error(exc, "threshold_validate")
            raise

        if passed:
            return None
        return self.err.with_params({"threshold": self.threshold})

    @property
    def _date_only(self) -> bool:
        return isinstance(self.threshold, date) and not isinstance(self.threshold, datetime)

    @property
    def _naive_time(self) -> bool:
        return isinstance(self.threshold, datetime) and self.threshold.utcoffset() is None

    def _passes(self, value: Any) -> bool:
        if self.kind is ThresholdKind.TIME:
            return self._passes_time(value)

        coerce = _COERCERS.get(self.kind)
        if coerce is None:
            raise UnsupportedTypeError(
                f"type not supported: {type(self.threshold).__name__}",
                type_name=type(self.threshold).__name__,
            )
        return self.operator.compare(coerce(self.threshold), coerce(value))

    def _passes_time(self, value: Any) -> bool:
        if self._date_only:
            if not isinstance(value, date) or isinstance(value, datetime):
                raise cannot_convert(value, "date")
        elif not isinstance(value, datetime):
            raise cannot_convert(value, "datetime")

        if is_zero_time(value):
            return True
        try:
            return self.operator.compare(self.threshold, value)
        except TypeError as exc:
            raise ConversionError(
                "cannot compare offset-naive and offset-aware datetimes",
                source_type=type(value).__name__,
                target="datetime",
                original_error=exc,
            ) from exc


def min_(threshold: Any, *, kind: ThresholdKind | None = None) -> ThresholdRule:
    """Check that a value is greater than or equal to ``threshold``.

    Call :meth:`ThresholdRule.exclusive` to require strictly greater.
    ``kind=ThresholdKind.UINT`` compares a plain ``int`` threshold as unsigned.
    """
    return ThresholdRule(
        threshold=threshold,
        operator=Operator.GREATER_EQUAL_THAN,
        err=ERR_MIN_GREATER_EQUAL_THAN_REQUIRED,
        kind=kind,  # type: ignore[arg-type]
    )


def max_(threshold: Any, *, kind: ThresholdKind | None = None) -> ThresholdRule:
    """Check that a value is less than or equal to ``threshold``.

    Call :meth:`ThresholdRule.exclusive` to require strictly less.
    """
    return ThresholdRule(
        threshold=threshold,
        operator=Operator.LESS_EQUAL_THAN,
        err=ERR_MAX_LESS_EQUAL_THAN_REQUIRED,
        kind=kind,  # type: ignore[arg-type]
    )


__all__ = ["Operator", "ThresholdKind", "ThresholdRule", "max_", "min_"]
