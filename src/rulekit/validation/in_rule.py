"""
Set-membership rules.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from .error_value import ERR_IN_INVALID, ERR_NOT_IN_INVALID, ValidationError
from .normalize import deep_equal, indirect, is_empty
from .rules import BaseValidationRule

T = TypeVar("T")


@dataclass(frozen=True)
class InRule(BaseValidationRule, Generic[T]):
    """Check that a value is one of a fixed, ordered list of elements.

    Elements are matched with :func:`~rulekit.validation.normalize.deep_equal`.
    An empty value is considered valid; combine with ``required`` to reject it.
    """

    elements: tuple[T, ...] = ()
    err: ValidationError = ERR_IN_INVALID

    def validate(self, value: Any) -> ValidationError | None:
        value, nil = indirect(value)
        if nil or is_empty(value):
            return None

        for element in self.elements:
            if deep_equal(element, value):
                return None

        return self.err


@dataclass(frozen=True)
class NotInRule(BaseValidationRule, Generic[T]):
    """Check that a value is none of a fixed list of elements."""

    elements: tuple[T, ...] = ()
    err: ValidationError = ERR_NOT_IN_INVALID

    def validate(self, value: Any) -> ValidationError | None:
        value, nil = indirect(value)
        if nil or is_empty(value):
            return None

        for element in self.elements:
            if deep_equal(element, value):
                return self.err

        return None


def in_(*values: T) -> InRule[T]:
    return InRule(elements=values)


def not_in(*values: T) -> NotInRule[T]:
    return NotInRule(elements=values)


__all__ = ["InRule", "NotInRule", "in_", "not_in"]
