"""
Presence rules: the counterpart of the "empty is valid" policy of every
other rule.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Self

from .error_value import (
    ERR_EMPTY,
    ERR_NIL,
    ERR_NIL_OR_NOT_EMPTY_REQUIRED,
    ERR_NOT_NIL_REQUIRED,
    ERR_REQUIRED,
    ValidationError,
)
from .normalize import indirect, is_empty
from .rules import BaseValidationRule


@dataclass(frozen=True)
class RequiredRule(BaseValidationRule):
    """Reject nil or empty values.

    With ``skip_nil`` set, nil passes and only non-nil empty values fail.
    """

    skip_nil: bool = False
    condition: bool = True
    err: ValidationError = ERR_REQUIRED

    def validate(self, value: Any) -> ValidationError | None:
        if not self.condition:
            return None
        value, nil = indirect(value)
        if self.skip_nil:
            if not nil and is_empty(value):
                return self.err
            return None
        if nil or is_empty(value):
            return self.err
        return None

    def when(self, condition: bool) -> Self:
        """Return a copy that only applies when ``condition`` is true."""
        return replace(self, condition=condition)


@dataclass(frozen=True)
class NotNilRule(BaseValidationRule):
    err: ValidationError = ERR_NOT_NIL_REQUIRED

    def validate(self, value: Any) -> ValidationError | None:
        _, nil = indirect(value)
        if nil:
            return self.err
        return None


@dataclass(frozen=True)
class AbsentRule(BaseValidationRule):
    """Require a value to be nil, or with ``skip_nil`` merely empty."""

    skip_nil: bool = False
    condition: bool = True
    err: ValidationError = ERR_NIL

    def validate(self, value: Any) -> ValidationError | None:
        if not self.condition:
            return None
        value, nil = indirect(value)
        if nil:
            return None
        if not self.skip_nil or not is_empty(value):
            return self.err
        return None

    def when(self, condition: bool) -> Self:
        return replace(self, condition=condition)


required = RequiredRule()
nil_or_not_empty = RequiredRule(skip_nil=True, err=ERR_NIL_OR_NOT_EMPTY_REQUIRED)
not_nil = NotNilRule()
nil = AbsentRule()
empty = AbsentRule(skip_nil=True, err=ERR_EMPTY)


__all__ = [
    "AbsentRule",
    "NotNilRule",
    "RequiredRule",
    "empty",
    "nil",
    "nil_or_not_empty",
    "not_nil",
    "required",
]
