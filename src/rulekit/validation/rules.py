"""
The rule contract shared by every validation rule.

A rule is an immutable object whose :meth:`~BaseValidationRule.validate`
returns ``None`` when the value passes and a
:class:`~rulekit.validation.ValidationError` when it does not. Problems with
the rule itself (an unsupported threshold type, an input that cannot be
coerced) are raised as :class:`~rulekit.errors.RuleKitError` subclasses
instead, so the two categories never mix.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any, Self

from .error_value import ValidationError


class BaseValidationRule:
    """Base helper to make rules callable.

    Subclasses are frozen dataclasses carrying an ``err`` field with the
    error value they report.
    """

    err: ValidationError

    def __call__(self, value: Any) -> Any:
        """Validate ``value`` and return it unchanged, raising the error value on failure."""
        error = self.validate(value)
        if error is not None:
            raise replace(error)
        return value

    def validate(self, value: Any) -> ValidationError | None:  # pragma: no cover - abstract
        raise NotImplementedError

    def error(self, message: str) -> Self:
        """Return a copy that reports ``message`` while keeping the error code."""
        return replace(self, err=self.err.with_message(message))

    def error_object(self, err: ValidationError) -> Self:
        """Return a copy that reports ``err`` in place of the default error."""
        return replace(self, err=err)


def validate(value: Any, *rules: BaseValidationRule) -> ValidationError | None:
    """Apply ``rules`` in order and return the first error, if any."""

    for rule in rules:
        error = rule.validate(value)
        if error is not None:
            return error
    return None


__all__ = ["BaseValidationRule", "validate"]
