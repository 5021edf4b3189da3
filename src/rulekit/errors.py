"""
Error hierarchy for rule configuration and type problems.

These exceptions are distinct from :class:`rulekit.validation.ValidationError`:
a ``ValidationError`` is the value a rule returns when the input does not
satisfy it, while the classes below are raised when a rule is misconfigured
or the input cannot be coerced into something comparable.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:  # pragma: no cover
    from rulekit.utilities.logging_patterns import StructuredLogger

_logger: Optional["StructuredLogger"] = None


def _get_logger() -> "StructuredLogger":
    global _logger
    if _logger is None:
        from rulekit.utilities.logging_patterns import get_logger as _get_structured_logger

        _logger = _get_structured_logger(__name__, component="errors")
    return _logger


class RuleKitError(Exception):
    """Base exception class for rule configuration and type errors"""

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        context: dict[str, Any] | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.context = context or {}
        self.original_error = original_error

    def add_context(self, **kwargs: Any) -> "RuleKitError":
        """Add additional context to the error"""
        self.context.update(kwargs)
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization"""
        return {
            "error_code": self.error_code,
            "message": self.message,
            "context": self.context,
        }


class ConversionError(RuleKitError, TypeError):
    """Raised when a value cannot be converted into the comparable type a rule needs"""

    def __init__(
        self, message: str, source_type: str | None = None, target: str | None = None, **kwargs: Any
    ) -> None:
        super().__init__(message, error_code="CONVERSION_ERROR", **kwargs)
        if source_type is not None:
            self.add_context(source_type=source_type, target=target)


class UnsupportedTypeError(RuleKitError, TypeError):
    """Raised when a rule is configured with a value of an unsupported type"""

    def __init__(self, message: str, type_name: str | None = None, **kwargs: Any) -> None:
        super().__init__(message, error_code="UNSUPPORTED_TYPE", **kwargs)
        if type_name is not None:
            self.add_context(type_name=type_name)


def cannot_convert(value: Any, target: str, *, original_error: Exception | None = None) -> ConversionError:
    """Build the standard ``cannot convert <type> to <target>`` error."""

    source_type = type(value).__name__
    return ConversionError(
        f"cannot convert {source_type} to {target}",
        source_type=source_type,
        target=target,
        original_error=original_error,
    )


def log_error(error: RuleKitError, operation: str) -> None:
    """Record a configuration/type error at debug level before it propagates."""

    _get_logger().debug(
        error.message,
        operation=operation,
        error_code=error.error_code,
        error_type=type(error).__name__,
    )


__all__ = [
    "ConversionError",
    "RuleKitError",
    "UnsupportedTypeError",
    "cannot_convert",
    "log_error",
]
