"""
The error value rules report when a value fails validation.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any

from .messages import render_message


@dataclass(frozen=True)
class ValidationError(Exception):
    """
    ValidationError identifies a failed rule by a stable ``code``.

    ``message`` is a template (``"must be no less than {{.threshold}}"``) and
    ``params`` supplies its substitutions. ``str(error)`` renders the
    message; ``code`` and ``params`` are meant for machine-readable
    reporting and translation lookup.

    Instances are immutable. The ``with_*`` methods return fresh copies, so
    module-level defaults can be shared freely.
    """

    code: str
    message: str
    params: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "params", MappingProxyType(dict(self.params or {})))

    def __str__(self) -> str:
        return render_message(self.message, self.params)

    def __hash__(self) -> int:
        return hash((self.code, self.message))

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self.code, self.message, dict(self.params)))

    def with_message(self, message: str) -> ValidationError:
        return replace(self, message=message)

    def with_params(self, params: Mapping[str, Any]) -> ValidationError:
        """Return a copy whose params are replaced wholesale by ``params``."""
        return replace(self, params=params)

    def with_code(self, code: str) -> ValidationError:
        return replace(self, code=code)

    def with_param(self, name: str, value: Any) -> ValidationError:
        """Return a copy with one param added or overwritten."""
        return replace(self, params={**self.params, name: value})

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization"""
        return {
            "code": self.code,
            "message": self.message,
            "params": dict(self.params),
            "error": str(self),
        }


ERR_IN_INVALID = ValidationError("validation_in_invalid", "must be a valid value")
ERR_NOT_IN_INVALID = ValidationError("validation_not_in_invalid", "must not be in list")

ERR_MIN_GREATER_EQUAL_THAN_REQUIRED = ValidationError(
    "validation_min_greater_equal_than_required", "must be no less than {{.threshold}}"
)
ERR_MAX_LESS_EQUAL_THAN_REQUIRED = ValidationError(
    "validation_max_less_equal_than_required", "must be no greater than {{.threshold}}"
)
ERR_MIN_GREATER_THAN_REQUIRED = ValidationError(
    "validation_min_greater_than_required", "must be greater than {{.threshold}}"
)
ERR_MAX_LESS_THAN_REQUIRED = ValidationError(
    "validation_max_less_than_required", "must be less than {{.threshold}}"
)

ERR_REQUIRED = ValidationError("validation_required", "cannot be blank")
ERR_NIL_OR_NOT_EMPTY_REQUIRED = ValidationError(
    "validation_nil_or_not_empty_required", "cannot be blank"
)
ERR_NOT_NIL_REQUIRED = ValidationError("validation_not_nil_required", "is required")
ERR_NIL = ValidationError("validation_nil", "must be blank")
ERR_EMPTY = ValidationError("validation_empty", "must be blank")


__all__ = [
    "ERR_EMPTY",
    "ERR_IN_INVALID",
    "ERR_MAX_LESS_EQUAL_THAN_REQUIRED",
    "ERR_MAX_LESS_THAN_REQUIRED",
    "ERR_MIN_GREATER_EQUAL_THAN_REQUIRED",
    "ERR_MIN_GREATER_THAN_REQUIRED",
    "ERR_NIL",
    "ERR_NIL_OR_NOT_EMPTY_REQUIRED",
    "ERR_NOT_IN_INVALID",
    "ERR_NOT_NIL_REQUIRED",
    "ERR_REQUIRED",
    "ValidationError",
]
