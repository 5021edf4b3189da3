"""rulekit: composable value validation rules with structured error values."""

from rulekit.errors import ConversionError, RuleKitError, UnsupportedTypeError
from rulekit.validation import (
    JSONNumber,
    Ref,
    ValidationError,
    in_,
    max_,
    min_,
    nil_or_not_empty,
    not_in,
    not_nil,
    required,
    validate,
)

__version__ = "0.1.0"

__all__ = [
    "ConversionError",
    "JSONNumber",
    "Ref",
    "RuleKitError",
    "UnsupportedTypeError",
    "ValidationError",
    "__version__",
    "in_",
    "max_",
    "min_",
    "nil_or_not_empty",
    "not_in",
    "not_nil",
    "required",
    "validate",
]
