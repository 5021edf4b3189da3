"""
Composable value validation rules.

Every rule exposes ``validate(value)``, returning ``None`` when the value
passes and a :class:`ValidationError` (stable code, message template,
params) when it does not. This module acts as a facade, re-exporting the
rules and helpers from their specialised modules.
"""

from .coercion import ThresholdKind, to_decimal, to_float, to_int, to_uint, unwrap_number
from .error_value import (
    ERR_EMPTY,
    ERR_IN_INVALID,
    ERR_MAX_LESS_EQUAL_THAN_REQUIRED,
    ERR_MAX_LESS_THAN_REQUIRED,
    ERR_MIN_GREATER_EQUAL_THAN_REQUIRED,
    ERR_MIN_GREATER_THAN_REQUIRED,
    ERR_NIL,
    ERR_NIL_OR_NOT_EMPTY_REQUIRED,
    ERR_NOT_IN_INVALID,
    ERR_NOT_NIL_REQUIRED,
    ERR_REQUIRED,
    ValidationError,
)
from .in_rule import InRule, NotInRule, in_, not_in
from .json_number import JSONNumber, loads
from .messages import render_message
from .normalize import ZERO_TIME, Ref, deep_equal, indirect, is_empty, is_nil
from .required import (
    AbsentRule,
    NotNilRule,
    RequiredRule,
    empty,
    nil,
    nil_or_not_empty,
    not_nil,
    required,
)
from .rules import BaseValidationRule, validate
from .threshold import Operator, ThresholdRule, max_, min_

__all__ = [
    # Rule contract
    "BaseValidationRule",
    "validate",
    # Membership
    "InRule",
    "NotInRule",
    "in_",
    "not_in",
    # Thresholds
    "Operator",
    "ThresholdKind",
    "ThresholdRule",
    "max_",
    "min_",
    # Presence
    "AbsentRule",
    "NotNilRule",
    "RequiredRule",
    "empty",
    "nil",
    "nil_or_not_empty",
    "not_nil",
    "required",
    # Error values
    "ValidationError",
    "render_message",
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
    # Normalization
    "Ref",
    "ZERO_TIME",
    "deep_equal",
    "indirect",
    "is_empty",
    "is_nil",
    # Coercion
    "JSONNumber",
    "loads",
    "to_decimal",
    "to_float",
    "to_int",
    "to_uint",
    "unwrap_number",
]
