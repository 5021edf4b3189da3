"""
Value normalization shared by every rule.

Rules never look at a raw input directly: they first strip indirection
layers with :func:`indirect` and then ask :func:`is_empty` whether the
resolved value should be treated as absent. Both helpers are the single
source of truth for those two questions.
"""

from __future__ import annotations

import dataclasses
import numbers
import weakref
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import UTC, date, datetime, timedelta
from typing import Any, Generic, TypeVar

import numpy as np
from pydantic import SecretBytes, SecretStr

T = TypeVar("T")

ZERO_TIME = datetime(1, 1, 1, tzinfo=UTC)
"""The zero time instant (``0001-01-01 00:00:00 UTC``); treated as absent."""


@dataclass(frozen=True)
class Ref(Generic[T]):
    """Explicit nullable reference.

    ``Ref(None)`` is nil, ``Ref(Ref(5))`` resolves to ``5``. Decoders and
    callers use it where a value may be present-but-unset.
    """

    target: T | None = None


_INDIRECTIONS = (Ref, weakref.ReferenceType, SecretStr, SecretBytes)
_MISSING = object()


def indirect(value: Any) -> tuple[Any, bool]:
    """Follow indirection layers down to the concrete value.

    Returns ``(resolved, is_nil)``. ``is_nil`` is true when ``value`` or any
    layer on the way down is ``None`` (or a dead weak reference), in which
    case ``resolved`` is ``None``.
    """

    while True:
        if value is None:
            return None, True
        if isinstance(value, Ref):
            value = value.target
        elif isinstance(value, weakref.ReferenceType):
            value = value()
        elif isinstance(value, (SecretStr, SecretBytes)):
            value = value.get_secret_value()
        else:
            return value, False


def is_nil(value: Any) -> bool:
    return indirect(value)[1]


def is_zero_time(value: date) -> bool:
    if isinstance(value, datetime):
        if value.utcoffset() is None:
            return value.replace(tzinfo=None) == datetime.min
        return value == ZERO_TIME
    return value == date.min


def is_empty(value: Any) -> bool:
    """Report whether ``value`` counts as absent.

    Empty means: ``None``; a zero-length string, buffer, sequence, mapping or
    set; ``False``; numeric zero; a zero ``timedelta``; the zero time instant;
    a reference that resolves to nil or to an empty value. Any other object is
    non-empty unless it defines ``__len__`` or ``__bool__`` itself.
    """

    if value is None:
        return True
    if isinstance(value, _INDIRECTIONS):
        resolved, nil = indirect(value)
        return nil or is_empty(resolved)
    if isinstance(value, (str, bytes, bytearray)):
        return len(value) == 0
    if isinstance(value, memoryview):
        return value.nbytes == 0
    if isinstance(value, (bool, np.bool_)):
        return not value
    if isinstance(value, (numbers.Number, np.number)):
        return value == 0
    if isinstance(value, date):
        return is_zero_time(value)
    if isinstance(value, timedelta):
        return value == timedelta(0)
    if isinstance(value, np.ndarray):
        return value.size == 0

    value_type = type(value)
    if hasattr(value_type, "__len__"):
        return len(value) == 0
    if hasattr(value_type, "__bool__"):
        return not bool(value)
    return False


def deep_equal(left: Any, right: Any) -> bool:
    """Type-strict structural equality.

    Values of different types are never equal (``True`` is not ``1`` and
    ``1`` is not ``1.0``); containers and dataclasses compare element-wise.
    """

    if type(left) is not type(right):
        return False
    if isinstance(left, Mapping):
        if len(left) != len(right):
            return False
        for key, item in left.items():
            match = next((other for other in right if deep_equal(key, other)), _MISSING)
            if match is _MISSING or not deep_equal(item, right[match]):
                return False
        return True
    if isinstance(left, (list, tuple)):
        if len(left) != len(right):
            return False
        return all(deep_equal(a, b) for a, b in zip(left, right))
    if isinstance(left, np.ndarray):
        return left.dtype == right.dtype and bool(np.array_equal(left, right))
    if dataclasses.is_dataclass(left) and not isinstance(left, type):
        return all(
            deep_equal(getattr(left, field.name), getattr(right, field.name))
            for field in dataclasses.fields(left)
        )
    return bool(left == right)


__all__ = [
    "Ref",
    "ZERO_TIME",
    "deep_equal",
    "indirect",
    "is_empty",
    "is_nil",
    "is_zero_time",
]
