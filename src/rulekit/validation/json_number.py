"""
Deferred numeric literals produced by JSON decoding.

``json.loads`` normally commits to ``int`` or ``float`` while parsing. Rules
that compare against a threshold want to decide that later, based on the
threshold's kind, so :func:`loads` keeps every number as a
:class:`JSONNumber` literal instead.
"""

from __future__ import annotations

import json
import math
import re
from decimal import Decimal, InvalidOperation
from typing import Any

from rulekit.errors import ConversionError

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1
UINT64_MAX = 2**64 - 1

_INT_PATTERN = re.compile(r"-?(?:0|[1-9]\d*)")
_NUMBER_PATTERN = re.compile(r"-?(?:0|[1-9]\d*)(?:\.\d+)?(?:[eE][+-]?\d+)?")


class JSONNumber(str):
    """A JSON number literal whose Python type has not been fixed yet."""

    __slots__ = ()

    def int64(self) -> int:
        """Parse the literal as a signed 64-bit integer."""
        if not _INT_PATTERN.fullmatch(self):
            raise ConversionError(
                f"cannot parse {str(self)!r} as int64", source_type="JSONNumber", target="int64"
            )
        number = int(self)
        if not INT64_MIN <= number <= INT64_MAX:
            raise ConversionError(
                f"value {self} overflows int64", source_type="JSONNumber", target="int64"
            )
        return number

    def float64(self) -> float:
        """Parse the literal as a 64-bit float."""
        if not _NUMBER_PATTERN.fullmatch(self):
            raise ConversionError(
                f"cannot parse {str(self)!r} as float64", source_type="JSONNumber", target="float64"
            )
        number = float(self)
        if math.isinf(number):
            raise ConversionError(
                f"value {self} overflows float64", source_type="JSONNumber", target="float64"
            )
        return number

    def decimal(self) -> Decimal:
        if not _NUMBER_PATTERN.fullmatch(self):
            raise ConversionError(
                f"cannot parse {str(self)!r} as Decimal", source_type="JSONNumber", target="Decimal"
            )
        try:
            return Decimal(str(self))
        except InvalidOperation as exc:  # pragma: no cover - pattern already guards syntax
            raise ConversionError(
                f"cannot parse {str(self)!r} as Decimal",
                source_type="JSONNumber",
                target="Decimal",
                original_error=exc,
            ) from exc

    def __repr__(self) -> str:
        return f"JSONNumber({str.__repr__(self)})"


def loads(text: str | bytes | bytearray, **kwargs: Any) -> Any:
    """Decode JSON keeping every number as a :class:`JSONNumber`."""

    kwargs.setdefault("parse_int", JSONNumber)
    kwargs.setdefault("parse_float", JSONNumber)
    return json.loads(text, **kwargs)


__all__ = ["INT64_MAX", "INT64_MIN", "JSONNumber", "UINT64_MAX", "loads"]
