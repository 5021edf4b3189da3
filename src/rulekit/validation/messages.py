"""
Rendering of error message templates.

Messages are written with ``{{.name}}`` placeholders (``{{ name }}`` works
too) and rendered with jinja2. Unknown placeholders render as empty
strings; a message jinja2 cannot handle is returned verbatim.
"""

from __future__ import annotations

import math
import re
from collections.abc import Mapping
from datetime import datetime
from functools import lru_cache
from typing import Any

import numpy as np
from jinja2 import Environment, Template, TemplateError

from rulekit.settings import get_settings
from rulekit.utilities.logging_patterns import get_logger

logger = get_logger(__name__, component="messages")

_DOT_PLACEHOLDER = re.compile(r"\{\{\s*\.([A-Za-z_][A-Za-z0-9_]*)\s*\}\}")


def format_param(value: Any) -> Any:
    """Format a single substituted parameter for display."""

    if isinstance(value, datetime):
        settings = get_settings()
        if value.utcoffset() is None:
            return value.strftime(settings.naive_time_format)
        return value.strftime(settings.time_format)
    if isinstance(value, (float, np.floating)):
        number = float(value)
        if math.isfinite(number) and number.is_integer() and abs(number) < 1e16:
            return str(int(number))
        return repr(number)
    return value


_environment = Environment(autoescape=False, keep_trailing_newline=True, finalize=format_param)


@lru_cache(maxsize=512)
def _compile(message: str) -> Template:
    return _environment.from_string(_DOT_PLACEHOLDER.sub(r"{{ \1 }}", message))


def render_message(message: str, params: Mapping[str, Any] | None = None) -> str:
    """Substitute ``params`` into ``message``."""

    if "{{" not in message and "{%" not in message:
        return message
    try:
        return _compile(message).render(dict(params or {}))
    except TemplateError as exc:
        logger.debug("Falling back to raw message", template=message, error_type=type(exc).__name__)
        return message


__all__ = ["format_param", "render_message"]
