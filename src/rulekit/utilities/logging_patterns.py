"""
Structured logging for rule internals.

Rules only log at DEBUG: when a deferred literal is resolved, when a
message template falls back to its raw text, and when a configuration or
type error is about to propagate. Keyword arguments become ``extra`` record
attributes so handlers can filter on them.
"""

import logging
from typing import Any

_STANDARD_KWARGS = frozenset({"exc_info", "stack_info", "stacklevel"})


class StructuredLogger:
    def __init__(self, name: str, component: str | None = None):
        self.logger = logging.getLogger(name)
        self.component = component
        self.name = name

    def _split_kwargs(self, kwargs: dict[str, Any]) -> tuple[dict[str, Any], dict[str, Any]]:
        standard = {key: value for key, value in kwargs.items() if key in _STANDARD_KWARGS}
        extra = {key: value for key, value in kwargs.items() if key not in _STANDARD_KWARGS}
        if self.component:
            extra["component"] = self.component
        return standard, extra

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None:
        if not self.logger.isEnabledFor(logging.DEBUG):
            return
        standard, extra = self._split_kwargs(kwargs)
        self.logger.debug(msg, *args, extra=extra, **standard)


def get_logger(name: str, component: str | None = None) -> StructuredLogger:
    return StructuredLogger(name, component=component)
