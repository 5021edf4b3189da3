"""
Simplified Utilities.
"""

from .logging_patterns import StructuredLogger, get_logger

__all__ = ["StructuredLogger", "get_logger"]
