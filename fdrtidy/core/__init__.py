"""Core types for fdrtidy.

This module provides the result model and field lookup shared by all tidiers.
"""

from fdrtidy.core.results import (
    MissingFieldError,
    QValueResult,
    get_field,
)

__all__ = [
    "MissingFieldError",
    "QValueResult",
    "get_field",
]
