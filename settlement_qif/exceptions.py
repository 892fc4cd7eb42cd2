"""
Error taxonomy for settlement → QIF conversion.

Row-level problems (``MalformedRowError``) are recovered from by the
converter; file-level problems abort the run before any output is written.
"""
from __future__ import annotations

from typing import Any, Dict, Optional


class ConversionError(Exception):
    """Base exception for all conversion errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class MissingInputFileError(ConversionError):
    """Raised when the configured input CSV does not exist."""


class MalformedRowError(ConversionError):
    """Raised when a CSV row has fewer fields than the settlement schema needs."""

    def __init__(self, line: str, field_count: int, expected: int):
        super().__init__(
            f"Expected {expected} columns, got {field_count}: {line}",
            details={"line": line, "field_count": field_count, "expected": expected},
        )
        self.line = line
        self.field_count = field_count
        self.expected = expected


class UnexpectedFailureError(ConversionError):
    """Raised for any other I/O or decoding failure while reading or writing."""


class ConfigurationError(ConversionError):
    """Raised when a converter option is invalid."""
