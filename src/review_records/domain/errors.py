"""Record-specific errors."""

from __future__ import annotations


class RecordError(Exception):
    """Base class for record construction and access failures."""


class InvalidArgumentError(RecordError, ValueError):
    """Raised when a record or builder receives an unusable title."""


class UnsupportedOperationError(RecordError, TypeError):
    """Raised when a read-only review sequence is asked to change."""
