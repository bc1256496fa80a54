"""Titled review records with strict and flexible collection ownership."""

from .domain import (
    FlexibleRecord,
    FlexibleRecordBuilder,
    FrozenReviews,
    InvalidArgumentError,
    ReadOnlyReviews,
    RecordError,
    ReviewView,
    StrictRecord,
    StrictRecordBuilder,
    UnsupportedOperationError,
)

__all__ = [
    "FlexibleRecord",
    "FlexibleRecordBuilder",
    "FrozenReviews",
    "InvalidArgumentError",
    "ReadOnlyReviews",
    "RecordError",
    "ReviewView",
    "StrictRecord",
    "StrictRecordBuilder",
    "UnsupportedOperationError",
]
