"""Domain layer exports."""

from .base import DomainModel
from .errors import InvalidArgumentError, RecordError, UnsupportedOperationError
from .flexible import FlexibleRecord, FlexibleRecordBuilder
from .reviews import FrozenReviews, ReadOnlyReviews, ReviewView
from .strict import StrictRecord, StrictRecordBuilder
from .titles import is_blank, require_title

__all__ = [
    "DomainModel",
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
    "is_blank",
    "require_title",
]
