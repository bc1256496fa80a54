"""Record that stores its reviews exactly as given."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from pydantic import SkipValidation

from .accumulator import ReviewAccumulator
from .base import DomainModel
from .reviews import FrozenReviews, ReviewView

logger = logging.getLogger(__name__)


class FlexibleRecord(DomainModel):
    """Transparent holder: ``record.reviews is`` the object it was built with.

    Nothing is validated or normalized, ``None`` included. Whether the
    reviews can change after construction depends only on what was passed in.
    """

    title: SkipValidation[str]
    reviews: SkipValidation[Sequence[str] | None]

    def __init__(self, title: str, reviews: Sequence[str] | None, **data: Any) -> None:
        super().__init__(title=title, reviews=reviews, **data)


class FlexibleRecordBuilder(ReviewAccumulator):
    """Collects reviews and offers three ways to hand them to a record."""

    __slots__ = ()

    def build(self) -> FlexibleRecord:
        """Share the working list itself; the record stays fully mutable."""

        logger.debug("Building flexible record %r on the working list", self._title)
        return FlexibleRecord(self._title, self._reviews)

    def build_with_write_blocking_view(self) -> FlexibleRecord:
        """Share the working list behind a view that rejects writes."""

        logger.debug("Building flexible record %r on a write-blocking view", self._title)
        return FlexibleRecord(self._title, ReviewView(self._reviews))

    def build_with_independent_copy(self) -> FlexibleRecord:
        """Snapshot the working list; later builder edits are not seen."""

        logger.debug("Building flexible record %r on an independent copy", self._title)
        return FlexibleRecord(self._title, FrozenReviews(self._reviews))


__all__ = ["FlexibleRecord", "FlexibleRecordBuilder"]
