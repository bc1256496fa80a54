"""Record that owns an independent, read-only copy of its reviews."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any, Self

from pydantic import Field, ValidationError, field_validator

from .accumulator import ReviewAccumulator
from .base import DomainModel
from .errors import InvalidArgumentError
from .reviews import FrozenReviews
from .titles import require_title

logger = logging.getLogger(__name__)


def _invalid_argument(exc: ValidationError) -> InvalidArgumentError:
    for error in exc.errors():
        cause = error.get("ctx", {}).get("error")
        if isinstance(cause, InvalidArgumentError):
            return cause
    return InvalidArgumentError(str(exc))


class StrictRecord(DomainModel):
    """Titled reviews, snapshotted at construction.

    Whatever the caller passes as ``reviews`` is copied into a
    :class:`FrozenReviews`; ``None`` becomes an empty one. Later changes to
    the caller's collection never reach the record, and writes through
    ``record.reviews`` raise :class:`UnsupportedOperationError`.
    """

    title: str
    reviews: FrozenReviews = Field(default_factory=FrozenReviews)

    def __init__(
        self,
        title: str | None = None,
        reviews: Iterable[str] | None = None,
        **data: Any,
    ) -> None:
        try:
            super().__init__(title=title, reviews=reviews, **data)
        except ValidationError as exc:
            raise _invalid_argument(exc) from exc

    @classmethod
    def model_validate(cls, obj: Any, **kwargs: Any) -> Self:
        try:
            return super().model_validate(obj, **kwargs)
        except ValidationError as exc:
            raise _invalid_argument(exc) from exc

    def model_copy(self, *, update: Mapping[str, Any] | None = None, deep: bool = False) -> Self:
        """Copy the record, sending any ``update`` back through construction."""

        if not update:
            return super().model_copy(deep=deep)
        return type(self)(**{"title": self.title, "reviews": self.reviews, **update})

    @field_validator("title", mode="before")
    @classmethod
    def ensure_title(cls, value: object) -> str:
        return require_title(value)

    @field_validator("reviews", mode="before")
    @classmethod
    def snapshot_reviews(cls, value: Iterable[str] | None) -> FrozenReviews:
        return FrozenReviews.of(value)


class StrictRecordBuilder(ReviewAccumulator):
    """Collects reviews, then copies them into a :class:`StrictRecord`."""

    __slots__ = ()

    def build(self) -> StrictRecord:
        # The copy happens here; earlier edits to the working list are captured.
        record = StrictRecord(self._title, self._reviews)
        logger.debug("Built strict record %r with %d reviews", record.title, len(record.reviews))
        return record


__all__ = ["StrictRecord", "StrictRecordBuilder"]
