"""Shared working state for record builders."""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Self

from .titles import require_title


class ReviewAccumulator:
    """Validated title plus a working list of reviews.

    The working list is held by reference. ``with_reviews`` swaps the
    reference, ``add_review`` appends in place, and nothing is copied until a
    subclass decides to copy at build time.
    """

    __slots__ = ("_reviews", "_title")

    def __init__(self, title: str) -> None:
        self._title = require_title(title)
        self._reviews: MutableSequence[str] = []

    @property
    def title(self) -> str:
        return self._title

    @property
    def reviews(self) -> MutableSequence[str]:
        """The current working list, not a copy."""

        return self._reviews

    def with_reviews(self, reviews: MutableSequence[str]) -> Self:
        self._reviews = reviews
        return self

    def add_review(self, review: str) -> Self:
        self._reviews.append(review)
        return self

    def __repr__(self) -> str:
        return f"{type(self).__name__}(title={self._title!r}, reviews={self._reviews!r})"
