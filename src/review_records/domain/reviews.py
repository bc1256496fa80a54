"""Read-only review sequences.

Two containers share one read-only surface:

* :class:`ReviewView` forwards every read to a list it does not own, so
  changes made to that list elsewhere show through the view.
* :class:`FrozenReviews` copies its input once and never changes again.

Both reject writes with :class:`UnsupportedOperationError` at the moment the
write is attempted.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, MutableSequence, Sequence
from typing import Any, NoReturn, overload

from .errors import InvalidArgumentError, UnsupportedOperationError


class ReadOnlyReviews(Sequence[str]):
    """Sequence of reviews that refuses every list-style mutation."""

    __slots__ = ("_items",)

    _items: Sequence[str]

    @overload
    def __getitem__(self, index: int) -> str: ...

    @overload
    def __getitem__(self, index: slice) -> list[str]: ...

    def __getitem__(self, index: int | slice) -> str | list[str]:
        if isinstance(index, slice):
            return list(self._items[index])
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ReadOnlyReviews):
            return list(self._items) == list(other._items)
        if isinstance(other, (list, tuple)):
            return list(self._items) == list(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._items)!r})"

    def _reject(self, operation: str) -> NoReturn:
        msg = f"{type(self).__name__} is read-only; {operation} is not supported"
        raise UnsupportedOperationError(msg)

    def append(self, item: str) -> NoReturn:
        self._reject("append")

    def extend(self, items: Iterable[str]) -> NoReturn:
        self._reject("extend")

    def insert(self, index: int, item: str) -> NoReturn:
        self._reject("insert")

    def remove(self, item: str) -> NoReturn:
        self._reject("remove")

    def pop(self, index: int = -1) -> NoReturn:
        self._reject("pop")

    def clear(self) -> NoReturn:
        self._reject("clear")

    def sort(self, *args: Any, **kwargs: Any) -> NoReturn:
        self._reject("sort")

    def reverse(self) -> NoReturn:
        self._reject("reverse")

    def __setitem__(self, index: int | slice, value: Any) -> NoReturn:
        self._reject("item assignment")

    def __delitem__(self, index: int | slice) -> NoReturn:
        self._reject("item deletion")

    def __iadd__(self, other: Iterable[str]) -> NoReturn:
        self._reject("in-place concatenation")

    def __imul__(self, count: int) -> NoReturn:
        self._reject("in-place repetition")


class ReviewView(ReadOnlyReviews):
    """Write-blocking window onto a list owned by someone else."""

    __slots__ = ()

    def __init__(self, backing: MutableSequence[str]) -> None:
        if isinstance(backing, str) or not isinstance(backing, Sequence):
            msg = f"ReviewView needs a backing sequence, got {type(backing).__name__}"
            raise InvalidArgumentError(msg)
        self._items = backing


class FrozenReviews(ReadOnlyReviews):
    """Independent snapshot of reviews, safe to share and hash."""

    __slots__ = ()

    _items: tuple[str, ...]

    def __init__(self, items: Iterable[str] = ()) -> None:
        self._items = tuple(items)

    def __hash__(self) -> int:
        return hash(self._items)

    @classmethod
    def of(cls, source: Iterable[str] | None) -> FrozenReviews:
        """Snapshot ``source``; ``None`` becomes an empty sequence.

        Non-iterables and non-string items are rejected with
        :class:`InvalidArgumentError`.
        """

        if source is None:
            return cls()
        if isinstance(source, FrozenReviews):
            return source
        if isinstance(source, str):
            msg = "Reviews must be a collection of strings, not a single string"
            raise InvalidArgumentError(msg)
        try:
            items = tuple(source)
        except TypeError as exc:
            msg = f"Reviews must be iterable, got {type(source).__name__}"
            raise InvalidArgumentError(msg) from exc
        for position, item in enumerate(items):
            if not isinstance(item, str):
                msg = f"Review {position} must be a string, got {type(item).__name__}"
                raise InvalidArgumentError(msg)
        return cls(items)


__all__ = ["FrozenReviews", "ReadOnlyReviews", "ReviewView"]
