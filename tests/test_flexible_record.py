from __future__ import annotations

import pytest

from review_records.domain import (
    FlexibleRecord,
    FlexibleRecordBuilder,
    FrozenReviews,
    InvalidArgumentError,
    ReviewView,
    UnsupportedOperationError,
)


def test_mutable_list_supplied(title: str) -> None:
    reviews = ["First review."]
    record = FlexibleRecord(title, reviews)

    assert record.reviews is reviews

    # the record is frozen, yet the list behind it is fully mutable
    record.reviews.append("Let me add a late review.")  # type: ignore[union-attr]

    assert record.reviews[-1] == "Let me add a late review."  # type: ignore[index]


def test_write_blocking_view_supplied(title: str) -> None:
    reviews = ["First review."]
    record = FlexibleRecord(title, ReviewView(reviews))

    with pytest.raises(UnsupportedOperationError):
        record.reviews.append("throw exception")  # type: ignore[union-attr]

    # the view points at the original list, so this extra item shows up
    reviews.append("Let me add a late review.")

    assert record.reviews[-1] == "Let me add a late review."  # type: ignore[index]


def test_independent_copy_supplied(title: str) -> None:
    reviews = ["First review."]
    record = FlexibleRecord(title, FrozenReviews(reviews))

    with pytest.raises(UnsupportedOperationError):
        record.reviews.append("throw exception")  # type: ignore[union-attr]

    reviews.append("This is only mutating the original list.")

    assert len(reviews) == 2
    assert record.reviews == ["First review."]


def test_flexible_record_stores_absent_reviews_as_is(title: str) -> None:
    record = FlexibleRecord(title, None)
    assert record.reviews is None


def test_flexible_record_does_not_validate_title() -> None:
    assert FlexibleRecord("", []).title == ""


def test_builder_rejects_blank_title() -> None:
    for bad_title in (None, "", "   "):
        with pytest.raises(InvalidArgumentError):
            FlexibleRecordBuilder(bad_title)  # type: ignore[arg-type]


def test_build_passes_working_list_through(title: str) -> None:
    builder = FlexibleRecordBuilder(title).add_review("a")
    record = builder.build()

    record.reviews.append("b")  # type: ignore[union-attr]

    assert record.reviews == ["a", "b"]
    assert record.reviews is builder.reviews


def test_build_sees_later_builder_additions(title: str) -> None:
    builder = FlexibleRecordBuilder(title).add_review("a")
    record = builder.build()

    builder.add_review("b")

    assert record.reviews == ["a", "b"]


def test_build_detaches_after_with_reviews_swap(title: str) -> None:
    builder = FlexibleRecordBuilder(title).add_review("a")
    record = builder.build()

    builder.with_reviews(["other"]).add_review("b")

    assert record.reviews == ["a"]


def test_builder_with_caller_list(title: str) -> None:
    reviews = ["First review."]
    builder = FlexibleRecordBuilder(title)

    record = builder.with_reviews(reviews).build()
    record.reviews.append("Let me add a late review.")  # type: ignore[union-attr]

    assert len(record.reviews) == 2  # type: ignore[arg-type]
    assert reviews[-1] == "Let me add a late review."


def test_write_blocking_view_build(title: str) -> None:
    builder = FlexibleRecordBuilder(title).add_review("a")
    record = builder.build_with_write_blocking_view()

    with pytest.raises(UnsupportedOperationError):
        record.reviews.append("b")  # type: ignore[union-attr]

    builder.add_review("b")

    assert isinstance(record.reviews, ReviewView)
    assert record.reviews == ["a", "b"]


def test_independent_copy_build(title: str) -> None:
    builder = FlexibleRecordBuilder(title).add_review("a")
    record = builder.build_with_independent_copy()

    builder.add_review("b")

    assert record.reviews == ["a"]
    with pytest.raises(UnsupportedOperationError):
        record.reviews.append("b")  # type: ignore[union-attr]


def test_independent_copy_of_empty_builder(title: str) -> None:
    builder = FlexibleRecordBuilder(title)
    record = builder.build_with_independent_copy()

    assert record.reviews is not None
    assert record.reviews == []
    with pytest.raises(UnsupportedOperationError):
        record.reviews.append("throw exception")  # type: ignore[union-attr]

    builder.add_review("This is only mutating the builder.")

    assert len(record.reviews) == 0


def test_write_blocking_view_needs_a_working_list(title: str) -> None:
    builder = FlexibleRecordBuilder(title).with_reviews(None)  # type: ignore[arg-type]

    with pytest.raises(InvalidArgumentError):
        builder.build_with_write_blocking_view()
