"""Probe how each construction strategy shares its reviews.

Every probe starts from a fresh working list, builds a record, then:

1. appends to the source (the caller's list or the builder) and checks
   whether the record sees it;
2. tries to append through ``record.reviews`` directly.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from enum import StrEnum

from review_records.domain import (
    DomainModel,
    FlexibleRecord,
    FlexibleRecordBuilder,
    StrictRecord,
    StrictRecordBuilder,
    UnsupportedOperationError,
)

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "The case of the forgotten reviews"
DEFAULT_SEED: tuple[str, ...] = ("First review.",)
DEFAULT_LATE_REVIEW = "Let me add a late review."

Record = StrictRecord | FlexibleRecord


class ConstructionStrategy(StrEnum):
    """Ways of turning a working list into a record."""

    STRICT_CONSTRUCTOR = "strict-constructor"
    STRICT_BUILDER = "strict-builder"
    FLEXIBLE_CONSTRUCTOR = "flexible-constructor"
    FLEXIBLE_PASS_THROUGH = "flexible-pass-through"
    FLEXIBLE_WRITE_BLOCKING_VIEW = "flexible-write-blocking-view"
    FLEXIBLE_INDEPENDENT_COPY = "flexible-independent-copy"


class AliasingReport(DomainModel):
    """Observed behaviour of one construction strategy."""

    strategy: ConstructionStrategy
    container_type: str
    direct_write_allowed: bool
    reflects_source_mutation: bool
    reviews_after: tuple[str, ...]

    @property
    def isolated(self) -> bool:
        return not (self.direct_write_allowed or self.reflects_source_mutation)


def _construct(
    strategy: ConstructionStrategy, title: str, source: list[str]
) -> tuple[Record, Callable[[str], object]]:
    """Build a record from ``source`` and return it with a source mutator."""

    if strategy is ConstructionStrategy.STRICT_CONSTRUCTOR:
        return StrictRecord(title, source), source.append
    if strategy is ConstructionStrategy.FLEXIBLE_CONSTRUCTOR:
        return FlexibleRecord(title, source), source.append
    if strategy is ConstructionStrategy.STRICT_BUILDER:
        strict_builder = StrictRecordBuilder(title).with_reviews(source)
        return strict_builder.build(), strict_builder.add_review

    builder = FlexibleRecordBuilder(title).with_reviews(source)
    if strategy is ConstructionStrategy.FLEXIBLE_PASS_THROUGH:
        return builder.build(), builder.add_review
    if strategy is ConstructionStrategy.FLEXIBLE_WRITE_BLOCKING_VIEW:
        return builder.build_with_write_blocking_view(), builder.add_review
    if strategy is ConstructionStrategy.FLEXIBLE_INDEPENDENT_COPY:
        return builder.build_with_independent_copy(), builder.add_review
    msg = f"Unknown construction strategy: {strategy!r}"
    raise ValueError(msg)


def probe(
    strategy: ConstructionStrategy,
    *,
    title: str = DEFAULT_TITLE,
    seed: Iterable[str] = DEFAULT_SEED,
    late_review: str = DEFAULT_LATE_REVIEW,
) -> AliasingReport:
    """Run a single strategy and report what was shared."""

    source = list(seed)
    record, mutate_source = _construct(strategy, title, source)
    reviews = record.reviews
    if reviews is None:  # pragma: no cover - every strategy supplies a sequence
        msg = f"{strategy} produced a record without reviews"
        raise ValueError(msg)

    before = len(reviews)
    mutate_source(late_review)
    reflects = len(reviews) == before + 1

    try:
        reviews.append(late_review)  # type: ignore[attr-defined]
    except UnsupportedOperationError:
        direct_write_allowed = False
    else:
        direct_write_allowed = True

    report = AliasingReport(
        strategy=strategy,
        container_type=type(reviews).__name__,
        direct_write_allowed=direct_write_allowed,
        reflects_source_mutation=reflects,
        reviews_after=tuple(reviews),
    )
    logger.debug(
        "Probe %s: container=%s writable=%s aliased=%s",
        strategy,
        report.container_type,
        report.direct_write_allowed,
        report.reflects_source_mutation,
    )
    return report


def run_all_probes(
    *,
    title: str = DEFAULT_TITLE,
    seed: Iterable[str] = DEFAULT_SEED,
    late_review: str = DEFAULT_LATE_REVIEW,
) -> list[AliasingReport]:
    seed_values = tuple(seed)
    return [
        probe(strategy, title=title, seed=seed_values, late_review=late_review)
        for strategy in ConstructionStrategy
    ]


__all__ = [
    "DEFAULT_LATE_REVIEW",
    "DEFAULT_SEED",
    "DEFAULT_TITLE",
    "AliasingReport",
    "ConstructionStrategy",
    "probe",
    "run_all_probes",
]
