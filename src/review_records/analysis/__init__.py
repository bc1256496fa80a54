"""Aliasing analysis exports."""

from .aliasing import (
    DEFAULT_LATE_REVIEW,
    DEFAULT_SEED,
    DEFAULT_TITLE,
    AliasingReport,
    ConstructionStrategy,
    probe,
    run_all_probes,
)

__all__ = [
    "DEFAULT_LATE_REVIEW",
    "DEFAULT_SEED",
    "DEFAULT_TITLE",
    "AliasingReport",
    "ConstructionStrategy",
    "probe",
    "run_all_probes",
]
