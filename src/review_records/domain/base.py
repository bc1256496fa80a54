"""Core base classes for record models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Immutable domain model base with strict validation.

    Freezing covers the fields themselves. Whatever container sits behind a
    field keeps its own mutability.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", arbitrary_types_allowed=True)
