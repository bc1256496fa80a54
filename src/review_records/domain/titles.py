"""Title validation shared by records and builders."""

from __future__ import annotations

from .errors import InvalidArgumentError


def is_blank(value: str) -> bool:
    return not value.strip()


def require_title(title: object) -> str:
    """Return ``title`` untouched, or raise if it is missing or blank."""

    if title is None:
        msg = "Title needs to be present and not blank"
        raise InvalidArgumentError(msg)
    if not isinstance(title, str):
        msg = f"Title must be a string, got {type(title).__name__}"
        raise InvalidArgumentError(msg)
    if is_blank(title):
        msg = "Title needs to be present and not blank"
        raise InvalidArgumentError(msg)
    return title
