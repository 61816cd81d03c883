"""Shared errors and construction-time converters for domain entities."""

from typing import Any


class InvalidInputError(TypeError):
    """Value given to a collection add operation is not an entity or a record."""


class InvalidDishError(InvalidInputError):
    """Raised when a menu receives something that is not a dish."""


class InvalidSongError(InvalidInputError):
    """Raised when a track list receives something that is not a song."""


def to_price(value: Any) -> float:
    """Coerce a price (number or numeric text) to float. ``None`` means 0."""
    if value is None:
        return 0.0
    return float(value)


def to_seconds(value: Any) -> int:
    """Coerce a duration to whole seconds, truncating any fraction."""
    if value is None:
        return 0
    return int(float(value))


def to_ingredients(value: Any) -> tuple[str, ...]:
    """Keep list/tuple input as a tuple of strings, anything else becomes empty.

    ``None`` members render as empty text.
    """
    if not isinstance(value, list | tuple):
        return ()
    return tuple("" if ingredient is None else str(ingredient) for ingredient in value)


def to_performer_label(value: Any) -> str | None:
    """Reduce a performer reference to its display label.

    Objects exposing ``name`` (such as ``Performer``) contribute that name,
    plain text is used as is, and empty values collapse to ``None``.
    """
    if value is None:
        return None
    if hasattr(value, "name"):
        return str(value.name) if value.name else None
    if isinstance(value, str):
        return value or None
    return str(value)
