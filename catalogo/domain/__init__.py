"""Catalogo domain layer - restaurant and music entities."""

from . import entities

# Re-export key types for convenience
from .entities import (
    Eatery,
    InvalidDishError,
    InvalidInputError,
    InvalidSongError,
    MenuItem,
    Performer,
    Track,
)

__all__ = [
    "entities",
    "Eatery",
    "MenuItem",
    "Performer",
    "Track",
    "InvalidDishError",
    "InvalidInputError",
    "InvalidSongError",
]
