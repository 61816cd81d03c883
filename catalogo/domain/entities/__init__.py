"""Core domain entities: dishes and restaurants, tracks and performers."""

# Restaurant entities
from .dining import Eatery, MenuItem

# Music entities
from .music import Performer, Track

# Shared errors
from .shared import InvalidDishError, InvalidInputError, InvalidSongError

__all__ = [
    # Restaurant entities
    "Eatery",
    "MenuItem",
    # Music entities
    "Performer",
    "Track",
    # Errors
    "InvalidDishError",
    "InvalidInputError",
    "InvalidSongError",
]
