"""Domain layer test fixtures - plain entities, no external dependencies."""

import pytest

from catalogo.domain.entities import Eatery, MenuItem, Performer, Track


@pytest.fixture
def eatery():
    """Empty restaurant used across menu tests."""
    return Eatery("Sabor & Cia", "Rua das Flores, 123")


@pytest.fixture
def lasagna():
    """Dish with a full ingredient list."""
    return MenuItem("Lasanha", 25.5, ["massa", "queijo", "molho"])


@pytest.fixture
def performer():
    """Rock band used across track tests."""
    return Performer("Banda Exemplo", "Rock")


@pytest.fixture
def song(performer):
    """Track labelled with the standard performer."""
    return Track("Canção 1", 210, performer)
