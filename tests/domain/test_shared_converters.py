"""Tests for construction-time converters."""

import pytest

from catalogo.domain.entities import Performer
from catalogo.domain.entities.shared import (
    to_ingredients,
    to_performer_label,
    to_price,
    to_seconds,
)


def test_to_price():
    assert to_price("25.5") == 25.5
    assert to_price(3) == 3.0
    assert to_price(None) == 0.0


def test_to_seconds():
    assert to_seconds("65") == 65
    assert to_seconds(65.7) == 65
    assert to_seconds(None) == 0


def test_to_ingredients_stringifies_members():
    assert to_ingredients(["ovo", 2]) == ("ovo", "2")
    assert to_ingredients("ovo") == ()


def test_to_ingredients_renders_none_members_empty():
    assert to_ingredients(["ovo", None]) == ("ovo", "")


@pytest.mark.parametrize(
    ("value", "label"),
    [
        (Performer("Banda Exemplo"), "Banda Exemplo"),
        (Performer(""), None),
        ("Solo Act", "Solo Act"),
        ("", None),
        (None, None),
    ],
)
def test_to_performer_label(value, label):
    assert to_performer_label(value) == label
