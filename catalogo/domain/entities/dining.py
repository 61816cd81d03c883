"""Restaurant-related domain entities.

A dish (``MenuItem``) is an immutable value record; an ``Eatery`` owns an
append-only menu of dishes.
"""

from collections.abc import Mapping
from typing import Any

from attrs import define, field, validators

from catalogo.config import get_logger

from .shared import InvalidDishError, to_ingredients, to_price

logger = get_logger(__name__)

NO_INGREDIENTS = "Ingredientes não informados"


@define(frozen=True, slots=True)
class MenuItem:
    """A single dish with its price and ingredient list."""

    name: str = field(validator=validators.instance_of(str))
    price: float = field(default=0.0, converter=to_price, validator=validators.ge(0))
    # Anything that is not a list/tuple is silently replaced by ()
    ingredients: tuple[str, ...] = field(factory=tuple, converter=to_ingredients)

    @classmethod
    def from_fields(cls, fields: Mapping[str, Any]) -> "MenuItem":
        """Build a dish from a plain record with ``name``, ``price`` and ``ingredients``."""
        return cls(
            name=fields.get("name") or "",
            price=fields.get("price", 0),
            ingredients=fields.get("ingredients", ()),
        )

    def describe(self) -> str:
        """Return the display line for this dish."""
        if self.ingredients:
            clause = f"Ingredientes: {', '.join(self.ingredients)}"
        else:
            clause = NO_INGREDIENTS
        return f"{self.name} - R$ {self.price:.2f}. {clause}"


@define(slots=True)
class Eatery:
    """A restaurant owning an ordered menu of dishes.

    The menu can only grow through ``add_menu_item``; ``menu`` exposes a
    read-only snapshot in insertion order.
    """

    name: str = field(validator=validators.instance_of(str))
    address: str = field(validator=validators.instance_of(str))
    _menu: list[MenuItem] = field(factory=list, init=False)

    @property
    def menu(self) -> tuple[MenuItem, ...]:
        return tuple(self._menu)

    def present(self) -> str:
        """Return the greeting for this restaurant."""
        return f"Bem-vindo ao restaurante {self.name}, localizado em {self.address}."

    def add_menu_item(self, item: MenuItem | Mapping[str, Any]) -> None:
        """Append a dish, building it first when given a plain record.

        A plain record is a mapping such as a dict; objects that only carry
        attributes (e.g. ``SimpleNamespace``) are not accepted. Missing keys
        take the MenuItem defaults, with an empty name.

        Raises:
            InvalidDishError: if ``item`` is neither a MenuItem nor a mapping.
        """
        if isinstance(item, MenuItem):
            dish = item
        elif isinstance(item, Mapping):
            dish = MenuItem.from_fields(item)
        else:
            raise InvalidDishError(
                "Prato inválido. Deve ser uma instância de MenuItem ou um mapeamento."
            )

        self._menu.append(dish)
        logger.debug(f"Added '{dish.name}' to menu of {self.name}")

    def list_menu_items(self) -> list[str]:
        """Describe every dish on the menu, in insertion order."""
        return [dish.describe() for dish in self._menu]
