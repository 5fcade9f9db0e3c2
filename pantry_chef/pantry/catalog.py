"""Pantry catalog: the ingredients available for selection."""

import uuid
from typing import Iterable, Iterator, Optional

from pantry_chef.models.models import Ingredient
from pantry_chef.utils.errors import ValidationError


DEFAULT_PANTRY = (
    Ingredient(id="1", name="Chicken"),
    Ingredient(id="2", name="Rice"),
    Ingredient(id="3", name="Tomatoes"),
    Ingredient(id="4", name="Onions"),
    Ingredient(id="5", name="Garlic"),
    Ingredient(id="6", name="Bell Peppers"),
    Ingredient(id="7", name="Olive Oil"),
    Ingredient(id="8", name="Pasta"),
    Ingredient(id="9", name="Eggs"),
    Ingredient(id="10", name="Milk"),
    Ingredient(id="11", name="Cheese"),
    Ingredient(id="12", name="Butter"),
)


class PantryCatalog:
    """Ordered list of known ingredients. Newly added items go to the front."""

    def __init__(self, ingredients: Optional[Iterable[Ingredient]] = None) -> None:
        self._items: list[Ingredient] = list(ingredients or [])

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Ingredient]:
        return iter(list(self._items))

    def get(self, ingredient_id: str) -> Optional[Ingredient]:
        for item in self._items:
            if item.id == ingredient_id:
                return item
        return None

    def search(self, term: str = "") -> list[Ingredient]:
        """Case-insensitive substring match on ingredient name.

        Args:
            term: Search text. Empty (or whitespace-only) returns the whole catalog.

        Returns:
            Matching ingredients in catalog order.
        """
        needle = (term or "").strip().lower()
        if not needle:
            return list(self._items)
        return [item for item in self._items if needle in item.name.lower()]

    def add(self, name: str) -> Ingredient:
        """Create an ingredient with a fresh id and prepend it.

        Duplicate names are allowed and treated as distinct items.

        Raises:
            ValidationError: If name is blank after trimming.
        """
        cleaned = (name or "").strip()
        if not cleaned:
            raise ValidationError("Please enter an ingredient name.")
        ingredient = Ingredient(id=uuid.uuid4().hex, name=cleaned)
        self._items.insert(0, ingredient)
        return ingredient
