"""Basket: the ingredient selection for the next recipe."""

from pantry_chef.models.models import Ingredient


class BasketSelection:
    """Ordered, duplicate-permitting ingredient selection. All operations are total."""

    def __init__(self) -> None:
        self._entries: list[Ingredient] = []

    def add(self, ingredient: Ingredient) -> None:
        self._entries.append(ingredient)

    def remove(self, ingredient_id: str) -> None:
        """Remove the first entry with this id; no-op if absent."""
        for index, entry in enumerate(self._entries):
            if entry.id == ingredient_id:
                del self._entries[index]
                return

    def clear(self) -> None:
        self._entries.clear()

    def count(self) -> int:
        return len(self._entries)

    def items(self) -> list[Ingredient]:
        """Snapshot copy; later basket changes do not affect it."""
        return list(self._entries)

    def names(self) -> list[str]:
        return [entry.name for entry in self._entries]
