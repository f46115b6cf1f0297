"""A loot box filled with random items when it is created."""

from __future__ import annotations

import random

from .runtime import Event

MIN_ITEMS = 1
MAX_ITEMS = 5
MIN_ITEM_ID = 1
MAX_ITEM_ID = 17


class FarmingBoxComponent:
    """Holds between one and five random items with ids from 1 to 17."""

    def __init__(self, rng: random.Random | None = None) -> None:
        rng = rng if rng is not None else random.Random()
        count = rng.randint(MIN_ITEMS, MAX_ITEMS)
        self._items = [rng.randint(MIN_ITEM_ID, MAX_ITEM_ID) for _ in range(count)]
        self.items_changed = Event()

    @property
    def items(self) -> list[int]:
        return list(self._items)

    def remove_item(self, item_id: int) -> bool:
        """Take one occurrence of the item out; False if the box does not hold it."""
        try:
            self._items.remove(item_id)
        except ValueError:
            return False
        self.items_changed.broadcast(list(self._items))
        return True