"""The list of item ids a player has discovered."""

from __future__ import annotations

from .runtime import Event


class EncyclopediaComponent:
    """Records discovered items and announces every change."""

    def __init__(self) -> None:
        self._items: list[int] = []
        self.items_changed = Event()

    @property
    def items(self) -> list[int]:
        return list(self._items)

    def _changed(self) -> None:
        self.items_changed.broadcast(list(self._items))

    def add_item(self, item_id: int) -> None:
        self._items.append(item_id)
        self._changed()

    def remove_item(self, item_id: int) -> bool:
        """Remove one occurrence of the item; False if it was not recorded."""
        try:
            self._items.remove(item_id)
        except ValueError:
            return False
        self._changed()
        return True

    def update_item(self, item_id: int) -> bool:
        """Record the item unless it is already known; returns whether it was new."""
        if item_id in self._items:
            return False
        self.add_item(item_id)
        return True