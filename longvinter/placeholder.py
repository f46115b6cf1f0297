"""A dropped-items container that disappears shortly after it is emptied."""

from __future__ import annotations

from typing import Any, Callable, Iterable

from .runtime import Event, TimerHandle, TimerManager

DESTROY_DELAY = 2.0


class PlaceholderComponent:
    """Holds dropped items; once empty it destroys its owner after a short delay."""

    def __init__(
        self,
        timers: TimerManager | None = None,
        on_destroy: Callable[[], Any] | None = None,
    ) -> None:
        self.timers = timers if timers is not None else TimerManager()
        self.destroy_timer = TimerHandle()
        self.destroyed = False
        self._on_destroy = on_destroy
        self._items: list[int] = []
        self.items_changed = Event()

    @property
    def items(self) -> list[int]:
        return list(self._items)

    def _changed(self) -> None:
        self.items_changed.broadcast(list(self._items))

    def add_all_items(self, items: Iterable[int]) -> None:
        self._items.extend(items)
        self._changed()

    def add_item(self, item_id: int) -> None:
        self._items.append(item_id)
        self._changed()

    def remove_item(self, item_id: int) -> bool:
        """Remove one occurrence of the item; schedule destruction once empty."""
        try:
            self._items.remove(item_id)
            removed = True
        except ValueError:
            removed = False
        if removed:
            self._changed()
        if not self._items and not self.destroy_timer.is_valid():
            self.timers.set_timer(self.destroy_timer, self._on_destroy_expired, DESTROY_DELAY)
        return removed

    def _on_destroy_expired(self) -> None:
        self.destroyed = True
        if self._on_destroy is not None:
            self._on_destroy()
        self.timers.clear_timer(self.destroy_timer)