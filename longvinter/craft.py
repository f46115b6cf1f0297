"""Camp-fire cooking: ingredients, recipe matching and the cooking timer."""

from __future__ import annotations

import re
from functools import partial

from .inventory import ItemDatabase
from .runtime import Event, TimerHandle, TimerManager

NO_ITEM = -1
SECONDS_PER_INGREDIENT = 4.0

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


class CraftComponent:
    """Holds the ingredients on the fire and cooks any recipe they match exactly."""

    def __init__(self, database: ItemDatabase, timers: TimerManager | None = None) -> None:
        self.database = database
        self.timers = timers if timers is not None else TimerManager()
        self.timer_handle = TimerHandle()
        self.cooking_time = 0.0
        self._items: list[int] = []
        self._crafted_item_id = NO_ITEM
        self._progress_ratio = 0.0
        self.items_changed = Event()
        self.craft_finished = Event()
        self.progress_changed = Event()

    @property
    def items(self) -> list[int]:
        return list(self._items)

    @property
    def crafted_item_id(self) -> int:
        return self._crafted_item_id

    @property
    def progress_ratio(self) -> float:
        return self._progress_ratio

    def _set_crafted(self, item_id: int) -> None:
        if item_id != self._crafted_item_id:
            self._crafted_item_id = item_id
            self.craft_finished.broadcast(item_id)

    def _set_progress(self, ratio: float) -> None:
        if ratio != self._progress_ratio:
            self._progress_ratio = ratio
            self.progress_changed.broadcast(ratio)

    def _reset(self) -> None:
        self._set_crafted(NO_ITEM)
        self._set_progress(0.0)
        self.timers.clear_timer(self.timer_handle)

    def _match_recipes(self) -> None:
        self._items.sort()
        table = self.database.craft_table
        recipes = table.rows() if table is not None else []
        for recipe in recipes:
            if recipe.required_items == self._items:
                self._start_cooking(len(self._items), _atoi(recipe.name))
        self.items_changed.broadcast(list(self._items))

    def _start_cooking(self, ingredient_count: int, item_id: int) -> None:
        self.cooking_time = ingredient_count * SECONDS_PER_INGREDIENT
        self.timers.set_timer(
            self.timer_handle, partial(self._finish, item_id), self.cooking_time, False
        )

    def _finish(self, item_id: int) -> None:
        self._set_crafted(item_id)
        self._set_progress(1.0)
        self.timers.clear_timer(self.timer_handle)

    def add_item(self, item_id: int) -> None:
        """Put an ingredient on the fire and restart cooking if a recipe now matches."""
        self._items.append(item_id)
        self._reset()
        self._match_recipes()

    def remove_item(self, item_id: int) -> bool:
        """Take one ingredient off the fire; returns whether it was there."""
        try:
            self._items.remove(item_id)
            removed = True
        except ValueError:
            removed = False
        self._reset()
        self._match_recipes()
        return removed

    def clear(self) -> None:
        """Remove every ingredient and stop cooking."""
        self._items.clear()
        self._reset()
        self.items_changed.broadcast([])

    def tick(self, delta: float) -> None:
        """Advance the cooking timer by delta and refresh the progress ratio."""
        self.timers.advance(delta)
        if self.timer_handle.is_valid() and self.cooking_time > 0:
            elapsed = self.timers.elapsed(self.timer_handle)
            if elapsed is not None:
                self._set_progress(elapsed / self.cooking_time)