"""The encyclopedia book's categories and entries, and the discovery feed."""

from __future__ import annotations

from typing import Iterable

from .inventory import ItemDatabase
from .itemdata import ItemData
from .runtime import TimerHandle, TimerManager

NO_ITEM = -1
NEW_DISCOVERY_ID = 1000
DISCOVERED_OPACITY = 1.0
UNDISCOVERED_OPACITY = 0.5
FEED_ENTRY_LIFETIME = 2.0

MARKER_GREEN = "green"
MARKER_RED = "red"

_CATEGORIES: tuple[tuple[str, str, tuple[int, ...]], ...] = (
    ("Fish", "17", tuple(range(1, 18))),
    ("Feathers & Trophies", "10", (121, 122, 123, 124, 140, 141, 142, 143)),
    (
        "Crops",
        "13",
        (314, 317, 316, 315, 125, 130, 117, 118, 119, 144, 145, 149, 168),
    ),
    ("Blueprint", "11", (526, 540, 308, 150, 565, 419, 420, 421, 422, 423)),
)


def default_categories() -> list[ItemData]:
    """The book's categories: name, found count, total count and the item ids."""
    categories = []
    for name, total, items in _CATEGORIES:
        category = ItemData(name=name, description_left="0", description=total)
        for item_id in items:
            category.add_item(item_id)
        categories.append(category)
    return categories


def book_entries(category: ItemData, database: ItemDatabase) -> list[ItemData]:
    """The tile entries for a category: each item's icon and id, in category order."""
    return [
        ItemData(icon_path=database.item_info(item_id).texture_path, item_id=item_id)
        for item_id in category.items
    ]


def entry_opacity(item_id: int, discovered: Iterable[int]) -> float:
    """Full opacity for a discovered item, half for one not yet found."""
    return DISCOVERED_OPACITY if item_id in set(discovered) else UNDISCOVERED_OPACITY


def discovery_marker(item_id: int) -> str:
    """The exclamation mark shown beside a feed entry: red for a new discovery."""
    return MARKER_RED if item_id == NEW_DISCOVERY_ID else MARKER_GREEN


class DiscoveryFeed:
    """Shows each newly obtained item at the top of a list for a short while."""

    def __init__(self, database: ItemDatabase, timers: TimerManager | None = None) -> None:
        self.database = database
        self.timers = timers if timers is not None else TimerManager()
        self.seen: list[int] = []
        self.entries: list[ItemData] = []

    def on_items_changed(self, items: Iterable[int]) -> ItemData | None:
        """Add the last item of the inventory if it was never seen; returns the new entry."""
        items = list(items)
        if not items:
            return None
        last = items[-1]
        if last == NO_ITEM or last in self.seen:
            return None
        self.seen.append(last)
        row = self.database.item_info(last)
        entry = ItemData(
            icon_path=row.texture_path,
            name=row.item_name,
            text_description=row.text_description,
        )
        self.entries.insert(0, entry)
        self.timers.set_timer(TimerHandle(), self.expire_oldest, FEED_ENTRY_LIFETIME)
        return entry

    def expire_oldest(self) -> ItemData | None:
        """Remove the bottom entry of the list; None if the list is empty."""
        return self.entries.pop() if self.entries else None