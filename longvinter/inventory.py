"""Item, buff and craft tables shared by a game instance, with item lookup."""

from __future__ import annotations

from dataclasses import dataclass

from .gameinfo import BuffRow, CraftRow, DataTable, ItemRow
from .itemdata import ItemData


class UnknownItemError(LookupError):
    """Raised when an item id has no row in the item table."""

    def __init__(self, item_id: int) -> None:
        super().__init__(f"no item with id {item_id}")
        self.item_id = item_id


@dataclass
class ItemDatabase:
    """The game's data tables."""

    item_table: DataTable[ItemRow] | None = None
    buff_table: DataTable[BuffRow] | None = None
    craft_table: DataTable[CraftRow] | None = None

    def item_info(self, item_id: int) -> ItemRow:
        """Return the item's row; raises UnknownItemError if there is none."""
        row = None if self.item_table is None else self.item_table.find_row(item_id)
        if row is None:
            raise UnknownItemError(item_id)
        return row

    def update_items(self, items: list[int]) -> list[ItemData]:
        """Build display entries for the given item ids, in order."""
        return [ItemData.from_item_row(item, self.item_info(item)) for item in items]


class GameInstance:
    """Owns the single ItemDatabase for a running game."""

    def __init__(
        self,
        item_table: DataTable[ItemRow] | None = None,
        buff_table: DataTable[BuffRow] | None = None,
        craft_table: DataTable[CraftRow] | None = None,
    ) -> None:
        self._inventory: ItemDatabase | None = None
        database = self.inventory()
        if item_table is not None:
            database.item_table = item_table
        if buff_table is not None:
            database.buff_table = buff_table
        if craft_table is not None:
            database.craft_table = craft_table

    def inventory(self) -> ItemDatabase:
        """Return the instance's ItemDatabase, creating it on first use."""
        if self._inventory is None:
            self._inventory = ItemDatabase()
        return self._inventory