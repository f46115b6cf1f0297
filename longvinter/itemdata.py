"""Display data for one item entry in the game's list and tile views."""

from __future__ import annotations

from dataclasses import dataclass, field

from .gameinfo import ItemRow, ItemType


@dataclass
class ItemData:
    """What a list entry needs to draw an item, plus an optional list of item ids."""

    icon_path: str = ""
    icon_path_right: str = ""
    description: str = ""
    description_left: str = ""
    name: str = ""
    text_description: str = ""
    item_id: int = 0
    item_type: ItemType = ItemType.NORMAL
    items: list[int] = field(default_factory=list)

    def add_item(self, item_id: int) -> None:
        """Append an item id to the entry's list."""
        self.items.append(item_id)

    @classmethod
    def from_item_row(cls, item_id: int, row: ItemRow) -> ItemData:
        """Build the entry for an item from its table row."""
        return cls(
            icon_path=row.texture_path,
            name=row.item_name,
            text_description=row.text_description,
            item_id=item_id,
            item_type=row.item_type,
        )