"""A player's equipped items and ammunition count."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from .gameinfo import EquipmentType
from .inventory import ItemDatabase
from .runtime import Event

if TYPE_CHECKING:
    from .inventory_component import InventoryComponent, PlayerStats

_EXCLUSIVE_SLOTS = frozenset(
    {
        EquipmentType.HAT,
        EquipmentType.WEAPON_GUN,
        EquipmentType.WEAPON_ROD,
        EquipmentType.WEAPON_SAW,
    }
)


class EquipmentComponent:
    """Equipped items; one hat, gun, rod and saw at a time."""

    def __init__(
        self,
        database: ItemDatabase,
        stats: PlayerStats | None = None,
        inventory: InventoryComponent | None = None,
    ) -> None:
        if stats is None:
            from .inventory_component import PlayerStats

            stats = PlayerStats()
        self.database = database
        self.stats = stats
        self.inventory = inventory
        self._items: list[int] = []
        self.ammo_count = stats.ammo_count
        self.items_changed = Event()
        self.ammo_count_changed = Event()

    @property
    def items(self) -> list[int]:
        return list(self._items)

    def _changed(self) -> None:
        self.items_changed.broadcast(list(self._items))

    def add_item(self, item_id: int) -> None:
        """Equip the item, sending any item in the same slot back to the inventory."""
        slot = self.database.item_info(item_id).equipment_type
        if slot in _EXCLUSIVE_SLOTS and self.inventory is not None:
            for equipped in list(self._items):
                if self.database.item_info(equipped).equipment_type is slot:
                    self.inventory.add_item(equipped)
                    self.remove_item(equipped)
        self._items.append(item_id)
        self._changed()

    def remove_item(self, item_id: int) -> bool:
        """Unequip one occurrence of the item; False if it was not equipped."""
        if self.database.item_info(item_id).equipment_type is EquipmentType.HAT:
            self.stats.hat = None
        try:
            self._items.remove(item_id)
        except ValueError:
            return False
        self._changed()
        return True

    def remove_all_items(self, item_ids: Iterable[int]) -> None:
        for item_id in list(item_ids):
            self.remove_item(item_id)

    def tick(self) -> None:
        """Follow the player's ammunition count, announcing any change."""
        current = self.stats.ammo_count
        if current != self.ammo_count:
            self.ammo_count = current
            self.ammo_count_changed.broadcast(current)