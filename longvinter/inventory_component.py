"""A player's inventory: items, money and the effects of using items."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Iterable

from .gameinfo import BuffType, EquipmentType, ItemType
from .inventory import ItemDatabase
from .runtime import Event

if TYPE_CHECKING:
    from .equipment import EquipmentComponent

DEFAULT_MK = 2000
AMMO_PER_PACK = 50
HOUSE_ITEM_ID = 502

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

_ADDITIVE_BUFFS = {
    BuffType.HP: "current_health",
    BuffType.SPEED: "speed",
    BuffType.OFFENCE: "offence",
    BuffType.DEFENCE: "defence",
    BuffType.GUN_ACCURACY: "gun_accuracy",
    BuffType.COLD_RESISTANCE: "cold_resistance",
    BuffType.ACQUISITION_RATE: "acquisition_rate",
    BuffType.ATTACK_SPEED: "attack_speed",
}


def _atoi(text: str) -> int:
    """Read a leading integer from text; 0 if there is none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


@dataclass
class PlayerStats:
    """The player attributes that items and buffs change."""

    current_health: float = 0.0
    speed: float = 0.0
    offence: float = 0.0
    defence: float = 0.0
    gun_accuracy: float = 0.0
    cold_resistance: float = 0.0
    fishing_speed_ratio: float = 1.0
    acquisition_rate: float = 0.0
    attack_speed: float = 0.0
    ammo_count: int = 0
    setting_house: bool = False
    hat: Any = None


class InventoryComponent:
    """Holds a player's items and MK and carries out buying, selling and using items."""

    def __init__(
        self,
        database: ItemDatabase,
        stats: PlayerStats | None = None,
        equipment: EquipmentComponent | None = None,
        mk: int = DEFAULT_MK,
    ) -> None:
        self.database = database
        self.stats = stats if stats is not None else PlayerStats()
        self.equipment = equipment
        self._items: list[int] = []
        self._mk = mk
        self.items_changed = Event()
        self.mk_changed = Event()

    @property
    def items(self) -> list[int]:
        return list(self._items)

    @property
    def mk(self) -> int:
        return self._mk

    @mk.setter
    def mk(self, value: int) -> None:
        self._mk = value
        self.mk_changed.broadcast(value)

    def _changed(self) -> None:
        self.items_changed.broadcast(list(self._items))

    def add_item(self, item_id: int) -> None:
        self._items.append(item_id)
        self._changed()

    def remove_item(self, item_id: int) -> bool:
        """Remove one occurrence of the item; False if it was not held."""
        try:
            self._items.remove(item_id)
        except ValueError:
            return False
        self._changed()
        return True

    def remove_all_items(self, item_ids: Iterable[int]) -> None:
        for item_id in list(item_ids):
            self.remove_item(item_id)

    def _price(self, item_id: int) -> int:
        return _atoi(self.database.item_info(item_id).description)

    def buy_item(self, item_id: int) -> bool:
        """Buy the item if MK covers its price; returns whether it was bought."""
        price = self._price(item_id)
        if self._mk < price:
            return False
        self.mk = self._mk - price
        self.add_item(item_id)
        return True

    def sell_item(self, item_id: int) -> bool:
        """Sell one held copy of the item for its price; False if none is held."""
        if item_id not in self._items:
            return False
        self.mk = self._mk + self._price(item_id)
        self.remove_item(item_id)
        return True

    def use_item(self, item_id: int) -> None:
        """Use the item: equip it or apply its buffs, then take it from the inventory."""
        row = self.database.item_info(item_id)
        stats = self.stats

        if row.item_type is ItemType.NORMAL:
            return

        if row.item_type is ItemType.EQUIPMENT:
            if row.equipment_type is EquipmentType.NONE:
                stats.ammo_count += AMMO_PER_PACK
                self.remove_item(item_id)
                return
            if self.equipment is None:
                raise RuntimeError("inventory has no equipment component")
            self.equipment.add_item(item_id)
        elif row.item_type is ItemType.DECORATIVE and item_id == HOUSE_ITEM_ID:
            stats.setting_house = True

        if row.buff_list:
            buff_table = self.database.buff_table
            for buff_id in row.buff_list:
                buff = None if buff_table is None else buff_table.find_row(buff_id)
                if buff is None:
                    raise LookupError(f"no buff with id {buff_id}")
                if buff.buff_type is BuffType.FISHING_SPEED:
                    ratio = stats.fishing_speed_ratio
                    stats.fishing_speed_ratio = ratio - ratio * buff.amount / 100
                else:
                    name = _ADDITIVE_BUFFS[buff.buff_type]
                    setattr(stats, name, getattr(stats, name) + buff.amount)

        self.remove_item(item_id)