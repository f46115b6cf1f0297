"""Shared game enumerations, data table rows and the data table container."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Generic, Iterator, TypeVar

PACKET_SIZE = 2048


class EquipmentType(IntEnum):
    NONE = 0
    HAT = 1
    WEAPON_GUN = 2
    WEAPON_SAW = 3
    WEAPON_ROD = 4
    BACKPACK = 5


class ItemType(IntEnum):
    NORMAL = 0
    FOOD = 1
    EQUIPMENT = 2
    DECORATIVE = 3
    MK = 4


class BuffType(IntEnum):
    HP = 0
    SPEED = 1
    OFFENCE = 2
    DEFENCE = 3
    GUN_ACCURACY = 4
    COLD_RESISTANCE = 5
    FISHING_SPEED = 6
    ACQUISITION_RATE = 7
    ATTACK_SPEED = 8


class QuestType(IntEnum):
    TEST = 0


class ChatPacketHeader(IntEnum):
    MSG = 0


@dataclass
class ItemRow:
    """One row of the item table."""

    item_name: str = ""
    item_type: ItemType = ItemType.NORMAL
    equipment_type: EquipmentType = EquipmentType.NONE
    buff_list: list[int] = field(default_factory=list)
    cooling_down_duration: float = 0.0
    texture: Any = None
    texture_path: str = ""
    equipment_texture_path: str = ""
    description: str = ""
    text_description: str = ""
    idle_socket_name: str = ""
    aim_socket_name: str = ""
    preview_deco_class: Any = None
    deco_class: Any = None


@dataclass
class BuffRow:
    """One row of the buff table."""

    buff_type: BuffType = BuffType.HP
    amount: float = 0.0


@dataclass
class CraftRow:
    """A recipe: the crafted item's id as its name and the sorted ingredient ids."""

    name: str = ""
    required_items: list[int] = field(default_factory=list)


@dataclass
class EncyclopediaRow:
    name: str = ""
    items: list[int] = field(default_factory=list)


@dataclass
class QuestRow:
    name: str = ""
    total_count: int = 0


RowT = TypeVar("RowT")


class DataTable(Generic[RowT]):
    """Rows keyed by name, kept in insertion order; integer names are stored as text."""

    def __init__(self) -> None:
        self._rows: dict[str, RowT] = {}

    def add_row(self, name: str | int, row: RowT) -> None:
        """Add a row, replacing any row already stored under the name."""
        self._rows[str(name)] = row

    def find_row(self, name: str | int) -> RowT | None:
        """Return the row stored under the name, or None."""
        return self._rows.get(str(name))

    def rows(self) -> list[RowT]:
        """All rows in the order they were first added."""
        return list(self._rows.values())

    def __contains__(self, name: object) -> bool:
        return str(name) in self._rows

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[str]:
        return iter(self._rows)