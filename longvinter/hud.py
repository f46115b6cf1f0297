"""The main HUD: which panels are shown and how clicks, movement and keys change that."""

from __future__ import annotations

from enum import Enum, auto
from typing import TYPE_CHECKING

from .runtime import Event

if TYPE_CHECKING:
    from .craft import CraftComponent
    from .inventory_component import InventoryComponent

TOGGLE_COOLDOWN = 1


class Panel(Enum):
    INVENTORY = auto()
    VENDOR = auto()
    CAMP_FIRE = auto()
    EQUIPMENT = auto()
    PLACEHOLDER = auto()
    RANDOM_BOX = auto()
    ENCYCLOPEDIA = auto()
    CRAFT_TABLE = auto()
    ENCYCLOPEDIA_BOOK = auto()


class ClickTarget(Enum):
    VENDOR = auto()
    CAMP_FIRE = auto()
    WORKBENCH = auto()
    OTHER = auto()


_CLICK_PANELS = {
    ClickTarget.VENDOR: Panel.VENDOR,
    ClickTarget.CAMP_FIRE: Panel.CAMP_FIRE,
    ClickTarget.WORKBENCH: Panel.CRAFT_TABLE,
}

_CLOSED_WITH_INVENTORY = (
    Panel.EQUIPMENT,
    Panel.RANDOM_BOX,
    Panel.PLACEHOLDER,
    Panel.CRAFT_TABLE,
    Panel.ENCYCLOPEDIA_BOOK,
)

_CLOSED_ON_MOVE = (
    Panel.VENDOR,
    Panel.EQUIPMENT,
    Panel.PLACEHOLDER,
    Panel.RANDOM_BOX,
    Panel.CRAFT_TABLE,
)


class MainHud:
    """Panel visibility; only the encyclopedia feed is shown at start."""

    def __init__(self) -> None:
        self._visible = {panel: panel is Panel.ENCYCLOPEDIA for panel in Panel}
        self._prev_toggle: int | None = None
        self.visibility_changed = Event()

    def is_visible(self, panel: Panel) -> bool:
        return self._visible[panel]

    def _set(self, panel: Panel, visible: bool) -> None:
        if self._visible[panel] != visible:
            self._visible[panel] = visible
            self.visibility_changed.broadcast(panel, visible)

    def show(self, panel: Panel) -> None:
        self._set(panel, True)

    def hide(self, panel: Panel) -> None:
        self._set(panel, False)

    def on_actor_clicked(self, target: ClickTarget | None) -> None:
        """Open the clicked actor's panel together with the inventory."""
        panel = None if target is None else _CLICK_PANELS.get(target)
        if panel is None:
            return
        self.show(panel)
        self.show(Panel.INVENTORY)

    def toggle_inventory(self, now: float) -> bool:
        """Open or close the inventory, at most once per second; returns whether it did."""
        seconds = int(now)
        if self._prev_toggle is not None and seconds - self._prev_toggle < TOGGLE_COOLDOWN:
            return False
        self._prev_toggle = seconds
        if self.is_visible(Panel.INVENTORY):
            self.hide(Panel.INVENTORY)
            for panel in _CLOSED_WITH_INVENTORY:
                self.hide(panel)
        else:
            self.show(Panel.INVENTORY)
        return True

    def on_player_moving(self, craft: CraftComponent, inventory: InventoryComponent) -> None:
        """Close interaction panels; ingredients on an open camp fire go back to the inventory."""
        if self.is_visible(Panel.CAMP_FIRE):
            for item_id in craft.items:
                inventory.add_item(item_id)
            craft.clear()
            self.hide(Panel.CAMP_FIRE)
        for panel in _CLOSED_ON_MOVE:
            self.hide(panel)