"""Placeable decorations, the tent, and the component that places them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from .inventory import ItemDatabase

if TYPE_CHECKING:
    from .inventory_component import InventoryComponent

Vector = tuple[float, float, float]
Color = tuple[float, float, float, float]

PREVIEW_OPACITY = 0.5
ZERO_ROTATION: Vector = (0.0, 0.0, 0.0)


@dataclass
class DecoBase:
    """A decoration; while translucent it shows whether it can be placed here."""

    item_id: int = 0
    opacity: float = 0.0
    color: Color = (0.0, 0.0, 0.0, 0.0)
    enable_color: Color = (0.0, 0.0, 0.0, 0.0)
    disable_color: Color = (0.0, 0.0, 0.0, 0.0)
    location: Vector = (0.0, 0.0, 0.0)
    rotation: Vector = ZERO_ROTATION
    setup_enabled: bool = False
    destroyed: bool = False

    def set_opacity(self, opacity: float) -> None:
        self.opacity = opacity

    def set_color(self, color: Color) -> None:
        self.color = color

    def tick(self, overlapping_count: int) -> None:
        """Update placement colour and state from the number of overlapping actors."""
        if self.opacity == 1.0:
            return
        if overlapping_count > 0:
            self.set_color(self.disable_color)
            self.setup_enabled = False
        else:
            self.set_color(self.enable_color)
            self.setup_enabled = True


@dataclass
class Tent(DecoBase):
    """A tent that can be upgraded, swapping its mesh for the upgraded one."""

    upgraded: bool = False
    mesh_visible: bool = True
    upgraded_mesh_visible: bool = field(default=True)

    def set_upgraded(self, value: bool) -> None:
        self.upgraded = value
        if value:
            self.upgraded_mesh_visible = True
            self.mesh_visible = False


class DecoComponent:
    """Shows a placement preview for a decoration and places it on click."""

    def __init__(
        self,
        database: ItemDatabase,
        inventory: InventoryComponent | None = None,
        owner_location: Vector = (0.0, 0.0, 0.0),
    ) -> None:
        self.database = database
        self.inventory = inventory
        self.owner_location = owner_location
        self.preview: DecoBase | None = None
        self.tent: Tent | None = None
        self.spawned: list[DecoBase] = []

    def spawn_preview(self, item_id: int) -> DecoBase | None:
        """Create a translucent preview of the item's decoration, if it has one."""
        row = self.database.item_info(item_id)
        if row.deco_class is None:
            return None
        preview: Any = row.preview_deco_class()
        preview.location = self.owner_location
        preview.set_opacity(PREVIEW_OPACITY)
        preview.item_id = item_id
        self.preview = preview
        return preview

    def on_click(self) -> DecoBase | None:
        """Place the previewed decoration if its spot is free; returns what was placed."""
        preview = self.preview
        if preview is None or preview.destroyed or not preview.setup_enabled:
            return None
        item_id = preview.item_id
        deco = self.spawn_deco(item_id, preview.location, preview.rotation)
        preview.destroyed = True
        self.preview = None
        if self.inventory is not None:
            self.inventory.remove_item(item_id)
        return deco

    def spawn_deco(self, item_id: int, location: Vector, rotation: Vector) -> DecoBase | None:
        """Place the item's decoration at location, unrotated."""
        row = self.database.item_info(item_id)
        if row.deco_class is None:
            return None
        deco: Any = row.deco_class()
        deco.location = location
        deco.rotation = ZERO_ROTATION
        self.spawned.append(deco)
        if isinstance(deco, Tent):
            self.tent = deco
        return deco

    def craft(self) -> bool:
        """Upgrade the placed tent; returns whether there was one."""
        if self.tent is None or self.tent.destroyed:
            return False
        self.tent.set_upgraded(True)
        return True