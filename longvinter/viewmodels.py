"""View models behind the camp-fire window and the player's health bar."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Iterable

from .gameinfo import ItemRow, ItemType
from .inventory import ItemDatabase
from .runtime import Event

if TYPE_CHECKING:
    from .craft import CraftComponent

ICON_SIZE = (32.0, 32.0)
DEFAULT_MAX_HEALTH = 10.0


@dataclass(frozen=True)
class SlateBrush:
    """How an icon image is drawn."""

    resource: Any = None
    image_size: tuple[float, float] = ICON_SIZE
    uv_region: tuple[tuple[float, float], tuple[float, float]] = ((0.0, 0.0), (1.0, 1.0))
    tint: tuple[float, float, float, float] = (1.0, 1.0, 1.0, 1.0)
    draw_as: str = "image"


def icon_brush(texture: Any) -> SlateBrush:
    """A 32x32 full-image brush for a texture."""
    return SlateBrush(resource=texture)


class CampFireItemViewModel:
    """One ingredient shown on the camp fire: its icon and whether it is edible."""

    def __init__(self) -> None:
        self.row: ItemRow | None = None
        self.item_icon_brush = SlateBrush()
        self.item_icon_path_right = ""
        self.item_description = ""
        self.item_description_left = ""
        self.item_name = ""
        self.item_text_description = ""
        self.eat_icon_visible = False
        self.field_changed = Event()

    def set_item_icon_brush(self, brush: SlateBrush) -> None:
        self.item_icon_brush = brush
        self.field_changed.broadcast("item_icon_brush", brush)

    def set_eat_icon_visibility(self, visible: bool) -> None:
        self.eat_icon_visible = visible
        self.field_changed.broadcast("eat_icon_visible", visible)

    def set_item_row(self, row: ItemRow) -> None:
        """Attach the item's table row; food shows the eat icon."""
        if self.row is row:
            return
        self.row = row
        self.eat_icon_visible = row.item_type is ItemType.FOOD

    def init_from(self, other: object) -> None:
        """Copy the icon and eat-icon state from another item view model."""
        if not isinstance(other, CampFireItemViewModel):
            return
        if other.row is None:
            raise ValueError("source view model has no item row")
        self.set_item_icon_brush(icon_brush(other.row.texture))
        self.set_eat_icon_visibility(other.eat_icon_visible)


class CampFireViewModel:
    """The camp-fire window: cooking progress and the ingredients on the fire."""

    def __init__(self, database: ItemDatabase, craft: CraftComponent | None = None) -> None:
        self.database = database
        self.current_ratio = 0.0
        self.items: list[CampFireItemViewModel] = []
        self.field_changed = Event()
        self.items_changed = Event()
        if craft is not None:
            self.bind(craft)

    def bind(self, craft: CraftComponent) -> None:
        """Follow a craft component's progress and ingredients."""
        craft.progress_changed.add(self.set_progress)
        craft.items_changed.add(self.on_items_changed)
        self.set_progress(0.0)
        self.on_items_changed(craft.items)

    def set_progress(self, ratio: float) -> None:
        if ratio != self.current_ratio:
            self.current_ratio = ratio
            self.field_changed.broadcast("current_progress_ratio", ratio)

    def set_items(self, items: list[CampFireItemViewModel]) -> None:
        if items != self.items:
            self.items = list(items)

    def on_items_changed(self, items: Iterable[int]) -> None:
        """Rebuild the ingredient view models and announce the change."""
        models = []
        for item_id in items:
            model = CampFireItemViewModel()
            model.set_item_row(self.database.item_info(item_id))
            models.append(model)
        self.set_items(models)
        self.items_changed.broadcast()


class PlayerStateViewModel:
    """The player's health as a fraction of the maximum."""

    def __init__(
        self,
        max_health: float = DEFAULT_MAX_HEALTH,
        current_health: float | None = None,
        hp_changed: Event | None = None,
    ) -> None:
        self.max_health = max_health
        self.current_health = 0.0
        self.field_changed = Event()
        if hp_changed is not None:
            hp_changed.add(self.set_current_health)
        if current_health is not None:
            self.set_current_health(current_health)

    def set_current_health(self, health: float) -> None:
        if health != self.current_health:
            self.current_health = health
            self.field_changed.broadcast("health_percent", self.health_percent())

    def health_percent(self) -> float:
        if self.max_health == 0:
            raise ZeroDivisionError("maximum health is zero")
        return self.current_health / self.max_health