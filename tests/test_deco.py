import pytest

from longvinter.deco import PREVIEW_OPACITY, ZERO_ROTATION, DecoBase, DecoComponent, Tent
from longvinter.gameinfo import DataTable, ItemRow, ItemType
from longvinter.inventory import ItemDatabase, UnknownItemError
from longvinter.inventory_component import InventoryComponent

RED = (1.0, 0.0, 0.0, 1.0)
GREEN = (0.0, 1.0, 0.0, 1.0)


@pytest.fixture
def database():
    table = DataTable()
    table.add_row(502, ItemRow(item_name="Tent", item_type=ItemType.DECORATIVE,
                               preview_deco_class=DecoBase, deco_class=Tent))
    table.add_row(1, ItemRow(item_name="Fish"))
    return ItemDatabase(item_table=table)


def test_tick_overlap_disables():
    deco = DecoBase(enable_color=GREEN, disable_color=RED, opacity=0.5)
    deco.tick(2)
    assert deco.color == RED
    assert deco.setup_enabled is False
    deco.tick(0)
    assert deco.color == GREEN
    assert deco.setup_enabled is True


def test_tick_opaque_does_nothing():
    deco = DecoBase(enable_color=GREEN, disable_color=RED)
    deco.set_opacity(1.0)
    deco.tick(0)
    assert deco.setup_enabled is False
    assert deco.color == (0.0, 0.0, 0.0, 0.0)


def test_tent_upgrade_swaps_mesh():
    tent = Tent()
    tent.set_upgraded(False)
    assert tent.mesh_visible is True
    tent.set_upgraded(True)
    assert tent.upgraded is True
    assert tent.mesh_visible is False
    assert tent.upgraded_mesh_visible is True


def test_spawn_preview(database):
    component = DecoComponent(database, owner_location=(1.0, 2.0, 3.0))
    preview = component.spawn_preview(502)
    assert type(preview) is DecoBase
    assert preview.opacity == PREVIEW_OPACITY
    assert preview.item_id == 502
    assert preview.location == (1.0, 2.0, 3.0)


def test_spawn_preview_without_deco(database):
    component = DecoComponent(database)
    assert component.spawn_preview(1) is None
    assert component.preview is None


def test_unknown_item(database):
    with pytest.raises(UnknownItemError):
        DecoComponent(database).spawn_preview(999)


def test_click_blocked_until_enabled(database):
    inventory = InventoryComponent(database)
    inventory.add_item(502)
    component = DecoComponent(database, inventory)
    component.spawn_preview(502)
    assert component.on_click() is None
    assert inventory.items == [502]


def test_click_places_and_crafts(database):
    inventory = InventoryComponent(database)
    inventory.add_item(502)
    component = DecoComponent(database, inventory)
    preview = component.spawn_preview(502)
    preview.location = (5.0, 6.0, 7.0)
    preview.rotation = (0.0, 90.0, 0.0)
    preview.tick(0)
    placed = component.on_click()
    assert isinstance(placed, Tent)
    assert placed.location == (5.0, 6.0, 7.0)
    assert placed.rotation == ZERO_ROTATION
    assert preview.destroyed is True
    assert component.preview is None
    assert inventory.items == []
    assert component.tent is placed
    assert component.craft() is True
    assert placed.upgraded is True


def test_craft_without_tent(database):
    assert DecoComponent(database).craft() is False