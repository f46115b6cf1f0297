import pytest

from longvinter.gameinfo import BuffRow, CraftRow, DataTable, ItemRow, ItemType
from longvinter.inventory import GameInstance, ItemDatabase, UnknownItemError


@pytest.fixture
def item_table():
    table = DataTable()
    table.add_row(1, ItemRow(item_name="Trout", item_type=ItemType.FOOD, texture_path="/t/1"))
    table.add_row(502, ItemRow(item_name="Tent", item_type=ItemType.DECORATIVE))
    return table


def test_item_info_finds_row(item_table):
    database = ItemDatabase(item_table=item_table)
    assert database.item_info(1).item_name == "Trout"
    assert database.item_info(502).item_type is ItemType.DECORATIVE


def test_item_info_unknown_raises(item_table):
    database = ItemDatabase(item_table=item_table)
    with pytest.raises(UnknownItemError) as info:
        database.item_info(999)
    assert info.value.item_id == 999


def test_item_info_without_table_raises():
    with pytest.raises(UnknownItemError):
        ItemDatabase().item_info(1)


def test_update_items_builds_entries_in_order(item_table):
    database = ItemDatabase(item_table=item_table)
    entries = database.update_items([502, 1, 1])
    assert [entry.item_id for entry in entries] == [502, 1, 1]
    assert entries[1].name == "Trout"
    assert entries[1].icon_path == "/t/1"


def test_update_items_unknown_raises(item_table):
    with pytest.raises(UnknownItemError):
        ItemDatabase(item_table=item_table).update_items([1, 7])


def test_game_instance_shares_one_database(item_table):
    buffs = DataTable()
    buffs.add_row(1, BuffRow())
    crafts = DataTable()
    crafts.add_row(1, CraftRow("10", [1]))
    game = GameInstance(item_table, buffs, crafts)
    database = game.inventory()
    assert game.inventory() is database
    assert database.item_table is item_table
    assert database.buff_table is buffs
    assert database.craft_table is crafts


def test_game_instance_without_tables_has_empty_database():
    database = GameInstance().inventory()
    assert database == ItemDatabase()