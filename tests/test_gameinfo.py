from longvinter.gameinfo import (
    PACKET_SIZE,
    BuffRow,
    BuffType,
    ChatPacketHeader,
    CraftRow,
    DataTable,
    EquipmentType,
    ItemRow,
    ItemType,
)


def test_enum_order_matches_declaration():
    assert list(EquipmentType)[0] is EquipmentType.NONE
    assert list(ItemType)[-1] is ItemType.MK
    assert list(BuffType)[-1] is BuffType.ATTACK_SPEED
    assert ChatPacketHeader.MSG == 0
    assert PACKET_SIZE == 2048
    assert ItemRow().item_type is list(ItemType)[0]
    table: DataTable[BuffRow] = DataTable()
    row = BuffRow(list(BuffType)[-1], 1.0)
    table.add_row(1, row)
    assert table.find_row(1) is row


def test_item_row_lists_are_independent():
    first = ItemRow()
    second = ItemRow()
    first.buff_list.append(1)
    assert second.buff_list == []
    assert first.item_type is ItemType.NORMAL


def test_find_row_accepts_int_or_str_names():
    table: DataTable[BuffRow] = DataTable()
    row = BuffRow(BuffType.SPEED, 10.0)
    table.add_row(3, row)
    assert table.find_row(3) is row
    assert table.find_row("3") is row
    assert 3 in table


def test_find_row_missing_returns_none():
    table: DataTable[BuffRow] = DataTable()
    assert table.find_row("nope") is None


def test_rows_keep_insertion_order_and_replace_in_place():
    table: DataTable[CraftRow] = DataTable()
    a = CraftRow("10", [1, 2])
    b = CraftRow("11", [3])
    c = CraftRow("12", [4])
    table.add_row("a", a)
    table.add_row("b", b)
    table.add_row("a", c)
    assert table.rows() == [c, b]
    assert list(table) == ["a", "b"]
    assert len(table) == 2