from longvinter.itemdata import ItemData
from longvinter.vendor import vendor_entry_layout


def test_selling_entry():
    data = ItemData(icon_path="/icons/fish", description="120", description_left="80")
    layout = vendor_entry_layout(data)
    assert layout.is_selling is True
    assert layout.left_icon_visible and not layout.right_icon_visible
    assert layout.right_text == "120"
    assert layout.right_text_visible and not layout.left_text_visible
    assert layout.right_mk_visible and not layout.left_mk_visible
    assert layout.icon_path == "/icons/fish"


def test_buying_entry():
    data = ItemData(icon_path="/icons/rod", description="0", description_left="300")
    layout = vendor_entry_layout(data)
    assert layout.is_selling is False
    assert layout.right_icon_visible and not layout.left_icon_visible
    assert layout.left_text == "300"
    assert layout.left_text_visible and not layout.right_text_visible
    assert layout.left_mk_visible and not layout.right_mk_visible


def test_sides_are_mirror_images():
    for description in ("0", "5", ""):
        layout = vendor_entry_layout(ItemData(description=description))
        assert layout.left_icon_visible != layout.right_icon_visible
        assert layout.left_text_visible != layout.right_text_visible
        assert layout.left_mk_visible != layout.right_mk_visible


def test_empty_description_counts_as_selling():
    layout = vendor_entry_layout(ItemData(description=""))
    assert layout.is_selling is True
    assert layout.right_text == ""