"""Layout of one vendor list entry: a selling or a buying offer."""

from __future__ import annotations

from dataclasses import dataclass

from .itemdata import ItemData

NOT_SOLD = "0"


@dataclass(frozen=True)
class VendorEntryLayout:
    """Which icon, price text and MK label a vendor entry shows, and on which side."""

    icon_path: str
    is_selling: bool
    left_icon_visible: bool
    right_icon_visible: bool
    left_text: str
    left_text_visible: bool
    right_text: str
    right_text_visible: bool
    left_mk_visible: bool
    right_mk_visible: bool


def vendor_entry_layout(data: ItemData) -> VendorEntryLayout:
    """Lay out an entry: a non-zero sell price puts the icon left and the price right."""
    selling = data.description != NOT_SOLD
    if selling:
        return VendorEntryLayout(
            icon_path=data.icon_path,
            is_selling=True,
            left_icon_visible=True,
            right_icon_visible=False,
            left_text="",
            left_text_visible=False,
            right_text=data.description,
            right_text_visible=True,
            left_mk_visible=False,
            right_mk_visible=True,
        )
    return VendorEntryLayout(
        icon_path=data.icon_path,
        is_selling=False,
        left_icon_visible=False,
        right_icon_visible=True,
        left_text=data.description_left,
        left_text_visible=True,
        right_text="",
        right_text_visible=False,
        left_mk_visible=True,
        right_mk_visible=False,
    )