from typing import ClassVar, Dict, Optional

from web_distribution.dtos.base import Dto


class Inventory(Dto):
    """A single inventory piece, flattened with the item it belongs to."""

    source_map: ClassVar[Dict[str, str]] = {
        "item_number": "item.item_number",
        "style_name": "item.style.name",
        "color_name": "item.color_name",
    }

    id: int
    item_number: Optional[str] = None
    style_name: Optional[str] = None
    color_name: Optional[str] = None
    lot: Optional[str] = None
    piece: Optional[str] = None
    warehouse_location: Optional[str] = None
    active: Optional[bool] = None
    approved: Optional[bool] = None
    pre_receipt: Optional[bool] = None
    seconds: Optional[bool] = None
    comment: Optional[str] = None
    vendor_piece: Optional[str] = None
    quantity_on_hand: Optional[float] = None
    # Computed once when the row is hydrated; not refreshed afterwards.
    quantity_available: Optional[float] = None
