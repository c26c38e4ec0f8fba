from typing import ClassVar, Dict, Optional

from web_distribution.dtos.base import Dto
from web_distribution.dtos.reference import Company, Line


class Product(Dto):
    """
    A sellable item (style + color). Most descriptive fields live on the nested
    style record and are flattened here.
    """

    source_map: ClassVar[Dict[str, str]] = {
        "style_name": "style.name",
        "category": "style.product_category_code.name",
        "content": "style.content",
        "width": "style.width",
        "repeat": "style.repeat",
        "price": "style.primary_price.wholesale_price",
        "selling_unit": "style.selling_unit.name",
        "mill_unit": "style.mill_unit.name",
        "warehouse_location_sample": "sample_warehouse_location",
        "discontinue_code": "discontinue_code.name",
        "primary_book": "primary_book.name",
    }

    id: int
    item_number: str
    style_id: Optional[int] = None
    style_name: str
    color_name: Optional[str] = None
    category: str
    content: Optional[str] = None
    width: Optional[str] = None
    repeat: Optional[str] = None
    price: Optional[float] = None
    selling_unit: Optional[str] = None
    mill_unit: Optional[str] = None
    warehouse_location: Optional[str] = None
    warehouse_location_sample: Optional[str] = None
    discontinue_code: Optional[str] = None
    primary_book: Optional[str] = None
    deleted_at: Optional[str] = None
    company: Optional[Company] = None
    line: Optional[Line] = None

    @property
    def trashed(self) -> bool:
        return self.deleted_at is not None
