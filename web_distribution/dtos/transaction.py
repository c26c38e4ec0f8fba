from typing import ClassVar, Dict, List, Optional

from pydantic import Field

from web_distribution.dtos.base import Dto, HasCustomFields
from web_distribution.dtos.reference import Country, Customer, Hold, Rep, State, Warehouse


class Allocation(Dto):
    """Quantity of one inventory piece assigned to a transaction item."""

    source_map: ClassVar[Dict[str, str]] = {
        "inventory_id": "piece_id",
        "lot": "piece.lot",
        "piece_number": "piece.piece",
        "warehouse": "piece.warehouse",
    }

    inventory_id: int
    quantity: float
    lot: Optional[str] = None
    piece_number: Optional[str] = None
    warehouse: Optional[Warehouse] = None


class TransactionItem(Dto):
    source_map: ClassVar[Dict[str, str]] = {
        "item_number": "item.item_number",
        "style_name": "item.style.name",
        "color_name": "item.color_name",
        "allocations": "allocated_pieces",
    }

    id: int
    item_id: Optional[int] = None
    item_number: Optional[str] = None
    style_name: Optional[str] = None
    color_name: Optional[str] = None
    quantity_ordered: float = 0.0
    price: Optional[float] = None
    allocations: List[Allocation] = Field(default_factory=list)

    @property
    def quantity_allocated(self) -> float:
        return sum(allocation.quantity for allocation in self.allocations)


class Transaction(HasCustomFields, Dto):
    id: int
    transaction_number: str
    company_id: Optional[int] = None
    customer: Optional[Customer] = None
    specifier: Optional[Customer] = None
    rep1: Optional[Rep] = None
    ship_to_name: Optional[str] = None
    ship_to_address_1: Optional[str] = None
    ship_to_address_2: Optional[str] = None
    ship_to_city: Optional[str] = None
    ship_to_postal_code: Optional[str] = None
    ship_to_country: Optional[Country] = None
    ship_to_state: Optional[State] = None
    holds: List[Hold] = Field(default_factory=list)
    items: List[TransactionItem] = Field(default_factory=list)

    @property
    def on_hold(self) -> bool:
        return bool(self.holds)
