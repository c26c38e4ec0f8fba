"""
DTOs (data models).

Flat typed records hydrated from Web Distribution JSON responses. Each DTO
declares a ``source_map`` table for fields that live at a nested path in the
response; everything else maps by name.
"""

from .base import CustomField, Dto, HasCustomFields, get_all_custom_fields, resolve_path
from .freight import FreightRequest, FreightResponse, validate_freight_request
from .inventory import Inventory
from .product import Product
from .reference import Address, Company, Country, Customer, Hold, Line, Rep, State, Warehouse
from .transaction import Allocation, Transaction, TransactionItem

__all__ = [
    # hydration
    "CustomField", "Dto", "HasCustomFields", "get_all_custom_fields", "resolve_path",
    # reference
    "Address", "Company", "Country", "Customer", "Hold", "Line", "Rep", "State", "Warehouse",
    # products / inventory
    "FreightRequest", "FreightResponse", "Inventory", "Product", "validate_freight_request",
    # transactions
    "Allocation", "Transaction", "TransactionItem",
]
