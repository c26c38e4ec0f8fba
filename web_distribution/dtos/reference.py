"""
Reference entities shared by products and transactions.
"""

from typing import ClassVar, Dict, Optional

from web_distribution.dtos.base import Dto, HasCustomFields


class Company(Dto):
    id: int
    name: Optional[str] = None
    code: Optional[str] = None


class Line(Dto):
    id: int
    name: Optional[str] = None
    code: Optional[str] = None
    company_id: Optional[int] = None


class Country(Dto):
    id: Optional[int] = None
    name: Optional[str] = None
    code: Optional[str] = None


class State(Dto):
    id: Optional[int] = None
    name: Optional[str] = None
    code: Optional[str] = None


class Address(Dto):
    id: Optional[int] = None
    address_1: Optional[str] = None
    address_2: Optional[str] = None
    city: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[Country] = None
    state: Optional[State] = None


class Warehouse(Dto):
    id: int
    name: Optional[str] = None
    code: Optional[str] = None


class Rep(Dto):
    id: int
    name: Optional[str] = None
    rep_number: Optional[str] = None


class Hold(Dto):
    """A hold placed on a transaction; the hold type is nested under ``hold``."""

    source_map: ClassVar[Dict[str, str]] = {
        "name": "hold.name",
        "code": "hold.code",
    }

    id: Optional[int] = None
    name: Optional[str] = None
    code: Optional[str] = None
    comment: Optional[str] = None


class Customer(HasCustomFields, Dto):
    """Customers and specifiers share this shape."""

    id: int
    customer_number: Optional[str] = None
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    country: Optional[Country] = None
    primary_address: Optional[Address] = None
