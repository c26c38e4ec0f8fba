"""
Repositories.

One class per API resource. Each method builds the query, issues a single
request through the shared WebDistributionClient and hydrates the result.
"""

from .base import AbstractRepository
from .companies import CompanyRepository, LineRepository
from .inventory import InventoryRepository
from .products import ProductRepository
from .transactions import TransactionRepository

__all__ = [
    "AbstractRepository",
    "CompanyRepository",
    "InventoryRepository",
    "LineRepository",
    "ProductRepository",
    "TransactionRepository",
]
