"""
Transaction repository.

Lookups plus allocation of inventory pieces to transaction items. Allocation
always posts the complete piece -> quantity map for an item (a reallocation),
so any piece left out of the map is released.
"""

import logging
from typing import Dict, Iterable, Union

from web_distribution.dtos.inventory import Inventory
from web_distribution.dtos.reference import Company
from web_distribution.dtos.transaction import Allocation, Transaction, TransactionItem
from web_distribution.exceptions import NotFoundException, RequestFailedError
from web_distribution.repositories.base import AbstractRepository

logger = logging.getLogger(__name__)

TRANSACTION_RELATIONS = [
    "customer.country",
    "customer.primaryAddress.country",
    "customer.primaryAddress.state",
    "holds.hold",
    "items.allocatedPieces.piece.warehouse",
    "items.item.style.millUnit",
    "items.item.style.productCategoryCode",
    "items.item.style.sellingUnit",
    "rep1",
    "shipToCountry",
    "shipToState",
    "specifier.country",
    "specifier.primaryAddress.country",
    "specifier.primaryAddress.state",
]


class TransactionRepository(AbstractRepository):
    def find_by_transaction_number(self, company: Union[Company, int], transaction_number: str) -> Transaction:
        query = {
            "with": list(TRANSACTION_RELATIONS),
            "company": self.resolve_id(company),
            "transaction_number": transaction_number,
            "transaction_number_exact": True,
        }

        try:
            response = self.client.get_json("api/transaction", query)
        except RequestFailedError as e:
            logger.info(f"Transaction {transaction_number} lookup failed: {e}")
            raise NotFoundException(f"Transaction with number {transaction_number} not found") from e

        rows = self.expect_list(response, "api/transaction")
        if not rows:
            raise NotFoundException(f"Transaction with number {transaction_number} not found")
        return Transaction.hydrate(rows[0])

    def unallocate(self, item: Union[TransactionItem, int]) -> None:
        item_id = self.resolve_id(item)
        self.client.post(f"api/transaction-item/{item_id}/unallocate")

    def allocate_single(self, item: TransactionItem, piece: Inventory) -> None:
        """Allocate the item's full ordered quantity from one piece."""
        self.allocate_single_id(item.id, piece.id, item.quantity_ordered)

    def allocate_single_id(self, item_id: int, piece_id: int, quantity: float) -> None:
        self.allocate_id(item_id, {piece_id: quantity})

    def allocate(self, item: TransactionItem, allocations: Iterable[Allocation]) -> None:
        allocation_map: Dict[int, float] = {}
        for allocation in allocations:
            # last one wins for a repeated piece
            allocation_map[allocation.inventory_id] = allocation.quantity

        self.allocate_id(item.id, allocation_map)

    def allocate_id(self, item_id: int, allocations: Dict[int, float]) -> None:
        logger.debug(f"Reallocating transaction item {item_id}: {allocations}")
        self.client.post(f"api/transaction-item/{item_id}/reallocate", allocations)
