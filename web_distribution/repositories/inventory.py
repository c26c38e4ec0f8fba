import logging
from typing import Any, Dict, List

from web_distribution.dtos.inventory import Inventory
from web_distribution.dtos.product import Product
from web_distribution.exceptions import NotFoundException, RequestFailedError
from web_distribution.repositories.base import AbstractRepository

logger = logging.getLogger(__name__)


class InventoryRepository(AbstractRepository):
    def find_by_id(self, inventory_id: int) -> Inventory:
        try:
            response = self.client.get_json(f"api/inventory/{inventory_id}", {"with": ["item.style"]})
        except RequestFailedError as e:
            logger.info(f"Inventory {inventory_id} lookup failed: {e}")
            raise NotFoundException(f"Inventory with id {inventory_id} not found") from e
        return Inventory.hydrate(response)

    def list_by_product(self, product: Product) -> List[Inventory]:
        """
        List the inventory pieces of a product.

        The rows are re-shaped with the product's own item number, style and
        color, and quantity_available is computed from on_hand - allocated.
        """
        path = f"api/item/{product.id}/inventory"
        response = self.client.get_json(path, {"with": ["item.style"], "item": product.id})
        rows = self.expect_list(response, path)
        return [Inventory.hydrate(self._reshape(row, product)) for row in rows]

    @staticmethod
    def _reshape(row: Dict[str, Any], product: Product) -> Dict[str, Any]:
        on_hand = row.get("on_hand") or 0
        allocated = row.get("allocated") or 0
        return {
            "id": row.get("id"),
            "item": {
                "item_number": product.item_number,
                "style": {"name": product.style_name},
                "color_name": product.color_name,
            },
            "lot": row.get("lot"),
            "piece": row.get("piece"),
            "warehouse_location": row.get("warehouse_location"),
            "active": True,
            "approved": True,
            "pre_receipt": False,
            "seconds": _is_seconds(row.get("seconds")),
            "comment": row.get("comment"),
            "vendor_piece": row.get("mill_piece"),
            "quantity_on_hand": row.get("on_hand"),
            "quantity_available": on_hand - allocated,
        }


def _is_seconds(flag: Any) -> bool:
    # only the integer 1 marks seconds; a JSON true does not
    return flag == 1 and not isinstance(flag, bool)
