"""
Product repository.

Wraps the ``api/item`` and ``api/style`` endpoints.

Known limitation:
- The API cannot filter by company and line at the same time. When a line_id
  option is passed to products()/iterate() the line filter replaces the company
  filter, so a line that belongs to another company returns that company's
  products. This is logged as a warning, not corrected.
"""

import logging
from typing import Any, Callable, Dict, Iterator, Optional, Union

from web_distribution.dtos.freight import FreightRequest, FreightResponse
from web_distribution.dtos.product import Product
from web_distribution.dtos.reference import Company
from web_distribution.exceptions import BadResponseError, NotFoundException
from web_distribution.repositories.base import AbstractRepository

logger = logging.getLogger(__name__)

LISTING_RELATIONS = [
    "style.productCategoryCode",
    "style.primaryPrice",
    "company",
    "line",
    "primaryBook",
    "style.sellingUnit",
    "style.millUnit",
]

DETAIL_RELATIONS = [
    "style.productCategoryCode",
    "style.primaryPrice",
    "company",
    "discontinueCode",
    "line",
    "primaryBook",
    "style.sellingUnit",
    "style.millUnit",
]


class ProductRepository(AbstractRepository):
    def products(
        self,
        company: Union[Company, int],
        options: Optional[Dict[str, Any]] = None,
        per_page: int = 128,
    ) -> Iterator[Product]:
        """
        Yield every product of a company, one page at a time.

        The next page is only requested once every product of the current page
        has been consumed. Iteration ends at the first empty page.
        """
        options = options or {}
        query: Dict[str, Any] = {
            "with": list(LISTING_RELATIONS),
            "count": per_page,
            "page": 1,
        }

        line_id = options.get("line_id")
        if line_id:
            query["line"] = self.resolve_id(line_id)
            logger.warning(
                f"Filtering products by line {query['line']} instead of company {self.resolve_id(company)}; "
                "the API cannot apply both, so products from other companies are returned if the line belongs to one"
            )
        else:
            query["company"] = self.resolve_id(company)

        while True:
            page = self.expect_list(self.client.get_json("api/item", dict(query)), "api/item")
            logger.debug(f"Fetched product page {query['page']} ({len(page)} items)")
            for row in page:
                yield Product.hydrate(row)
            query["page"] += 1
            if not page:
                return

    def iterate(
        self,
        company: Union[Company, int],
        callback: Callable[[Product], Any],
        options: Optional[Dict[str, Any]] = None,
        per_page: int = 128,
    ) -> None:
        """Invoke callback for every product; an exception from callback stops iteration."""
        for product in self.products(company, options, per_page):
            callback(product)

    def find(self, company: Union[Company, int], item_number: str) -> Product:
        """Exact item number lookup within a company, trashed items included."""
        query = {
            "company": self.resolve_id(company),
            "search": f"#{item_number}",
            "trashed": "true",
            "with": list(DETAIL_RELATIONS),
        }
        response = self.expect_list(self.client.get_json("api/item", query), "api/item")
        if not response:
            logger.info(f"No product {item_number} for company {query['company']}")
            raise NotFoundException(f"Product {item_number} not found", payload=query)
        return Product.hydrate(response[0])

    def find_by_id(self, product_id: int) -> Product:
        try:
            response = self.client.get_json(f"api/item/{product_id}", {"with": list(DETAIL_RELATIONS)})
        except BadResponseError as e:
            logger.info(f"Product {product_id} lookup failed with status {e.status_code}")
            raise NotFoundException(f"Product with id {product_id} not found") from e
        return Product.hydrate(response)

    def update(self, product: Product) -> Product:
        """
        Write the style fields, then the item fields, then re-fetch the product.

        The two writes are independent requests: if the item write fails the
        style write has already been applied.
        """
        if product.style_id is None:
            raise ValueError(f"Product {product.id} has no style_id")
        if product.company is None:
            raise ValueError(f"Product {product.id} has no company")

        self.client.put_json(f"api/style/{product.style_id}", {
            "name": product.style_name,
            "content": product.content,
            "width": product.width,
            "repeat": product.repeat,
        })
        self.client.put_json(f"api/item/{product.id}", {
            "item_number": product.item_number,
            "color_name": product.color_name,
            "warehouse_location": product.warehouse_location,
            "sample_warehouse_location": product.warehouse_location_sample,
        })
        logger.info(f"Updated product {product.id} ({product.item_number})")

        return self.find(product.company, product.item_number)

    def freight(self, product: Union[Product, int], request: FreightRequest) -> FreightResponse:
        request.validate()

        query = {
            "postal_code": request.postal_code,
            "quantity": request.quantity,
            "country": request.country,
        }
        product_id = self.resolve_id(product)
        return FreightResponse.hydrate(self.client.get_json(f"api/item/{product_id}/freight", query))
