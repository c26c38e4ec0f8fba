from typing import Any, Optional

import httpx

from web_distribution.client import WebDistributionClient
from web_distribution.config import ClientConfig
from web_distribution.repositories import (
    CompanyRepository,
    InventoryRepository,
    LineRepository,
    ProductRepository,
    TransactionRepository,
)


class WebDistribution:
    """
    Entry point: one client shared by every repository.

    Usage:
        with WebDistribution.from_config(load_client_config()) as wd:
            product = wd.products.find(company_id, "1234-01")
    """

    def __init__(self, client: WebDistributionClient):
        self.client = client
        self.products = ProductRepository(client)
        self.inventory = InventoryRepository(client)
        self.transactions = TransactionRepository(client)
        self.companies = CompanyRepository(client)
        self.lines = LineRepository(client)

    @classmethod
    def from_config(cls, config: ClientConfig, transport: Optional[httpx.BaseTransport] = None) -> "WebDistribution":
        return cls(WebDistributionClient(config, transport=transport))

    def close(self) -> None:
        self.client.close()

    def __enter__(self) -> "WebDistribution":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
