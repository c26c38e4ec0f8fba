"""
Reference data: companies and the product lines they own.
"""

import logging
from typing import List, Union

from web_distribution.dtos.reference import Company, Line
from web_distribution.exceptions import BadResponseError, NotFoundException
from web_distribution.repositories.base import AbstractRepository

logger = logging.getLogger(__name__)


class CompanyRepository(AbstractRepository):
    def list(self) -> List[Company]:
        rows = self.expect_list(self.client.get_json("api/company"), "api/company")
        return [Company.hydrate(row) for row in rows]

    def find_by_id(self, company_id: int) -> Company:
        try:
            return Company.hydrate(self.client.get_json(f"api/company/{company_id}"))
        except BadResponseError as e:
            logger.info(f"Company {company_id} lookup failed with status {e.status_code}")
            raise NotFoundException(f"Company with id {company_id} not found") from e


class LineRepository(AbstractRepository):
    def list_by_company(self, company: Union[Company, int]) -> List[Line]:
        rows = self.expect_list(
            self.client.get_json("api/line", {"company": self.resolve_id(company)}),
            "api/line",
        )
        return [Line.hydrate(row) for row in rows]
