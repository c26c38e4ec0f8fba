"""
Freight quote request/response.

The request is validated locally before it is sent, in the same way as the
other outgoing request objects: validate_freight_request() returns a list of
errors, an empty list means the request is valid.
"""

import re
from dataclasses import dataclass
from typing import List, Optional

from web_distribution.dtos.base import Dto, HasCustomFields
from web_distribution.exceptions import InvalidRequestError

_COUNTRY_CODE = re.compile(r"^[A-Za-z]{2}$")


@dataclass
class FreightRequest:
    postal_code: str
    quantity: float
    country: str = "US"

    def validate(self) -> None:
        errors = validate_freight_request(self)
        if errors:
            raise InvalidRequestError(errors)


def validate_freight_request(request: FreightRequest) -> List[str]:
    errors: List[str] = []

    if not request.postal_code or not str(request.postal_code).strip():
        errors.append("postal_code is required")
    if request.quantity is None or request.quantity <= 0:
        errors.append("quantity must be greater than zero")
    if not request.country or not _COUNTRY_CODE.match(request.country):
        errors.append(f"country '{request.country}' must be a 2-letter ISO code")

    return errors


class FreightResponse(HasCustomFields, Dto):
    amount: float
    currency: Optional[str] = None
    carrier: Optional[str] = None
    service: Optional[str] = None
    transit_days: Optional[int] = None
