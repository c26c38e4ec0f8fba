"""
Web Distribution SDK.

Python client for the Web Distribution REST API (products, inventory, sales
transactions). Responses are hydrated into the flat DTOs under
``web_distribution.dtos``; every request goes through one
WebDistributionClient shared by the repositories.
"""

__version__ = "1.0.0"

from .client import WebDistributionClient
from .config import ClientConfig, load_client_config
from .exceptions import (
    BadResponseError,
    HydrationError,
    InvalidRequestError,
    NotFoundException,
    RequestFailedError,
    ResponseException,
    TransportError,
    WebDistributionError,
)
from .sdk import WebDistribution

__all__ = [
    "WebDistribution", "WebDistributionClient", "ClientConfig", "load_client_config",
    # errors
    "BadResponseError", "HydrationError", "InvalidRequestError", "NotFoundException",
    "RequestFailedError", "ResponseException", "TransportError", "WebDistributionError",
]
