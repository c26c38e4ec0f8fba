from typing import Any, Union

from web_distribution.client import WebDistributionClient
from web_distribution.dtos.base import Dto
from web_distribution.exceptions import ResponseException


class AbstractRepository:
    def __init__(self, client: WebDistributionClient):
        self.client = client

    @staticmethod
    def resolve_id(entity: Union[Dto, int]) -> int:
        """Accept either an entity or its id and return the id."""
        if isinstance(entity, bool):
            raise TypeError("Expected an entity or an integer id, got bool")
        if isinstance(entity, int):
            return entity
        if isinstance(entity, Dto) and isinstance(getattr(entity, "id", None), int):
            return entity.id
        raise TypeError(f"Expected an entity or an integer id, got {type(entity).__name__}")

    @staticmethod
    def expect_list(response: Any, path: str) -> list:
        if not isinstance(response, list):
            raise ResponseException(
                f"Expected a list from {path}, got {type(response).__name__}",
                payload=response,
            )
        return response
