"""
Web Distribution HTTP client.

The only place that talks HTTP to the Web Distribution API. Repositories call
get_json / put_json / post and receive decoded JSON back.

Implementation notes:
- Uses a synchronous httpx.Client; one client is shared by all repositories
- Query strings follow the API's PHP conventions (``with[]=a&with[]=b``, booleans as 1/0)
- httpx errors are re-raised as the SDK's transport errors, nothing is retried
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional, Tuple

import httpx

from web_distribution.config import ClientConfig
from web_distribution.exceptions import (
    BadResponseError,
    RequestFailedError,
    ResponseException,
    TransportError,
)

logger = logging.getLogger(__name__)


def encode_query(query: Optional[Mapping[str, Any]]) -> List[Tuple[str, str]]:
    params: List[Tuple[str, str]] = []
    for key, value in (query or {}).items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            params.extend((f"{key}[]", _encode_scalar(v)) for v in value)
        else:
            params.append((key, _encode_scalar(value)))
    return params


def _encode_scalar(value: Any) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    return str(value)


class WebDistributionClient:
    def __init__(self, config: ClientConfig, transport: Optional[httpx.BaseTransport] = None) -> None:
        self.config = config
        self._http = httpx.Client(
            base_url=config.base_url,
            timeout=config.timeout_seconds,
            headers=self._headers(),
            transport=transport,
            follow_redirects=True,
        )

    def _headers(self) -> Dict[str, str]:
        headers = {
            "Accept": "application/json",
            "User-Agent": self.config.user_agent,
        }
        if self.config.api_token:
            headers["Authorization"] = f"Bearer {self.config.api_token}"
        return headers

    def get_json(self, path: str, query: Optional[Mapping[str, Any]] = None) -> Any:
        return self._request("GET", path, params=encode_query(query))

    def put_json(self, path: str, body: Any) -> Any:
        return self._request("PUT", path, json=body)

    def post(self, path: str, body: Any = None) -> Any:
        if body is None:
            return self._request("POST", path)
        return self._request("POST", path, json=body)

    def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        try:
            response = self._http.request(method, path, **kwargs)
            logger.debug(f"{method} {path} -> {response.status_code}")
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.debug(f"Web Distribution returned {status} for {method} {path}")
            raise BadResponseError(
                f"{method} {path} failed with status {status}",
                status_code=status,
                payload=_safe_body(e.response),
            ) from e
        except httpx.TooManyRedirects as e:
            raise RequestFailedError(f"{method} {path} failed: {e}") from e
        except httpx.HTTPError as e:
            logger.error(f"Request error connecting to Web Distribution: {e}")
            raise TransportError(f"{method} {path} failed: {e}") from e

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise ResponseException(
                f"{method} {path} returned a non-JSON body",
                payload=response.text,
            ) from e

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "WebDistributionClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


def _safe_body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text
