"""
Exception hierarchy for the Web Distribution SDK.

Transport errors come from the HTTP client; repositories translate the ones they
understand into NotFoundException and let everything else propagate.
"""

from __future__ import annotations

from typing import Any, List, Optional


class WebDistributionError(Exception):
    def __init__(self, message: str = "", *, payload: Any = None) -> None:
        super().__init__(message)
        self.payload = payload


# ---------------------------------------------------------------------------
# Transport
# ---------------------------------------------------------------------------

class TransportError(WebDistributionError):
    """Network level failure (connect error, timeout, protocol error)."""


class RequestFailedError(TransportError):
    """The request completed but failed (error status, too many redirects)."""


class BadResponseError(RequestFailedError):
    def __init__(self, message: str, *, status_code: int, payload: Any = None) -> None:
        super().__init__(message, payload=payload)
        self.status_code = status_code


# ---------------------------------------------------------------------------
# Domain
# ---------------------------------------------------------------------------

class ResponseException(WebDistributionError):
    """The API answered with a body we cannot use."""


class NotFoundException(WebDistributionError):
    pass


class HydrationError(WebDistributionError):
    """A required field is missing or has the wrong type."""

    def __init__(self, message: str, *, field: Optional[str] = None, payload: Any = None) -> None:
        super().__init__(message, payload=payload)
        self.field = field


class InvalidRequestError(WebDistributionError, ValueError):
    def __init__(self, errors: List[str]) -> None:
        super().__init__("; ".join(errors))
        self.errors = errors
