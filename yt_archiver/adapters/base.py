"""Errors and the abstract continuation client used by the fetch services."""

from abc import ABC, abstractmethod
from typing import Any


class ArchiverError(Exception):
    """Base error for the archiver."""

    pass


class RequestFailed(ArchiverError):
    """Raised when the platform answers with a non-success HTTP status."""

    def __init__(self, status_code: int, url: str, message: str = "") -> None:
        self.status_code = status_code
        self.url = url
        detail = message or f"request to {url} returned {status_code}"
        super().__init__(detail)


class ContinuationClient(ABC):
    """Anything that can resolve a continuation token to a decoded response."""

    @abstractmethod
    async def post_next(self, api_url: str, client_version: str, continuation: str) -> dict[str, Any]:
        """POST one continuation request and return the decoded JSON."""
        ...
