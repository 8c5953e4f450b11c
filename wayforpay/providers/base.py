"""
Abstract transport interface.

A transport takes a finished field map and delivers it to the gateway
API, returning the decoded JSON body. It does not interpret the response
and does not retry.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any


class Transport(ABC):
    """Abstract base class for gateway transports."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Transport identifier (e.g. 'httpx')."""
        ...

    @abstractmethod
    async def send(self, url: str, payload: Mapping[str, Any]) -> dict[str, Any]:
        """
        POST ``payload`` as JSON to ``url`` and return the decoded body.

        Raises:
            httpx.HTTPError: On network failure.
            ValueError: If the response body is not valid JSON.
        """
        ...

    async def aclose(self) -> None:
        """Release any held connections."""
