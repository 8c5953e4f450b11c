"""HTTP transport backed by a shared httpx.AsyncClient."""

import json
import logging
from collections.abc import Mapping
from decimal import Decimal
from typing import Any, Optional

import httpx

from wayforpay.config import settings
from wayforpay.constants import JSON_CONTENT_TYPE
from wayforpay.providers.base import Transport

logger = logging.getLogger("wayforpay.transport")


def _json_default(value: Any) -> Any:
    # Decimal amounts go out as JSON numbers
    if isinstance(value, Decimal):
        return float(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


class HttpxTransport(Transport):
    """
    Sends gateway requests over HTTPS.

    The underlying client is created lazily on first use and reused for
    every later call. Pass ``client`` to supply a preconfigured one
    (custom transport, proxies, tests).
    """

    def __init__(
        self,
        timeout: Optional[float] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self._timeout = timeout if timeout is not None else settings.timeout
        self._client = client

    @property
    def name(self) -> str:
        return "httpx"

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self._timeout, connect=5.0),
                limits=httpx.Limits(max_connections=10, max_keepalive_connections=5),
            )
        return self._client

    async def send(self, url: str, payload: Mapping[str, Any]) -> dict[str, Any]:
        body = json.dumps(payload, ensure_ascii=False, default=_json_default).encode("utf-8")
        response = await self._get_client().post(
            url,
            content=body,
            headers={"Content-Type": JSON_CONTENT_TYPE},
        )
        logger.debug("POST %s -> %d", url, response.status_code)
        return response.json()

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None
