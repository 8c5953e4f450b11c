"""
Offline transport for development and tests.

Records every payload it receives and answers with a canned approval
shaped like a real gateway reply, or with a response supplied by the
caller. Nothing leaves the process.
"""

from collections.abc import Mapping
from typing import Any, Optional

from wayforpay.providers.base import Transport

APPROVED_REASON_CODE = 1100


class MockTransport(Transport):
    """Transport that never touches the network."""

    def __init__(self, response: Optional[Mapping[str, Any]] = None):
        self._response = dict(response) if response is not None else None
        self.sent: list[tuple[str, dict[str, Any]]] = []

    @property
    def name(self) -> str:
        return "mock"

    async def send(self, url: str, payload: Mapping[str, Any]) -> dict[str, Any]:
        self.sent.append((url, dict(payload)))

        if self._response is not None:
            return dict(self._response)

        return {
            "merchantAccount": payload.get("merchantAccount"),
            "orderReference": payload.get("orderReference"),
            "transactionStatus": "Approved",
            "reasonCode": APPROVED_REASON_CODE,
            "reason": "Ok",
        }

    @property
    def last_payload(self) -> Optional[dict[str, Any]]:
        return self.sent[-1][1] if self.sent else None
