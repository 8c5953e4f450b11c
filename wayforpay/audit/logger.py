"""
Audit log lines for gateway traffic.

Every outbound request and every decoded response gets one INFO record
carrying the transaction type, order reference and a truncated JSON dump
of the payload. Card data and the signature are masked before anything
reaches a handler.
"""

import json
import logging
from collections.abc import Mapping
from typing import Any, Optional

logger = logging.getLogger("wayforpay.audit")

SENSITIVE_FIELDS = frozenset(
    {"card", "cardCvv", "expMonth", "expYear", "recToken", "rec2Token", "cardBeneficiary"}
)
MAX_DETAIL_CHARS = 200


def _mask(value: Any) -> str:
    text = str(value)
    if len(text) <= 4:
        return "****"
    return "*" * (len(text) - 4) + text[-4:]


def mask_fields(fields: Mapping[str, Any]) -> dict[str, Any]:
    """Copy of ``fields`` safe to log: card data masked, signature shortened."""
    masked: dict[str, Any] = {}
    for key, value in fields.items():
        if key in SENSITIVE_FIELDS and value:
            masked[key] = _mask(value)
        elif key == "merchantSignature" and value:
            masked[key] = f"{str(value)[:6]}..."
        else:
            masked[key] = value
    return masked


def _dump(fields: Any) -> str:
    if not fields:
        return ""
    if isinstance(fields, Mapping):
        fields = mask_fields(fields)
    return json.dumps(fields, ensure_ascii=False, default=str)[:MAX_DETAIL_CHARS]


def log_request(transaction_type: str, fields: Mapping[str, Any]) -> None:
    logger.info(
        "REQUEST | type=%s order=%s | %s",
        transaction_type,
        fields.get("orderReference") or "-",
        _dump(fields),
    )


def log_response(
    transaction_type: str,
    order_reference: Optional[str],
    response: Any,
) -> None:
    logger.info(
        "RESPONSE | type=%s order=%s | %s",
        transaction_type,
        order_reference or "-",
        _dump(response),
    )
