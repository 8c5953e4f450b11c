"""
Transaction catalog lookups.

Pure functions over the static tables in ``catalog.fields``. The only
input-dependent decision is the CHARGE payment-source branch, which is
resolved from the field map built so far:

  - ``recToken`` present and non-empty → token charge, requires ``recToken``
  - otherwise → card charge, requires card number, expiry, CVV and holder
"""

from collections.abc import Mapping
from typing import Any

from wayforpay.catalog.fields import (
    API_BOOKKEEPING_FIELDS,
    CHARGE_CARD_FIELDS,
    CHARGE_TOKEN_FIELDS,
    EXTRA_REQUIRED_FIELDS,
    SIGNATURE_FIELDS,
    SIGNED_OPTIONAL_FIELDS,
)
from wayforpay.engine.errors import UnknownTransactionType
from wayforpay.models.enums import TransactionType


def is_empty(value: Any) -> bool:
    """True for values the gateway treats as not supplied."""
    if value is None:
        return True
    if isinstance(value, (str, bytes, list, tuple)):
        return len(value) == 0
    return False


def resolve_type(transaction_type: TransactionType | str) -> TransactionType:
    """
    Coerce a wire identifier or enum member into a ``TransactionType``.

    Raises:
        UnknownTransactionType: If the value names no catalog entry.
    """
    if isinstance(transaction_type, TransactionType):
        return transaction_type
    try:
        return TransactionType(transaction_type)
    except ValueError:
        raise UnknownTransactionType(transaction_type) from None


def signature_fields(transaction_type: TransactionType | str) -> tuple[str, ...]:
    """Ordered field names whose values make up the signature payload."""
    return SIGNATURE_FIELDS[resolve_type(transaction_type)]


def _charge_payment_fields(fields: Mapping[str, Any]) -> tuple[str, ...]:
    if not is_empty(fields.get("recToken")):
        return CHARGE_TOKEN_FIELDS
    return CHARGE_CARD_FIELDS


def required_fields(
    transaction_type: TransactionType | str,
    fields: Mapping[str, Any],
) -> list[str]:
    """
    Field names that must be present and non-empty for a transaction type.

    Args:
        transaction_type: Catalog entry to look up.
        fields: The field map built so far. Only consulted for CHARGE.

    Returns:
        De-duplicated names: bookkeeping fields first, then signature
        fields (less those allowed to be empty), then type-specific extras.
    """
    tx_type = resolve_type(transaction_type)

    groups: list[tuple[str, ...]] = []
    if tx_type is not TransactionType.PURCHASE:
        groups.append(API_BOOKKEEPING_FIELDS)
    optional = SIGNED_OPTIONAL_FIELDS.get(tx_type, ())
    groups.append(tuple(name for name in SIGNATURE_FIELDS[tx_type] if name not in optional))
    groups.append(EXTRA_REQUIRED_FIELDS.get(tx_type, ()))
    if tx_type is TransactionType.CHARGE:
        groups.append(_charge_payment_fields(fields))

    # dict preserves first-seen order
    return list(dict.fromkeys(name for group in groups for name in group))
