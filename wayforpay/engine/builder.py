"""
Request builder: turns caller fields into a signed, validated field map.

The flow for each request:

  1. Reject an empty field map
  2. Resolve the transaction type against the catalog
  3. Add transactionType and merchantAccount, then sign
  4. Add apiVersion (every type except PURCHASE)
  5. Validate required fields, reporting all missing names at once

The builder holds only immutable credentials, so one instance can serve
concurrent callers. The caller's mapping is copied, never mutated; byte values in the
configured charset come back as text.
"""

import logging
from collections.abc import Mapping
from typing import Any

from wayforpay.catalog.resolver import is_empty, required_fields, resolve_type
from wayforpay.constants import API_VERSION, DEFAULT_CHARSET
from wayforpay.engine.errors import EmptyInput, MissingRequiredFields
from wayforpay.engine.signature import decode_fields, sign
from wayforpay.models.enums import TransactionType
from wayforpay.models.requests import Credentials, PreparedRequest

logger = logging.getLogger("wayforpay.builder")


def find_missing(required: list[str], fields: Mapping[str, Any]) -> list[str]:
    """Required names that are absent or hold an empty value."""
    return [name for name in required if is_empty(fields.get(name))]


class RequestBuilder:
    """Assembles gateway requests for one merchant."""

    def __init__(self, credentials: Credentials, charset: str = DEFAULT_CHARSET):
        self._credentials = credentials
        self._charset = charset

    @property
    def merchant_account(self) -> str:
        return self._credentials.merchant_account

    @property
    def charset(self) -> str:
        return self._charset

    def prepare(
        self,
        transaction_type: TransactionType | str,
        fields: Mapping[str, Any],
    ) -> dict[str, Any]:
        """
        Build the finished field map for a transaction.

        Args:
            transaction_type: Catalog entry or its wire identifier.
            fields: Business fields supplied by the caller.

        Returns:
            A new dict with transactionType, merchantAccount,
            merchantSignature and (except PURCHASE) apiVersion merged in.

        Raises:
            EmptyInput: If ``fields`` is empty.
            UnknownTransactionType: If the type is not in the catalog.
            MissingSignatureFields: If signature inputs are absent.
            MissingRequiredFields: If required fields are absent or empty.
            EncodingUnsupported: If the configured charset has no codec
                or a byte value is not valid in it.
        """
        if not fields:
            raise EmptyInput()

        tx_type = resolve_type(transaction_type)

        # Byte values are decoded once so the returned map holds text only
        params = decode_fields(fields, self._charset)
        params["transactionType"] = tx_type.value
        params["merchantAccount"] = self._credentials.merchant_account
        params["merchantSignature"] = sign(
            tx_type, params, self._credentials.merchant_password, self._charset
        )

        if tx_type is not TransactionType.PURCHASE:
            params["apiVersion"] = API_VERSION

        missing = find_missing(required_fields(tx_type, params), params)
        if missing:
            logger.warning(
                "Rejected %s request for order %s: missing %s",
                tx_type.value,
                params.get("orderReference") or "-",
                ", ".join(missing),
            )
            raise MissingRequiredFields(missing)

        return params

    def prepare_request(
        self,
        transaction_type: TransactionType | str,
        fields: Mapping[str, Any],
    ) -> PreparedRequest:
        """Same as :meth:`prepare`, wrapped with its resolved type."""
        params = self.prepare(transaction_type, fields)
        return PreparedRequest(transaction_type=resolve_type(transaction_type), fields=params)

    def build_signature(
        self,
        transaction_type: TransactionType | str,
        fields: Mapping[str, Any],
    ) -> str:
        """Run the full prepare pass and return only the signature."""
        return self.prepare(transaction_type, fields)["merchantSignature"]
