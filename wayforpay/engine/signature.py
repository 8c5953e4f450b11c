"""
Request signature (merchantSignature).

The gateway authenticates each request with an HMAC-MD5 over selected
field values:

  1. Take the signature field list of the transaction type, in catalog order
  2. Render each value as text; sequences are joined with ";" first
  3. Join all pieces with ";" and encode as UTF-8
  4. HMAC-MD5 keyed with the merchant secret, lowercase hex digest

Field order and the two-level join are fixed by the gateway. A mismatch
is only visible as a declined live request.
"""

import codecs
import hashlib
import hmac
from collections.abc import Mapping
from typing import Any

from wayforpay.catalog.resolver import signature_fields
from wayforpay.constants import DEFAULT_CHARSET, DEFAULT_CHARSET_ALIASES, FIELDS_DELIMITER
from wayforpay.engine.errors import EncodingUnsupported, MissingSignatureFields
from wayforpay.models.enums import TransactionType


def is_default_charset(charset: str) -> bool:
    return charset.strip().lower() in DEFAULT_CHARSET_ALIASES


def _ensure_codec(charset: str) -> None:
    try:
        codecs.lookup(charset)
    except LookupError:
        raise EncodingUnsupported(charset) from None


def scalar_text(value: Any, charset: str = "utf-8") -> str:
    """Render one scalar the way the gateway expects to see it signed."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "1" if value else ""
    if isinstance(value, bytes):
        try:
            return value.decode(charset)
        except (LookupError, UnicodeDecodeError) as exc:
            raise EncodingUnsupported(charset) from exc
    if isinstance(value, float):
        # 1.0 is signed as "1", 0.16 as "0.16"
        if value.is_integer() and abs(value) < 1e15:
            return str(int(value))
        return repr(value)
    return str(value)


def signature_piece(value: Any, charset: str = DEFAULT_CHARSET) -> str:
    """Text contribution of one field; sequences are joined with ';'."""
    codec = "utf-8" if is_default_charset(charset) else charset
    if isinstance(value, (list, tuple)):
        return FIELDS_DELIMITER.join(scalar_text(item, codec) for item in value)
    return scalar_text(value, codec)


def _decode_value(value: Any, codec: str) -> Any:
    if isinstance(value, bytes):
        return scalar_text(value, codec)
    if isinstance(value, (list, tuple)) and any(isinstance(item, bytes) for item in value):
        return [scalar_text(item, codec) if isinstance(item, bytes) else item for item in value]
    return value


def decode_fields(fields: Mapping[str, Any], charset: str = DEFAULT_CHARSET) -> dict[str, Any]:
    """
    Copy of ``fields`` with byte values decoded from ``charset`` to text.

    Raises:
        EncodingUnsupported: If the charset has no codec or a value is not
            valid in it.
    """
    codec = "utf-8" if is_default_charset(charset) else charset
    return {key: _decode_value(value, codec) for key, value in fields.items()}


def signature_payload(
    transaction_type: TransactionType | str,
    fields: Mapping[str, Any],
    charset: str = DEFAULT_CHARSET,
) -> bytes:
    """
    Build the UTF-8 byte string that gets signed.

    Raises:
        UnknownTransactionType: If the type is not in the catalog.
        MissingSignatureFields: Naming every absent signature input.
        EncodingUnsupported: If a non-default charset has no codec.
    """
    names = signature_fields(transaction_type)

    missing = [name for name in names if name not in fields]
    if missing:
        raise MissingSignatureFields(missing)

    if not is_default_charset(charset):
        _ensure_codec(charset)

    pieces = [signature_piece(fields[name], charset) for name in names]
    return FIELDS_DELIMITER.join(pieces).encode("utf-8")


def sign(
    transaction_type: TransactionType | str,
    fields: Mapping[str, Any],
    secret: str,
    charset: str = DEFAULT_CHARSET,
) -> str:
    """Lowercase hex HMAC-MD5 of the signature payload keyed with ``secret``."""
    payload = signature_payload(transaction_type, fields, charset)
    return hmac.new(secret.encode("utf-8"), payload, hashlib.md5).hexdigest()
