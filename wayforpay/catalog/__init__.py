from wayforpay.catalog.fields import EXTRA_REQUIRED_FIELDS, SIGNATURE_FIELDS
from wayforpay.catalog.resolver import is_empty, required_fields, resolve_type, signature_fields

__all__ = [
    "EXTRA_REQUIRED_FIELDS",
    "SIGNATURE_FIELDS",
    "is_empty",
    "required_fields",
    "resolve_type",
    "signature_fields",
]
