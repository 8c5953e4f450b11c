from wayforpay.models.enums import TransactionType
from wayforpay.models.requests import Credentials, PreparedRequest

__all__ = [
    "Credentials",
    "PreparedRequest",
    "TransactionType",
]
