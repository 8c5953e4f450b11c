from wayforpay.client import WayForPay
from wayforpay.config import Settings, settings
from wayforpay.engine.builder import RequestBuilder
from wayforpay.engine.errors import (
    EmptyInput,
    EncodingUnsupported,
    InvalidConfiguration,
    MissingRequiredFields,
    MissingSignatureFields,
    UnknownTransactionType,
    WayForPayError,
)
from wayforpay.engine.signature import sign
from wayforpay.models import Credentials, PreparedRequest, TransactionType
from wayforpay.providers.base import Transport
from wayforpay.providers.http_transport import HttpxTransport
from wayforpay.providers.mock_transport import MockTransport

__all__ = [
    "Credentials",
    "EmptyInput",
    "EncodingUnsupported",
    "HttpxTransport",
    "InvalidConfiguration",
    "MissingRequiredFields",
    "MissingSignatureFields",
    "MockTransport",
    "PreparedRequest",
    "RequestBuilder",
    "Settings",
    "Transport",
    "TransactionType",
    "UnknownTransactionType",
    "WayForPay",
    "WayForPayError",
    "settings",
    "sign",
]
