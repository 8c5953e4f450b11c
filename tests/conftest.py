"""Shared test fixtures."""

import pytest

from wayforpay.client import WayForPay
from wayforpay.engine.builder import RequestBuilder
from wayforpay.models.enums import TransactionType
from wayforpay.models.requests import Credentials
from wayforpay.providers.mock_transport import MockTransport

MERCHANT_ACCOUNT = "test_merch_n1"
MERCHANT_SECRET = "flk3409refn54t54t*FNJ4"

# Regression vector: HMAC-MD5 of
# "test_merch_n1;www.market.ua;RG3656-1430373125;1430373125;0.16;UAH;Saturn BUE 1.2;1;0.16"
PURCHASE_SIGNATURE = "7358baabc59425355a4873760499eee1"

CART_FIELDS = {
    "merchantDomainName": "www.market.ua",
    "orderReference": "RG3656-1430373125",
    "orderDate": 1430373125,
    "amount": 0.16,
    "currency": "UAH",
    "productName": ["Saturn BUE 1.2"],
    "productCount": [1],
    "productPrice": [0.16],
}

# Smallest caller-supplied field set each transaction type accepts.
VALID_FIELDS = {
    TransactionType.PURCHASE: {**CART_FIELDS, "merchantTransactionSecureType": "AUTO"},
    TransactionType.CHARGE: {
        **CART_FIELDS,
        "clientFirstName": "Ivan",
        "clientLastName": "Petrenko",
        "clientEmail": "ivan@example.com",
        "clientPhone": "380501234567",
        "clientCountry": "UKR",
        "clientIpAddress": "10.0.0.1",
        "card": "4111111111111111",
        "expMonth": "12",
        "expYear": "2030",
        "cardCvv": "123",
        "cardHolder": "IVAN PETRENKO",
    },
    TransactionType.CREATE_INVOICE: dict(CART_FIELDS),
    TransactionType.SETTLE: {"orderReference": "RG3656-1430373125", "amount": 0.16, "currency": "UAH"},
    TransactionType.REFUND: {
        "orderReference": "RG3656-1430373125",
        "amount": 0.16,
        "currency": "UAH",
        "comment": "Customer returned goods",
    },
    TransactionType.CHECK_STATUS: {"orderReference": "RG3656-1430373125"},
    TransactionType.COMPLETE_3DS: {
        "authorization_ticket": "ticket-1",
        "d3ds_md": "md-1",
        "d3ds_pares": "pares-1",
    },
    TransactionType.ACCOUNT_TO_CARD: {
        "orderReference": "P2P-0001",
        "amount": 150,
        "currency": "UAH",
        "cardBeneficiary": "4111111111111111",
        "rec2Token": "rec2-token-1",
    },
    TransactionType.ACCOUNT_TO_PHONE: {
        "orderReference": "PHONE-0001",
        "amount": 25,
        "currency": "UAH",
        "phone": "380501234567",
    },
    TransactionType.TRANSACTION_LIST: {"dateBegin": 1430373125, "dateEnd": 1430459525},
}


@pytest.fixture
def credentials():
    return Credentials(merchant_account=MERCHANT_ACCOUNT, merchant_password=MERCHANT_SECRET)


@pytest.fixture
def builder(credentials):
    return RequestBuilder(credentials)


@pytest.fixture
def transport():
    return MockTransport()


@pytest.fixture
def client(transport):
    """Client wired to an offline transport."""
    return WayForPay(MERCHANT_ACCOUNT, MERCHANT_SECRET, transport=transport)


@pytest.fixture
def purchase_fields():
    return dict(VALID_FIELDS[TransactionType.PURCHASE])
