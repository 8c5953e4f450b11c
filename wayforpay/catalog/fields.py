"""
Per-transaction-type field tables.

Signature field order is part of the wire contract: the gateway verifies
the HMAC over the values joined in exactly this order, so these tuples
must never be reordered.

Required fields are the signature fields plus the bookkeeping and
customer-data fields each operation demands. CHARGE has a conditional
tail resolved at lookup time (stored-credential token vs. raw card data).
"""

from wayforpay.models.enums import TransactionType

# ─── Signature fields ─────────────────────────────────────────────────
# Shared by every operation that carries a full cart.
PURCHASE_SIGNATURE_FIELDS: tuple[str, ...] = (
    "merchantAccount",
    "merchantDomainName",
    "orderReference",
    "orderDate",
    "amount",
    "currency",
    "productName",
    "productCount",
    "productPrice",
)

# Operations on an existing order.
ORDER_SIGNATURE_FIELDS: tuple[str, ...] = (
    "merchantAccount",
    "orderReference",
    "amount",
    "currency",
)

SIGNATURE_FIELDS: dict[TransactionType, tuple[str, ...]] = {
    TransactionType.PURCHASE: PURCHASE_SIGNATURE_FIELDS,
    TransactionType.CHARGE: PURCHASE_SIGNATURE_FIELDS,
    TransactionType.CREATE_INVOICE: PURCHASE_SIGNATURE_FIELDS,
    TransactionType.SETTLE: ORDER_SIGNATURE_FIELDS,
    TransactionType.REFUND: ORDER_SIGNATURE_FIELDS,
    TransactionType.CHECK_STATUS: ("merchantAccount", "orderReference"),
    # 3-D Secure completion is keyed by the ticket, not the merchant
    TransactionType.COMPLETE_3DS: ("authorization_ticket", "d3ds_md", "d3ds_pares"),
    TransactionType.ACCOUNT_TO_CARD: ORDER_SIGNATURE_FIELDS + ("cardBeneficiary", "rec2Token"),
    TransactionType.ACCOUNT_TO_PHONE: ORDER_SIGNATURE_FIELDS + ("phone",),
    TransactionType.TRANSACTION_LIST: ("merchantAccount", "dateBegin", "dateEnd"),
}

# ─── Required fields beyond the signature set ─────────────────────────
# Added by prepare() for every type except PURCHASE.
API_BOOKKEEPING_FIELDS: tuple[str, ...] = ("transactionType", "apiVersion")

CHARGE_CLIENT_FIELDS: tuple[str, ...] = (
    "clientFirstName",
    "clientLastName",
    "clientEmail",
    "clientPhone",
    "clientCountry",
    "clientIpAddress",
)

# CHARGE pays either with a stored-credential token or with raw card data.
CHARGE_TOKEN_FIELDS: tuple[str, ...] = ("recToken",)
CHARGE_CARD_FIELDS: tuple[str, ...] = ("card", "expMonth", "expYear", "cardCvv", "cardHolder")

# Signed but allowed to be empty: a payout to a raw card number sends an
# empty rec2Token. The key itself must still be present for signing.
SIGNED_OPTIONAL_FIELDS: dict[TransactionType, tuple[str, ...]] = {
    TransactionType.ACCOUNT_TO_CARD: ("rec2Token",),
}

# P2_PHONE carries orderDate but it is not part of the required set.
EXTRA_REQUIRED_FIELDS: dict[TransactionType, tuple[str, ...]] = {
    TransactionType.PURCHASE: ("merchantTransactionSecureType",),
    TransactionType.CHARGE: CHARGE_CLIENT_FIELDS,
    TransactionType.REFUND: ("comment",),
    TransactionType.ACCOUNT_TO_CARD: ("merchantSignature",),
}
