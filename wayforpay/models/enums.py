"""Enumerations for the gateway domain model."""

from enum import Enum


class TransactionType(str, Enum):
    """Transaction types accepted by the gateway, valued by their wire identifier."""

    PURCHASE = "PURCHASE"
    SETTLE = "SETTLE"
    CHARGE = "CHARGE"
    COMPLETE_3DS = "COMPLETE_3DS"
    REFUND = "REFUND"
    CHECK_STATUS = "CHECK_STATUS"
    ACCOUNT_TO_CARD = "P2P_CREDIT"
    CREATE_INVOICE = "CREATE_INVOICE"
    ACCOUNT_TO_PHONE = "P2_PHONE"
    TRANSACTION_LIST = "TRANSACTION_LIST"
