"""Merchant credentials and the finished request handed to a transport."""

from dataclasses import dataclass, field
from typing import Any

from wayforpay.engine.errors import InvalidConfiguration
from wayforpay.models.enums import TransactionType


@dataclass(frozen=True)
class Credentials:
    """Merchant account identifier and secret key used for signing."""

    merchant_account: str
    merchant_password: str = field(repr=False)

    def __post_init__(self):
        if not isinstance(self.merchant_account, str) or self.merchant_account == "":
            raise InvalidConfiguration("Merchant account must be string and not empty")
        if not isinstance(self.merchant_password, str) or self.merchant_password == "":
            raise InvalidConfiguration("Merchant password must be string and not empty")


@dataclass
class PreparedRequest:
    """A validated, signed field map ready for transmission."""

    transaction_type: TransactionType
    fields: dict[str, Any]

    @property
    def signature(self) -> str:
        return self.fields["merchantSignature"]

    @property
    def order_reference(self) -> str | None:
        return self.fields.get("orderReference")
