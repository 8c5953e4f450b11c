"""
Gateway client: one method per transaction type.

API operations (settle, charge, refund, ...) prepare a signed request and
send it through the configured transport, returning the decoded gateway
reply untouched. PURCHASE is browser-driven, so it is exposed as form,
redirect URL and widget renderings instead of an API call.
"""

from collections.abc import Mapping
from typing import Any, Optional

from wayforpay.audit.logger import log_request, log_response
from wayforpay.config import settings
from wayforpay.engine.builder import RequestBuilder
from wayforpay.models.enums import TransactionType
from wayforpay.models.requests import Credentials
from wayforpay.providers.base import Transport
from wayforpay.providers.http_transport import HttpxTransport
from wayforpay.rendering import render_form, render_purchase_url, render_widget

Fields = Mapping[str, Any]


class WayForPay:
    """
    Client bound to one merchant account.

    Arguments left as ``None`` fall back to ``wayforpay.config.settings``
    (``WAYFORPAY_*`` environment variables).

    Raises:
        InvalidConfiguration: If the account or password ends up empty.
    """

    def __init__(
        self,
        merchant_account: Optional[str] = None,
        merchant_password: Optional[str] = None,
        charset: Optional[str] = None,
        transport: Optional[Transport] = None,
        api_url: Optional[str] = None,
    ):
        self._credentials = Credentials(
            merchant_account=merchant_account if merchant_account is not None else settings.merchant_account,
            merchant_password=merchant_password if merchant_password is not None else settings.merchant_password,
        )
        self._builder = RequestBuilder(
            self._credentials,
            charset=charset if charset is not None else settings.charset,
        )
        self._transport = transport if transport is not None else HttpxTransport()
        self._api_url = api_url or settings.api_url

    @property
    def merchant_account(self) -> str:
        return self._credentials.merchant_account

    @property
    def builder(self) -> RequestBuilder:
        return self._builder

    @property
    def transport(self) -> Transport:
        return self._transport

    async def __aenter__(self) -> "WayForPay":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._transport.aclose()

    # ==================== CORE ====================

    def prepare(self, transaction_type: TransactionType | str, fields: Fields) -> dict[str, Any]:
        return self._builder.prepare(transaction_type, fields)

    def create_signature(self, transaction_type: TransactionType | str, fields: Fields) -> str:
        return self._builder.build_signature(transaction_type, fields)

    async def build_request_payload(
        self,
        transaction_type: TransactionType | str,
        fields: Fields,
    ) -> dict[str, Any]:
        """Prepare a request, send it to the API and return the decoded reply."""
        request = self._builder.prepare_request(transaction_type, fields)
        log_request(request.transaction_type.value, request.fields)

        response = await self._transport.send(self._api_url, request.fields)

        log_response(request.transaction_type.value, request.order_reference, response)
        return response

    # ==================== API OPERATIONS ====================

    async def settle(self, fields: Fields) -> dict[str, Any]:
        return await self.build_request_payload(TransactionType.SETTLE, fields)

    async def charge(self, fields: Fields) -> dict[str, Any]:
        return await self.build_request_payload(TransactionType.CHARGE, fields)

    async def complete_3ds(self, fields: Fields) -> dict[str, Any]:
        return await self.build_request_payload(TransactionType.COMPLETE_3DS, fields)

    async def refund(self, fields: Fields) -> dict[str, Any]:
        return await self.build_request_payload(TransactionType.REFUND, fields)

    async def check_status(self, fields: Fields) -> dict[str, Any]:
        return await self.build_request_payload(TransactionType.CHECK_STATUS, fields)

    async def account_to_card(self, fields: Fields) -> dict[str, Any]:
        return await self.build_request_payload(TransactionType.ACCOUNT_TO_CARD, fields)

    async def create_invoice(self, fields: Fields) -> dict[str, Any]:
        return await self.build_request_payload(TransactionType.CREATE_INVOICE, fields)

    async def account_to_phone(self, fields: Fields) -> dict[str, Any]:
        return await self.build_request_payload(TransactionType.ACCOUNT_TO_PHONE, fields)

    async def transaction_list(self, fields: Fields) -> dict[str, Any]:
        return await self.build_request_payload(TransactionType.TRANSACTION_LIST, fields)

    # ==================== PURCHASE (browser) ====================

    def build_form(self, fields: Fields) -> str:
        """HTML form that posts a signed purchase to the hosted payment page."""
        return render_form(self._builder.prepare(TransactionType.PURCHASE, fields))

    def generate_purchase_url(self, fields: Fields) -> str:
        """GET redirect URL for a signed purchase."""
        return render_purchase_url(self._builder.prepare(TransactionType.PURCHASE, fields))

    def build_widget_button(self, fields: Fields, callback: Optional[str] = None) -> str:
        """Script snippet that opens the payment widget for a signed purchase."""
        return render_widget(self._builder.prepare(TransactionType.PURCHASE, fields), callback)
