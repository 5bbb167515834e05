"""Request models. Field declaration order is the canonical signing order."""

from __future__ import annotations

from dataclasses import dataclass, fields
from decimal import Decimal
from typing import Any, ClassVar
import urllib.parse

from iyzi_client.signing import SignableObject

from .base import ApiModel, api_field, wire_key
from .enums import BasketItemType, Currency, Locale, PaymentChannel, PaymentGroup, RefundReason


@dataclass(slots=True)
class BaseRequest(ApiModel):
    """
    Locale/conversation envelope shared by every request.

    On its own it signs unbracketed; inside a subclass it is merged inline
    ahead of the subclass fields.
    """

    bracketed: ClassVar[bool] = False

    locale: Locale | str | None = api_field()
    conversation_id: str | None = api_field()

    def envelope(self) -> SignableObject:
        return SignableObject.of(
            [("locale", self.locale), ("conversationId", self.conversation_id)],
            bracketed=False,
        )

    def signed_fields(self) -> list[tuple[str | None, Any]]:
        own = [
            (wire_key(f), getattr(self, f.name))
            for f in fields(self)
            if f.metadata.get("signed", True) and f.name not in _ENVELOPE_FIELDS
        ]
        if type(self) is BaseRequest:
            return list(self.envelope().fields)
        return [(None, self.envelope()), *own]

    def query_pairs(self) -> list[tuple[str, str]]:
        pairs: list[tuple[str, str]] = []
        if self.conversation_id:
            pairs.append(("conversationId", self.conversation_id))
        if self.locale:
            pairs.append(("locale", str(self.locale)))
        return pairs

    def query_params(self) -> str:
        pairs = self.query_pairs()
        return f"?{urllib.parse.urlencode(pairs)}" if pairs else ""


_ENVELOPE_FIELDS = frozenset({"locale", "conversation_id"})


@dataclass(slots=True)
class PagingRequest(BaseRequest):
    bracketed: ClassVar[bool] = True

    page: int | None = api_field()
    count: int | None = api_field()

    def query_pairs(self) -> list[tuple[str, str]]:
        pairs = BaseRequest.query_pairs(self)
        if self.page is not None:
            pairs.append(("page", str(self.page)))
        if self.count is not None:
            pairs.append(("count", str(self.count)))
        return pairs


@dataclass(slots=True)
class Address(ApiModel):
    address: str | None = api_field()
    zip_code: str | None = api_field()
    contact_name: str | None = api_field()
    city: str | None = api_field()
    country: str | None = api_field()


@dataclass(slots=True)
class Buyer(ApiModel):
    id: str | None = api_field()
    name: str | None = api_field()
    surname: str | None = api_field()
    identity_number: str | None = api_field()
    email: str | None = api_field()
    gsm_number: str | None = api_field()
    registration_date: str | None = api_field()
    last_login_date: str | None = api_field()
    registration_address: str | None = api_field()
    city: str | None = api_field()
    country: str | None = api_field()
    zip_code: str | None = api_field()
    ip: str | None = api_field()


@dataclass(slots=True)
class PaymentCard(ApiModel):
    card_holder_name: str | None = api_field()
    card_number: str | None = api_field()
    expire_year: str | None = api_field()
    expire_month: str | None = api_field()
    cvc: str | None = api_field()
    register_card: int | None = api_field()
    card_alias: str | None = api_field()
    card_token: str | None = api_field()
    card_user_key: str | None = api_field()


@dataclass(slots=True)
class BasketItem(ApiModel):
    id: str | None = api_field()
    price: Decimal | None = api_field()
    name: str | None = api_field()
    category1: str | None = api_field()
    category2: str | None = api_field()
    item_type: BasketItemType | str | None = api_field()
    sub_merchant_key: str | None = api_field()
    sub_merchant_price: Decimal | None = api_field()


@dataclass(slots=True)
class RetrieveBinNumberRequest(BaseRequest):
    bracketed: ClassVar[bool] = True

    bin_number: str | None = api_field()


@dataclass(slots=True)
class RetrieveInstallmentInfoRequest(BaseRequest):
    bracketed: ClassVar[bool] = True

    bin_number: str | None = api_field()
    price: Decimal | None = api_field()
    currency: Currency | str | None = api_field()


@dataclass(slots=True)
class CreatePaymentRequest(BaseRequest):
    bracketed: ClassVar[bool] = True

    price: Decimal | None = api_field()
    paid_price: Decimal | None = api_field()
    installment: int | None = api_field()
    payment_channel: PaymentChannel | str | None = api_field()
    basket_id: str | None = api_field()
    payment_group: PaymentGroup | str | None = api_field()
    payment_card: PaymentCard | None = api_field()
    buyer: Buyer | None = api_field()
    shipping_address: Address | None = api_field()
    billing_address: Address | None = api_field()
    basket_items: list[BasketItem] | None = api_field()
    payment_source: str | None = api_field()
    pos_order_id: str | None = api_field()
    currency: Currency | str | None = api_field()
    connector_name: str | None = api_field()
    callback_url: str | None = api_field()


@dataclass(slots=True)
class RetrievePaymentRequest(BaseRequest):
    bracketed: ClassVar[bool] = True

    payment_id: str | None = api_field()
    payment_conversation_id: str | None = api_field()


@dataclass(slots=True)
class CreateCancelRequest(BaseRequest):
    bracketed: ClassVar[bool] = True

    payment_id: str | None = api_field()
    ip: str | None = api_field()
    reason: RefundReason | None = api_field()
    description: str | None = api_field()


@dataclass(slots=True)
class CreateRefundRequest(BaseRequest):
    bracketed: ClassVar[bool] = True

    payment_transaction_id: str | None = api_field()
    price: Decimal | None = api_field()
    ip: str | None = api_field()
    currency: Currency | str | None = api_field()
    reason: RefundReason | None = api_field()
    description: str | None = api_field()


@dataclass(slots=True)
class IyziLinkSaveRequest(BaseRequest):
    """Sent to V2 endpoints, which sign the JSON body; only the envelope is canonical."""

    bracketed: ClassVar[bool] = True

    name: str | None = api_field(signed=False)
    description: str | None = api_field(signed=False)
    base64_encoded_image: str | None = api_field(json_key="encodedImageFile", signed=False)
    price: Decimal | None = api_field(signed=False)
    currency: Currency | str | None = api_field(json_key="currencyCode", signed=False)
    address_ignorable: bool | None = api_field(signed=False)
    sold_limit: int | None = api_field(signed=False)
    installment_requested: bool | None = api_field(signed=False)
