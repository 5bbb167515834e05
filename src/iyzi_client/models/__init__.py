"""Request and response models."""

from .base import ApiModel, api_field
from .enums import BasketItemType, Currency, Locale, PaymentChannel, PaymentGroup, RefundReason
from .requests import (
    Address,
    BaseRequest,
    BasketItem,
    Buyer,
    CreateCancelRequest,
    CreatePaymentRequest,
    CreateRefundRequest,
    IyziLinkSaveRequest,
    PagingRequest,
    PaymentCard,
    RetrieveBinNumberRequest,
    RetrieveInstallmentInfoRequest,
    RetrievePaymentRequest,
)
from .resources import IyzipayResource

__all__ = [
    "Address",
    "ApiModel",
    "BaseRequest",
    "BasketItem",
    "BasketItemType",
    "Buyer",
    "CreateCancelRequest",
    "CreatePaymentRequest",
    "CreateRefundRequest",
    "Currency",
    "IyziLinkSaveRequest",
    "IyzipayResource",
    "Locale",
    "PagingRequest",
    "PaymentCard",
    "PaymentChannel",
    "PaymentGroup",
    "RefundReason",
    "RetrieveBinNumberRequest",
    "RetrieveInstallmentInfoRequest",
    "RetrievePaymentRequest",
    "api_field",
]
