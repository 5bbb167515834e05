"""Enumerated request values understood by the API."""

from __future__ import annotations

from enum import StrEnum


class Locale(StrEnum):
    EN = "en"
    TR = "tr"


class Currency(StrEnum):
    TRY = "TRY"
    EUR = "EUR"
    USD = "USD"
    GBP = "GBP"
    IRR = "IRR"
    NOK = "NOK"
    RUB = "RUB"
    CHF = "CHF"


class PaymentChannel(StrEnum):
    MOBILE = "MOBILE"
    WEB = "WEB"
    MOBILE_WEB = "MOBILE_WEB"
    MOBILE_IOS = "MOBILE_IOS"
    MOBILE_ANDROID = "MOBILE_ANDROID"
    MOBILE_WINDOWS = "MOBILE_WINDOWS"
    MOBILE_TABLET = "MOBILE_TABLET"
    MOBILE_PHONE = "MOBILE_PHONE"


class PaymentGroup(StrEnum):
    PRODUCT = "PRODUCT"
    LISTING = "LISTING"
    SUBSCRIPTION = "SUBSCRIPTION"


class BasketItemType(StrEnum):
    PHYSICAL = "PHYSICAL"
    VIRTUAL = "VIRTUAL"


class RefundReason(StrEnum):
    DOUBLE_PAYMENT = "DOUBLE_PAYMENT"
    BUYER_REQUEST = "BUYER_REQUEST"
    FRAUD = "FRAUD"
    OTHER = "OTHER"
