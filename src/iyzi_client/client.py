"""Client facade over the V1 (canonical string) and V2 (JSON body) endpoints."""

from __future__ import annotations

import logging
from typing import Any
import urllib.parse

from iyzi_client.config import ClientOptions
from iyzi_client.models import (
    BaseRequest,
    CreateCancelRequest,
    CreatePaymentRequest,
    CreateRefundRequest,
    IyziLinkSaveRequest,
    IyzipayResource,
    PagingRequest,
    RetrieveBinNumberRequest,
    RetrieveInstallmentInfoRequest,
    RetrievePaymentRequest,
)
from iyzi_client.signing import ApiVersion, AuthHeaderBuilder, SigningError, canonical_string
from iyzi_client.transport import HttpTransport, Transport

logger = logging.getLogger(__name__)

API_TEST = "/payment/test"
BIN_CHECK = "/payment/bin/check"
INSTALLMENT = "/payment/iyzipos/installment"
PAYMENT_AUTH = "/payment/auth"
PAYMENT_DETAIL = "/payment/detail"
PAYMENT_CANCEL = "/payment/cancel"
PAYMENT_REFUND = "/payment/refund"
V2_IYZILINK_PRODUCTS = "/v2/iyzilink/products"
IYZILINK_PRODUCT_TYPE = ("productType", "IYZILINK")


class IyzipayClient:
    """Signs and sends API requests; a signing failure aborts before sending."""

    def __init__(
        self,
        options: ClientOptions,
        transport: Transport | None = None,
        header_builder: AuthHeaderBuilder | None = None,
    ) -> None:
        self.options = options
        self.transport = transport or HttpTransport(timeout_seconds=options.timeout_seconds)
        self.header_builder = header_builder or AuthHeaderBuilder(credentials=options.credentials)

    def _wrap(self, response: dict[str, Any], url: str) -> IyzipayResource:
        resource = IyzipayResource.from_dict(response)
        if not resource.succeeded:
            logger.warning(
                "Request to %s failed: status=%s errorCode=%s errorMessage=%s",
                url,
                resource.status,
                resource.error_code,
                resource.error_message,
            )
        return resource

    def _signed_headers(self, version: ApiVersion, **kwargs: str) -> dict[str, str]:
        try:
            return self.header_builder.headers_for(version, **kwargs)
        except SigningError:
            logger.error("Refusing to send %s request; signing failed.", version)
            raise

    def _send_v1(self, path: str, request: BaseRequest) -> IyzipayResource:
        url = self.options.url(path)
        headers = self._signed_headers(ApiVersion.V1, canonical_body=canonical_string(request))
        response = self.transport.request_json("POST", url, body=request.to_json(), headers=headers)
        return self._wrap(response, url)

    def _send_v2(self, method: str, path: str, query: str, body: str = "") -> IyzipayResource:
        uri = f"{self.options.url(path)}{query}"
        logger.debug("uri:%s", uri)
        headers = self._signed_headers(ApiVersion.V2, uri=uri, body=body)
        response = self.transport.request_json(method, uri, body=body or None, headers=headers)
        return self._wrap(response, uri)

    def api_test(self) -> IyzipayResource:
        url = self.options.url(API_TEST)
        return self._wrap(self.transport.request_json("GET", url), url)

    def retrieve_bin_number(self, request: RetrieveBinNumberRequest) -> IyzipayResource:
        return self._send_v1(BIN_CHECK, request)

    def retrieve_installment_info(self, request: RetrieveInstallmentInfoRequest) -> IyzipayResource:
        return self._send_v1(INSTALLMENT, request)

    def create_payment(self, request: CreatePaymentRequest) -> IyzipayResource:
        return self._send_v1(PAYMENT_AUTH, request)

    def retrieve_payment(self, request: RetrievePaymentRequest) -> IyzipayResource:
        return self._send_v1(PAYMENT_DETAIL, request)

    def create_cancel(self, request: CreateCancelRequest) -> IyzipayResource:
        return self._send_v1(PAYMENT_CANCEL, request)

    def create_refund(self, request: CreateRefundRequest) -> IyzipayResource:
        return self._send_v1(PAYMENT_REFUND, request)

    def create_iyzilink(self, request: IyziLinkSaveRequest) -> IyzipayResource:
        body = request.to_json()
        logger.debug("RequestBody:%s", body)
        return self._send_v2("POST", V2_IYZILINK_PRODUCTS, request.query_params(), body)

    def update_iyzilink(self, token: str, request: IyziLinkSaveRequest) -> IyzipayResource:
        body = request.to_json()
        logger.debug("RequestBody:%s", body)
        return self._send_v2("PUT", f"{V2_IYZILINK_PRODUCTS}/{token}", request.query_params(), body)

    def retrieve_iyzilink(self, token: str, request: BaseRequest) -> IyzipayResource:
        return self._send_v2("GET", f"{V2_IYZILINK_PRODUCTS}/{token}", request.query_params())

    def retrieve_all_iyzilinks(self, request: PagingRequest) -> IyzipayResource:
        query = f"?{urllib.parse.urlencode([*request.query_pairs(), IYZILINK_PRODUCT_TYPE])}"
        return self._send_v2("GET", V2_IYZILINK_PRODUCTS, query)

    def delete_iyzilink(self, token: str, request: BaseRequest) -> IyzipayResource:
        return self._send_v2("DELETE", f"{V2_IYZILINK_PRODUCTS}/{token}", request.query_params())
