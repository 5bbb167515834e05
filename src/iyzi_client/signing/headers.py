"""Authorization header assembly for V1 and V2 endpoints."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
import logging
from typing import Callable

from iyzi_client.config import Credentials

from .nonce import legacy_nonce, uuid_nonce
from .signers import sign_v1, sign_v2

logger = logging.getLogger(__name__)

CLIENT_TITLE = "iyzi-client"
CLIENT_VERSION = "0.1.0"

AUTHORIZATION = "Authorization"
RANDOM_HEADER_NAME = "x-iyzi-rnd"
CLIENT_VERSION_HEADER_NAME = "x-iyzi-client-version"
CONTENT_TYPE = "Content-Type"
ACCEPT = "Accept"
APPLICATION_JSON = "application/json"

V1_SCHEME = "IYZWS"
V2_SCHEME = "IYZWSv2"


class ApiVersion(StrEnum):
    V1 = "v1"
    V2 = "v2"


def authorization_v1(credentials: Credentials, nonce: str, canonical_body: str) -> str:
    digest = sign_v1(credentials.api_key, credentials.secret_key, nonce, canonical_body)
    return f"{V1_SCHEME} {credentials.api_key}:{digest}"


def authorization_v2(credentials: Credentials, uri: str, nonce: str, body: str = "") -> str:
    content = sign_v2(uri, credentials.api_key, credentials.secret_key, nonce, body)
    return f"{V2_SCHEME} {content}"


def client_version() -> str:
    return f"{CLIENT_TITLE}-{CLIENT_VERSION}"


@dataclass(slots=True)
class AuthHeaderBuilder:
    """
    Builds the header set for one outgoing request.

    Nonce factories are swappable so tests can pin the random component.
    """

    credentials: Credentials
    v1_nonce: Callable[[], str] = legacy_nonce
    v2_nonce: Callable[[], str] = uuid_nonce
    client_version: str = field(default_factory=client_version)

    def v1_headers(self, canonical_body: str) -> dict[str, str]:
        nonce = self.v1_nonce()
        logger.debug("Request:%s", canonical_body)
        headers = {
            RANDOM_HEADER_NAME: nonce,
            AUTHORIZATION: authorization_v1(self.credentials, nonce, canonical_body),
            CLIENT_VERSION_HEADER_NAME: self.client_version,
            CONTENT_TYPE: APPLICATION_JSON,
            ACCEPT: APPLICATION_JSON,
        }
        logger.debug("Signed V1 request nonce=%s headers=%s", nonce, sorted(headers))
        return headers

    def v2_headers(self, uri: str, body: str = "") -> dict[str, str]:
        nonce = self.v2_nonce()
        headers = {
            AUTHORIZATION: authorization_v2(self.credentials, uri, nonce, body),
            CLIENT_VERSION_HEADER_NAME: self.client_version,
        }
        logger.debug("Signed V2 request uri=%s nonce=%s headers=%s", uri, nonce, sorted(headers))
        return headers

    def headers_for(
        self,
        version: ApiVersion,
        *,
        uri: str = "",
        canonical_body: str = "",
        body: str = "",
    ) -> dict[str, str]:
        if version == ApiVersion.V1:
            return self.v1_headers(canonical_body)
        if version == ApiVersion.V2:
            return self.v2_headers(uri, body)
        raise ValueError(f"Unsupported API version: {version}")
