"""Request canonicalization and signing."""

from .canonical import SignableList, SignableObject, canonical_string, canonicalize, format_price
from .errors import InvalidKeyError, InvalidUriError, SigningEncodingError, SigningError
from .headers import (
    AUTHORIZATION,
    CLIENT_VERSION_HEADER_NAME,
    RANDOM_HEADER_NAME,
    V1_SCHEME,
    V2_SCHEME,
    ApiVersion,
    AuthHeaderBuilder,
    authorization_v1,
    authorization_v2,
    client_version,
)
from .nonce import legacy_nonce, uuid_nonce
from .signers import extract_v2_path, sign_v1, sign_v2

__all__ = [
    "AUTHORIZATION",
    "CLIENT_VERSION_HEADER_NAME",
    "RANDOM_HEADER_NAME",
    "V1_SCHEME",
    "V2_SCHEME",
    "ApiVersion",
    "AuthHeaderBuilder",
    "InvalidKeyError",
    "InvalidUriError",
    "SignableList",
    "SignableObject",
    "SigningEncodingError",
    "SigningError",
    "authorization_v1",
    "authorization_v2",
    "canonical_string",
    "canonicalize",
    "client_version",
    "extract_v2_path",
    "format_price",
    "legacy_nonce",
    "sign_v1",
    "sign_v2",
    "uuid_nonce",
]
