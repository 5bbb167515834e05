"""Signature primitives for the IYZWS (V1) and IYZWSv2 (V2) schemes."""

from __future__ import annotations

import base64
import hashlib
import hmac

from .errors import InvalidKeyError, InvalidUriError, SigningEncodingError

V2_PATH_MARKER = "/v2"
QUERY_MARKER = "?"


def _utf8(text: str, label: str) -> bytes:
    try:
        return text.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise SigningEncodingError(f"{label} is not valid UTF-8 text.") from exc


def _b64(raw: bytes) -> str:
    return base64.b64encode(raw).decode("ascii")


def sign_v1(api_key: str, secret_key: str, nonce: str, canonical_body: str) -> str:
    """Base64 SHA-1 of ``api_key + nonce + secret_key + canonical_body``."""
    message = _utf8(f"{api_key}{nonce}{secret_key}{canonical_body}", "V1 signing input")
    return _b64(hashlib.sha1(message).digest())


def extract_v2_path(uri: str) -> str:
    """
    Return the URI path from the first ``/v2`` up to the query string.

    Raises InvalidUriError when the URI has no ``/v2`` segment.
    """
    start = uri.find(V2_PATH_MARKER)
    if start < 0:
        raise InvalidUriError(f"URI has no '{V2_PATH_MARKER}' path segment: {uri!r}")
    end = uri.find(QUERY_MARKER, start)
    if end < 0:
        return uri[start:]
    return uri[start:end]


def hmac_sha256_hex(secret_key: str, payload: str) -> str:
    if not isinstance(secret_key, str) or not secret_key:
        raise InvalidKeyError("HMAC secret key must be a non-empty string.")
    key = _utf8(secret_key, "Secret key")
    return hmac.new(key, _utf8(payload, "V2 signing payload"), hashlib.sha256).hexdigest()


def sign_v2(uri: str, api_key: str, secret_key: str, nonce: str, body: str = "") -> str:
    """Base64 of ``apiKey:..&randomKey:..&signature:<hex hmac>`` over nonce + path + body."""
    path = extract_v2_path(uri)
    signature = hmac_sha256_hex(secret_key, f"{nonce}{path}{body}")
    composed = f"apiKey:{api_key}&randomKey:{nonce}&signature:{signature}"
    return _b64(_utf8(composed, "V2 authorization content"))
