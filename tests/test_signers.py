from __future__ import annotations

import base64

import pytest

from iyzi_client.signing import (
    InvalidKeyError,
    InvalidUriError,
    SigningEncodingError,
    extract_v2_path,
    sign_v1,
    sign_v2,
)
from iyzi_client.signing.signers import hmac_sha256_hex

V2_WITH_BODY = (
    "YXBpS2V5OmFwaUtleSZyYW5kb21LZXk6cmFuZG9tJnNpZ25hdHVyZTo0YWZhMjhjYjE3NTkwNThlYWEzNjNhZGVkNjAzM2NhNTg0"
    "N2NmNDYxODNhZDdiYTI5ZDEwZjE3ZWNiMGJmY2M4"
)
V2_EMPTY_BODY = (
    "YXBpS2V5OmFwaUtleSZyYW5kb21LZXk6cmFuZG9tJnNpZ25hdHVyZTpjOWU1OTI2NjE4ODNlY2NkYjEzYmEwOGFhYTdhNTJiMDhm"
    "ZTFkNDhkZTU2OGZmNDgxZDZmOGM3ZWFkMjkzN2Uy"
)
JSON_BODY = '{"data":"value"}'


def test_sign_v1_known_vector() -> None:
    assert sign_v1("apiKey", "secretKey", "random", "[data=value]") == "Cy84UuLZpfGhI7oaPD0Ckx1M0mo="


def test_sign_v1_is_deterministic_and_nonce_sensitive() -> None:
    first = sign_v1("apiKey", "secretKey", "random", "[data=value]")
    assert first == sign_v1("apiKey", "secretKey", "random", "[data=value]")
    assert first != sign_v1("apiKey", "secretKey", "random2", "[data=value]")


def test_sign_v2_known_vectors() -> None:
    assert sign_v2("/v2/uri?test=true", "apiKey", "secretKey", "random", JSON_BODY) == V2_WITH_BODY
    assert sign_v2("/v2/uri", "apiKey", "secretKey", "random", JSON_BODY) == V2_WITH_BODY
    assert sign_v2("/v2/uri?test=true", "apiKey", "secretKey", "random", "") == V2_EMPTY_BODY


def test_sign_v2_composed_content() -> None:
    decoded = base64.b64decode(V2_WITH_BODY).decode("utf-8")
    expected_signature = hmac_sha256_hex("secretKey", f"random/v2/uri{JSON_BODY}")
    assert decoded == f"apiKey:apiKey&randomKey:random&signature:{expected_signature}"
    assert expected_signature == expected_signature.lower()
    assert len(expected_signature) == 64


def test_sign_v2_ignores_host_and_query() -> None:
    full = sign_v2(
        "https://sandbox-api.iyzipay.com/v2/uri?locale=tr&conversationId=1",
        "apiKey",
        "secretKey",
        "random",
        JSON_BODY,
    )
    assert full == V2_WITH_BODY


def test_extract_v2_path() -> None:
    assert extract_v2_path("https://api.iyzipay.com/v2/iyzilink/products/abc?locale=tr") == "/v2/iyzilink/products/abc"
    assert extract_v2_path("/v2/iyzilink/products") == "/v2/iyzilink/products"
    assert extract_v2_path("https://h/base?x=1/v2/p") == "/v2/p"


def test_missing_v2_segment_is_a_typed_error() -> None:
    with pytest.raises(InvalidUriError):
        extract_v2_path("https://api.iyzipay.com/payment/auth")
    with pytest.raises(InvalidUriError):
        sign_v2("/v1/uri?test=true", "apiKey", "secretKey", "random", JSON_BODY)


def test_empty_secret_key_is_a_typed_error() -> None:
    with pytest.raises(InvalidKeyError):
        sign_v2("/v2/uri", "apiKey", "", "random", JSON_BODY)


def test_unencodable_input_is_a_typed_error() -> None:
    with pytest.raises(SigningEncodingError):
        sign_v1("apiKey", "secretKey", "\ud800", "[data=value]")
    with pytest.raises(SigningEncodingError):
        sign_v2("/v2/uri", "apiKey", "secretKey", "\ud800", JSON_BODY)
