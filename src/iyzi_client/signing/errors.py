"""Typed failures raised while signing a request."""

from __future__ import annotations


class SigningError(Exception):
    """Base class for every signing failure; the request must not be sent."""


class InvalidUriError(SigningError):
    """Raised when a V2 request URI carries no ``/v2`` path segment."""


class InvalidKeyError(SigningError):
    """Raised when the HMAC key is empty or not a string."""


class SigningEncodingError(SigningError):
    """Raised when signing input cannot be encoded as UTF-8."""
