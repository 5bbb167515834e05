"""Blocking JSON-over-HTTP transport."""

from __future__ import annotations

from abc import ABC, abstractmethod
import json
import logging
from typing import Any
import urllib.error
import urllib.request

from iyzi_client.config import DEFAULT_TIMEOUT_SECONDS

logger = logging.getLogger(__name__)

APPLICATION_JSON = "application/json"


class Transport(ABC):
    """Sends one request and returns the decoded JSON response."""

    @abstractmethod
    def request_json(
        self,
        method: str,
        url: str,
        body: str | None = None,
        headers: dict[str, str] | None = None,
    ) -> dict[str, Any]:
        """Perform the request; errors propagate to the caller."""


class _NoRedirectHandler(urllib.request.HTTPRedirectHandler):
    def redirect_request(self, req, fp, code, msg, headers, newurl):  # type: ignore[override]
        return None


class HttpTransport(Transport):
    """urllib transport with a fixed timeout and redirects disabled.

    A non-2xx response whose body is an iyzipay status envelope is returned like
    any other response; every other HTTP error propagates.
    """

    def __init__(self, timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS, headers: dict[str, str] | None = None) -> None:
        self.timeout_seconds = timeout_seconds
        self.headers = {"Content-Type": APPLICATION_JSON, "Accept": APPLICATION_JSON, **(headers or {})}
        self._opener = urllib.request.build_opener(_NoRedirectHandler())

    def request_json(
        self,
        method: str,
        url: str,
        body: str | None = None,
        headers: dict[str, str] | None = None,
    ) -> dict[str, Any]:
        data = body.encode("utf-8") if body else None
        request = urllib.request.Request(
            url=url,
            data=data,
            method=method.upper(),
            headers={**self.headers, **(headers or {})},
        )
        logger.debug("%s %s", method.upper(), url)
        try:
            with self._opener.open(request, timeout=self.timeout_seconds) as response:
                text = response.read().decode("utf-8")
        except urllib.error.HTTPError as exc:
            envelope = _error_envelope(exc)
            if envelope is None:
                raise
            logger.debug("%s %s returned HTTP %s with an error envelope", method.upper(), url, exc.code)
            return envelope
        return json.loads(text) if text else {}


def _error_envelope(exc: urllib.error.HTTPError) -> dict[str, Any] | None:
    """Decoded iyzipay error body of a non-2xx response, if it carries one."""
    try:
        payload = json.loads(exc.read().decode("utf-8"))
    except (UnicodeDecodeError, ValueError):
        return None
    if isinstance(payload, dict) and "status" in payload:
        return payload
    return None
