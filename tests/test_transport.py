from __future__ import annotations

from http.server import BaseHTTPRequestHandler, HTTPServer
import json
import logging
import threading
import urllib.error

import pytest

from iyzi_client import AuthHeaderBuilder, ClientOptions, HttpTransport, IyzipayClient
from iyzi_client.models import RetrieveBinNumberRequest

FAILURE_BODY = {
    "status": "failure",
    "errorCode": "1001",
    "errorMessage": "api bilgileri bulunamadı",
    "locale": "tr",
    "systemTime": 1700000000000,
}


class _Handler(BaseHTTPRequestHandler):
    def _send(self, code: int, body: bytes = b"", content_type: str = "application/json", **headers: str) -> None:
        self.send_response(code)
        self.send_header("Content-Type", content_type)
        self.send_header("Content-Length", str(len(body)))
        for name, value in headers.items():
            self.send_header(name, value)
        self.end_headers()
        self.wfile.write(body)

    def _route(self) -> None:
        if self.path.startswith("/redirect"):
            self._send(302, Location="/elsewhere")
        elif self.path.startswith("/elsewhere"):
            self._send(200, b'{"status":"success"}')
        elif self.path.startswith("/payment/bin/check"):
            length = int(self.headers.get("Content-Length", "0"))
            self.rfile.read(length)
            self._send(401, json.dumps(FAILURE_BODY).encode("utf-8"))
        else:
            self._send(500, b"internal error", content_type="text/plain")

    def do_GET(self) -> None:
        self._route()

    def do_POST(self) -> None:
        self._route()

    def log_message(self, format: str, *args: object) -> None:
        return None


@pytest.fixture
def base_url():
    server = HTTPServer(("127.0.0.1", 0), _Handler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        yield f"http://127.0.0.1:{server.server_address[1]}"
    finally:
        server.shutdown()
        server.server_close()
        thread.join()


def test_redirect_is_not_followed(base_url) -> None:
    transport = HttpTransport(timeout_seconds=5.0)
    with pytest.raises(urllib.error.HTTPError) as exc:
        transport.request_json("GET", f"{base_url}/redirect")
    assert exc.value.code == 302
    assert exc.value.headers["Location"] == "/elsewhere"


def test_error_envelope_on_non_2xx_is_returned(base_url) -> None:
    transport = HttpTransport(timeout_seconds=5.0)
    out = transport.request_json("POST", f"{base_url}/payment/bin/check", body='{"binNumber":"554960"}')
    assert out == FAILURE_BODY


def test_non_envelope_error_propagates(base_url) -> None:
    transport = HttpTransport(timeout_seconds=5.0)
    with pytest.raises(urllib.error.HTTPError) as exc:
        transport.request_json("GET", f"{base_url}/payment/test")
    assert exc.value.code == 500


def test_client_wraps_and_logs_error_envelope(base_url, caplog) -> None:
    options = ClientOptions(api_key="apiKey", secret_key="secretKey", base_url=base_url, timeout_seconds=5.0)
    builder = AuthHeaderBuilder(credentials=options.credentials, v1_nonce=lambda: "random", v2_nonce=lambda: "random")
    client = IyzipayClient(options, header_builder=builder)
    caplog.set_level(logging.WARNING, logger="iyzi_client.client")

    resource = client.retrieve_bin_number(RetrieveBinNumberRequest(bin_number="554960"))

    assert resource.failed
    assert resource.error_code == "1001"
    assert resource.system_time == 1700000000000
    assert "errorCode=1001" in caplog.text
