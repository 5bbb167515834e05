"""Per-request nonce providers for both authorization schemes."""

from __future__ import annotations

from datetime import datetime, timezone
import secrets
import string
from uuid import uuid4

RANDOM_STRING_SIZE = 8
_ALPHANUMERIC = string.ascii_letters + string.digits


def now_utc() -> datetime:
    """Return timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def _ts_ms() -> int:
    return int(now_utc().timestamp() * 1000)


def random_alphanumeric(size: int = RANDOM_STRING_SIZE) -> str:
    return "".join(secrets.choice(_ALPHANUMERIC) for _ in range(size))


def legacy_nonce(timestamp_ms: int | None = None) -> str:
    """Epoch milliseconds followed by eight random alphanumerics."""
    ts = timestamp_ms if timestamp_ms is not None else _ts_ms()
    return f"{ts}{random_alphanumeric()}"


def uuid_nonce() -> str:
    return str(uuid4())
