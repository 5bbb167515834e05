"""Client configuration objects and helpers."""

from __future__ import annotations

from dataclasses import dataclass, field
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

SANDBOX_BASE_URL = "https://sandbox-api.iyzipay.com"
DEFAULT_TIMEOUT_SECONDS = 14.0

ENV_API_KEY = "IYZIPAY_API_KEY"
ENV_SECRET_KEY = "IYZIPAY_SECRET_KEY"
ENV_BASE_URL = "IYZIPAY_BASE_URL"
ENV_TIMEOUT_SECONDS = "IYZIPAY_TIMEOUT_SECONDS"


@dataclass(frozen=True, slots=True)
class Credentials:
    api_key: str
    secret_key: str = field(repr=False)


@dataclass(frozen=True, slots=True)
class ClientOptions:
    """Immutable per-client settings passed explicitly to every signing call."""

    api_key: str
    secret_key: str = field(repr=False)
    base_url: str = SANDBOX_BASE_URL
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS

    @property
    def credentials(self) -> Credentials:
        return Credentials(api_key=self.api_key, secret_key=self.secret_key)

    def url(self, path: str) -> str:
        return f"{self.base_url.rstrip('/')}{path}"

    @staticmethod
    def from_dict(payload: Mapping[str, Any]) -> "ClientOptions":
        missing = [key for key in ("api_key", "secret_key") if not payload.get(key)]
        if missing:
            raise ValueError(f"Missing required client option(s): {', '.join(missing)}")
        timeout = payload.get("timeout_seconds")
        if timeout is None or timeout == "":
            timeout = DEFAULT_TIMEOUT_SECONDS
        try:
            timeout_seconds = float(timeout)
        except (TypeError, ValueError) as exc:
            raise ValueError("Invalid client option: timeout_seconds") from exc
        return ClientOptions(
            api_key=str(payload["api_key"]),
            secret_key=str(payload["secret_key"]),
            base_url=str(payload.get("base_url") or SANDBOX_BASE_URL),
            timeout_seconds=timeout_seconds,
        )


def load_options(path: str | Path) -> ClientOptions:
    """Load client options from YAML; a top-level ``iyzipay`` section is honoured."""
    file_path = Path(path)
    with file_path.open("r", encoding="utf-8") as handle:
        payload = yaml.safe_load(handle) or {}
    return ClientOptions.from_dict(payload.get("iyzipay", payload))


def options_from_env(environ: Mapping[str, str] | None = None) -> ClientOptions:
    env = os.environ if environ is None else environ
    return ClientOptions.from_dict(
        {
            "api_key": env.get(ENV_API_KEY),
            "secret_key": env.get(ENV_SECRET_KEY),
            "base_url": env.get(ENV_BASE_URL),
            "timeout_seconds": env.get(ENV_TIMEOUT_SECONDS, DEFAULT_TIMEOUT_SECONDS),
        }
    )
