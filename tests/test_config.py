from __future__ import annotations

import pytest
import yaml

from iyzi_client import ClientOptions, load_options, options_from_env
from iyzi_client.config import SANDBOX_BASE_URL


def test_load_options_from_sectioned_yaml(tmp_path) -> None:
    path = tmp_path / "client.yaml"
    path.write_text(
        yaml.safe_dump(
            {
                "iyzipay": {
                    "api_key": "k",
                    "secret_key": "s",
                    "base_url": "https://api.iyzipay.com",
                    "timeout_seconds": 5,
                }
            }
        ),
        encoding="utf-8",
    )
    options = load_options(path)
    assert options.api_key == "k"
    assert options.secret_key == "s"
    assert options.base_url == "https://api.iyzipay.com"
    assert options.timeout_seconds == 5.0
    assert options.credentials.api_key == "k"


def test_load_options_from_flat_yaml_uses_defaults(tmp_path) -> None:
    path = tmp_path / "flat.yaml"
    path.write_text("api_key: k\nsecret_key: s\n", encoding="utf-8")
    options = load_options(path)
    assert options.base_url == SANDBOX_BASE_URL
    assert options.timeout_seconds == 14.0


def test_missing_secret_is_rejected() -> None:
    with pytest.raises(ValueError, match="secret_key"):
        ClientOptions.from_dict({"api_key": "k"})


def test_options_from_env() -> None:
    options = options_from_env(
        {
            "IYZIPAY_API_KEY": "k",
            "IYZIPAY_SECRET_KEY": "s",
            "IYZIPAY_BASE_URL": "https://api.iyzipay.com/",
            "IYZIPAY_TIMEOUT_SECONDS": "3.5",
        }
    )
    assert options.timeout_seconds == 3.5
    assert options.url("/payment/auth") == "https://api.iyzipay.com/payment/auth"


def test_options_from_process_environment(monkeypatch) -> None:
    monkeypatch.setenv("IYZIPAY_API_KEY", "env-key")
    monkeypatch.setenv("IYZIPAY_SECRET_KEY", "env-secret")
    monkeypatch.delenv("IYZIPAY_BASE_URL", raising=False)
    options = options_from_env()
    assert options.api_key == "env-key"
    assert options.base_url == SANDBOX_BASE_URL
    assert "env-secret" not in repr(options)


def test_blank_yaml_timeout_falls_back_to_default(tmp_path) -> None:
    path = tmp_path / "blank.yaml"
    path.write_text("api_key: k\nsecret_key: s\ntimeout_seconds:\n", encoding="utf-8")
    assert load_options(path).timeout_seconds == 14.0


def test_empty_env_timeout_falls_back_to_default() -> None:
    options = options_from_env({"IYZIPAY_API_KEY": "k", "IYZIPAY_SECRET_KEY": "s", "IYZIPAY_TIMEOUT_SECONDS": ""})
    assert options.timeout_seconds == 14.0


def test_invalid_timeout_names_the_option() -> None:
    with pytest.raises(ValueError, match="timeout_seconds"):
        options_from_env({"IYZIPAY_API_KEY": "k", "IYZIPAY_SECRET_KEY": "s", "IYZIPAY_TIMEOUT_SECONDS": "soon"})
    with pytest.raises(ValueError, match="timeout_seconds"):
        ClientOptions.from_dict({"api_key": "k", "secret_key": "s", "timeout_seconds": [5]})
