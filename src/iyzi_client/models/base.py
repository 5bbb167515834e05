"""Shared plumbing for request models: wire keys, signing order, JSON shape."""

from __future__ import annotations

from dataclasses import Field, field, fields
from decimal import Decimal
from enum import Enum
import json
from typing import Any, ClassVar

from iyzi_client.signing import SignableObject


def api_field(key: str | None = None, *, json_key: str | None = None, signed: bool = True) -> Any:
    """
    Optional model field.

    ``key`` is the wire name used for signing (camelCase of the attribute when
    omitted); ``json_key`` overrides it in the JSON body only; ``signed=False``
    keeps the field out of the canonical string.
    """
    return field(default=None, metadata={"key": key, "json_key": json_key, "signed": signed})


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def wire_key(model_field: Field) -> str:
    return model_field.metadata.get("key") or _camel(model_field.name)


def _json_value(value: Any) -> Any:
    if isinstance(value, ApiModel):
        return value.to_dict()
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, (list, tuple)):
        return [_json_value(item) for item in value]
    return value


class ApiModel:
    """Mixin for dataclass models; declared field order is the signing order."""

    bracketed: ClassVar[bool] = True

    def signed_fields(self) -> list[tuple[str | None, Any]]:
        return [
            (wire_key(f), getattr(self, f.name))
            for f in fields(self)
            if f.metadata.get("signed", True)
        ]

    def to_signable(self) -> SignableObject:
        return SignableObject.of(self.signed_fields(), bracketed=self.bracketed)

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue
            out[f.metadata.get("json_key") or wire_key(f)] = _json_value(value)
        return out

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), separators=(",", ":"), ensure_ascii=False)
