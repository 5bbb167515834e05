"""Response envelope shared by every endpoint."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

SUCCESS = "success"
FAILURE = "failure"


@dataclass(slots=True)
class IyzipayResource:
    status: str | None = None
    error_code: str | None = None
    error_message: str | None = None
    error_group: str | None = None
    locale: str | None = None
    system_time: int | None = None
    conversation_id: str | None = None
    payload: dict[str, Any] = field(default_factory=dict)

    @property
    def succeeded(self) -> bool:
        return self.status == SUCCESS

    @property
    def failed(self) -> bool:
        return self.status == FAILURE

    def get(self, key: str, default: Any = None) -> Any:
        """Endpoint-specific field from the raw payload."""
        return self.payload.get(key, default)

    @staticmethod
    def from_dict(payload: dict[str, Any]) -> "IyzipayResource":
        # a malformed systemTime stays available through payload
        try:
            system_time = int(payload["systemTime"])
        except (KeyError, TypeError, ValueError):
            system_time = None
        return IyzipayResource(
            status=payload.get("status"),
            error_code=payload.get("errorCode"),
            error_message=payload.get("errorMessage"),
            error_group=payload.get("errorGroup"),
            locale=payload.get("locale"),
            system_time=system_time,
            conversation_id=payload.get("conversationId"),
            payload=dict(payload),
        )
