"""Canonical request strings consumed by the V1 signer.

The canonical form is order sensitive. Rendering rules:

1. Absent (``None``) values contribute nothing, not ``key=``.
2. Scalars render with ``str``; booleans as ``true``/``false``; enums by value.
3. ``Decimal`` amounts go through :func:`format_price`.
4. Objects emit ``key=value,`` per present field in declared order, then the
   buffer is trimmed of one leading and one trailing comma and wrapped in
   ``[...]`` unless the object is an unbracketed envelope.
5. Lists render each element, join with ``", "`` and wrap once in ``[...]``;
   empty lists are absent.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, Iterable

DOT = "."
ZERO = "0"
COMMA = ","


@dataclass(frozen=True, slots=True)
class SignableObject:
    """
    Ordered field set of one request or nested model.

    A field whose key is ``None`` is an inline fragment: its rendered value is
    merged into this object without a ``key=`` prefix.
    """

    fields: tuple[tuple[str | None, Any], ...]
    bracketed: bool = True

    @staticmethod
    def of(fields: Iterable[tuple[str | None, Any]], bracketed: bool = True) -> "SignableObject":
        return SignableObject(fields=tuple(fields), bracketed=bracketed)


@dataclass(frozen=True, slots=True)
class SignableList:
    """Ordered collection of scalars or objects."""

    items: tuple[Any, ...]

    @staticmethod
    def of(items: Iterable[Any]) -> "SignableList":
        return SignableList(items=tuple(items))


def format_price(price: Decimal) -> str:
    """Render an amount with trailing zeros stripped but at least one fractional digit."""
    if price.is_zero():
        return "0.0"
    formatted = format(price, "f")
    if DOT not in formatted:
        formatted = f"{formatted}{DOT}{ZERO}"
    formatted = formatted.rstrip(ZERO)
    if formatted.endswith(DOT):
        formatted = f"{formatted}{ZERO}"
    return formatted


def _assemble(buffer: str, bracketed: bool) -> str:
    out = buffer.strip()
    if out.startswith(COMMA):
        out = out[1:]
    if out.endswith(COMMA):
        out = out[:-1]
    if bracketed:
        out = f"[{out}]"
    return out


def _render_scalar(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, float):
        raise TypeError("Floating point values cannot be signed losslessly; use decimal.Decimal.")
    if isinstance(value, (str, int)):
        return str(value)
    raise TypeError(f"Unsupported canonical value type: {type(value).__name__}")


def canonicalize(value: Any) -> str | None:
    """Render one tagged value; ``None`` means the value contributes nothing."""
    if value is None:
        return None
    if isinstance(value, SignableObject):
        parts: list[str] = []
        for key, member in value.fields:
            rendered = canonicalize(member)
            if rendered is None:
                continue
            parts.append(f"{rendered}," if key is None else f"{key}={rendered},")
        return _assemble("".join(parts), value.bracketed)
    if isinstance(value, (SignableList, list, tuple)):
        items = value.items if isinstance(value, SignableList) else tuple(value)
        rendered_items = [r for r in (canonicalize(item) for item in items) if r is not None]
        if not rendered_items:
            return None
        return _assemble("".join(f"{r}, " for r in rendered_items), bracketed=True)
    if hasattr(value, "to_signable"):
        return canonicalize(value.to_signable())
    if isinstance(value, Decimal):
        return format_price(value)
    return _render_scalar(value)


def canonical_string(value: Any) -> str:
    """Canonical form of a request, empty when nothing is present."""
    return canonicalize(value) or ""
