"""Literal values and bound parameters.

Two ways to put a value into SQL:

* **Literals** (``value`` and the typed ``value_*`` helpers) format the value
  into the SQL text.  Strings are single-quoted **without escaping**; never
  pass untrusted input here.
* **Params** (``param`` and the typed ``param_*`` helpers) emit a positional
  marker and carry the value alongside the text for the driver to bind.

Both accept a closed set of runtime types and fail fast with
:class:`~sqlparts.errors.UnsupportedValueError` on anything else.
"""
from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime
from typing import Any

from sqlparts.errors import UnsupportedValueError
from sqlparts.fragment.nodes import BoundValue, Placeholder, TextLiteral, placeholder

__all__ = [
    "BoundValue",
    "format_time",
    "param",
    "param_bool",
    "param_bools",
    "param_int",
    "param_ints",
    "param_string",
    "param_strings",
    "param_time",
    "params",
    "value",
    "value_bool",
    "value_int",
    "value_string",
    "value_time",
]

TRUE = TextLiteral(text="TRUE")
FALSE = TextLiteral(text="FALSE")


def _require(v: Any, expected: type, kind: str) -> None:
    # bool is an int subclass; an int slot must not take a bool.
    if not isinstance(v, expected) or (expected is int and isinstance(v, bool)):
        raise UnsupportedValueError(
            f"Expected {kind} value, got {type(v).__name__}.",
            value_type=type(v).__name__,
        )


def format_time(v: datetime) -> str:
    """``YYYY-MM-DD HH:MM:SS`` in the timestamp's own zone, no offset."""
    return v.replace(tzinfo=None, microsecond=0).isoformat(sep=" ")


# ---------------------------------------------------------------------------
# Literals
# ---------------------------------------------------------------------------


def value(v: Any) -> TextLiteral:
    """Render ``v`` as an SQL literal, dispatching on its runtime type.

    Args:
        v: A ``str``, ``int``, ``datetime`` or ``bool``.

    Returns:
        A :class:`~sqlparts.fragment.nodes.TextLiteral`.

    Raises:
        UnsupportedValueError: For any other type, ``None`` included.
    """
    if isinstance(v, bool):
        return value_bool(v)
    if isinstance(v, str):
        return value_string(v)
    if isinstance(v, int):
        return value_int(v)
    if isinstance(v, datetime):
        return value_time(v)
    raise UnsupportedValueError(
        f"Invalid literal value type {type(v).__name__}.",
        value_type=type(v).__name__,
    )


def value_string(v: str) -> TextLiteral:
    _require(v, str, "text")
    return TextLiteral(text=f"'{v}'")


def value_int(v: int) -> TextLiteral:
    _require(v, int, "integer")
    return TextLiteral(text=str(v))


def value_time(v: datetime) -> TextLiteral:
    _require(v, datetime, "timestamp")
    return TextLiteral(text=f"'{format_time(v)}'")


def value_bool(v: bool) -> TextLiteral:
    _require(v, bool, "boolean")
    return TRUE if v else FALSE


# ---------------------------------------------------------------------------
# Params
# ---------------------------------------------------------------------------


def param(v: BoundValue) -> Placeholder:
    """A placeholder bound to ``v`` (text, integer, timestamp, boolean or None)."""
    return placeholder(v)


def param_bool(v: bool) -> Placeholder:
    _require(v, bool, "boolean")
    return placeholder(v)


def param_int(v: int) -> Placeholder:
    _require(v, int, "integer")
    return placeholder(v)


def param_string(v: str) -> Placeholder:
    _require(v, str, "text")
    return placeholder(v)


def param_time(v: datetime) -> Placeholder:
    _require(v, datetime, "timestamp")
    return placeholder(v)


def params(vs: Iterable[BoundValue]) -> list[Placeholder]:
    """One placeholder per value, in input order."""
    return [param(v) for v in vs]


def param_bools(vs: Iterable[bool]) -> list[Placeholder]:
    return [param_bool(v) for v in vs]


def param_ints(vs: Iterable[int]) -> list[Placeholder]:
    return [param_int(v) for v in vs]


def param_strings(vs: Iterable[str]) -> list[Placeholder]:
    return [param_string(v) for v in vs]
