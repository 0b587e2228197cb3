"""Pre-built fragments: names, constants, SQL function wrappers.

Function names follow MySQL (``TO_BASE64``, ``JSON_EXTRACT``, ``IF``).
Everything here is a thin composition of the node primitives in
:mod:`sqlparts.fragment.nodes`.
"""
from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime, timezone
from typing import TYPE_CHECKING

from sqlparts.fragment.nodes import (
    _CLOSE,
    _COMMA,
    _OPEN,
    Fragment,
    FragmentSequence,
    TextLiteral,
    and_,
    interleave,
    or_,
)
from sqlparts.fragment.values import FALSE, TRUE, param_time

if TYPE_CHECKING:
    from sqlparts.query.builder import Query

logger = logging.getLogger(__name__)

_ALL = TextLiteral(text="*")
_NULL = TextLiteral(text="NULL")

_EPOCH = datetime(1970, 1, 1)
_EPOCH_UTC = _EPOCH.replace(tzinfo=timezone.utc)


# ---------------------------------------------------------------------------
# Names
# ---------------------------------------------------------------------------


def table(name: str) -> TextLiteral:
    return TextLiteral(text=name)


def field(name: str) -> TextLiteral:
    return TextLiteral(text=name)


def field_np(namespace: str, name: str) -> FragmentSequence:
    """Qualified column: ``namespace.name``."""
    return FragmentSequence(
        children=(TextLiteral(text=namespace), TextLiteral(text="."), TextLiteral(text=name))
    )


def alias(name: str) -> TextLiteral:
    return TextLiteral(text=name)


def table_fields(name: str, *fields: Fragment) -> FragmentSequence:
    """Table with a column list, as used by INSERT: ``name(a, b)``."""
    return FragmentSequence(
        children=(TextLiteral(text=name), _OPEN, *interleave(fields, _COMMA), _CLOSE)
    )


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------


def all_() -> TextLiteral:
    return _ALL


def null() -> TextLiteral:
    return _NULL


def true() -> TextLiteral:
    return TRUE


def false() -> TextLiteral:
    return FALSE


# ---------------------------------------------------------------------------
# Grouping and functions
# ---------------------------------------------------------------------------


def _call(name: str, *args: Fragment) -> FragmentSequence:
    return FragmentSequence(
        children=(TextLiteral(text=f"{name}("), *interleave(args, _COMMA), _CLOSE)
    )


def cond(v: Fragment) -> FragmentSequence:
    """Parenthesise ``v``."""
    return FragmentSequence(children=(_OPEN, v, _CLOSE))


def min_(v: Fragment) -> FragmentSequence:
    return _call("MIN", v)


def max_(v: Fragment) -> FragmentSequence:
    return _call("MAX", v)


def count(v: Fragment) -> FragmentSequence:
    return _call("COUNT", v)


def distinct(v: Fragment) -> FragmentSequence:
    return _call("DISTINCT", v)


def to_base64(v: Fragment) -> FragmentSequence:
    return _call("TO_BASE64", v)


def concat(*vs: Fragment) -> FragmentSequence:
    return _call("CONCAT", *vs)


def json_extract(v: Fragment, path: Fragment) -> FragmentSequence:
    return _call("JSON_EXTRACT", v, path)


def average(v: Fragment) -> FragmentSequence:
    """Average to two decimals: ``CAST(AVG(v) AS DECIMAL(7,2))``.

    The precision is fixed.
    """
    return FragmentSequence(
        children=(TextLiteral(text="CAST(AVG("), v, TextLiteral(text=") AS DECIMAL(7,2))"))
    )


def if_(condition: Fragment, then: Fragment, otherwise: Fragment) -> FragmentSequence:
    """``IF(condition, then, otherwise)``."""
    return _call("IF", condition, then, otherwise)


def case(condition: Fragment, then: Fragment, otherwise: Fragment) -> FragmentSequence:
    """``CASE WHEN condition THEN then ELSE otherwise END``."""
    return FragmentSequence(
        children=(
            TextLiteral(text="CASE WHEN "),
            condition,
            TextLiteral(text=" THEN "),
            then,
            TextLiteral(text=" ELSE "),
            otherwise,
            TextLiteral(text=" END"),
        )
    )


def exists(query: Query) -> FragmentSequence:
    """``EXISTS(<sub-statement>)``, snapshotting ``query`` now."""
    return FragmentSequence(children=(TextLiteral(text="EXISTS"), query.as_subquery()))


# ---------------------------------------------------------------------------
# Date ranges
# ---------------------------------------------------------------------------


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _is_unset(ts: datetime | None) -> bool:
    if ts is None:
        return True
    if not isinstance(ts, datetime):
        return False
    return ts <= (_EPOCH if ts.tzinfo is None else _EPOCH_UTC)


def date_overlaps(
    live_start: Fragment,
    live_end: Fragment,
    cmp_start: datetime | None = None,
    cmp_end: datetime | None = None,
    *,
    now: Callable[[], datetime] | None = None,
) -> FragmentSequence:
    """Predicate: the live interval overlaps ``[cmp_start, cmp_end]``.

    Renders as::

        (live_start IS NULL OR live_end IS NULL
         OR ? <= live_end AND ? >= live_start)

    A NULL live bound means open-ended, so the row always matches.  A
    comparison bound that is ``None`` or at/before the Unix epoch is
    replaced by the current time (naive timestamps are read as UTC).

    Args:
        live_start: Column (or expression) holding the interval start.
        live_end: Column (or expression) holding the interval end.
        cmp_start: Start of the comparison window.
        cmp_end: End of the comparison window.
        now: Clock used for substitution; defaults to the current UTC time.
            Called at most once, so both substituted bounds are equal.

    Raises:
        UnsupportedValueError: If a set bound is not a ``datetime``.
    """
    if _is_unset(cmp_start) or _is_unset(cmp_end):
        current = (now or _utc_now)()
        logger.debug("date_overlaps: substituting %s for unset comparison bound(s)", current)
        if _is_unset(cmp_start):
            cmp_start = current
        if _is_unset(cmp_end):
            cmp_end = current

    return cond(
        or_(
            or_(live_start.is_(_NULL), live_end.is_(_NULL)),
            and_(param_time(cmp_start).lte(live_end), param_time(cmp_end).gte(live_start)),
        )
    )
