"""sqlparts – compose SQL from typed fragments, bind values as params.

Public API
----------
Fragments
    ``text``, ``byte``, ``placeholder``, ``join``, ``list_`` and the
    operator methods on every :class:`Fragment` (``eq``, ``in_``,
    ``and_`` ...), plus free-function ``and_``, ``or_``, ``xor``.

Values
    ``value`` / ``value_*`` render SQL literals; ``param`` / ``param_*`` /
    ``params`` bind values to positional markers.

Helpers
    Names (``table``, ``field``, ``field_np``, ``alias``, ``table_fields``),
    constants (``all_``, ``null``, ``true``, ``false``), functions
    (``count``, ``average``, ``if_``, ``case``, ``exists``,
    ``date_overlaps`` ...), and :class:`ValuesList`.

Statements
    :class:`Query`, :class:`OrderDirection`, ``union``.

Every render returns :class:`RenderedSQL`; pass ``sql`` and ``params``
straight to a DB-API cursor::

    q = Query.from_table(table("users")).select(all_()).where(
        field("id").in_(param_ints(ids))
    )
    rendered = q.render()
    cursor.execute(rendered.sql, rendered.params)

SQL literals are not escaped.  Use params for anything user-supplied.
"""

from __future__ import annotations

from sqlparts.config import DEFAULT_CONFIG, RenderConfig
from sqlparts.errors import RenderError, SqlPartsError, UnsupportedValueError
from sqlparts.fragment.functions import (
    alias,
    all_,
    average,
    case,
    concat,
    cond,
    count,
    date_overlaps,
    distinct,
    exists,
    false,
    field,
    field_np,
    if_,
    json_extract,
    max_,
    min_,
    null,
    table,
    table_fields,
    to_base64,
    true,
)
from sqlparts.fragment.nodes import (
    BoundValue,
    ByteLiteral,
    Fragment,
    FragmentSequence,
    Node,
    Placeholder,
    TextLiteral,
    and_,
    byte,
    join,
    list_,
    or_,
    placeholder,
    text,
    xor,
)
from sqlparts.fragment.values import (
    param,
    param_bool,
    param_bools,
    param_int,
    param_ints,
    param_string,
    param_strings,
    param_time,
    params,
    value,
    value_bool,
    value_int,
    value_string,
    value_time,
)
from sqlparts.fragment.values_list import ValuesList
from sqlparts.query.builder import OrderDirection, Query, union
from sqlparts.rendered import RenderedSQL

__all__ = [
    # Config / errors
    "DEFAULT_CONFIG",
    "RenderConfig",
    "RenderError",
    "SqlPartsError",
    "UnsupportedValueError",
    # Nodes
    "BoundValue",
    "ByteLiteral",
    "Fragment",
    "FragmentSequence",
    "Node",
    "Placeholder",
    "TextLiteral",
    "RenderedSQL",
    # Primitives
    "and_",
    "byte",
    "join",
    "list_",
    "or_",
    "placeholder",
    "text",
    "xor",
    # Values / params
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
    # Helpers
    "alias",
    "all_",
    "average",
    "case",
    "concat",
    "cond",
    "count",
    "date_overlaps",
    "distinct",
    "exists",
    "false",
    "field",
    "field_np",
    "if_",
    "json_extract",
    "max_",
    "min_",
    "null",
    "table",
    "table_fields",
    "to_base64",
    "true",
    "ValuesList",
    # Statements
    "OrderDirection",
    "Query",
    "union",
]
