"""Statement assembler: clause fragments → one ordered SELECT statement.

``Query`` collects fragments per clause and renders them in a fixed order::

    WITH <ctes> SELECT <items> FROM <from> <joins>
    WHERE <preds AND-joined> GROUP BY <exprs> ORDER BY <exprs> LIMIT <n>

Clauses with nothing in them are left out entirely.  No statement-level
validation happens here: a missing FROM target simply renders as
incomplete SQL for the database to reject.

Usage::

    q = (
        Query.from_table(table("employees").as_("e"))
        .select(field("e.id"), count(all_()))
        .where(field("e.tenant_id").eq(param("acme")))
        .group_by(field("e.id"))
        .order_by(field("e.id"), OrderDirection.DESC)
        .limit(10)
    )
    cursor.execute(*q.render())
"""
from __future__ import annotations

import logging
from enum import Enum

from sqlparts.config import RenderConfig
from sqlparts.errors import UnsupportedValueError
from sqlparts.fragment.nodes import _CLOSE, _COMMA, _OPEN, Fragment, FragmentSequence, TextLiteral, interleave
from sqlparts.rendered import RenderedSQL

logger = logging.getLogger(__name__)

_SPACE = TextLiteral(text=" ")
_WITH = TextLiteral(text="WITH ")
_SELECT = TextLiteral(text="SELECT ")
_FROM = TextLiteral(text=" FROM ")
_WHERE = TextLiteral(text=" WHERE ")
_AND = TextLiteral(text=" AND ")
_GROUP_BY = TextLiteral(text=" GROUP BY ")
_ORDER_BY = TextLiteral(text=" ORDER BY ")
_AS_OPEN = TextLiteral(text=" AS (")
_ON = TextLiteral(text=" ON ")
_UNION = TextLiteral(text=") UNION (")


class OrderDirection(str, Enum):
    """Sort direction appended to an ORDER BY item."""

    ASC = "ASC"
    DESC = "DESC"


def _body(part: Fragment | Query) -> Fragment:
    if isinstance(part, Query):
        return part.to_fragment()
    return part


class Query:
    """Mutable SELECT statement builder.

    Every clause method appends and returns ``self`` for chaining.  Render
    as often as needed; rendering does not change the builder.  Not safe
    for concurrent mutation.

    Args:
        from_: Optional FROM target (table, aliased table, derived table).
    """

    def __init__(self, from_: Fragment | None = None) -> None:
        self._from = from_
        self._select: list[Fragment] = []
        self._joins: list[Fragment] = []
        self._where: list[Fragment] = []
        self._group_by: list[Fragment] = []
        self._order_by: list[Fragment] = []
        self._with: list[Fragment] = []
        self._limit = 0

    @classmethod
    def from_table(cls, table: Fragment) -> Query:
        return cls(from_=table)

    # ------------------------------------------------------------------
    # Clause accumulation
    # ------------------------------------------------------------------

    def from_(self, table: Fragment) -> Query:
        self._from = table
        return self

    def select(self, *parts: Fragment) -> Query:
        self._select.extend(parts)
        return self

    def left_join(self, table: Fragment, on: Fragment) -> Query:
        return self._join("LEFT JOIN ", table, on)

    def inner_join(self, table: Fragment, on: Fragment) -> Query:
        return self._join("INNER JOIN ", table, on)

    def _join(self, keyword: str, table: Fragment, on: Fragment) -> Query:
        self._joins.append(FragmentSequence(children=(TextLiteral(text=keyword), table, _ON, on)))
        return self

    def where(self, *parts: Fragment) -> Query:
        """Add predicates; all WHERE predicates are AND-joined."""
        self._where.extend(parts)
        return self

    def group_by(self, *parts: Fragment) -> Query:
        self._group_by.extend(parts)
        return self

    def order_by(self, part: Fragment, direction: OrderDirection | str = OrderDirection.ASC) -> Query:
        """Add an ORDER BY item.

        Raises:
            ValueError: If ``direction`` is not ``ASC`` or ``DESC``.
        """
        direction = OrderDirection(direction)
        self._order_by.append(FragmentSequence(children=(part, TextLiteral(text=f" {direction.value}"))))
        return self

    def limit(self, limit: int) -> Query:
        """Set LIMIT; ``0`` omits the clause.  Rendered as literal text."""
        if not isinstance(limit, int) or isinstance(limit, bool):
            raise UnsupportedValueError(
                f"LIMIT must be an integer, got {type(limit).__name__}.",
                value_type=type(limit).__name__,
            )
        self._limit = limit
        return self

    def with_(self, part: Fragment | Query, name: Fragment) -> Query:
        """Add a common table expression: ``name AS (part)``."""
        self._with.append(FragmentSequence(children=(name, _AS_OPEN, _body(part), _CLOSE)))
        return self

    def with_recursive(self, part: Fragment | Query, name: str) -> Query:
        """Add a recursive CTE: ``RECURSIVE name AS (part)``."""
        self._with.append(
            FragmentSequence(children=(TextLiteral(text=f"RECURSIVE {name} AS ("), _body(part), _CLOSE))
        )
        return self

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    @property
    def from_part(self) -> Fragment | None:
        return self._from

    @property
    def select_parts(self) -> tuple[Fragment, ...]:
        return tuple(self._select)

    @property
    def join_parts(self) -> tuple[Fragment, ...]:
        return tuple(self._joins)

    @property
    def where_parts(self) -> tuple[Fragment, ...]:
        return tuple(self._where)

    @property
    def group_by_parts(self) -> tuple[Fragment, ...]:
        return tuple(self._group_by)

    @property
    def order_by_parts(self) -> tuple[Fragment, ...]:
        return tuple(self._order_by)

    @property
    def with_parts(self) -> tuple[Fragment, ...]:
        return tuple(self._with)

    @property
    def limit_value(self) -> int:
        return self._limit

    # ------------------------------------------------------------------
    # Assembly
    # ------------------------------------------------------------------

    def to_fragment(self) -> FragmentSequence:
        """Snapshot the statement as an immutable fragment (no parentheses).

        Later changes to this builder do not affect the returned fragment.
        """
        children: list[Fragment] = []

        if self._with:
            children += [_WITH, *interleave(self._with, _COMMA), _SPACE]

        children += [_SELECT, *interleave(self._select, _COMMA), _FROM]
        if self._from is not None:
            children.append(self._from)

        for join in self._joins:
            children += [_SPACE, join]

        if self._where:
            children += [_WHERE, *interleave(self._where, _AND)]

        if self._group_by:
            children += [_GROUP_BY, *interleave(self._group_by, _COMMA)]

        if self._order_by:
            children += [_ORDER_BY, *interleave(self._order_by, _COMMA)]

        if self._limit:
            children.append(TextLiteral(text=f" LIMIT {self._limit}"))

        return FragmentSequence(children=tuple(children))

    def as_subquery(self) -> FragmentSequence:
        """The statement in parentheses, for EXISTS, scalar or derived tables."""
        return FragmentSequence(children=(_OPEN, self.to_fragment(), _CLOSE))

    def render(self, config: RenderConfig | None = None) -> RenderedSQL:
        """Render the full statement.

        Args:
            config: Render options; defaults to :data:`~sqlparts.config.DEFAULT_CONFIG`.

        Returns:
            :class:`~sqlparts.rendered.RenderedSQL` with ``sql`` and ``params``.
        """
        rendered = self.to_fragment().render(config)
        logger.debug(
            "Rendered query: %d select, %d join, %d where, %d params",
            len(self._select),
            len(self._joins),
            len(self._where),
            rendered.placeholder_count,
        )
        return rendered


def union(lhs: Query | Fragment, rhs: Query | Fragment) -> FragmentSequence:
    """``(lhs) UNION (rhs)``."""
    return FragmentSequence(children=(_OPEN, _body(lhs), _UNION, _body(rhs), _CLOSE))
