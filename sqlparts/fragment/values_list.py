"""Incremental ``VALUES (...), (...)`` builder."""
from __future__ import annotations

from sqlparts.config import RenderConfig
from sqlparts.fragment.nodes import _CLOSE, _COMMA, _OPEN, Fragment, FragmentSequence, TextLiteral, interleave
from sqlparts.rendered import RenderedSQL

_VALUES = TextLiteral(text="VALUES ")


class ValuesList:
    """Accumulates rows for a ``VALUES`` list.

    Mutable; confine an instance to one thread.  :meth:`to_fragment`
    snapshots the rows, so later appends do not change fragments already
    handed out.

    Example::

        rows = ValuesList()
        for user in users:
            rows.append(param_int(user.id), param_string(user.name))
        sql, params = rows.render()
        # "VALUES (?, ?), (?, ?)"
    """

    def __init__(self) -> None:
        self._rows: list[FragmentSequence] = []

    def __len__(self) -> int:
        return len(self._rows)

    def append(self, *values: Fragment) -> ValuesList:
        """Add one parenthesised row."""
        self._rows.append(FragmentSequence(children=(_OPEN, *interleave(values, _COMMA), _CLOSE)))
        return self

    def to_fragment(self) -> FragmentSequence:
        return FragmentSequence(children=(_VALUES, *interleave(self._rows, _COMMA)))

    def render(self, config: RenderConfig | None = None) -> RenderedSQL:
        return self.to_fragment().render(config)
