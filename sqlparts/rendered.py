"""The output of rendering a fragment or a statement."""
from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class RenderedSQL:
    """SQL text plus the values bound to its positional markers.

    Attributes:
        sql: The rendered SQL string.
        params: Bound values, one per marker, in left-to-right text order.
            Hand both to the driver: ``cursor.execute(r.sql, r.params)``.
    """

    sql: str
    params: list[Any] = field(default_factory=list)

    @property
    def placeholder_count(self) -> int:
        """Number of positional markers in :attr:`sql`."""
        return len(self.params)

    def __iter__(self) -> Iterator[Any]:
        # Allows ``sql, params = fragment.render()``.
        yield self.sql
        yield self.params
