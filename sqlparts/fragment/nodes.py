"""Fragment model: the four closed node variants and their rendering.

Every SQL-building primitive is a :class:`Fragment`.  The set of concrete
node types is closed and expressed as a Pydantic discriminated union
(:data:`Node`):

``ByteLiteral``
    One raw character (punctuation such as ``(`` and ``)``).
``TextLiteral``
    Raw SQL text: keywords, identifiers, formatted literal values.
``Placeholder``
    One bound value; renders as a positional marker.
``FragmentSequence``
    An ordered tuple of child nodes rendered back to back.

Nodes are frozen.  Operator methods never mutate ``self``; appending to a
``FragmentSequence`` copies its child tuple into a new sequence, so two
derived fragments can share the same sub-fragment safely.

Usage::

    from sqlparts.fragment.nodes import text

    pred = text("a").eq(text("1")).and_(text("b").in_([]))
    sql, params = pred.render()
    # sql == "a = 1 AND b IN (NULL)"
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime
from typing import Annotated, Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Discriminator,
    Field,
    Strict,
    StrictBool,
    StrictInt,
    StrictStr,
    Tag,
    ValidationError,
)

from sqlparts.config import DEFAULT_CONFIG, RenderConfig
from sqlparts.errors import RenderError, UnsupportedValueError
from sqlparts.rendered import RenderedSQL

#: Values that may be bound to a placeholder.  Closed on purpose: anything
#: else is rejected when the placeholder is built, not when SQL executes.
BoundValue = StrictBool | StrictInt | StrictStr | Annotated[datetime, Strict()] | None

_FROZEN = ConfigDict(extra="forbid", frozen=True)


# ---------------------------------------------------------------------------
# Base class: operator methods shared by every node
# ---------------------------------------------------------------------------


class Fragment(BaseModel):
    """Base class for all fragment nodes.

    Subclasses are the four variants of :data:`Node`; do not subclass
    further.  All methods return new fragments.
    """

    model_config = _FROZEN

    def _append(self, *nodes: Fragment) -> FragmentSequence:
        if isinstance(self, FragmentSequence):
            return FragmentSequence(children=self.children + nodes)
        return FragmentSequence(children=(self, *nodes))

    # ------------------------------------------------------------------
    # Naming
    # ------------------------------------------------------------------

    def as_(self, alias: str) -> FragmentSequence:
        """``<self> AS <alias>``."""
        return self._append(TextLiteral(text=f" AS {alias}"))

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def eq(self, other: Fragment) -> FragmentSequence:
        return self._append(_EQ, other)

    def ne(self, other: Fragment) -> FragmentSequence:
        return self._append(_NE, other)

    def lt(self, other: Fragment) -> FragmentSequence:
        return self._append(_LT, other)

    def lte(self, other: Fragment) -> FragmentSequence:
        return self._append(_LTE, other)

    def gt(self, other: Fragment) -> FragmentSequence:
        return self._append(_GT, other)

    def gte(self, other: Fragment) -> FragmentSequence:
        return self._append(_GTE, other)

    def is_(self, other: Fragment) -> FragmentSequence:
        return self._append(_IS, other)

    def is_not(self, other: Fragment) -> FragmentSequence:
        return self._append(_IS_NOT, other)

    # ------------------------------------------------------------------
    # Membership
    # ------------------------------------------------------------------

    def in_(self, candidates: Iterable[Fragment]) -> FragmentSequence:
        """``<self> IN (c1, c2, ...)``.

        An empty candidate set renders as ``IN (NULL)``, which is valid SQL
        and never true, instead of the syntax error ``IN ()``.
        """
        items = tuple(candidates)
        if not items:
            return self._append(_IN_NULL)
        return self._append(_IN_OPEN, *interleave(items, _COMMA), _CLOSE)

    def not_in(self, candidates: Iterable[Fragment]) -> FragmentSequence:
        """``<self> NOT IN (...)``; empty candidates give ``NOT IN (NULL)``."""
        return self._append(_NOT).in_(candidates)

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def add(self, other: Fragment) -> FragmentSequence:
        return self._append(_PLUS, other)

    def sub(self, other: Fragment) -> FragmentSequence:
        return self._append(_MINUS, other)

    # ------------------------------------------------------------------
    # Boolean connectives (free-function forms below render identically)
    # ------------------------------------------------------------------

    def and_(self, other: Fragment) -> FragmentSequence:
        return self._append(_AND, other)

    def or_(self, other: Fragment) -> FragmentSequence:
        return self._append(_OR, other)

    def xor(self, other: Fragment) -> FragmentSequence:
        return self._append(_XOR, other)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(self, config: RenderConfig | None = None) -> RenderedSQL:
        """Render this fragment to SQL text and its ordered params.

        Args:
            config: Render options; defaults to :data:`~sqlparts.config.DEFAULT_CONFIG`.

        Returns:
            :class:`~sqlparts.rendered.RenderedSQL`.

        Raises:
            RenderError: If the tree contains a node outside :data:`Node`.
        """
        buf = _RenderBuffer(marker=(config or DEFAULT_CONFIG).placeholder)
        buf.write(self)
        return RenderedSQL(sql="".join(buf.chunks), params=buf.params)


# ---------------------------------------------------------------------------
# Concrete node types
# ---------------------------------------------------------------------------


class ByteLiteral(Fragment):
    """A single raw character: ``ByteLiteral(char="(")``."""

    char: str = Field(min_length=1, max_length=1)


class TextLiteral(Fragment):
    """Raw SQL text emitted verbatim: ``TextLiteral(text="SELECT ")``."""

    text: str


class Placeholder(Fragment):
    """A positional marker bound to exactly one value."""

    value: BoundValue


class FragmentSequence(Fragment):
    """Ordered child nodes rendered by concatenation."""

    children: tuple[Node, ...] = ()


# ---------------------------------------------------------------------------
# Discriminated union
# ---------------------------------------------------------------------------


def _node_discriminator(v: Any) -> str | None:
    """Return the tag for the Pydantic discriminated union."""
    if isinstance(v, dict):
        for key, tag in (("char", "byte"), ("text", "text"), ("value", "param"), ("children", "seq")):
            if key in v:
                return tag
    if isinstance(v, ByteLiteral):
        return "byte"
    if isinstance(v, TextLiteral):
        return "text"
    if isinstance(v, Placeholder):
        return "param"
    if isinstance(v, FragmentSequence):
        return "seq"
    return None


Node = Annotated[
    Annotated[ByteLiteral, Tag("byte")]
    | Annotated[TextLiteral, Tag("text")]
    | Annotated[Placeholder, Tag("param")]
    | Annotated[FragmentSequence, Tag("seq")],
    Discriminator(_node_discriminator),
]

# Resolve the forward reference in the recursive sequence type.
FragmentSequence.model_rebuild()


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


@dataclass
class _RenderBuffer:
    """Accumulates text chunks and params during one render call."""

    marker: str
    chunks: list[str] = field(default_factory=list)
    params: list[Any] = field(default_factory=list)

    def write(self, root: Fragment) -> None:
        # Explicit stack: long free-function chains nest deeply.
        stack: list[Fragment] = [root]
        while stack:
            node = stack.pop()
            if isinstance(node, FragmentSequence):
                stack.extend(reversed(node.children))
            elif isinstance(node, TextLiteral):
                self.chunks.append(node.text)
            elif isinstance(node, ByteLiteral):
                self.chunks.append(node.char)
            elif isinstance(node, Placeholder):
                self.chunks.append(self.marker)
                self.params.append(node.value)
            else:
                raise RenderError(
                    f"Unknown fragment node type: {type(node).__name__}",
                    node_type=type(node).__name__,
                )


# ---------------------------------------------------------------------------
# Shared punctuation and operator text
# ---------------------------------------------------------------------------

_OPEN = ByteLiteral(char="(")
_CLOSE = ByteLiteral(char=")")
_COMMA = TextLiteral(text=", ")

_EQ = TextLiteral(text=" = ")
_NE = TextLiteral(text=" != ")
_LT = TextLiteral(text=" < ")
_LTE = TextLiteral(text=" <= ")
_GT = TextLiteral(text=" > ")
_GTE = TextLiteral(text=" >= ")
_IS = TextLiteral(text=" IS ")
_IS_NOT = TextLiteral(text=" IS NOT ")
_PLUS = TextLiteral(text=" + ")
_MINUS = TextLiteral(text=" - ")
_AND = TextLiteral(text=" AND ")
_OR = TextLiteral(text=" OR ")
_XOR = TextLiteral(text=" XOR ")
_NOT = TextLiteral(text=" NOT")
_IN_OPEN = TextLiteral(text=" IN (")
_IN_NULL = TextLiteral(text=" IN (NULL)")


# ---------------------------------------------------------------------------
# Construction primitives
# ---------------------------------------------------------------------------


def interleave(parts: Iterable[Fragment], separator: Fragment) -> tuple[Fragment, ...]:
    """Return ``parts`` with ``separator`` between consecutive items."""
    out: list[Fragment] = []
    for i, part in enumerate(parts):
        if i:
            out.append(separator)
        out.append(part)
    return tuple(out)


def byte(char: str) -> ByteLiteral:
    """A single raw character."""
    return ByteLiteral(char=char)


def text(raw: str) -> TextLiteral:
    """Raw SQL text, emitted verbatim (no quoting, no escaping)."""
    return TextLiteral(text=raw)


def placeholder(value: Any) -> Placeholder:
    """A positional marker bound to ``value``.

    Raises:
        UnsupportedValueError: If ``value`` is not a :data:`BoundValue`.
    """
    try:
        return Placeholder(value=value)
    except ValidationError as exc:
        raise UnsupportedValueError(
            f"Cannot bind value of type {type(value).__name__}.",
            value_type=type(value).__name__,
        ) from exc


def join(parts: Iterable[Fragment], separator: str = ", ") -> FragmentSequence:
    """``parts`` joined by ``separator`` text."""
    return FragmentSequence(children=interleave(parts, TextLiteral(text=separator)))


def list_(*parts: Fragment) -> FragmentSequence:
    """Comma-separated list: ``a, b, c``."""
    return FragmentSequence(children=interleave(parts, _COMMA))


def and_(left: Fragment, right: Fragment) -> FragmentSequence:
    """``<left> AND <right>``; same output as ``left.and_(right)``."""
    return FragmentSequence(children=(left, _AND, right))


def or_(left: Fragment, right: Fragment) -> FragmentSequence:
    """``<left> OR <right>``; same output as ``left.or_(right)``."""
    return FragmentSequence(children=(left, _OR, right))


def xor(left: Fragment, right: Fragment) -> FragmentSequence:
    """``<left> XOR <right>``; same output as ``left.xor(right)``."""
    return FragmentSequence(children=(left, _XOR, right))
