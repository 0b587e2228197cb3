"""sqlparts fragment layer: immutable SQL fragments and pre-built helpers."""
from sqlparts.fragment.nodes import (
    BoundValue,
    ByteLiteral,
    Fragment,
    FragmentSequence,
    Node,
    Placeholder,
    TextLiteral,
)
from sqlparts.fragment.values_list import ValuesList

__all__ = [
    "BoundValue",
    "ByteLiteral",
    "Fragment",
    "FragmentSequence",
    "Node",
    "Placeholder",
    "TextLiteral",
    "ValuesList",
]
