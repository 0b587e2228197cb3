"""Custom exception hierarchy for sqlparts.

All public errors inherit from SqlPartsError so callers can catch the base
class for any sqlparts-specific failure.
"""
from __future__ import annotations


class SqlPartsError(Exception):
    """Base exception for all sqlparts errors."""


class UnsupportedValueError(SqlPartsError, TypeError):
    """Raised when a value cannot be rendered as a literal or bound as a param.

    Literals accept text, integers, timestamps and booleans; bound params
    additionally accept ``None``.  Anything else is a programming error at
    the call site, so this also subclasses :class:`TypeError`.

    Args:
        message: Human-readable description.
        value_type: Name of the offending runtime type.
    """

    def __init__(self, message: str, value_type: str | None = None) -> None:
        super().__init__(message)
        self.value_type = value_type


class RenderError(SqlPartsError):
    """Raised when rendering meets a node outside the closed fragment set.

    Args:
        message: Human-readable description.
        node_type: Name of the unexpected node type.
    """

    def __init__(self, message: str, node_type: str | None = None) -> None:
        super().__init__(message)
        self.node_type = node_type
