"""Formatting failures carried as diagnostics."""

from __future__ import annotations

from collections.abc import Sequence

from stylepy.diagnostics import (
    FORMAT_INVARIANT_VIOLATION,
    FORMAT_UNSUPPORTED_CONSTRUCT,
    Diagnostic,
)
from stylepy.text import EMPTY_RANGE, TextRange


class FormatError(Exception):
    """A formatting pass was abandoned; `diagnostic` says where and why."""

    def __init__(self, diagnostic: Diagnostic) -> None:
        super().__init__(diagnostic.message)
        self.diagnostic = diagnostic


class UnsupportedConstructError(FormatError):
    @classmethod
    def for_node(cls, node: object, detail: str | None = None) -> "UnsupportedConstructError":
        kind = type(node).__name__
        message = f"Unsupported construct `{kind}`"
        if detail:
            message = f"{message}: {detail}"
        return cls(Diagnostic.from_spec(FORMAT_UNSUPPORTED_CONSTRUCT, node_span(node), message))


class InvariantViolationError(FormatError):
    @classmethod
    def for_node(cls, node: object, detail: str) -> "InvariantViolationError":
        kind = type(node).__name__
        message = f"Internal error in `{kind}`: {detail}"
        return cls(Diagnostic.from_spec(FORMAT_INVARIANT_VIOLATION, node_span(node), message))


def node_span(node: object) -> TextRange:
    span = getattr(node, "span", None)
    return span if isinstance(span, TextRange) else EMPTY_RANGE


def require_items[T](items: Sequence[T], node: object, field_name: str) -> Sequence[T]:
    """Return `items`, raising when a list the data model declares 1..N is empty."""
    if not items:
        raise InvariantViolationError.for_node(node, f"`{field_name}` must hold at least one item")
    return items


__all__ = [
    "FormatError",
    "InvariantViolationError",
    "UnsupportedConstructError",
    "node_span",
    "require_items",
]
