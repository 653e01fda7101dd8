"""Doc tree primitives."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Text:
    s: str


@dataclass(frozen=True, slots=True)
class Space:
    """A single mandatory space."""


@dataclass(frozen=True, slots=True)
class HardLine:
    """Always breaks when rendered."""


@dataclass(frozen=True, slots=True)
class LineOrSpace:
    """Breaks when the enclosing group breaks; otherwise a single space."""


@dataclass(frozen=True, slots=True)
class SoftLine:
    """Space, unless the content up to the next break opportunity overflows the line."""


@dataclass(frozen=True, slots=True)
class Concat:
    parts: tuple[Doc, ...]


@dataclass(frozen=True, slots=True)
class Group:
    """Render child flat if it fits; else break.

    `expand` is set when the child holds a hard line, which forces break mode.
    """

    child: Doc
    expand: bool = False


@dataclass(frozen=True, slots=True)
class Nest:
    """Increase indentation for any line breaks within child."""

    child: Doc
    by: int = 2


type Doc = Text | Space | HardLine | LineOrSpace | SoftLine | Concat | Group | Nest

NIL: Doc = Concat(())


def text(s: str) -> Doc:
    return Text(s)


def space() -> Doc:
    return Space()


def hard_line() -> Doc:
    return HardLine()


def line_or_space() -> Doc:
    return LineOrSpace()


def soft_line() -> Doc:
    return SoftLine()


def concat(*parts: Doc) -> Doc:
    flat: list[Doc] = []
    for p in parts:
        if isinstance(p, Concat):
            flat.extend(p.parts)
        else:
            flat.append(p)
    if len(flat) == 1:
        return flat[0]
    return Concat(tuple(flat))


def join(sep: Doc, parts: Iterable[Doc]) -> Doc:
    out: list[Doc] = []
    first = True
    for p in parts:
        if first:
            out.append(p)
            first = False
        else:
            out.append(sep)
            out.append(p)
    return concat(*out)


def group(d: Doc) -> Doc:
    return Group(d, expand=_has_hard_line(d))


def nest(d: Doc, by: int) -> Doc:
    return Nest(d, by=by)


def _has_hard_line(d: Doc) -> bool:
    stack: list[Doc] = [d]
    while stack:
        current = stack.pop()
        if isinstance(current, HardLine):
            return True
        if isinstance(current, Group):
            # Nested groups already know.
            if current.expand:
                return True
            continue
        if isinstance(current, Concat):
            stack.extend(current.parts)
        elif isinstance(current, Nest):
            stack.append(current.child)
    return False


__all__ = [
    "NIL",
    "Concat",
    "Doc",
    "Group",
    "HardLine",
    "LineOrSpace",
    "Nest",
    "SoftLine",
    "Space",
    "Text",
    "concat",
    "group",
    "hard_line",
    "join",
    "line_or_space",
    "nest",
    "soft_line",
    "space",
    "text",
]
