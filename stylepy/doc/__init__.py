"""Layout-agnostic document tree and its renderer."""

from stylepy.doc.doc import (
    NIL,
    Concat,
    Doc,
    Group,
    HardLine,
    LineOrSpace,
    Nest,
    SoftLine,
    Space,
    Text,
    concat,
    group,
    hard_line,
    join,
    line_or_space,
    nest,
    soft_line,
    space,
    text,
)
from stylepy.doc.render import render

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
    "render",
    "soft_line",
    "space",
    "text",
]
