"""Width-aware doc renderer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from stylepy.doc.doc import Concat, Doc, Group, HardLine, LineOrSpace, Nest, SoftLine, Space, Text

type Mode = Literal["flat", "break"]


@dataclass(frozen=True, slots=True)
class _Frame:
    indent: int
    mode: Mode
    doc: Doc


def render(doc: Doc, *, print_width: int = 80, line_break: str = "\n") -> str:
    """Render doc into a string, breaking lines to stay within print_width where possible."""
    out: list[str] = []
    col = 0

    stack: list[_Frame] = [_Frame(indent=0, mode="break", doc=doc)]

    while stack:
        frame = stack.pop()
        ind, mode, d = frame.indent, frame.mode, frame.doc

        if isinstance(d, Text):
            out.append(d.s)
            col += len(d.s)
            continue

        if isinstance(d, Space):
            out.append(" ")
            col += 1
            continue

        if isinstance(d, Concat):
            # push in reverse so first part is processed first
            for p in reversed(d.parts):
                stack.append(_Frame(ind, mode, p))
            continue

        if isinstance(d, HardLine):
            col = _newline(out, ind, line_break)
            continue

        if isinstance(d, LineOrSpace):
            if mode == "flat":
                out.append(" ")
                col += 1
            else:
                col = _newline(out, ind, line_break)
            continue

        if isinstance(d, SoftLine):
            if mode == "flat" or _fits(print_width - col - 1, stack):
                out.append(" ")
                col += 1
            else:
                col = _newline(out, ind, line_break)
            continue

        if isinstance(d, Nest):
            stack.append(_Frame(ind + d.by, mode, d.child))
            continue

        # Group
        if not d.expand and _fits(print_width - col, [*stack, _Frame(ind, "flat", d.child)]):
            stack.append(_Frame(ind, "flat", d.child))
        else:
            stack.append(_Frame(ind, "break", d.child))

    return "".join(out)


def _newline(out: list[str], indent: int, line_break: str) -> int:
    # Drop trailing spaces left before the break.
    if out:
        out[-1] = out[-1].rstrip(" ")
    out.append(line_break)
    out.append(" " * indent)
    return indent


def _fits(remaining: int, frames: list[_Frame]) -> bool:
    """
    Lookahead: simulate rendering the top of `frames` (without producing output) until:
    - the text exceeds `remaining` => doesn't fit
    - we reach a line break in break mode => fits (the rest goes on the next line).
    """
    if remaining < 0:
        return False

    probe = list(frames)
    used = 0

    while probe:
        fr = probe.pop()
        d = fr.doc

        if isinstance(d, Text):
            used += len(d.s)
            if used > remaining:
                return False
            continue

        if isinstance(d, Space):
            used += 1
            if used > remaining:
                return False
            continue

        if isinstance(d, Concat):
            for p in reversed(d.parts):
                probe.append(_Frame(fr.indent, fr.mode, p))
            continue

        if isinstance(d, HardLine):
            return True

        if isinstance(d, (LineOrSpace, SoftLine)):
            if fr.mode == "break":
                return True
            used += 1
            if used > remaining:
                return False
            continue

        if isinstance(d, Nest):
            probe.append(_Frame(fr.indent + d.by, fr.mode, d.child))
            continue

        probe.append(_Frame(fr.indent, "break" if d.expand else fr.mode, d.child))

    return True


__all__ = ["render"]
