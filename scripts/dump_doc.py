#!/usr/bin/env python
"""Print the document tree of a stylesheet and its rendering at a chosen width."""

import argparse
import logging
from pathlib import Path

from stylepy.doc import render
from stylepy.format import BlockSelectorLineBreak, FormatOptions, format_stylesheet
from stylepy.parser import parse_stylesheet

logger = logging.getLogger("dump_doc")


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("path", type=Path)
    parser.add_argument("--width", type=int, default=80)
    parser.add_argument(
        "--selector-linebreak",
        choices=[policy.value for policy in BlockSelectorLineBreak],
        default=BlockSelectorLineBreak.CONSISTENT.value,
    )
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    text = args.path.read_text(encoding="utf-8")
    parsed = parse_stylesheet(text)
    for diagnostic in parsed.diagnostics:
        logger.warning("%s %s at %s", diagnostic.code, diagnostic.message, diagnostic.range.as_tuple())

    options = FormatOptions(
        print_width=args.width,
        block_selector_linebreak=BlockSelectorLineBreak(args.selector_linebreak),
    )
    doc = format_stylesheet(parsed.root, options)
    print(doc)
    print()
    print(render(doc, print_width=options.print_width, line_break=options.line_break.text))


if __name__ == "__main__":
    main()
