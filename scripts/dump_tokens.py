#!/usr/bin/env python
"""Print the token stream of a stylesheet."""

import argparse
import logging
from pathlib import Path

from stylepy.lexer import Lexer, dump_tokens


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("path", type=Path)
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    text = args.path.read_text(encoding="utf-8")
    lexer = Lexer(text)
    tokens = lexer.lex()
    dump_tokens(tokens, text, lexer.diagnostics)


if __name__ == "__main__":
    main()
