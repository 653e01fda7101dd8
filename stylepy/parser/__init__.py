"""Parser infrastructure (token cursor + recursive-descent grammar)."""

from stylepy.parser.css import parse_result, parse_stylesheet
from stylepy.parser.grammar import parse_source_file, parse_statement_list
from stylepy.parser.parsed import ParsedStylesheet
from stylepy.parser.parser import CssSyntaxError, Parser, ParserProgress
from stylepy.parser.prelude import parse_prelude, unprefixed_name

__all__ = [
    "CssSyntaxError",
    "ParsedStylesheet",
    "Parser",
    "ParserProgress",
    "parse_prelude",
    "parse_result",
    "parse_source_file",
    "parse_statement_list",
    "parse_stylesheet",
    "unprefixed_name",
]
