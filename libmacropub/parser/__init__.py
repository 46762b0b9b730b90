"""Parser of annotated `macro_rules!` definitions from token trees."""

from .definition import MacroDefinition, ParseFailure, ParseResult
from .parser import MACRO_DEFINITION_KEYWORD, parse_macro_definition
from .states import ParserState

__all__ = [
    "MACRO_DEFINITION_KEYWORD",
    "MacroDefinition",
    "ParseFailure",
    "ParseResult",
    "ParserState",
    "parse_macro_definition",
]
