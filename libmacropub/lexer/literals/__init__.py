"""Literal tokenizers, each consumes literal starting at current lexer state position."""

from .character import tokenize_character_or_lifetime
from .numeric import tokenize_numeric_literal
from .string import escape_string_literal, try_tokenize_prefixed_literal, tokenize_string_literal

__all__ = [
    "escape_string_literal",
    "tokenize_character_or_lifetime",
    "tokenize_numeric_literal",
    "tokenize_string_literal",
    "try_tokenize_prefixed_literal",
]
