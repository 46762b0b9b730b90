"""Lexer package that tokenizes source text into token trees (tokens with nested delimited groups)."""

from .lexer import tokenize_from_raw
from .serializer import serialize_token, serialize_tokens
from .tokens import (
    Delimiter,
    Group,
    Identifier,
    LiteralToken,
    Punctuation,
    Spacing,
    Token,
    TokenLocation,
    TokenSequence,
)

__all__ = [
    "Delimiter",
    "Group",
    "Identifier",
    "LiteralToken",
    "Punctuation",
    "Spacing",
    "Token",
    "TokenLocation",
    "TokenSequence",
    "serialize_token",
    "serialize_tokens",
    "tokenize_from_raw",
]
