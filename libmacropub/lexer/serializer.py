from __future__ import annotations

from typing import TYPE_CHECKING, assert_never

from libmacropub.lexer.tokens import (
    DELIMITER_TO_PAIR,
    Delimiter,
    Group,
    Identifier,
    LiteralToken,
    Punctuation,
    Spacing,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from libmacropub.lexer.tokens import Token


def serialize_tokens(tokens: Iterable[Token]) -> str:
    """Serialize tokens into deterministic source text.

    Tokens are separated with single space, except joint punctuation which is glued to next token.
    Same tokens always produce same text (locations are not involved), which is required for fingerprinting.
    """
    parts: list[str] = []
    glue_next = False
    for token in tokens:
        if parts and not glue_next:
            parts.append(" ")
        parts.append(serialize_token(token))
        glue_next = isinstance(token, Punctuation) and token.spacing == Spacing.JOINT
    return "".join(parts)


def serialize_token(token: Token) -> str:
    match token:
        case Identifier(text=text):
            return text
        case Punctuation(char=char):
            return char
        case LiteralToken(text=text):
            return text
        case Group(delimiter=delimiter, tokens=inner):
            return _serialize_group(delimiter, serialize_tokens(inner))
        case _:
            assert_never(token)


def _serialize_group(delimiter: Delimiter, inner: str) -> str:
    opening, closing = DELIMITER_TO_PAIR[delimiter]
    if delimiter == Delimiter.BRACE and inner:
        # Braces are padded for readability, e.g `{ () => {} ; }`
        return f"{opening} {inner} {closing}"
    return f"{opening}{inner}{closing}"
