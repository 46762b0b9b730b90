from __future__ import annotations

from typing import TYPE_CHECKING

from libmacropub.lexer.errors.unclosed_character_quote import (
    UnclosedCharacterQuoteError,
)
from libmacropub.lexer.helpers import (
    ESCAPE_SYMBOL,
    LIFETIME_QUOTE,
    find_quoted_literal_end,
    is_identifier_start,
)
from libmacropub.lexer.tokens import LiteralToken, Punctuation, Spacing

if TYPE_CHECKING:
    from libmacropub.lexer._state import LexerState

CHARACTER_QUOTE = "'"


def tokenize_character_or_lifetime(state: LexerState) -> LiteralToken | Punctuation:
    """Tokenize character literal, or lifetime quote (`'a`) which is an joint punctuation followed by identifier.

    For lifetimes only quote punctuation is consumed, identifier is left for next tokenize.
    """
    assert state.peek() == CHARACTER_QUOTE, "Expected character quote at current position"

    is_character = state.peek(1) == ESCAPE_SYMBOL or (
        state.peek(1) != "" and state.peek(2) == CHARACTER_QUOTE
    )
    if is_character:
        return tokenize_character_literal(state)

    if is_identifier_start(state.peek(1)):
        location = state.current_location()
        state.advance()
        return Punctuation(char=LIFETIME_QUOTE, spacing=Spacing.JOINT, location=location)

    raise UnclosedCharacterQuoteError(open_quote_at=state.current_location())


def tokenize_character_literal(state: LexerState, *, prefix: str = "") -> LiteralToken:
    """Tokenize character (or byte with `b` prefix) literal starting at open quote."""
    assert state.peek() == CHARACTER_QUOTE, "Expected character quote at current position"
    location = state.current_location()
    start = state.position - len(prefix)

    ends_at = find_quoted_literal_end(
        state.text,
        state.position + 1,
        quote=CHARACTER_QUOTE,
    )
    if ends_at == -1 or "\n" in state.text[state.position : ends_at]:
        raise UnclosedCharacterQuoteError(open_quote_at=location)

    state.advance(ends_at - state.position)
    return LiteralToken(text=state.text[start : state.position], location=location)
