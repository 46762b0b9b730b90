from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

    from libmacropub.lexer._state import LexerState


ESCAPE_SYMBOL = "\\"
SINGLE_LINE_COMMENT = "//"
BLOCK_COMMENT_OPEN = "/*"
BLOCK_COMMENT_CLOSE = "*/"

PUNCTUATION_SYMBOLS = frozenset("~!@#$%^&*-=+|;:,<.>/?")
LIFETIME_QUOTE = "'"


def is_identifier_start(symbol: str) -> bool:
    return symbol == "_" or symbol.isalpha()


def is_identifier_continue(symbol: str) -> bool:
    return symbol == "_" or symbol.isalnum()


def is_punctuation(symbol: str) -> bool:
    return symbol != "" and symbol in PUNCTUATION_SYMBOLS


def consume_while(state: LexerState, predicate: Callable[[str], bool]) -> str:
    """Consume symbols while predicate holds, returns consumed text. E.g `.takewhile()` over state."""
    start = state.position
    while not state.is_exhausted and predicate(state.peek()):
        state.advance()
    return state.text[start : state.position]


def find_quoted_literal_end(text: str, idx: int, *, quote: str) -> int:
    """Find index right after close quote of an literal or -1 if not closed properly.

    `idx` must point right after the open quote.
    """
    idx_end = len(text)
    while idx < idx_end:
        current = text[idx]
        if current == ESCAPE_SYMBOL:
            # Skip escaped symbol whatever it is (includes escaped quotes)
            idx += 2
            continue
        if current == quote:
            return idx + 1
        idx += 1

    return -1
