from __future__ import annotations

from typing import TYPE_CHECKING

from libmacropub.lexer.errors.unclosed_string_quote import UnclosedStringQuoteError
from libmacropub.lexer.helpers import find_quoted_literal_end, is_identifier_continue
from libmacropub.lexer.literals.character import tokenize_character_literal
from libmacropub.lexer.tokens import LiteralToken

if TYPE_CHECKING:
    from libmacropub.lexer._state import LexerState

STRING_QUOTE = '"'
RAW_STRING_HASH = "#"

# Prefixes that may start an literal instead of an identifier
# (ordered so longest prefixes are tried first)
STRING_PREFIXES = ("br", "cr", "b", "c", "r")


def tokenize_string_literal(state: LexerState, *, prefix: str = "") -> LiteralToken:
    """Tokenize string literal (optionally prefixed with `b` / `c`) starting at open quote."""
    assert state.peek() == STRING_QUOTE, "Expected string quote at current position"
    location = state.current_location()
    start = state.position - len(prefix)

    ends_at = find_quoted_literal_end(state.text, state.position + 1, quote=STRING_QUOTE)
    if ends_at == -1:
        raise UnclosedStringQuoteError(open_quote_at=location)

    state.advance(ends_at - state.position)
    _consume_literal_suffix(state)
    return LiteralToken(text=state.text[start : state.position], location=location)


def tokenize_raw_string_literal(state: LexerState, *, prefix: str) -> LiteralToken:
    """Tokenize raw string literal (`r"..."`, `r#"..."#`) starting right after its prefix."""
    location = state.current_location()
    start = state.position - len(prefix)

    hashes = 0
    while state.peek(hashes) == RAW_STRING_HASH:
        hashes += 1
    assert state.peek(hashes) == STRING_QUOTE, "Expected string quote after raw string hashes"

    terminator = STRING_QUOTE + RAW_STRING_HASH * hashes
    ends_at = state.text.find(terminator, state.position + hashes + 1)
    if ends_at == -1:
        raise UnclosedStringQuoteError(open_quote_at=location)

    state.advance(ends_at + len(terminator) - state.position)
    _consume_literal_suffix(state)
    return LiteralToken(text=state.text[start : state.position], location=location)


def try_tokenize_prefixed_literal(state: LexerState) -> LiteralToken | None:
    """Try to tokenize literal with an prefix (`b"..."`, `r#"..."#`, `b'x'`) or return nothing.

    Does not modify state when there is no prefixed literal at current position.
    """
    for prefix in STRING_PREFIXES:
        if not state.startswith(prefix):
            continue

        after = state.peek(len(prefix))
        is_raw = prefix.endswith("r")
        if is_raw and (after == STRING_QUOTE or _is_raw_string_hashes(state, len(prefix))):
            state.advance(len(prefix))
            return tokenize_raw_string_literal(state, prefix=prefix)

        if not is_raw and after == STRING_QUOTE:
            state.advance(len(prefix))
            return tokenize_string_literal(state, prefix=prefix)

        if prefix == "b" and after == "'":
            state.advance(len(prefix))
            return tokenize_character_literal(state, prefix=prefix)
    return None


def escape_string_literal(text: str) -> str:
    """Quote given text into an string literal source text."""
    escaped = (
        text.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
    )
    return f'"{escaped}"'


def _is_raw_string_hashes(state: LexerState, offset: int) -> bool:
    """Is there `#...#"` sequence at given offset (raw string with hashes, not raw identifier)."""
    hashes = 0
    while state.peek(offset + hashes) == RAW_STRING_HASH:
        hashes += 1
    return hashes > 0 and state.peek(offset + hashes) == STRING_QUOTE


def _consume_literal_suffix(state: LexerState) -> None:
    while not state.is_exhausted and is_identifier_continue(state.peek()):
        state.advance()
