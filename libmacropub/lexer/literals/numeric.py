from __future__ import annotations

from string import digits
from typing import TYPE_CHECKING

from libmacropub.lexer.helpers import consume_while, is_identifier_continue, is_identifier_start
from libmacropub.lexer.tokens import LiteralToken

if TYPE_CHECKING:
    from libmacropub.lexer._state import LexerState

NON_DECIMAL_MARKS = ("0x", "0o", "0b")
EXPONENT_MARKS = ("e", "E")
EXPONENT_SIGNS = ("+", "-")


def tokenize_numeric_literal(state: LexerState) -> LiteralToken:
    """Tokenize integer or float literal with its suffix (e.g `1_000u64`, `0xFF`, `1.5e-3f32`).

    Value is not validated nor parsed, only boundaries of literal are located.
    """
    assert state.peek() in digits, "Numeric literal must start with digit"
    location = state.current_location()
    start = state.position

    is_non_decimal = state.startswith(NON_DECIMAL_MARKS)
    _consume_digits_and_suffix(state, is_non_decimal=is_non_decimal)

    if not is_non_decimal and state.peek() == "." and _is_fractional_dot(state):
        state.advance()
        _consume_digits_and_suffix(state, is_non_decimal=False)

    return LiteralToken(text=state.text[start : state.position], location=location)


def _consume_digits_and_suffix(state: LexerState, *, is_non_decimal: bool) -> None:
    consumed = consume_while(state, is_identifier_continue)
    if (
        not is_non_decimal
        and consumed.endswith(EXPONENT_MARKS)
        and state.peek() in EXPONENT_SIGNS
        and state.peek(1) in digits
        and state.peek(1) != ""
    ):
        state.advance()
        consume_while(state, is_identifier_continue)


def _is_fractional_dot(state: LexerState) -> bool:
    """Is dot at current position part of float literal (not range `..` nor field / method access)."""
    after = state.peek(1)
    if after == ".":
        return False
    return not is_identifier_start(after)
