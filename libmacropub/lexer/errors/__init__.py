"""Errors collections that lexer may raise (user-facing ones)."""

from .mismatched_delimiter import MismatchedDelimiterError
from .unclosed_block_comment import UnclosedBlockCommentError
from .unclosed_character_quote import UnclosedCharacterQuoteError
from .unclosed_delimiter import UnclosedDelimiterError
from .unclosed_string_quote import UnclosedStringQuoteError
from .unexpected_closing_delimiter import UnexpectedClosingDelimiterError
from .unknown_character import UnknownCharacterError

__all__ = [
    "MismatchedDelimiterError",
    "UnclosedBlockCommentError",
    "UnclosedCharacterQuoteError",
    "UnclosedDelimiterError",
    "UnclosedStringQuoteError",
    "UnexpectedClosingDelimiterError",
    "UnknownCharacterError",
]
