from __future__ import annotations

from dataclasses import dataclass, field
from string import digits
from typing import TYPE_CHECKING, Literal

from libmacropub.lexer._state import LexerState
from libmacropub.lexer.errors import (
    MismatchedDelimiterError,
    UnclosedBlockCommentError,
    UnclosedDelimiterError,
    UnexpectedClosingDelimiterError,
    UnknownCharacterError,
)
from libmacropub.lexer.helpers import (
    BLOCK_COMMENT_CLOSE,
    BLOCK_COMMENT_OPEN,
    SINGLE_LINE_COMMENT,
    consume_while,
    is_identifier_continue,
    is_identifier_start,
    is_punctuation,
)
from libmacropub.lexer.literals import (
    escape_string_literal,
    tokenize_character_or_lifetime,
    tokenize_numeric_literal,
    tokenize_string_literal,
    try_tokenize_prefixed_literal,
)
from libmacropub.lexer.tokens import (
    CLOSING_DELIMITERS,
    DELIMITER_TO_PAIR,
    OPENING_DELIMITERS,
    Delimiter,
    Group,
    Identifier,
    LiteralToken,
    Punctuation,
    Spacing,
)

if TYPE_CHECKING:
    from pathlib import Path

    from libmacropub.lexer.tokens import Token, TokenLocation, TokenSequence

RAW_IDENTIFIER_PREFIX = "r#"

OUTER_LINE_DOC_COMMENT = "///"
INNER_LINE_DOC_COMMENT = "//!"
OUTER_BLOCK_DOC_COMMENT = "/**"
INNER_BLOCK_DOC_COMMENT = "/*!"


@dataclass
class _OpenGroup:
    """Group that is being filled with tokens, until its closing delimiter is met."""

    delimiter: Delimiter
    location: TokenLocation
    tokens: list[Token] = field(default_factory=list)


def tokenize_from_raw(
    source: Path | Literal["cli", "toolchain"],
    text: str,
) -> TokenSequence:
    """Perform lexical analysis of given text into token trees (tokens with nested groups).

    Comments are dropped, doc comments are converted into `#[doc = "..."]` attributes.
    :returns tokens: Top-level tokens, in order from top to bottom of an text
    """
    state = LexerState(path=source, text=text)
    groups: list[_OpenGroup] = [
        _OpenGroup(delimiter=Delimiter.NONE, location=state.current_location()),
    ]

    while _skip_whitespace_and_comments(state, groups[-1].tokens):
        symbol = state.peek()
        location = state.current_location()

        if delimiter := OPENING_DELIMITERS.get(symbol):
            state.advance()
            groups.append(_OpenGroup(delimiter=delimiter, location=location))
            continue

        if delimiter := CLOSING_DELIMITERS.get(symbol):
            state.advance()
            _close_group(groups, delimiter, symbol, location)
            continue

        groups[-1].tokens.append(_tokenize_next_token(state))

    if len(groups) > 1:
        unclosed = groups[-1]
        raise UnclosedDelimiterError(
            open_delimiter_at=unclosed.location,
            delimiter=DELIMITER_TO_PAIR[unclosed.delimiter][0],
        )

    return tuple(groups[0].tokens)


def _close_group(
    groups: list[_OpenGroup],
    delimiter: Delimiter,
    symbol: str,
    location: TokenLocation,
) -> None:
    """Pop innermost open group and append it as an token to its parent."""
    if len(groups) == 1:
        raise UnexpectedClosingDelimiterError(at=location, delimiter=symbol)

    closed = groups.pop()
    if closed.delimiter != delimiter:
        raise MismatchedDelimiterError(
            open_delimiter_at=closed.location,
            close_delimiter_at=location,
            expected=DELIMITER_TO_PAIR[closed.delimiter][1],
            got=symbol,
        )

    groups[-1].tokens.append(
        Group(
            delimiter=closed.delimiter,
            tokens=tuple(closed.tokens),
            location=closed.location,
        ),
    )


def _tokenize_next_token(state: LexerState) -> Token:
    """Acquire single (non-group) token at current state position and move state after it."""
    symbol = state.peek()

    match symbol:
        case '"':
            return tokenize_string_literal(state)
        case "'":
            return tokenize_character_or_lifetime(state)
        case _ if symbol in digits:
            return tokenize_numeric_literal(state)
        case _ if is_identifier_start(symbol):
            if literal := try_tokenize_prefixed_literal(state):
                return literal
            return _tokenize_identifier(state)
        case _ if is_punctuation(symbol):
            return _tokenize_punctuation(state)
        case _:
            raise UnknownCharacterError(at=state.current_location(), character=symbol)


def _tokenize_identifier(state: LexerState) -> Identifier:
    location = state.current_location()
    start = state.position
    if state.startswith(RAW_IDENTIFIER_PREFIX) and is_identifier_start(state.peek(2)):
        state.advance(len(RAW_IDENTIFIER_PREFIX))

    consume_while(state, is_identifier_continue)
    return Identifier(text=state.text[start : state.position], location=location)


def _tokenize_punctuation(state: LexerState) -> Punctuation:
    location = state.current_location()
    char = state.advance()

    # Multi-character operators are sequence of joint punctuation
    is_joint = is_punctuation(state.peek()) and not state.startswith(
        (SINGLE_LINE_COMMENT, BLOCK_COMMENT_OPEN),
    )
    spacing = Spacing.JOINT if is_joint else Spacing.ALONE
    return Punctuation(char=char, spacing=spacing, location=location)


def _skip_whitespace_and_comments(state: LexerState, tokens: list[Token]) -> bool:
    """Skip until next meaningful symbol, doc comments are emitted into tokens as attributes.

    :returns has_more: False if reached end of text
    """
    while not state.is_exhausted:
        if state.peek().isspace():
            state.advance()
            continue

        if state.startswith(SINGLE_LINE_COMMENT):
            _consume_line_comment(state, tokens)
            continue

        if state.startswith(BLOCK_COMMENT_OPEN):
            _consume_block_comment(state, tokens)
            continue

        return True
    return False


def _consume_line_comment(state: LexerState, tokens: list[Token]) -> None:
    location = state.current_location()
    is_outer_doc = state.startswith(OUTER_LINE_DOC_COMMENT) and state.peek(3) != "/"
    is_inner_doc = state.startswith(INNER_LINE_DOC_COMMENT)

    comment = consume_while(state, lambda s: s != "\n")
    if is_outer_doc or is_inner_doc:
        tokens.extend(
            _doc_attribute_tokens(comment[3:], location, inner=is_inner_doc),
        )


def _consume_block_comment(state: LexerState, tokens: list[Token]) -> None:
    """Consume (possibly nested) block comment."""
    location = state.current_location()
    start = state.position
    is_outer_doc = (
        state.startswith(OUTER_BLOCK_DOC_COMMENT)
        and state.peek(3) != "*"
        and not state.startswith("/**/")
    )
    is_inner_doc = state.startswith(INNER_BLOCK_DOC_COMMENT)

    depth = 0
    while not state.is_exhausted:
        if state.startswith(BLOCK_COMMENT_OPEN):
            depth += 1
            state.advance(len(BLOCK_COMMENT_OPEN))
            continue
        if state.startswith(BLOCK_COMMENT_CLOSE):
            depth -= 1
            state.advance(len(BLOCK_COMMENT_CLOSE))
            if depth == 0:
                break
            continue
        state.advance()

    if depth != 0:
        raise UnclosedBlockCommentError(open_comment_at=location)

    if is_outer_doc or is_inner_doc:
        comment = state.text[start + 3 : state.position - len(BLOCK_COMMENT_CLOSE)]
        tokens.extend(_doc_attribute_tokens(comment, location, inner=is_inner_doc))


def _doc_attribute_tokens(
    comment: str,
    location: TokenLocation,
    *,
    inner: bool,
) -> TokenSequence:
    """Construct `#[doc = "comment"]` (or `#![doc = ...]`) tokens from doc comment."""
    attribute = Group(
        delimiter=Delimiter.BRACKET,
        tokens=(
            Identifier(text="doc", location=location),
            Punctuation(char="=", location=location),
            LiteralToken(text=escape_string_literal(comment), location=location),
        ),
        location=location,
    )
    if inner:
        return (
            Punctuation(char="#", spacing=Spacing.JOINT, location=location),
            Punctuation(char="!", location=location),
            attribute,
        )
    return (Punctuation(char="#", location=location), attribute)
