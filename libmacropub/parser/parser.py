from __future__ import annotations

from typing import TYPE_CHECKING

from libmacropub.lexer.tokens import Delimiter, Group, Identifier, Punctuation
from libmacropub.parser.definition import MacroDefinition, ParseFailure
from libmacropub.parser.states import ParserState

if TYPE_CHECKING:
    from libmacropub.lexer.tokens import Token, TokenSequence
    from libmacropub.parser.definition import ParseResult

MACRO_DEFINITION_KEYWORD = "macro_rules"
ATTRIBUTE_MARK = "#"
MACRO_BANG = "!"

# What parser expects at each non-terminal state, for failure reports
EXPECTED_AT_STATE = {
    ParserState.START: f"`{MACRO_DEFINITION_KEYWORD}` or an attribute",
    ParserState.COLLECTING_ATTRS: f"`{MACRO_DEFINITION_KEYWORD}` or an attribute",
    ParserState.SAW_KEYWORD: f"`{MACRO_BANG}` after `{MACRO_DEFINITION_KEYWORD}`",
    ParserState.SAW_BANG: "macro name identifier",
    ParserState.SAW_NAME: "brace-delimited macro arms",
}


def parse_macro_definition(item: TokenSequence) -> ParseResult:
    """Parse annotated item as an `macro_rules!` definition with optional leading attributes.

    Strict order is: `#[...]`*, `macro_rules`, `!`, name, `{ arms }`, anything else is trailing.
    Nothing is raised on malformed item, instead failure with state where parser stopped is returned.
    """
    state = ParserState.START
    attributes: list[Token] = []
    keyword: Identifier | None = None
    bang: Punctuation | None = None
    name: Identifier | None = None
    arms: Group | None = None

    position = 0
    while not state.is_terminal:
        token = item[position] if position < len(item) else None

        match state, token:
            case (
                ParserState.START | ParserState.COLLECTING_ATTRS,
                Punctuation(char="#"),
            ):
                attribute = item[position + 1] if position + 1 < len(item) else None
                if not _is_attribute_body(attribute):
                    return ParseFailure(
                        state=state,
                        reason=f"expected bracketed attribute after `{ATTRIBUTE_MARK}`",
                        location=token.location,
                    )
                attributes.extend((token, attribute))
                position += 2
                state = ParserState.COLLECTING_ATTRS
            case (
                ParserState.START | ParserState.COLLECTING_ATTRS,
                Identifier(text="macro_rules"),
            ):
                keyword = token
                position += 1
                state = ParserState.SAW_KEYWORD
            case ParserState.SAW_KEYWORD, Punctuation(char="!"):
                bang = token
                position += 1
                state = ParserState.SAW_BANG
            case ParserState.SAW_BANG, Identifier():
                name = token
                position += 1
                state = ParserState.SAW_NAME
            case ParserState.SAW_NAME, Group(delimiter=Delimiter.BRACE):
                arms = token
                position += 1
                state = ParserState.SAW_BODY
            case ParserState.SAW_BODY, _:
                # Whatever is left is passed through as trailing tokens
                state = ParserState.DONE
            case _:
                return _unexpected_token_failure(state, token)

    assert keyword is not None
    assert bang is not None
    assert name is not None
    assert arms is not None
    return MacroDefinition(
        attributes=tuple(attributes),
        keyword=keyword,
        bang=bang,
        name=name,
        arms=arms,
        trailing=tuple(item[position:]),
    )


def _is_attribute_body(token: Token | None) -> bool:
    return isinstance(token, Group) and token.delimiter == Delimiter.BRACKET


def _unexpected_token_failure(state: ParserState, token: Token | None) -> ParseFailure:
    expected = EXPECTED_AT_STATE[state]
    if token is None:
        return ParseFailure(state=state, reason=f"expected {expected}, got end of item")
    return ParseFailure(
        state=state,
        reason=f"expected {expected}",
        location=token.location,
    )
