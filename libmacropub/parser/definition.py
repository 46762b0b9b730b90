from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from libmacropub.lexer.tokens import (
        Group,
        Identifier,
        Punctuation,
        TokenLocation,
        TokenSequence,
    )
    from libmacropub.parser.states import ParserState


@dataclass(frozen=True)
class MacroDefinition:
    """Parsed view over an annotated `macro_rules!` item.

    Arms are kept as an opaque group, they are never parsed further.
    """

    # Leading `#[...]` attributes, verbatim (`#` punctuation and bracket group pairs)
    attributes: TokenSequence

    # `macro_rules` keyword and `!` after it, kept as tokens to preserve their locations
    keyword: Identifier
    bang: Punctuation

    name: Identifier
    arms: Group

    # Anything after definition within same annotated item
    trailing: TokenSequence = ()


@dataclass(frozen=True)
class ParseFailure:
    """Item is not an macro definition, parser stopped at given state."""

    state: ParserState
    reason: str

    # Where unexpected token is, if there is any (None if item ended too early)
    location: TokenLocation | None = None

    def __repr__(self) -> str:
        at = f" at {self.location!r}" if self.location else ""
        return f"Not an macro definition{at}: {self.reason} (parser state: {self.state.name})"


ParseResult: TypeAlias = MacroDefinition | ParseFailure
