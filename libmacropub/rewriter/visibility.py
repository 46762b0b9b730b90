from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias, assert_never

from libmacropub.lexer.tokens import Delimiter, Group, Identifier

if TYPE_CHECKING:
    from libmacropub.lexer.tokens import TokenSequence

VISIBILITY_KEYWORD = "pub"


@dataclass(frozen=True)
class DefaultVisibility:
    """No attribute argument, macro is world-visible (backed by an world-visible export)."""


@dataclass(frozen=True)
class RestrictedVisibility:
    """Attribute argument is an visibility path (e.g `crate`, `in super::module`), passed as-is."""

    path: TokenSequence


VisibilityRequest: TypeAlias = DefaultVisibility | RestrictedVisibility


def visibility_from_attribute(attr: TokenSequence) -> VisibilityRequest:
    """Decide visibility from attribute argument tokens, argument grammar is not validated."""
    if not attr:
        return DefaultVisibility()
    return RestrictedVisibility(path=tuple(attr))


def visibility_tokens(visibility: VisibilityRequest) -> TokenSequence:
    """Tokens of an visibility qualifier, `pub` or `pub(path)`."""
    keyword = Identifier(text=VISIBILITY_KEYWORD)
    match visibility:
        case DefaultVisibility():
            return (keyword,)
        case RestrictedVisibility(path=path):
            return (keyword, Group(delimiter=Delimiter.PARENTHESIS, tokens=path))
        case _:
            assert_never(visibility)
