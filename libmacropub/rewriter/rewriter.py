from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

from libmacropub.capabilities.capabilities import Capabilities
from libmacropub.hashing import fingerprint_item
from libmacropub.lexer.lexer import RAW_IDENTIFIER_PREFIX
from libmacropub.lexer.tokens import Group, Identifier, Punctuation
from libmacropub.parser import ParseFailure, parse_macro_definition
from libmacropub.rewriter.templates import (
    DOC_ONLY_DECL_MACRO_ATTRIBUTES,
    ERROR_MARKER,
    NOT_DOC_ATTRIBUTES,
    WORLD_EXPORT_ATTRIBUTES,
)
from libmacropub.rewriter.visibility import (
    DefaultVisibility,
    visibility_from_attribute,
    visibility_tokens,
)

if TYPE_CHECKING:
    from libmacropub.lexer.tokens import Token, TokenLocation, TokenSequence
    from libmacropub.parser import MacroDefinition

INTERNAL_NAME_PREFIX = "macro_impl"

STATEMENT_TERMINATOR = ";"
DECL_MACRO_ARM_SEPARATOR = ","
DECL_MACRO_KEYWORD = "macro"


class AttributeRewriter:
    """Rewrites `#[macro_pub]` annotated `macro_rules!` definitions to obey normal visibility rules.

    Instead of textually scoped `#[macro_export]` macro, definition is re-declared
    and re-exported with `use`, which makes it an ordinary item within module system:

    `#[macro_pub(crate)] macro_rules! m { ... }` becomes:
        `macro_rules! m { ... } pub(crate) use m as m;`

    `#[macro_pub] macro_rules! m { ... }` (world-visible) becomes:
        `#[macro_export] #[doc(hidden)] macro_rules! macro_impl_<hash>_m { ... }`
        `pub use macro_impl_<hash>_m as m;`
    where hash is an fingerprint of whole annotated item to prevent conflicts
    within (flat) exported macros namespace.

    If compiler supports simple declarative macros (probed ahead of time into capabilities),
    world-visible macro also receives an documentation-only `pub macro m { ... }` declaration,
    so it is documented as an regular macro instead of an plain re-export.
    """

    capabilities: Capabilities

    def __init__(self, capabilities: Capabilities | None = None) -> None:
        self.capabilities = capabilities if capabilities is not None else Capabilities()

    def rewrite(self, attr: TokenSequence, item: TokenSequence) -> TokenSequence:
        """Rewrite annotated item with given attribute argument into replacement tokens.

        Malformed (non-macro) item is returned as-is followed by an `compile_error!` marker.
        """
        definition = parse_macro_definition(item)
        if isinstance(definition, ParseFailure):
            # Marker is reported at the item itself, not somewhere inside toolchain
            marker = _relocate_tokens(ERROR_MARKER, item[0].location) if item else ERROR_MARKER
            return (*item, *marker)

        visibility = visibility_from_attribute(attr)
        vis = visibility_tokens(visibility)
        is_world_visible = isinstance(visibility, DefaultVisibility)

        if not is_world_visible:
            # Not exported outside of crate, so there is no namespace to conflict within
            return (
                *definition.attributes,
                *_macro_rules_tokens(definition, definition.name),
                *_reexport_tokens(vis, definition.name, definition.name),
                *definition.trailing,
            )

        internal_name = internal_macro_name(item, definition.name)
        exported = (
            *WORLD_EXPORT_ATTRIBUTES,
            *_macro_rules_tokens(definition, internal_name),
        )
        reexport = _reexport_tokens(vis, internal_name, definition.name)

        if not self.capabilities.has_simple_decl_macro:
            return (
                *definition.attributes,
                *exported,
                *reexport,
                *definition.trailing,
            )

        # Exactly one of documentation or regular variant is compiled
        return (
            *definition.attributes,
            *DOC_ONLY_DECL_MACRO_ATTRIBUTES,
            *vis,
            *_decl_macro_tokens(definition),
            *definition.attributes,
            *NOT_DOC_ATTRIBUTES,
            *exported,
            *NOT_DOC_ATTRIBUTES,
            *reexport,
            *definition.trailing,
        )


def rewrite_macro_pub(
    attr: TokenSequence,
    item: TokenSequence,
    *,
    capabilities: Capabilities,
) -> TokenSequence:
    """Rewrite single annotated item, see `AttributeRewriter`."""
    return AttributeRewriter(capabilities).rewrite(attr, item)


def internal_macro_name(item: TokenSequence, name: Identifier) -> Identifier:
    """Get collision-resistant internal name derived from whole (unmodified) annotated item.

    Raw identifier prefix is dropped, as prefixed name is never an keyword.
    """
    fingerprint = fingerprint_item(item)
    plain_name = name.text.removeprefix(RAW_IDENTIFIER_PREFIX)
    return Identifier(
        text=f"{INTERNAL_NAME_PREFIX}_{fingerprint}_{plain_name}",
        location=name.location,
    )


def rewrite_arm_separators(arms: Group) -> Group:
    """Replace top-level `;` arm separators with `,` as `macro` syntax requires.

    Only top-level punctuation is inspected, nested groups are left untouched.
    """
    return Group(
        delimiter=arms.delimiter,
        tokens=tuple(_rewrite_arm_separator(token) for token in arms.tokens),
        location=arms.location,
    )


def _rewrite_arm_separator(token: Token) -> Token:
    match token:
        case Punctuation(char=";", spacing=spacing, location=location):
            return Punctuation(
                char=DECL_MACRO_ARM_SEPARATOR,
                spacing=spacing,
                location=location,
            )
        case _:
            return token


def _relocate_tokens(tokens: TokenSequence, location: TokenLocation) -> TokenSequence:
    relocated: list[Token] = []
    for token in tokens:
        if isinstance(token, Group):
            token = replace(token, tokens=_relocate_tokens(token.tokens, location))
        relocated.append(replace(token, location=location))
    return tuple(relocated)


def _macro_rules_tokens(definition: MacroDefinition, name: Identifier) -> TokenSequence:
    """`macro_rules! <name> { arms }` with original keyword and arms."""
    return (definition.keyword, definition.bang, name, definition.arms)


def _decl_macro_tokens(definition: MacroDefinition) -> TokenSequence:
    """`macro <name> { arms }` with arm separators rewritten."""
    keyword = Identifier(text=DECL_MACRO_KEYWORD)
    return (keyword, definition.name, rewrite_arm_separators(definition.arms))


def _reexport_tokens(
    vis: TokenSequence,
    target: Identifier,
    alias: Identifier,
) -> TokenSequence:
    """`<vis> use <target> as <alias>;`."""
    return (
        *vis,
        Identifier(text="use"),
        target,
        Identifier(text="as"),
        alias,
        Punctuation(char=STATEMENT_TERMINATOR),
    )
