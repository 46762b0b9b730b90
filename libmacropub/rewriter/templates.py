"""Fixed token snippets emitted by rewriter, lexed once from their source text."""

from libmacropub.lexer.lexer import tokenize_from_raw

ERROR_MARKER_MESSAGE = "`#[macro_pub]` must be used on a `macro_rules!` macro"

# Appended after original item when it is not an macro definition
ERROR_MARKER = tokenize_from_raw(
    "toolchain",
    f'compile_error! {{ "{ERROR_MARKER_MESSAGE}" }}',
)

# Documentation-only declaration with legacy (`macro_rules!`) hygiene
DOC_ONLY_DECL_MACRO_ATTRIBUTES = tokenize_from_raw(
    "toolchain",
    '#[cfg(doc)] #[rustc_macro_transparency = "semitransparent"]',
)

NOT_DOC_ATTRIBUTES = tokenize_from_raw("toolchain", "#[cfg(not(doc))]")

WORLD_EXPORT_ATTRIBUTES = tokenize_from_raw(
    "toolchain",
    "#[macro_export] #[doc(hidden)]",
)
