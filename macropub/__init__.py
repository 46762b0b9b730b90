"""macropub toolchain.

Provides CLI for rewriting `#[macro_pub]` annotated macros and probing host compiler capabilities.
"""

from libmacropub.rewriter import rewrite_macro_pub

__all__ = [
    "rewrite_macro_pub",
]
