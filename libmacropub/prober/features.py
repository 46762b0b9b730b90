"""Compiler features that rewriter may take advantage of, and snippets to probe them."""

from __future__ import annotations

from typing import TYPE_CHECKING

from libmacropub.capabilities.capabilities import Capabilities

if TYPE_CHECKING:
    from libmacropub.prober.prober import CompilerProber

# Macro with two otherwise-identical arms, declared with `macro` (macros 2.0) syntax
# but with `macro_rules!` hygiene (semitransparent), requires both experimental features
SIMPLE_DECL_MACRO_SNIPPET = r"""
#![feature(decl_macro, rustc_attrs)]
#[rustc_macro_transparency = "semitransparent"]
pub macro m {
    () => {},
    () => {},
}
"""


def probe_simple_decl_macro(prober: CompilerProber) -> bool:
    return prober.probe(SIMPLE_DECL_MACRO_SNIPPET)


def probe_capabilities(prober: CompilerProber) -> Capabilities:
    """Probe all features into capabilities."""
    return Capabilities(
        has_simple_decl_macro=probe_simple_decl_macro(prober),
    )
