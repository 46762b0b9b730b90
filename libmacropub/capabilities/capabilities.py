from dataclasses import dataclass, field

# Name of build configuration flag (`cfg`) emitted when feature is supported
HAS_SIMPLE_DECL_MACRO_CFG = "has_simple_decl_macro"


@dataclass(frozen=True)
class Capabilities:
    """Host compiler capabilities, probed once per build configuration.

    Read-only for rewriter, absence of capability means unsupported (conservative default).
    """

    # Compiler accepts `pub macro` with `macro_rules!` hygiene
    # (`#![feature(decl_macro, rustc_attrs)]` + `#[rustc_macro_transparency = "semitransparent"]`)
    # When set, world-visible macros receive documentation-only declaration
    has_simple_decl_macro: bool = field(default=False)

    def enabled_cfgs(self) -> list[str]:
        """Build configuration flags for all supported capabilities."""
        cfgs: list[str] = []
        if self.has_simple_decl_macro:
            cfgs.append(HAS_SIMPLE_DECL_MACRO_CFG)
        return cfgs
