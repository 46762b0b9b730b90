"""Rewriter of `#[macro_pub]` annotated items."""

from .rewriter import (
    AttributeRewriter,
    internal_macro_name,
    rewrite_arm_separators,
    rewrite_macro_pub,
)
from .templates import ERROR_MARKER, ERROR_MARKER_MESSAGE
from .visibility import (
    DefaultVisibility,
    RestrictedVisibility,
    VisibilityRequest,
    visibility_from_attribute,
    visibility_tokens,
)

__all__ = [
    "ERROR_MARKER",
    "ERROR_MARKER_MESSAGE",
    "AttributeRewriter",
    "DefaultVisibility",
    "RestrictedVisibility",
    "VisibilityRequest",
    "internal_macro_name",
    "rewrite_arm_separators",
    "rewrite_macro_pub",
    "visibility_from_attribute",
    "visibility_tokens",
]
