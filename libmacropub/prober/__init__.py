"""Capability prober, detects host compiler features by compiling synthetic snippets."""

from .configure import probe_source_paths, probe_sources_digest, run_build_configuration
from .directives import emit_cfg, emit_rerun_if_changed
from .environment import (
    ENCODED_FLAGS_SEPARATOR,
    ProberEnvironment,
    read_encoded_rustflags,
    split_encoded_flags,
)
from .features import SIMPLE_DECL_MACRO_SNIPPET, probe_capabilities, probe_simple_decl_macro
from .prober import CompilerProber, run_compiler_process

__all__ = [
    "ENCODED_FLAGS_SEPARATOR",
    "SIMPLE_DECL_MACRO_SNIPPET",
    "CompilerProber",
    "ProberEnvironment",
    "emit_cfg",
    "emit_rerun_if_changed",
    "probe_capabilities",
    "probe_simple_decl_macro",
    "probe_source_paths",
    "probe_sources_digest",
    "read_encoded_rustflags",
    "run_build_configuration",
    "run_compiler_process",
    "split_encoded_flags",
]
