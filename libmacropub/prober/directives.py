"""Build system directives, written by build script on its standard output."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from pathlib import Path


def emit_cfg(cfg: str, *, stream: TextIO | None = None) -> None:
    """Write configuration flag directive, build system passes it to compiler (`--cfg CFG`)."""
    _emit(f"cargo:rustc-cfg={cfg}", stream)


def emit_rerun_if_changed(path: Path | str, *, stream: TextIO | None = None) -> None:
    """Write directive telling build system to re-run build configuration if `path` changes."""
    _emit(f"cargo:rerun-if-changed={path}", stream)


def _emit(directive: str, stream: TextIO | None) -> None:
    print(directive, file=stream or sys.stdout)
