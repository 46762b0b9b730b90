from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from libmacropub.prober.errors import (
    MissingEncodedFlagsError,
    MissingOutputDirectoryError,
    OutputDirectoryNotWritableError,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

OUT_DIR_VARIABLE = "OUT_DIR"
RUSTC_VARIABLE = "RUSTC"
TARGET_VARIABLE = "TARGET"
ENCODED_RUSTFLAGS_VARIABLE = "CARGO_ENCODED_RUSTFLAGS"

RUSTC_DEFAULT_EXECUTABLE = "rustc"

# ASCII unit separator (US), delimits fields of encoded flags
ENCODED_FLAGS_SEPARATOR = "\x1f"


@dataclass(frozen=True)
class ProberEnvironment:
    """Configuration of capability prober, as build system passes it to build scripts."""

    # Scratch directory for probe artifacts
    out_dir: Path

    # Compiler executable
    rustc: str = field(default=RUSTC_DEFAULT_EXECUTABLE)

    # Target triplet, None means host
    target: str | None = field(default=None)

    # Flags that real build would pass to compiler, each one is forwarded verbatim
    rustflags: tuple[str, ...] = field(default=())

    @classmethod
    def from_mapping(cls, environ: Mapping[str, str] | None = None) -> ProberEnvironment:
        """Read configuration from environment (by default - current process one).

        Missing encoded flags or output directory is fatal, prober refuses to guess them.
        """
        if environ is None:
            environ = os.environ

        if (out_dir := environ.get(OUT_DIR_VARIABLE)) is None:
            raise MissingOutputDirectoryError(variable=OUT_DIR_VARIABLE)

        return cls(
            out_dir=validate_output_directory(Path(out_dir)),
            rustc=environ.get(RUSTC_VARIABLE) or RUSTC_DEFAULT_EXECUTABLE,
            target=environ.get(TARGET_VARIABLE) or None,
            rustflags=tuple(read_encoded_rustflags(environ)),
        )


def read_encoded_rustflags(environ: Mapping[str, str]) -> list[str]:
    """Get compiler flags from encoded variable, splitting exactly on unit-separator byte.

    Flags are not sourced from any other variables (e.g `RUSTFLAGS`),
    as build system folds every flags source into that encoded one.
    """
    encoded = environ.get(ENCODED_RUSTFLAGS_VARIABLE)
    if encoded is None:
        raise MissingEncodedFlagsError(variable=ENCODED_RUSTFLAGS_VARIABLE)
    return split_encoded_flags(encoded)


def split_encoded_flags(encoded: str) -> list[str]:
    if not encoded:
        return []
    return encoded.split(ENCODED_FLAGS_SEPARATOR)


def validate_output_directory(path: Path) -> Path:
    """Sanity check that output directory exists and is writable."""
    if not path.is_dir() or not os.access(path, os.W_OK):
        raise OutputDirectoryNotWritableError(path=path)
    return path
