"""Persisting probed capabilities between build configuration and rewrites, so compiler is probed only once."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from libmacropub.capabilities.capabilities import Capabilities
from libmacropub.capabilities.errors import MalformedCapabilitiesFileError

if TYPE_CHECKING:
    from pathlib import Path

CAPABILITIES_FILENAME = "macropub-capabilities.json"
CAPABILITIES_FILE_ENCODING = "utf-8"


@dataclass(frozen=True)
class CapabilitiesRecord:
    """Capabilities with information about how they were probed (to detect stale ones)."""

    capabilities: Capabilities

    # Digest of probing logic source, probe must be re-run when it changes
    probe_digest: str

    # Compiler and target that were probed
    rustc: str
    target: str | None = None

    # Compiler flags that every probe was compiled with
    rustflags: tuple[str, ...] = ()

    def is_stale(
        self,
        *,
        probe_digest: str,
        rustc: str,
        target: str | None,
        rustflags: tuple[str, ...] = (),
    ) -> bool:
        return (self.probe_digest, self.rustc, self.target, self.rustflags) != (
            probe_digest,
            rustc,
            target,
            tuple(rustflags),
        )


def save_capabilities_record(path: Path, record: CapabilitiesRecord) -> None:
    """Write capabilities record as an JSON document."""
    document = {
        "has_simple_decl_macro": record.capabilities.has_simple_decl_macro,
        "probe_digest": record.probe_digest,
        "rustc": record.rustc,
        "rustflags": list(record.rustflags),
        "target": record.target,
    }
    with path.open("w", encoding=CAPABILITIES_FILE_ENCODING) as f:
        json.dump(document, f, indent=2, sort_keys=True)
        f.write("\n")


def load_capabilities_record(path: Path) -> CapabilitiesRecord | None:
    """Read capabilities record, or nothing if it was never written."""
    if not path.is_file():
        return None

    with path.open("r", encoding=CAPABILITIES_FILE_ENCODING) as f:
        try:
            document = json.load(f)
        except json.JSONDecodeError as e:
            raise MalformedCapabilitiesFileError(path=path, reason=str(e)) from e

    if not isinstance(document, dict):
        raise MalformedCapabilitiesFileError(
            path=path,
            reason="expected an JSON object at top-level",
        )

    return CapabilitiesRecord(
        capabilities=Capabilities(
            has_simple_decl_macro=_read_flag(path, document, "has_simple_decl_macro"),
        ),
        probe_digest=str(document.get("probe_digest", "")),
        rustc=str(document.get("rustc", "")),
        target=document.get("target"),
        rustflags=_read_rustflags(path, document),
    )


def load_capabilities(path: Path) -> Capabilities:
    """Read capabilities, missing file or missing flag means unsupported."""
    record = load_capabilities_record(path)
    if record is None:
        return Capabilities()
    return record.capabilities


def _read_flag(path: Path, document: dict[str, Any], name: str) -> bool:
    value = document.get(name, False)
    if not isinstance(value, bool):
        raise MalformedCapabilitiesFileError(
            path=path,
            reason=f"expected boolean for `{name}`, got {type(value).__name__}",
        )
    return value


def _read_rustflags(path: Path, document: dict[str, Any]) -> tuple[str, ...]:
    rustflags = document.get("rustflags", [])
    if not isinstance(rustflags, list) or not all(isinstance(f, str) for f in rustflags):
        raise MalformedCapabilitiesFileError(
            path=path,
            reason="expected list of strings for `rustflags`",
        )
    return tuple(rustflags)
