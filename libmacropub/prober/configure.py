"""Build configuration step: probe compiler once and persist capabilities for later rewrites."""

from __future__ import annotations

from hashlib import md5
from pathlib import Path
from typing import TYPE_CHECKING, TextIO

from libmacropub.capabilities.persistence import (
    CAPABILITIES_FILENAME,
    CapabilitiesRecord,
    load_capabilities_record,
    save_capabilities_record,
)
from libmacropub.prober.directives import emit_cfg, emit_rerun_if_changed
from libmacropub.prober.environment import ProberEnvironment
from libmacropub.prober.features import probe_capabilities
from libmacropub.prober.prober import CompilerProber, run_compiler_process

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from libmacropub.capabilities.capabilities import Capabilities
    from libmacropub.prober.prober import CompilerRunner

PROBER_SOURCES_DIRECTORY = Path(__file__).parent


def probe_source_paths() -> list[Path]:
    """Sources of probing logic, capabilities must be re-probed when any of them changes."""
    return sorted(PROBER_SOURCES_DIRECTORY.glob("*.py"))


def probe_sources_digest() -> str:
    digest = md5(usedforsecurity=False)
    for path in probe_source_paths():
        digest.update(path.name.encode())
        digest.update(path.read_bytes())
    return digest.hexdigest()


def run_build_configuration(  # noqa: PLR0913
    environ: Mapping[str, str] | None = None,
    *,
    stream: TextIO | None = None,
    capabilities_path: Path | None = None,
    reuse_fresh_capabilities: bool = True,
    runner: CompilerRunner = run_compiler_process,
    on_shell_call: Callable[[list[str]], None] | None = None,
    on_warning: Callable[[str], None] | None = None,
) -> Capabilities:
    """Probe compiler capabilities, emit build directives for them and persist them.

    Capabilities are re-used without probing when persisted ones were probed
    by same probing logic, with same compiler, flags and for same target.
    Missing environment configuration is fatal and propagated as an error.
    """
    for path in probe_source_paths():
        emit_rerun_if_changed(path, stream=stream)

    environment = ProberEnvironment.from_mapping(environ)
    if capabilities_path is None:
        capabilities_path = environment.out_dir / CAPABILITIES_FILENAME

    digest = probe_sources_digest()
    record = load_capabilities_record(capabilities_path)
    is_fresh = record is not None and not record.is_stale(
        probe_digest=digest,
        rustc=environment.rustc,
        target=environment.target,
        rustflags=environment.rustflags,
    )

    if reuse_fresh_capabilities and is_fresh:
        assert record is not None
        capabilities = record.capabilities
    else:
        prober = CompilerProber(
            environment,
            runner=runner,
            on_shell_call=on_shell_call,
            on_warning=on_warning,
        )
        prober.detect_no_std()
        capabilities = probe_capabilities(prober)
        save_capabilities_record(
            capabilities_path,
            CapabilitiesRecord(
                capabilities=capabilities,
                probe_digest=digest,
                rustc=environment.rustc,
                target=environment.target,
                rustflags=environment.rustflags,
            ),
        )

    for cfg in capabilities.enabled_cfgs():
        emit_cfg(cfg, stream=stream)
    return capabilities
