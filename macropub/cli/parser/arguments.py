from dataclasses import dataclass
from pathlib import Path


@dataclass(slots=True, frozen=True)
class CLIArguments:
    """Arguments from argument parser provided for whole macropub toolchain process."""

    source_filepaths: list[Path]

    # Raw (not tokenized) attribute argument
    attribute: str

    version: bool
    configure: bool
    fingerprint: bool

    capabilities_path: Path | None

    # Overrides persisted capabilities when set
    has_simple_decl_macro: bool | None

    verbose: bool
    show_commands: bool

    cli_debug_user_friendly_errors: bool
