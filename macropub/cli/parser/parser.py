from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING

from libmacropub.capabilities import CAPABILITIES_FILENAME
from libmacropub.prober.environment import OUT_DIR_VARIABLE
from macropub.cli.output import cli_fatal_abort
from macropub.cli.parser.arguments import CLIArguments

if TYPE_CHECKING:
    from argparse import Namespace

STDIN_SOURCE = "-"


def parse_cli_arguments(args: Namespace) -> CLIArguments:
    """Parse CLI arguments from argparse into custom DTO."""
    _validate_mutually_exclusive_goals(args)

    return CLIArguments(
        # Goals.
        version=bool(args.version),
        configure=bool(args.configure),
        fingerprint=bool(args.fingerprint),
        # Rest of these are mostly goal-specific
        source_filepaths=_process_source_filepaths(args),
        attribute=str(args.attribute),
        capabilities_path=_process_capabilities_path(args),
        has_simple_decl_macro=args.has_simple_decl_macro,
        verbose=bool(args.verbose or args.show_commands),
        show_commands=bool(args.show_commands),
        cli_debug_user_friendly_errors=bool(args.cli_debug_user_friendly_errors),
    )


def _validate_mutually_exclusive_goals(args: Namespace) -> None:
    goals = [args.version, args.configure, args.fingerprint]
    if sum(map(bool, goals)) > 1:
        cli_fatal_abort(
            text="Goals `--version`, `--configure` and `--fingerprint` are mutually exclusive!",
        )


def _process_source_filepaths(args: Namespace) -> list[Path]:
    paths = [Path(f) for f in args.source_files]
    for path in paths:
        if str(path) == STDIN_SOURCE:
            continue
        if not path.exists():
            cli_fatal_abort(text=f"Source file '{path}' does not exists!")
        if not path.is_file():
            cli_fatal_abort(text=f"Source '{path}' is not a file!")
    return paths


def _process_capabilities_path(args: Namespace) -> Path | None:
    """Explicit capabilities path, or default one inside build script output directory."""
    if args.capabilities:
        return Path(args.capabilities)

    if out_dir := os.environ.get(OUT_DIR_VARIABLE):
        return Path(out_dir) / CAPABILITIES_FILENAME
    return None
