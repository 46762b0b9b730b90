from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

from libmacropub.capabilities import Capabilities, load_capabilities
from macropub.cli.output import cli_message

if TYPE_CHECKING:
    from macropub.cli.parser.arguments import CLIArguments


def resolve_cli_capabilities(args: CLIArguments) -> Capabilities:
    """Load persisted capabilities (never probes) and apply overrides from CLI."""
    capabilities = Capabilities()
    if args.capabilities_path is not None:
        cli_message(
            "INFO",
            f"Loading capabilities from '{args.capabilities_path}'...",
            verbose=args.verbose,
        )
        capabilities = load_capabilities(args.capabilities_path)

    if args.has_simple_decl_macro is not None:
        capabilities = replace(
            capabilities,
            has_simple_decl_macro=args.has_simple_decl_macro,
        )

    cli_message("INFO", f"Using {capabilities}", verbose=args.verbose)
    return capabilities
