from __future__ import annotations

import sys
from typing import TYPE_CHECKING, NoReturn

from libmacropub.prober import run_build_configuration
from macropub.cli.output import cli_message

if TYPE_CHECKING:
    from macropub.cli.parser.arguments import CLIArguments


def cli_perform_configure_goal(args: CLIArguments) -> NoReturn:
    """Perform configure goal that probes host compiler (as an build script) and emits build directives into stdout."""
    cli_message("INFO", "Probing host compiler capabilities...", verbose=args.verbose)

    capabilities = run_build_configuration(
        capabilities_path=args.capabilities_path,
        on_shell_call=lambda command: cli_message(
            "INFO",
            f"Running probe: `{' '.join(command)}`",
            verbose=args.show_commands,
        ),
        on_warning=lambda text: cli_message("WARNING", text),
    )

    cli_message("INFO", f"Probed {capabilities}", verbose=args.verbose)
    return sys.exit(0)
