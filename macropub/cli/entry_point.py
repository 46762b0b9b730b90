from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from macropub.cli.errors.error_handler import cli_macropub_error_handler
from macropub.cli.goals import perform_desired_toolchain_goal
from macropub.cli.parser.builder import build_cli_parser
from macropub.cli.parser.parser import parse_cli_arguments

from .executable import cli_get_executable_program
from .output import cli_message

if TYPE_CHECKING:
    from collections.abc import Sequence


def cli_entry_point(
    prog: str | None = None,
    argv: Sequence[str] | None = None,
) -> None:
    """CLI main entry, `argv` defaults to process arguments."""
    prog = cli_get_executable_program(
        override=prog,
        warn_proper_installation=True,
    )

    parser = build_cli_parser(prog)
    args = parse_cli_arguments(parser.parse_args(argv))

    # Lexer, prober and capabilities errors are reported as messages with exit code 1
    with cli_macropub_error_handler(
        debug_user_friendly_errors=args.cli_debug_user_friendly_errors,
    ):
        perform_desired_toolchain_goal(args)

    # Every goal exits by itself
    cli_message("ERROR", "Bug in an CLI: goal returned without exiting!")
    sys.exit(1)


if __name__ == "__main__":
    cli_entry_point(prog=None)
