"""Goals for CLI (e.g rewrite, configure, show version) as different goals that output different result."""

import sys
from time import perf_counter_ns
from typing import NoReturn

from macropub.cli.goals.configure import cli_perform_configure_goal
from macropub.cli.goals.fingerprint import cli_perform_fingerprint_goal
from macropub.cli.goals.rewrite import cli_perform_rewrite_goal
from macropub.cli.goals.version import cli_perform_version_goal
from macropub.cli.output import cli_message
from macropub.cli.parser.arguments import CLIArguments

NANOS_TO_SECONDS = 1_000_000_000


def perform_desired_toolchain_goal(args: CLIArguments) -> NoReturn:
    """Perform toolchain goal base on CLI arguments, by default fall into rewrite goal."""
    start = perf_counter_ns()
    try:
        if args.version:
            return cli_perform_version_goal(args)

        if args.configure:
            return cli_perform_configure_goal(args)

        if args.fingerprint:
            return cli_perform_fingerprint_goal(args)

        return cli_perform_rewrite_goal(args)
    except SystemExit as e:
        end = perf_counter_ns()
        time_taken = (end - start) / NANOS_TO_SECONDS
        cli_message(
            "INFO",
            f"Performing an goal took {time_taken:.2f} seconds!",
            verbose=args.verbose,
        )
        sys.exit(e.code)
