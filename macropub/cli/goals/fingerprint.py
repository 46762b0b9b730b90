from __future__ import annotations

import sys
from typing import TYPE_CHECKING, NoReturn

from libmacropub.hashing import fingerprint_item
from libmacropub.parser import ParseFailure, parse_macro_definition
from libmacropub.rewriter import internal_macro_name
from macropub.cli.goals._sources import tokenize_cli_sources
from macropub.cli.output import cli_fatal_abort

if TYPE_CHECKING:
    from macropub.cli.parser.arguments import CLIArguments


def cli_perform_fingerprint_goal(args: CLIArguments) -> NoReturn:
    """Perform fingerprint goal that emits fingerprint and internal (exported) name of each macro."""
    for source, item in tokenize_cli_sources(args):
        definition = parse_macro_definition(item)
        if isinstance(definition, ParseFailure):
            return cli_fatal_abort(f"{source}: {definition!r}")

        internal_name = internal_macro_name(item, definition.name)
        print(f"{source}\t{fingerprint_item(item)}\t{internal_name.text}")

    return sys.exit(0)
