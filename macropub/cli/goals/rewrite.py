from __future__ import annotations

import sys
from typing import TYPE_CHECKING, NoReturn

from libmacropub.lexer import serialize_tokens
from libmacropub.parser import ParseFailure, parse_macro_definition
from libmacropub.rewriter import AttributeRewriter
from macropub.cli.goals._capabilities import resolve_cli_capabilities
from macropub.cli.goals._sources import tokenize_cli_attribute, tokenize_cli_sources
from macropub.cli.output import cli_message

if TYPE_CHECKING:
    from macropub.cli.parser.arguments import CLIArguments


def cli_perform_rewrite_goal(args: CLIArguments) -> NoReturn:
    """Perform rewrite goal that emits rewritten items into stdout, one per line."""
    rewriter = AttributeRewriter(resolve_cli_capabilities(args))
    attr = tokenize_cli_attribute(args)

    for source, item in tokenize_cli_sources(args):
        definition = parse_macro_definition(item)
        if isinstance(definition, ParseFailure):
            # Rewriter itself does not fail, it emits `compile_error!` so compiler reports it
            cli_message("WARNING", f"{source}: {definition!r}")

        print(serialize_tokens(rewriter.rewrite(attr, item)))

    return sys.exit(0)
