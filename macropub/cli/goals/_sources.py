from __future__ import annotations

import sys
from pathlib import Path
from typing import TYPE_CHECKING

from libmacropub.lexer import tokenize_from_raw
from libmacropub.lexer.io import read_source_file
from macropub.cli.output import cli_message
from macropub.cli.parser.parser import STDIN_SOURCE

if TYPE_CHECKING:
    from libmacropub.lexer import TokenSequence
    from macropub.cli.parser.arguments import CLIArguments


def tokenize_cli_sources(args: CLIArguments) -> list[tuple[str, TokenSequence]]:
    """Tokenize each source given to CLI (stdin if there is none), each source is single annotated item."""
    paths = args.source_filepaths or [Path(STDIN_SOURCE)]

    sources: list[tuple[str, TokenSequence]] = []
    for path in paths:
        if str(path) == STDIN_SOURCE:
            cli_message("INFO", "Reading item from stdin...", verbose=args.verbose)
            sources.append(("<stdin>", tokenize_from_raw("cli", sys.stdin.read())))
            continue

        cli_message("INFO", f"Tokenizing '{path}'...", verbose=args.verbose)
        sources.append((str(path), tokenize_from_raw(path, read_source_file(path))))
    return sources


def tokenize_cli_attribute(args: CLIArguments) -> TokenSequence:
    return tokenize_from_raw("cli", args.attribute)
