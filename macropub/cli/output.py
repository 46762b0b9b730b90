"""Output of CLI messages, all of them are written into stderr as stdout is reserved for goal output."""

import sys
from typing import Literal, NoReturn, TypeAlias

MessageLevel: TypeAlias = Literal["INFO", "WARNING", "ERROR"]

LEVEL_TO_COLOR: dict[MessageLevel, str] = {
    "INFO": "\033[94m",
    "WARNING": "\033[93m",
    "ERROR": "\033[91m",
}
COLOR_RESET = "\033[0m"


def cli_message(level: MessageLevel, text: str, *, verbose: bool = True) -> None:
    """Emit message with given level, INFO ones are shown only when verbose."""
    if level == "INFO" and not verbose:
        return

    prefix = f"[{level}]"
    if sys.stderr.isatty():
        prefix = f"{LEVEL_TO_COLOR[level]}{prefix}{COLOR_RESET}"
    print(f"{prefix} {text}", file=sys.stderr)


def cli_fatal_abort(text: str) -> NoReturn:
    cli_message("ERROR", text)
    sys.exit(1)
