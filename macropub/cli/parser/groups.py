import argparse
from argparse import ArgumentParser


def add_goal_group(parser: ArgumentParser) -> None:
    """Construct and inject argument group with goals other than rewriting into given parser."""
    group = parser.add_argument_group("Goals", "What to do instead of rewriting")

    group.add_argument(
        "--configure",
        required=False,
        action="store_true",
        help="If passed will probe host compiler (configured from build script environment), emit build directives into stdout and persist capabilities.",
    )

    group.add_argument(
        "--fingerprint",
        required=False,
        action="store_true",
        help="If passed will only emit fingerprint and internal name of each given macro.",
    )


def add_rewrite_group(parser: ArgumentParser) -> None:
    """Construct and inject argument group with rewrite options into given parser."""
    group = parser.add_argument_group("Rewrite", "Control how items are rewritten")

    group.add_argument(
        "--attr",
        "-a",
        type=str,
        required=False,
        default="",
        dest="attribute",
        help="Attribute argument, visibility path (e.g `crate`, `in super`). By default macro is world-visible.",
    )


def add_capabilities_group(parser: ArgumentParser) -> None:
    """Construct and inject argument group with compiler capabilities options into given parser."""
    group = parser.add_argument_group(
        "Capabilities",
        "Host compiler capabilities, probed ahead of time via `--configure`",
    )

    group.add_argument(
        "--capabilities",
        "-c",
        type=str,
        required=False,
        help="Path to persisted capabilities file. By default it is searched in `$OUT_DIR` if it is set, otherwise nothing is supported.",
    )

    decl_macro_group = group.add_mutually_exclusive_group()
    decl_macro_group.add_argument(
        "--has-simple-decl-macro",
        action="store_true",
        dest="has_simple_decl_macro",
        help="Force compiler to be treated as supporting simple declarative macros",
    )
    decl_macro_group.add_argument(
        "--no-simple-decl-macro",
        action="store_false",
        dest="has_simple_decl_macro",
        help="Force compiler to be treated as not supporting simple declarative macros",
    )
    group.set_defaults(has_simple_decl_macro=None)


def add_debug_group(parser: ArgumentParser) -> None:
    """Construct and inject argument group with debug options into given parser."""
    group = parser.add_argument_group("Debug", "Debugging and logging")

    group.add_argument(
        "--verbose",
        "-v",
        required=False,
        action="store_true",
        help="If passed will enable INFO level logs from toolchain.",
    )

    group.add_argument(
        "-vv",
        "-###",
        required=False,
        dest="show_commands",
        action="store_true",
        help="If passed will display commands that toolchain performed if any (e.g compiler probes).",
    )


def add_toolchain_debug_group(parser: ArgumentParser) -> None:
    """Construct and inject argument group with internal toolchain debug options into given parser."""
    parser.add_argument(
        "--debug-unwrap-errors",
        dest="cli_debug_user_friendly_errors",
        action="store_false",
        default=True,
        help=argparse.SUPPRESS,
    )
