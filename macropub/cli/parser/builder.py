from argparse import ArgumentParser

from macropub.cli.parser import groups


def build_cli_parser(prog: str) -> ArgumentParser:
    """Get argument parser instance to parse incoming arguments."""
    parser = ArgumentParser(
        description="macropub - rewrite `#[macro_pub]` annotated `macro_rules!` macros to obey normal visibility rules",
        usage=f"{prog} files... [options] [-h]",
        add_help=True,
        allow_abbrev=False,
        prog=prog,
    )

    parser.add_argument(
        "source_files",
        help="Annotated items to rewrite (`-` to read from stdin), each file is a single item",
        nargs="*",
        default=[],
    )

    parser.add_argument(
        "--version",
        default=False,
        action="store_true",
        help="Show version info",
    )

    groups.add_goal_group(parser)
    groups.add_rewrite_group(parser)
    groups.add_capabilities_group(parser)
    groups.add_debug_group(parser)
    groups.add_toolchain_debug_group(parser)
    return parser
