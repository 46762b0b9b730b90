import sys
from dataclasses import fields
from platform import platform, python_implementation, python_version
from typing import NoReturn

from libmacropub.capabilities import Capabilities
from libmacropub.prober import probe_sources_digest
from macropub.cli.goals._capabilities import resolve_cli_capabilities
from macropub.cli.parser.arguments import CLIArguments


def cli_perform_version_goal(args: CLIArguments) -> NoReturn:
    """Perform version goal that display information about host and toolchain."""
    capabilities = resolve_cli_capabilities(args)

    print("[macropub toolchain]")
    print(f"\tProber digest: {probe_sources_digest()}")
    print("Host machine:")
    print(f"\tPlatform: {platform()}")
    print(f"\tPython: {python_implementation()} {python_version()}")
    print("Capabilities:")
    for field in fields(Capabilities):
        print(f"\t{field.name} = {getattr(capabilities, field.name)}")
    return sys.exit(0)
