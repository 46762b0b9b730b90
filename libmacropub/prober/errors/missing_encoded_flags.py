from libmacropub.exceptions import MacroPubError


class MissingEncodedFlagsError(MacroPubError):
    def __init__(self, variable: str) -> None:
        self.variable = variable

    def __repr__(self) -> str:
        return f"""Expected environment variable `{self.variable}` with encoded compiler flags, but it is not set!

Compiler cannot be probed without flags that real build would use.
It is set by build system for build scripts, fields are separated with unit-separator (0x1F) byte.

{self.generic_error_name}"""
