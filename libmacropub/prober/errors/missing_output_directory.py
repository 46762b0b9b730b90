from libmacropub.exceptions import MacroPubError


class MissingOutputDirectoryError(MacroPubError):
    def __init__(self, variable: str) -> None:
        self.variable = variable

    def __repr__(self) -> str:
        return f"""Expected environment variable `{self.variable}` with scratch output directory, but it is not set!

Probes emit compiler artifacts into that directory.

{self.generic_error_name}"""
