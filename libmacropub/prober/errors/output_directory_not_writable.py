from pathlib import Path

from libmacropub.exceptions import MacroPubError


class OutputDirectoryNotWritableError(MacroPubError):
    def __init__(self, path: Path) -> None:
        self.path = path

    def __repr__(self) -> str:
        return f"""Output directory '{self.path}' does not exist, is not a directory or is not writable!

Probes emit compiler artifacts into that directory.

{self.generic_error_name}"""
