from pathlib import Path

from libmacropub.exceptions import MacroPubError


class MalformedCapabilitiesFileError(MacroPubError):
    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason

    def __repr__(self) -> str:
        return f"""Capabilities file '{self.path}' is malformed: {self.reason}!

Remove it and re-run build configuration (`--configure`) to probe compiler again.

{self.generic_error_name}"""
