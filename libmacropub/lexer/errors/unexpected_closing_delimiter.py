from libmacropub.exceptions import MacroPubError
from libmacropub.lexer.tokens import TokenLocation


class UnexpectedClosingDelimiterError(MacroPubError):
    def __init__(self, at: TokenLocation, delimiter: str) -> None:
        self.at = at
        self.delimiter = delimiter

    def __repr__(self) -> str:
        return f"""Unexpected closing delimiter `{self.delimiter}` at {self.at}!

There is no open group to close here.

{self.generic_error_name}"""
