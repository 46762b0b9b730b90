from libmacropub.exceptions import MacroPubError
from libmacropub.lexer.tokens import TokenLocation


class UnclosedDelimiterError(MacroPubError):
    def __init__(self, open_delimiter_at: TokenLocation, delimiter: str) -> None:
        self.open_delimiter_at = open_delimiter_at
        self.delimiter = delimiter

    def __repr__(self) -> str:
        return f"""Unclosed delimiter `{self.delimiter}` at {self.open_delimiter_at}!

Token groups must be closed with matching delimiter before end of input.

{self.generic_error_name}"""
