from libmacropub.exceptions import MacroPubError
from libmacropub.lexer.tokens import TokenLocation


class MismatchedDelimiterError(MacroPubError):
    def __init__(
        self,
        open_delimiter_at: TokenLocation,
        close_delimiter_at: TokenLocation,
        expected: str,
        got: str,
    ) -> None:
        self.open_delimiter_at = open_delimiter_at
        self.close_delimiter_at = close_delimiter_at
        self.expected = expected
        self.got = got

    def __repr__(self) -> str:
        return f"""Mismatched closing delimiter `{self.got}` at {self.close_delimiter_at}!

Expected `{self.expected}` to close group opened at {self.open_delimiter_at}.

{self.generic_error_name}"""
