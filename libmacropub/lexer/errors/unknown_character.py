from libmacropub.exceptions import MacroPubError
from libmacropub.lexer.tokens import TokenLocation


class UnknownCharacterError(MacroPubError):
    def __init__(self, at: TokenLocation, character: str) -> None:
        self.at = at
        self.character = character

    def __repr__(self) -> str:
        return f"""Unknown character {self.character!r} at {self.at}!

{self.generic_error_name}"""
