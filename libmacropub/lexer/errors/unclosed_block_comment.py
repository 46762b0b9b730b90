from libmacropub.exceptions import MacroPubError
from libmacropub.lexer.tokens import TokenLocation


class UnclosedBlockCommentError(MacroPubError):
    def __init__(self, open_comment_at: TokenLocation) -> None:
        self.open_comment_at = open_comment_at

    def __repr__(self) -> str:
        return f"""Unclosed block comment at {self.open_comment_at}!

Block comments are nested, each `/*` requires its own `*/`.

{self.generic_error_name}"""
