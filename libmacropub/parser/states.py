from enum import Enum, auto


class ParserState(Enum):
    """States of an macro definition parser, in order of transitions.

    Any unexpected token at non-terminal state moves parser into `FAILED`.
    """

    START = auto()
    COLLECTING_ATTRS = auto()
    SAW_KEYWORD = auto()
    SAW_BANG = auto()
    SAW_NAME = auto()
    SAW_BODY = auto()

    # Terminal ones
    DONE = auto()
    FAILED = auto()

    @property
    def is_terminal(self) -> bool:
        return self in (ParserState.DONE, ParserState.FAILED)
