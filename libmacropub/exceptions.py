"""Base of all errors that are reported to user (e.g by CLI) with an message."""

import re
from abc import abstractmethod

_WORD_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def camel_to_kebab(s: str) -> str:
    """`UnclosedDelimiterError` -> `unclosed-delimiter-error`."""
    return _WORD_BOUNDARY.sub("-", s).lower()


class MacroPubError(Exception):
    """Parent for all macropub errors, each one renders user-facing message with its `__repr__`.

    Message ends with generic error name, e.g `[unclosed-delimiter-error]`.
    """

    @abstractmethod
    def __repr__(self) -> str:
        return f"Undocumented macropub error ({self.__class__.__name__})\n\n{self.generic_error_name}"

    def __str__(self) -> str:
        # Subclasses do not pass message to `Exception`, so traceback shows user message instead
        return repr(self)

    @property
    def generic_error_name(self) -> str:
        return f"[{camel_to_kebab(self.__class__.__name__)}]"
