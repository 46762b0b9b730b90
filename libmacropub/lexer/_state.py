from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal

from .tokens import TokenLocation

if TYPE_CHECKING:
    from pathlib import Path


@dataclass(frozen=False)
class LexerState:
    """State for lexical analysis which only required for internal usages.

    Unlike line-oriented lexers, text is consumed as a whole
    as block comments and raw strings may span several lines.
    """

    path: Path | Literal["cli", "toolchain"]
    text: str = ""

    position: int = 0

    _row: int = 0
    _row_starts_at: int = 0

    def current_location(self) -> TokenLocation:
        if self.path == "cli":
            return TokenLocation.cli()
        if self.path == "toolchain":
            return TokenLocation.toolchain()

        return TokenLocation(
            filepath=self.path,
            line_number=self.row,
            col_number=self.col,
        )

    @property
    def row(self) -> int:
        return self._row

    @property
    def col(self) -> int:
        return self.position - self._row_starts_at

    @property
    def is_exhausted(self) -> bool:
        return self.position >= len(self.text)

    def peek(self, offset: int = 0) -> str:
        """Get symbol at current position shifted by offset, or empty string if out of text."""
        idx = self.position + offset
        if idx < 0 or idx >= len(self.text):
            return ""
        return self.text[idx]

    def startswith(self, prefix: str | tuple[str, ...]) -> bool:
        return self.text.startswith(prefix, self.position)

    def advance(self, by: int = 1) -> str:
        """Move position forward, tracking rows for locations, returns consumed text."""
        consumed = self.text[self.position : self.position + by]
        for offset, symbol in enumerate(consumed):
            if symbol == "\n":
                self._row += 1
                self._row_starts_at = self.position + offset + 1
        self.position += len(consumed)
        return consumed
