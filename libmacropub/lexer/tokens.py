from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING, Literal, TypeAlias

if TYPE_CHECKING:
    from pathlib import Path


@dataclass(frozen=True)
class TokenLocation:
    """Location of any token within source code file."""

    line_number: int
    col_number: int

    filepath: Path | None = None
    source: Literal["file", "cli", "toolchain"] = "file"

    def __post_init__(self) -> None:
        if self.source == "file":
            assert self.filepath is not None

    def __repr__(self) -> str:
        if self.source == "cli":
            return "'(command-line-interface)'"
        if self.source == "toolchain":
            return "'(macropub-toolchain-internals)'"
        assert self.filepath is not None
        return f"'{self.filepath.name}:{self.line_number + 1}:{self.col_number + 1}'"

    @classmethod
    def cli(cls) -> TokenLocation:
        """Create a location for command-line originated tokens."""
        return cls(
            line_number=0,
            col_number=0,
            source="cli",
        )

    @classmethod
    def toolchain(cls) -> TokenLocation:
        """Create a location for toolchain originated tokens (e.g generated ones)."""
        return cls(
            line_number=0,
            col_number=0,
            source="toolchain",
        )


class Delimiter(Enum):
    """Kind of delimiter that surrounds an group of tokens."""

    PARENTHESIS = auto()  # ( ... )
    BRACE = auto()  # { ... }
    BRACKET = auto()  # [ ... ]

    # Invisible delimiter, group is rendered as its inner tokens only
    NONE = auto()


class Spacing(Enum):
    """Whether an punctuation is immediately followed by another one (e.g `=>`, `::`)."""

    ALONE = auto()
    JOINT = auto()


OPENING_DELIMITERS = {
    "(": Delimiter.PARENTHESIS,
    "{": Delimiter.BRACE,
    "[": Delimiter.BRACKET,
}
CLOSING_DELIMITERS = {
    ")": Delimiter.PARENTHESIS,
    "}": Delimiter.BRACE,
    "]": Delimiter.BRACKET,
}
DELIMITER_TO_PAIR = {
    Delimiter.PARENTHESIS: ("(", ")"),
    Delimiter.BRACE: ("{", "}"),
    Delimiter.BRACKET: ("[", "]"),
    Delimiter.NONE: ("", ""),
}


# Location is excluded from comparisons, as tokens are equal when their content is equal
# (generated and lexed tokens must be comparable)


@dataclass(frozen=True)
class Identifier:
    """Identifier or keyword (keywords are not distinguished at token level)."""

    text: str
    location: TokenLocation = field(
        default_factory=TokenLocation.toolchain,
        compare=False,
    )


@dataclass(frozen=True)
class Punctuation:
    """Single punctuation character with spacing to the next token."""

    char: str
    spacing: Spacing = Spacing.ALONE
    location: TokenLocation = field(
        default_factory=TokenLocation.toolchain,
        compare=False,
    )

    def __post_init__(self) -> None:
        assert len(self.char) == 1, "Punctuation must contain exactly one character"


@dataclass(frozen=True)
class LiteralToken:
    """Any literal (string, character, byte, numeric), kept as-is in its source text form."""

    text: str
    location: TokenLocation = field(
        default_factory=TokenLocation.toolchain,
        compare=False,
    )


@dataclass(frozen=True)
class Group:
    """Delimited sequence of tokens."""

    delimiter: Delimiter
    tokens: TokenSequence = ()
    location: TokenLocation = field(
        default_factory=TokenLocation.toolchain,
        compare=False,
    )


Token: TypeAlias = Identifier | Punctuation | LiteralToken | Group
TokenSequence: TypeAlias = tuple[Token, ...]
