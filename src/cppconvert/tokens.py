"""Token types, data structures, and character classification helpers."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto


class TokenType(Enum):
    # Pass-through
    WHITESPACE = auto()  # run of space, tab, CR, LF
    OTHER = auto()  # any single unclassified char, or a malformed construct
    COMMENT = auto()  # /* ... */ or // ...\n
    STRING = auto()  # "..." or '...', escape-aware
    RAW_STRING = auto()  # R"delim(...)delim"
    IDENTIFIER = auto()  # letter or _ followed by ASCII alnum/_

    # Keywords (rewritten)
    AND = auto()
    OR = auto()
    EQ = auto()
    NEQ = auto()
    XOR = auto()
    NULL = auto()


KEYWORDS: dict[str, TokenType] = {
    "AND": TokenType.AND,
    "OR": TokenType.OR,
    "EQ": TokenType.EQ,
    "NEQ": TokenType.NEQ,
    "XOR": TokenType.XOR,
    "NULL": TokenType.NULL,
}

KEYWORD_TYPES = frozenset(KEYWORDS.values())


@dataclass(frozen=True, slots=True)
class Position:
    """Source position, 1-based line and column, 0-based character offset."""

    line: int
    column: int
    offset: int


@dataclass(frozen=True, slots=True)
class Span:
    """Source range from start (inclusive) to end (exclusive) position."""

    start: Position
    end: Position


@dataclass(frozen=True, slots=True)
class Token:
    """A classified span of the scanned source.

    The token keeps a reference to the whole source rather than a copy of its
    text; ``lexeme`` slices it on demand.
    """

    type: TokenType
    span: Span
    source: str = field(repr=False, compare=False)

    @property
    def lexeme(self) -> str:
        return self.source[self.span.start.offset : self.span.end.offset]

    @property
    def is_keyword(self) -> bool:
        return self.type in KEYWORD_TYPES


WHITESPACE_CHARS = frozenset(" \t\r\n")

# Encoding prefixes that turn a following "..." into a raw string literal
RAW_STRING_PREFIXES = frozenset({"R", "LR", "uR", "UR", "u8R"})


def is_whitespace(ch: str) -> bool:
    """Return True if ch is one of the whitespace characters the scanner groups."""
    return ch in WHITESPACE_CHARS


def is_ident_start(ch: str) -> bool:
    """Return True if ch can start an identifier (any letter, or underscore)."""
    return ch.isalpha() or ch == "_"


def is_ident_char(ch: str) -> bool:
    """Return True if ch can continue an identifier (ASCII alnum or underscore)."""
    return ch.isascii() and (ch.isalnum() or ch == "_")
