"""C++ source scanner: splits text into a contiguous stream of classified tokens.

Only the constructs that can hide a keyword spelling are recognised: comments,
quoted literals and raw string literals. Everything else is either an
identifier or passes through one character at a time.
"""

from __future__ import annotations

from collections.abc import Iterator

from cppconvert.errors import Diagnostic
from cppconvert.tokens import (
    KEYWORDS,
    RAW_STRING_PREFIXES,
    Position,
    Span,
    Token,
    TokenType,
    is_ident_char,
    is_ident_start,
    is_whitespace,
)


class Scanner:
    """Pull-based scanner over one file's text.

    ``next_token()`` returns one token per call and ``None`` once the input is
    exhausted. Malformed constructs never raise: they come back as a token
    covering what was consumed and a ``Diagnostic`` is appended to
    ``diagnostics``.
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._pos = 0
        self._line = 1
        self._col = 1
        self._start = self._current_pos()
        self.diagnostics: list[Diagnostic] = []

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.next_token()
            if token is None:
                return
            yield token

    def next_token(self) -> Token | None:
        """Scan and return the next token, or None at end of input."""
        if self._at_end():
            return None

        self._start = self._current_pos()
        ch = self._advance()

        if is_whitespace(ch):
            return self._lex_whitespace()

        if ch == "/":
            return self._lex_slash()

        if ch in "\"'":
            return self._lex_string(ch)

        if is_ident_start(ch):
            return self._lex_identifier()

        return self._make(TokenType.OTHER)

    # ------------------------------------------------------------------
    # Position helpers
    # ------------------------------------------------------------------

    def _at_end(self) -> bool:
        return self._pos >= len(self._source)

    def _current_pos(self) -> Position:
        return Position(self._line, self._col, self._pos)

    def _peek(self) -> str:
        if self._pos < len(self._source):
            return self._source[self._pos]
        return ""

    def _lookback(self, distance: int) -> str:
        """Return the char ``distance`` places behind the cursor (1 = last consumed)."""
        idx = self._pos - distance
        if idx >= 0:
            return self._source[idx]
        return ""

    def _advance(self) -> str:
        ch = self._source[self._pos]
        self._pos += 1
        if ch == "\n":
            self._line += 1
            self._col = 1
        else:
            self._col += 1
        return ch

    def _make(self, tt: TokenType) -> Token:
        return Token(tt, Span(self._start, self._current_pos()), self._source)

    def _warn(self, message: str, width: int = 1) -> None:
        self.diagnostics.append(Diagnostic(message, self._start, self._source, width))

    # ------------------------------------------------------------------
    # Token kinds
    # ------------------------------------------------------------------

    def _lex_whitespace(self) -> Token:
        while is_whitespace(self._peek()):
            self._advance()
        return self._make(TokenType.WHITESPACE)

    def _lex_slash(self) -> Token:
        nxt = self._peek()

        if nxt == "*":
            self._advance()
            while not self._at_end():
                if self._advance() == "*" and self._peek() == "/":
                    self._advance()
                    return self._make(TokenType.COMMENT)
            self._warn("unterminated block comment", width=2)
            return self._make(TokenType.OTHER)

        if nxt == "/":
            while not self._at_end():
                if self._advance() == "\n":
                    return self._make(TokenType.COMMENT)
            # Line comment on the last line of a file without a trailing newline
            return self._make(TokenType.OTHER)

        return self._make(TokenType.OTHER)

    def _lex_string(self, quote: str) -> Token:
        """Scan a quoted literal; the opening quote has been consumed.

        A quote preceded by a single backslash is escaped. A quote preceded by
        two backslashes ends the literal (the backslash itself was escaped).
        Longer backslash runs are not counted.
        """
        while not self._at_end():
            if self._advance() != quote:
                continue
            if self._lookback(2) != "\\" or self._lookback(3) == "\\":
                return self._make(TokenType.STRING)

        self._warn("unterminated string literal")
        return self._make(TokenType.STRING)

    def _lex_identifier(self) -> Token:
        while is_ident_char(self._peek()):
            self._advance()

        text = self._source[self._start.offset : self._pos]
        if text in RAW_STRING_PREFIXES and self._peek() == '"':
            return self._lex_raw_string()

        return self._make(KEYWORDS.get(text, TokenType.IDENTIFIER))

    def _lex_raw_string(self) -> Token:
        """Scan ``"delim( ... )delim"``; the prefix has been consumed."""
        self._advance()  # opening quote
        delim_start = self._pos

        while True:
            if self._at_end():
                self._warn(
                    "raw string literal is missing its opening '('",
                    width=delim_start - self._start.offset,
                )
                return self._make(TokenType.OTHER)
            if self._advance() == "(":
                break

        delimiter = self._source[delim_start : self._pos - 1]

        # Offset just past the most recent ')', or -1 before the first one
        close_start = -1
        while not self._at_end():
            ch = self._advance()
            if ch == ")":
                close_start = self._pos
            elif (
                ch == '"'
                and close_start >= 0
                and self._source[close_start : self._pos - 1] == delimiter
            ):
                return self._make(TokenType.RAW_STRING)

        self._warn(
            f"unterminated raw string literal (expected '){delimiter}\"')",
            width=delim_start - self._start.offset,
        )
        return self._make(TokenType.OTHER)


def tokenize(source: str) -> list[Token]:
    """Convenience function: scan source text and return the full token list."""
    return list(Scanner(source))
