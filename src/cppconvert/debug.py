"""--debug token stream dump to stderr."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import TextIO

from cppconvert.tokens import Token


def dump_tokens(tokens: Iterable[Token], *, file: TextIO = sys.stderr) -> None:
    """Print one line per token: kind, start/end line:column, and the lexeme."""
    for token in tokens:
        start = token.span.start
        end = token.span.end
        marker = "*" if token.is_keyword else " "
        file.write(
            f"{marker} {token.type.name:<10} "
            f"{start.line}:{start.column}-{end.line}:{end.column} "
            f"{token.lexeme!r}\n"
        )
