"""Keyword replacement table."""

from __future__ import annotations

from cppconvert.tokens import Token, TokenType

REPLACEMENTS: dict[TokenType, str] = {
    TokenType.AND: "&&",
    TokenType.OR: "||",
    TokenType.EQ: "==",
    TokenType.NEQ: "!=",
    TokenType.XOR: "^",
    TokenType.NULL: "nullptr",
}


def substitute(token: Token) -> str:
    """Return the text to emit for token: its replacement, or its lexeme unchanged."""
    replacement = REPLACEMENTS.get(token.type)
    if replacement is None:
        return token.lexeme
    return replacement
