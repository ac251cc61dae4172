"""Shared test fixtures and helpers."""

from __future__ import annotations

from pathlib import Path

import pytest

from cppconvert.scanner import tokenize
from cppconvert.tokens import Token, TokenType


@pytest.fixture
def lex():
    """Return a helper that scans source and returns the token list."""

    def _lex(source: str) -> list[Token]:
        return tokenize(source)

    return _lex


@pytest.fixture
def make_tree(tmp_path: Path):
    """Return a helper that writes {relative path: content} under tmp_path."""

    def _make(files: dict[str, str]) -> Path:
        for rel, content in files.items():
            path = tmp_path / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(content.encode("utf-8"))
        return tmp_path

    return _make


def assert_types(tokens: list[Token], expected: list[TokenType]) -> None:
    """Assert that the token types match the expected list."""
    actual = [t.type for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_lexemes(tokens: list[Token], expected: list[str]) -> None:
    """Assert that the token lexemes match the expected list."""
    actual = [t.lexeme for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def find_tokens(tokens: list[Token], tt: TokenType) -> list[Token]:
    """Return all tokens of the given type."""
    return [t for t in tokens if t.type == tt]
