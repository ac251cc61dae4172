"""Transform driver: source text in, converted source text out."""

from __future__ import annotations

from dataclasses import dataclass

from cppconvert.errors import Diagnostic
from cppconvert.scanner import Scanner
from cppconvert.substitution import substitute


@dataclass(frozen=True, slots=True)
class Conversion:
    """Result of converting one source text."""

    text: str
    replacements: int
    diagnostics: list[Diagnostic]

    @property
    def changed(self) -> bool:
        return self.replacements > 0


def convert_source(source: str) -> Conversion:
    """Scan source, substitute keyword tokens, and report what happened."""
    scanner = Scanner(source)
    parts: list[str] = []
    replacements = 0
    for token in scanner:
        if token.is_keyword:
            replacements += 1
        parts.append(substitute(token))
    return Conversion("".join(parts), replacements, scanner.diagnostics)


def convert(source: str) -> str:
    """Return source with AND/OR/EQ/NEQ/XOR/NULL replaced outside comments and literals."""
    return convert_source(source).text
