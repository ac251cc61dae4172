"""Scanner diagnostics with formatted source context."""

from __future__ import annotations

from cppconvert.tokens import Position


class Diagnostic:
    """A malformed construct the scanner recovered from.

    The scanner never raises; it records one of these and keeps going so the
    file still converts with the construct passed through unchanged.
    ``width`` is the length of the construct's opener (``/*``, ``"``,
    ``R"`` ...), which is what the carets underline.
    """

    def __init__(self, message: str, position: Position, source: str, width: int = 1) -> None:
        self.message = message
        self.position = position
        self.source = source
        self.width = width

    def __repr__(self) -> str:
        return f"Diagnostic({self.message!r}, {self.position.line}:{self.position.column})"

    def __str__(self) -> str:
        return self.format()

    def source_line(self) -> str:
        """Return the line holding the construct, without its line ending."""
        line_start = self.source.rfind("\n", 0, self.position.offset) + 1
        line_end = self.source.find("\n", self.position.offset)
        if line_end == -1:
            line_end = len(self.source)
        return self.source[line_start:line_end].rstrip("\r")

    def format(self, filename: str = "input.cpp") -> str:
        """Render as ``warning: ...`` with a file:line:col pointer and carets."""
        line = self.source_line()
        col = self.position.column
        # Openers never span lines, but stay inside the visible line
        carets = "^" * max(1, min(self.width, len(line) - col + 1))

        number = str(self.position.line)
        margin = " " * len(number)

        return "\n".join(
            [
                f"warning: {self.message}",
                f"{margin} --> {filename}:{number}:{col}",
                f"{margin} |",
                f"{number} | {line}",
                f"{margin} | {' ' * (col - 1)}{carets}",
            ]
        )
