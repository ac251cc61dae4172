"""File-walk driver: find C++ sources under a root and convert them in place."""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from pathlib import Path

from cppconvert.transform import Conversion, convert_source

DEFAULT_EXTENSIONS = ("cpp", "h", "inl")

# Generated lexer/parser sources are left alone
DEFAULT_EXCLUDES = ("Yacc", "Flex")


@dataclass(frozen=True, slots=True)
class FileResult:
    """Outcome of converting one file."""

    path: Path
    source: str = field(repr=False)
    conversion: Conversion
    written: bool

    @property
    def changed(self) -> bool:
        return self.conversion.changed


def is_excluded(path: Path, excludes: Iterable[str]) -> bool:
    """Return True if any exclude substring occurs in the path's string form."""
    text = str(path)
    return any(pattern in text for pattern in excludes)


def has_extension(path: Path, extensions: Iterable[str]) -> bool:
    """Return True if the path's extension (without the dot) is exactly one of extensions."""
    suffix = path.suffix
    return bool(suffix) and suffix[1:] in set(extensions)


def _raise(exc: OSError) -> None:
    raise exc


def iter_sources(
    root: Path,
    extensions: Iterable[str] = DEFAULT_EXTENSIONS,
    excludes: Iterable[str] = DEFAULT_EXCLUDES,
) -> Iterator[Path]:
    """Yield convertible files under root in sorted, depth-first order.

    Raises OSError when root does not exist or a directory cannot be listed.
    """
    extensions = tuple(extensions)
    excludes = tuple(excludes)

    if root.is_file():
        if not is_excluded(root, excludes) and has_extension(root, extensions):
            yield root
        return

    for dirpath, dirnames, filenames in os.walk(root, onerror=_raise):
        current = Path(dirpath)
        dirnames[:] = sorted(d for d in dirnames if not is_excluded(current / d, excludes))
        for name in sorted(filenames):
            path = current / name
            if is_excluded(path, excludes) or not has_extension(path, extensions):
                continue
            yield path


def read_source(path: Path) -> str:
    """Read a file as UTF-8 without newline translation."""
    return path.read_bytes().decode("utf-8")


def write_source(path: Path, text: str) -> None:
    path.write_bytes(text.encode("utf-8"))


def convert_file(path: Path, *, dry_run: bool = False) -> FileResult:
    """Convert one file in place. I/O and decoding errors propagate."""
    source = read_source(path)
    conversion = convert_source(source)
    written = conversion.changed and not dry_run
    if written:
        write_source(path, conversion.text)
    return FileResult(path, source, conversion, written)
