"""Command-line interface for cppconvert."""

from __future__ import annotations

import argparse
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from cppconvert.debug import dump_tokens
from cppconvert.scanner import tokenize
from cppconvert.walk import DEFAULT_EXCLUDES, DEFAULT_EXTENSIONS, convert_file, iter_sources

CONFIG_FILENAME = "cppconvert.toml"

USAGE_HINT = (
    "Please provide the root directory where the c++ files live (e.g. Vertigo/Development)"
)


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    root: Path
    extensions: list[str]
    excludes: list[str]
    dry_run: bool
    debug: bool


@dataclass(slots=True)
class RunSummary:
    """Counters accumulated over one run."""

    files: int = 0
    changed: int = 0
    replacements: int = 0
    warnings: int = 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="cppconvert",
        description="Replace AND/OR/EQ/NEQ/XOR/NULL with native C++ operators, in place",
    )
    p.add_argument(
        "root",
        nargs="*",
        metavar="ROOT",
        help="Directory (or single file) to convert recursively",
    )
    p.add_argument(
        "--ext",
        action="append",
        default=[],
        metavar="EXT",
        help="File extension to convert, without the dot (repeatable; default: cpp, h, inl)",
    )
    p.add_argument(
        "--exclude",
        action="append",
        default=[],
        metavar="TEXT",
        help="Skip paths containing TEXT (repeatable; default: Yacc, Flex)",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help=f"Config file (default: auto-discover {CONFIG_FILENAME} in ROOT)",
    )
    p.add_argument(
        "-n",
        "--dry-run",
        action="store_true",
        help="Report files that would change without writing them",
    )
    p.add_argument("--debug", action="store_true", help="Dump each file's tokens to stderr")
    return p


def normalize_extension(ext: str) -> str:
    """Strip a leading dot so '.cpp' and 'cpp' mean the same thing."""
    return ext[1:] if ext.startswith(".") else ext


def load_config(config_path: Path | None, root: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    if config_path is not None:
        path = config_path
    elif root.is_dir():
        path = root / CONFIG_FILENAME
    else:
        return {}

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        return tomllib.load(f)


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: defaults < config file < CLI flags. Config lists come first and
    CLI values are appended; defaults apply only when both are empty.
    """
    root = Path(args.root[0])

    config_path = Path(args.config) if args.config else None
    config = load_config(config_path, root)
    cfg_files = config.get("files")
    if not isinstance(cfg_files, dict):
        cfg_files = {}

    # Extensions: config < CLI
    extensions: list[str] = []
    cfg_exts = cfg_files.get("extensions")
    if isinstance(cfg_exts, list):
        extensions.extend(normalize_extension(str(e)) for e in cfg_exts)
    extensions.extend(normalize_extension(e) for e in args.ext)
    if not extensions:
        extensions = list(DEFAULT_EXTENSIONS)

    # Exclusions: config < CLI
    excludes: list[str] = []
    cfg_excludes = cfg_files.get("exclude")
    if isinstance(cfg_excludes, list):
        excludes.extend(str(e) for e in cfg_excludes)
    excludes.extend(args.exclude)
    if not excludes:
        excludes = list(DEFAULT_EXCLUDES)

    return CliOptions(
        root=root,
        extensions=extensions,
        excludes=excludes,
        dry_run=args.dry_run,
        debug=args.debug,
    )


def convert_tree(options: CliOptions) -> RunSummary:
    """Convert every candidate file under options.root, stopping at the first error."""
    summary = RunSummary()
    for path in iter_sources(options.root, options.extensions, options.excludes):
        print(f"Converting {path}...")
        result = convert_file(path, dry_run=options.dry_run)

        if options.debug:
            dump_tokens(tokenize(result.source), file=sys.stderr)

        for diag in result.conversion.diagnostics:
            print(diag.format(str(path)), file=sys.stderr)

        summary.files += 1
        summary.warnings += len(result.conversion.diagnostics)
        if result.changed:
            summary.changed += 1
            summary.replacements += result.conversion.replacements
            if options.dry_run:
                print(f"Would change {path}", file=sys.stderr)
    return summary


def format_summary(summary: RunSummary, dry_run: bool) -> str:
    verb = "Would convert" if dry_run else "Converted"
    text = (
        f"{verb} {summary.changed} of {summary.files} file(s), "
        f"{summary.replacements} replacement(s)"
    )
    if summary.warnings:
        text += f", {summary.warnings} warning(s)"
    return text


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1). Does not call sys.exit()."""
    parser = build_parser()
    args, unknown = parser.parse_known_args(argv)

    if unknown or len(args.root) != 1:
        print(parser.format_usage().rstrip(), file=sys.stderr)
        print(USAGE_HINT, file=sys.stderr)
        return 0

    try:
        options = resolve_options(args)
    except tomllib.TOMLDecodeError as exc:
        print(f"error: invalid config file: {exc}", file=sys.stderr)
        return 1

    try:
        summary = convert_tree(options)
    except UnicodeDecodeError as exc:
        print(f"error: file is not valid UTF-8: {exc}", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(format_summary(summary, options.dry_run), file=sys.stderr)
    return 0
