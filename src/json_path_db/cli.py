"""Command line interface over JSON documents.

    json-path-db paths FILE
    json-path-db db FILE [--mode plain|diff|update]
    json-path-db diff LEFT RIGHT [--null-equals-missing] [--strict-types]

Output is one JSON value per line. ``FILE`` may be ``-`` for stdin; ``diff``
accepts ``-`` for at most one of its two documents.

Exit status: 0 on success (and for ``diff``, when the documents are the
same), 1 when ``diff`` finds differences, 2 on bad input.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, TextIO

from json_path_db import __version__
from json_path_db.api import diff, enumerate_paths, make_db
from json_path_db.db.formatter import TupleMode
from json_path_db.diff.config import DiffConfig
from json_path_db.errors import JsonPathDbError
from json_path_db.result import SAME

__all__ = ["build_parser", "main"]

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_DIFFERENT = 1
EXIT_BAD_INPUT = 2


class InputError(Exception):
    """A document could not be read or parsed."""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="json-path-db",
        description="Flatten JSON documents into path-indexed rows, or diff two of them.",
    )
    parser.add_argument(
        "--version", "-V", action="version", version=f"json-path-db {__version__}"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    paths_parser = subparsers.add_parser("paths", help="List every leaf path")
    paths_parser.add_argument("file", help="JSON document, or - for stdin")

    db_parser = subparsers.add_parser("db", help="Emit one row per leaf")
    db_parser.add_argument("file", help="JSON document, or - for stdin")
    db_parser.add_argument(
        "--mode",
        "-m",
        choices=[mode.value for mode in TupleMode],
        default=TupleMode.PLAIN.value,
        help="Row shape (default: plain)",
    )

    diff_parser = subparsers.add_parser("diff", help="Diff two documents by path")
    diff_parser.add_argument("left", help="Left JSON document, or - for stdin")
    diff_parser.add_argument("right", help="Right JSON document, or - for stdin")
    diff_parser.add_argument(
        "--null-equals-missing",
        action="store_true",
        help="Treat a null leaf as equal to a missing path",
    )
    diff_parser.add_argument(
        "--strict-types",
        action="store_true",
        help="Values of different types never compare equal (1 vs 1.0)",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``json-path-db`` console script."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.command:
        parser.print_help()
        return EXIT_OK

    try:
        if args.command == "paths":
            return _cmd_paths(args, sys.stdout)
        if args.command == "db":
            return _cmd_db(args, sys.stdout)
        return _cmd_diff(args, sys.stdout)
    except (InputError, JsonPathDbError) as exc:
        print(f"json-path-db: {exc}", file=sys.stderr)
        return EXIT_BAD_INPUT


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def _cmd_paths(args: argparse.Namespace, out: TextIO) -> int:
    for path in enumerate_paths(_load(args.file)):
        _emit(out, path)
    return EXIT_OK


def _cmd_db(args: argparse.Namespace, out: TextIO) -> int:
    for row in make_db(_load(args.file), TupleMode(args.mode)):
        _emit(out, row)
    return EXIT_OK


def _cmd_diff(args: argparse.Namespace, out: TextIO) -> int:
    if args.left == "-" and args.right == "-":
        raise InputError("only one of LEFT and RIGHT can be - (stdin is read once)")
    config = DiffConfig(
        null_equals_missing=args.null_equals_missing,
        strict_types=args.strict_types,
    )
    result = diff(_load(args.left), _load(args.right), config=config)
    if result is SAME:
        out.write("same\n")
        return EXIT_OK
    for record in result:
        _emit(out, record.as_dict())
    return EXIT_DIFFERENT


# ---------------------------------------------------------------------------
# I/O helpers
# ---------------------------------------------------------------------------


def _load(source: str) -> Any:
    try:
        if source == "-":
            text = sys.stdin.read()
        else:
            text = Path(source).read_text(encoding="utf-8")
    except OSError as exc:
        raise InputError(f"cannot read {source}: {exc.strerror}") from exc

    try:
        document = json.loads(text)
    except json.JSONDecodeError as exc:
        raise InputError(f"invalid JSON in {source}: {exc}") from exc

    logger.debug("loaded %s (%s)", source, type(document).__name__)
    return document


def _emit(out: TextIO, value: Any) -> None:
    out.write(json.dumps(value, ensure_ascii=False, default=repr))
    out.write("\n")
