"""Command-line entry point: print Polyglot hashes for FEN positions."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Iterable, Iterator, Sequence
from pathlib import Path
from typing import TextIO

from chess_zobrist.core.zobrist import ConstantTableError, load_table, polyglot_table
from chess_zobrist.hasher import WRONG_POSITION, PositionHasher

_LOGGER = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID_POSITION = 1
EXIT_BAD_TABLE = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chess-zobrist",
        description="Print the Polyglot Zobrist hash of each FEN position.",
    )
    parser.add_argument(
        "fen",
        nargs="*",
        help="FEN strings to hash (quoted); read one per line from stdin if omitted",
    )
    parser.add_argument(
        "--table",
        type=Path,
        default=None,
        help="constant table file, one 16-digit hex value per line",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="enable debug logging"
    )
    return parser


def _iter_fens(fens: Sequence[str], lines: Iterable[str]) -> Iterator[str]:
    if fens:
        yield from fens
        return
    for line in lines:
        line = line.strip()
        if line:
            yield line


def run(
    argv: Sequence[str] | None = None,
    *,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> int:
    """Run the CLI and return its exit status."""
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        table = load_table(args.table) if args.table is not None else polyglot_table()
    except (OSError, ConstantTableError) as exc:
        _LOGGER.error("Cannot load constant table: %s", exc)
        return EXIT_BAD_TABLE

    hasher = PositionHasher(table)
    out = stdout if stdout is not None else sys.stdout
    status = EXIT_OK
    for fen in _iter_fens(args.fen, stdin if stdin is not None else sys.stdin):
        digest = hasher.hash_position(fen)
        if digest == WRONG_POSITION:
            status = EXIT_INVALID_POSITION
        print(f"{digest}  {fen}", file=out)
    return status


def main() -> None:
    """Launch the chess-zobrist command."""
    sys.exit(run())


if __name__ == "__main__":
    main()
