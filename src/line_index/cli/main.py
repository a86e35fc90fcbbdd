# Minimal CLI using argparse that builds an index and optionally lists the file through it.
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from line_index.core.config import MAX_KEY_LENGTH, MIN_KEY_LENGTH, IndexConfig
from line_index.core.errors import ArgumentError, LineIndexError
from line_index.core.indexer import MODE_CREATE, MODE_LIST, SimpleLineIndexer


class _Parser(argparse.ArgumentParser):
    def error(self, message: str):
        raise ArgumentError(message)


def build_parser() -> argparse.ArgumentParser:
    p = _Parser(
        prog="line-index",
        description="Build a single-level sorted index over a text file",
    )
    mode = p.add_mutually_exclusive_group(required=True)
    mode.add_argument(
        MODE_CREATE, dest="mode", action="store_const", const=MODE_CREATE,
        help="Create the index only",
    )
    mode.add_argument(
        MODE_LIST, dest="mode", action="store_const", const=MODE_LIST,
        help="Create the index, then list the input in key order",
    )
    p.add_argument("input", type=Path, help="Input text file")
    p.add_argument("index", type=Path, help="Output index file")
    p.add_argument(
        "key_length",
        help=f"Key length in bytes ({MIN_KEY_LENGTH}-{MAX_KEY_LENGTH})",
    )
    p.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level for diagnostics on stderr (default: WARNING)",
    )
    return p


def parse_key_length(raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise ArgumentError(f"Key length must be an integer, got {raw!r}") from None


def main(argv: list[str] | None = None) -> int:
    argv = argv if argv is not None else sys.argv[1:]
    parser = build_parser()

    try:
        args = parser.parse_args(argv)
        config = IndexConfig(key_length=parse_key_length(args.key_length))
        indexer = SimpleLineIndexer(config)
    except ArgumentError as e:
        print(f"Invalid arguments: {e}")
        print(parser.format_usage(), end="")
        return 0

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        result = indexer.run(args.mode, args.input, args.index)
    except LineIndexError as e:
        print(f"Error: {e}")
        return 1

    for failure in result.failures:
        print(f"Lookup failed for offset {failure.record.offset}: {failure.error}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
