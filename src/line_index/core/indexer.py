"""Line indexer - main public API.

Orchestrates Scanner, Builder, Codec and Lookup Engine.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import BinaryIO, Iterator

from ..components.builder import SimpleIndexBuilder
from ..components.codec import SimpleIndexCodec
from ..components.lookup import SimpleLookupEngine
from ..components.scanner import SimpleScanner
from ..interfaces.builder import IndexBuilder
from ..interfaces.codec import IndexCodec
from ..interfaces.lookup import LookupEngine
from ..interfaces.scanner import Scanner
from .config import IndexConfig
from .errors import ArgumentError
from .types import Listing, LookupFailure, Record

logger = logging.getLogger(__name__)

MODE_CREATE = "-c"
MODE_LIST = "-l"
MODES = (MODE_CREATE, MODE_LIST)


@dataclass
class RunResult:
    """Outcome of a single run."""
    mode: str
    records: list[Record]
    listed: int = 0
    failures: list[LookupFailure] = field(default_factory=list)


class SimpleLineIndexer:
    """Single-level index over a line-oriented file.

    Args:
        config: Index configuration

    Public API:
        - build_index(input_path, index_path): scan, sort and write the index
        - list_records(input_path, index_path): read the index and yield lines
        - run(mode, input_path, index_path): what the command line does

    Invariants:
        - Phases run in sequence and each closes its files before the next
        - The input file is reopened for listing
    """

    def __init__(self, config: IndexConfig):
        config.validate()
        self.config = config
        self.scanner: Scanner = SimpleScanner()
        self.builder: IndexBuilder = SimpleIndexBuilder(config.key_length, self.scanner)
        self.codec: IndexCodec = SimpleIndexCodec(config.key_length, config.pad_byte)
        self.lookup_engine: LookupEngine = SimpleLookupEngine(config.key_length)

    @property
    def failures(self) -> list[LookupFailure]:
        """Per-record failures from the most recent listing."""
        return self.lookup_engine.failures

    def build_index(self, input_path: str | Path, index_path: str | Path) -> list[Record]:
        """Build the index of input_path and write it to index_path."""
        if self.config.count_lines_first:
            count = self.scanner.count_lines(input_path)
            if count is not None:
                logger.info(f"Counted {count} lines in {input_path}")

        records = self.builder.build(input_path)
        self.codec.encode(records, index_path)
        return records

    def list_records(
        self,
        input_path: str | Path,
        index_path: str | Path,
        expected_count: int | None = None,
    ) -> Iterator[Listing]:
        """Yield (key, payload) pairs in index order."""
        records = self.codec.decode(index_path, expected_count)
        yield from self.lookup_engine.lookup(records, input_path)

    def run(
        self,
        mode: str,
        input_path: str | Path,
        index_path: str | Path,
        out: BinaryIO | None = None,
    ) -> RunResult:
        """Build the index, then list the input in key order if mode is -l."""
        if mode not in MODES:
            raise ArgumentError(f"Invalid program mode {mode!r}, expected one of {', '.join(MODES)}")

        records = self.build_index(input_path, index_path)
        result = RunResult(mode=mode, records=records)
        if mode == MODE_CREATE:
            return result

        if out is None:
            out = sys.stdout.buffer

        # Decode before writing anything so a bad index leaves stdout clean
        decoded = self.codec.decode(index_path, len(records))

        out.write(b"Listing file using index:\n")
        for key, payload in self.lookup_engine.lookup(decoded, input_path):
            out.write(key + payload + b"\n")
            result.listed += 1
        result.failures = list(self.failures)

        out.write(b"Done listing file!\n")
        out.write(f"# of records in file: {len(decoded)}\n".encode())
        if result.failures:
            out.write(f"# of records not listed: {len(result.failures)}\n".encode())
        out.flush()
        return result
