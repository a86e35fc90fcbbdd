"""Lookup engine implementation.

Rebuilds original lines in index order by seeking to stored offsets.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable, Iterator

from ..core.errors import OpenError, ReadError, SeekError
from ..core.types import Listing, LookupFailure, Record

logger = logging.getLogger(__name__)


class SimpleLookupEngine:
    """Seek-and-read reconstruction of indexed lines.

    Args:
        key_length: Number of leading bytes that form the key

    Invariants:
        - Output follows the order of the given records
        - The stored key is emitted; the key bytes read back are dropped,
          except when decoding shortened the stored key (trailing pad
          bytes that were part of the line), where the line prefix wins
        - A failed record is recorded in failures and skipped
    """

    def __init__(self, key_length: int):
        self.key_length = key_length
        self.failures: list[LookupFailure] = []

    def lookup(self, records: Iterable[Record], path: str | Path) -> Iterator[Listing]:
        """Yield (key, payload) for each record, reading path by offset.

        Raises:
            OpenError: path cannot be reopened
        """
        path = Path(path)
        self.failures = []
        try:
            f = open(path, "rb")
        except OSError as e:
            raise OpenError(f"Error reopening input file for lookup: {e}", path, "lookup") from e

        with f:
            size = os.fstat(f.fileno()).st_size
            emitted = 0
            for record in records:
                try:
                    line = self._read_line(f, record.offset, size, path)
                except (SeekError, ReadError) as e:
                    logger.warning(f"Skipping record {record}: {e}")
                    self.failures.append(LookupFailure(record, e))
                    continue
                yield (self._restore_key(record.key, line), line[self.key_length:])
                emitted += 1

        logger.info(f"Listed {emitted} records from {path} ({len(self.failures)} failed)")

    def _restore_key(self, key: bytes, line: bytes) -> bytes:
        """Return the full key when a pad-stripped key is shorter than its line."""
        if len(key) < self.key_length and len(line) > len(key):
            return line[: self.key_length]
        return key

    def _read_line(self, f, offset: int, size: int, path: Path) -> bytes:
        """Read the line starting at offset, without its newline."""
        if offset < 0 or offset >= size:
            raise SeekError(f"Offset {offset} is outside file of {size} bytes", path, "lookup")
        try:
            f.seek(offset, os.SEEK_SET)
        except (OSError, OverflowError) as e:
            raise SeekError(f"Seek to {offset} failed: {e}", path, "lookup") from e
        try:
            raw = f.readline()
        except OSError as e:
            raise ReadError(f"Read at {offset} failed: {e}", path, "lookup") from e
        return raw[:-1] if raw.endswith(b"\n") else raw
