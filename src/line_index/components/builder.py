"""Index builder implementation.

Uses sortedcontainers.SortedKeyList to keep records in index order.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sortedcontainers import SortedKeyList

from ..core.types import Record
from .scanner import SimpleScanner

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from ..core.types import ScannedLine
    from ..interfaces.scanner import Scanner

logger = logging.getLogger(__name__)


def _index_order(record: Record) -> tuple[bytes, int]:
    # Equal keys fall back to scan order
    return (record.key, record.offset)


class SimpleIndexBuilder:
    """Build key-sorted records from a scanned file.

    Args:
        key_length: Number of leading bytes used as the key
        scanner: Source of (offset, line) pairs

    Invariants:
        - Exactly one record per scanned line
        - Keys are line[:key_length], never padded
        - Output is sorted by key bytes, ties by ascending offset
    """

    def __init__(self, key_length: int, scanner: Scanner | None = None):
        self.key_length = key_length
        self.scanner = scanner if scanner is not None else SimpleScanner()

    def from_lines(self, lines: Iterable[ScannedLine]) -> list[Record]:
        """Extract keys from (offset, line) pairs and return them sorted."""
        records = SortedKeyList(key=_index_order)
        for offset, line in lines:
            records.add(Record(line[: self.key_length], offset))
        return list(records)

    def build(self, path: str | Path) -> list[Record]:
        """Scan path and return its records in index order."""
        records = self.from_lines(self.scanner.scan(path))
        logger.info(f"Built {len(records)} records from {path} (key_length={self.key_length})")
        return records
