"""Protocol definition for the index builder."""

from __future__ import annotations
from pathlib import Path
from typing import Iterable, Protocol
from ..core.types import Record, ScannedLine


class IndexBuilder(Protocol):
    """Turns scanned lines into key-sorted records."""
    
    def from_lines(self, lines: Iterable[ScannedLine]) -> list[Record]:
        """Extract keys and return records in index order.
        
        Args:
            lines: (offset, line) pairs in scan order
        
        Returns:
            One record per line, sorted by key bytes
        
        Invariants:
            - Keys are line[:key_length] with no padding
            - Equal keys keep ascending offset order
        """
        ...
    
    def build(self, path: str | Path) -> list[Record]:
        """Scan the file at path and return records in index order."""
        ...
