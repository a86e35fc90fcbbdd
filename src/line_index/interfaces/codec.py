"""Protocol definition for the index codec."""

from __future__ import annotations
from pathlib import Path
from typing import Protocol, Sequence
from ..core.types import Record


class IndexCodec(Protocol):
    """Fixed-width binary persistence of a record sequence."""
    
    entry_size: int
    
    def encode(self, records: Sequence[Record], path: str | Path) -> int:
        """Write one entry per record to path.
        
        Args:
            records: Records in index order
            path: Destination, truncated before writing
        
        Returns:
            Number of entries written
        
        Raises:
            WriteError: path cannot be opened or a write fails
            FormatError: a record does not fit the entry layout
        """
        ...
    
    def decode(self, path: str | Path, expected_count: int | None = None) -> list[Record]:
        """Read records back in stored order.
        
        Args:
            path: Index file written by encode
            expected_count: Entry count the caller expects, if known
        
        Raises:
            ReadError: path cannot be opened or read
            FormatError: size is not a whole number of entries or count differs
        """
        ...
