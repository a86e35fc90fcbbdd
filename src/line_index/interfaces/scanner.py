"""Protocol definition for the line scanner."""

from __future__ import annotations
from pathlib import Path
from typing import Iterator, Protocol
from ..core.types import ScannedLine


class Scanner(Protocol):
    """Single pass over a newline-delimited file."""
    
    def count_lines(self, path: str | Path) -> int | None:
        """Count lines in path.
        
        Args:
            path: Input file
        
        Returns:
            Number of lines, or None if the file could not be counted
        
        Invariants:
            - Never raises; the count is only a capacity hint
        """
        ...
    
    def scan(self, path: str | Path) -> Iterator[ScannedLine]:
        """Yield (offset, line) pairs in file order.
        
        Args:
            path: Input file, read as raw bytes
        
        Raises:
            OpenError: path cannot be opened
            ReadError: a read fails partway
        
        Invariants:
            - First offset is 0 and offsets strictly increase
            - Lines exclude the newline; a final unterminated line is yielded
        """
        ...
