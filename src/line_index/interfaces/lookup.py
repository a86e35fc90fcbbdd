"""Protocol definition for the lookup engine."""

from __future__ import annotations
from pathlib import Path
from typing import Iterable, Iterator, Protocol
from ..core.types import Listing, LookupFailure, Record


class LookupEngine(Protocol):
    """Rebuilds original lines from record offsets."""
    
    failures: list[LookupFailure]
    
    def lookup(self, records: Iterable[Record], path: str | Path) -> Iterator[Listing]:
        """Yield (key, payload) for each record in sequence order.
        
        Args:
            records: Records in index order
            path: The indexed input file, reopened for this phase
        
        Raises:
            OpenError: path cannot be reopened
        
        Invariants:
            - payload is the line after its first key_length bytes
            - A record that cannot be read goes to failures and is skipped
        """
        ...
