"""Common type definitions for the line index.

Defines fundamental types used across all components.
"""

from __future__ import annotations

from typing import NamedTuple

# Core primitive types
Key = bytes
Offset = int
Line = bytes
Payload = bytes
ScannedLine = tuple[Offset, Line]
Listing = tuple[Key, Payload]


class Record(NamedTuple):
    """One input line as seen by the index: key prefix and start offset."""
    key: Key
    offset: Offset


class LookupFailure(NamedTuple):
    """A record the lookup engine could not reconstruct."""
    record: Record
    error: Exception
