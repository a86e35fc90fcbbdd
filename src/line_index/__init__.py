"""Line Index - single-level sorted index over line-oriented files."""

from .core.config import IndexConfig
from .core.errors import (
    LineIndexError,
    ArgumentError,
    FormatError,
    IndexIOError,
    OpenError,
    ReadError,
    WriteError,
    SeekError,
)
from .core.indexer import SimpleLineIndexer, RunResult
from .core.types import Key, Offset, Record, LookupFailure

__all__ = [
    "IndexConfig",
    "LineIndexError",
    "ArgumentError",
    "FormatError",
    "IndexIOError",
    "OpenError",
    "ReadError",
    "WriteError",
    "SeekError",
    "SimpleLineIndexer",
    "RunResult",
    "Key",
    "Offset",
    "Record",
    "LookupFailure",
]
