"""Exception hierarchy for the line index.

Defines all custom exceptions used throughout the implementation.
"""

from __future__ import annotations

from pathlib import Path


class LineIndexError(Exception):
    """Base exception for all line index errors."""
    pass


class ArgumentError(LineIndexError):
    """Raised for a bad argument count, mode or key length."""
    pass


class FormatError(LineIndexError):
    """Raised when index data does not match the fixed entry layout."""
    pass


class IndexIOError(LineIndexError):
    """Base for failures at a file boundary.

    Args:
        message: What went wrong
        path: File involved
        phase: Pipeline phase that was running (scan, encode, decode, lookup)
    """

    def __init__(self, message: str, path: str | Path | None = None, phase: str | None = None):
        self.path = Path(path) if path is not None else None
        self.phase = phase
        context = []
        if phase:
            context.append(f"phase={phase}")
        if self.path is not None:
            context.append(f"file={self.path}")
        if context:
            message = f"{message} ({', '.join(context)})"
        super().__init__(message)


class OpenError(IndexIOError):
    """Raised when a file cannot be opened."""
    pass


class ReadError(IndexIOError):
    """Raised when reading from a file fails."""
    pass


class WriteError(IndexIOError):
    """Raised when writing to a file fails."""
    pass


class SeekError(IndexIOError):
    """Raised when an offset cannot be reached in a file."""
    pass
