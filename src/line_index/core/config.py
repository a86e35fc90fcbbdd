"""Configuration for the line index.

Defines the tunable parameters of an index build.
"""

from __future__ import annotations

from dataclasses import dataclass

from .errors import ArgumentError

MIN_KEY_LENGTH = 1
MAX_KEY_LENGTH = 24


@dataclass
class IndexConfig:
    """Configuration parameters for building and reading an index.

    Attributes:
        key_length: Number of leading bytes of each line used as the key
        pad_byte: Filler for keys shorter than key_length in the index file
        count_lines_first: Whether to run the optional line counting pass
    """

    key_length: int
    pad_byte: bytes = b"\x00"
    count_lines_first: bool = True

    def validate(self) -> None:
        """Raise ArgumentError if any parameter is out of range."""
        if isinstance(self.key_length, bool) or not isinstance(self.key_length, int):
            raise ArgumentError(f"Key length must be an integer, got {self.key_length!r}")
        if self.key_length < MIN_KEY_LENGTH or self.key_length > MAX_KEY_LENGTH:
            raise ArgumentError(
                f"Invalid key length {self.key_length}, "
                f"expected a value between {MIN_KEY_LENGTH} and {MAX_KEY_LENGTH}"
            )
        if not isinstance(self.pad_byte, bytes) or len(self.pad_byte) != 1:
            raise ArgumentError(f"Pad byte must be a single byte, got {self.pad_byte!r}")
