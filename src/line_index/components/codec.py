"""Index file codec.

Encodes key-sorted records as fixed-width binary entries and reads them back.
"""

from __future__ import annotations

import logging
import os
import struct
from pathlib import Path
from typing import Sequence

from ..core.errors import FormatError, ReadError, WriteError
from ..core.types import Record

logger = logging.getLogger(__name__)

# Entry format: [key (key_length B, right-padded with pad_byte)][offset (8B, little-endian unsigned)]
OFFSET_FORMAT = "<Q"
OFFSET_SIZE = struct.calcsize(OFFSET_FORMAT)
MAX_OFFSET = 2**64 - 1


class SimpleIndexCodec:
    """Fixed-width binary codec for index files.

    Args:
        key_length: Width of the key field in bytes
        pad_byte: Filler written after keys shorter than key_length

    Invariants:
        - Every entry is exactly key_length + 8 bytes
        - Entries are written and read back in sequence order
        - Trailing pad bytes are stripped on decode, so a decoded Record
          whose key really ended in pad_byte compares unequal to the
          original; the lookup engine restores such keys from the input
    """

    def __init__(self, key_length: int, pad_byte: bytes = b"\x00"):
        self.key_length = key_length
        self.pad_byte = pad_byte
        self._entry = struct.Struct(f"<{key_length}sQ")
        self.entry_size = self._entry.size

    def pack(self, record: Record) -> bytes:
        """Return the binary entry for a single record."""
        key, offset = record
        if len(key) > self.key_length:
            raise FormatError(f"Key {key!r} is longer than key length {self.key_length}")
        if not 0 <= offset <= MAX_OFFSET:
            raise FormatError(f"Offset {offset} does not fit in {OFFSET_SIZE} unsigned bytes")
        return self._entry.pack(key.ljust(self.key_length, self.pad_byte), offset)

    def unpack(self, entry: bytes) -> Record:
        """Return the record stored in a single binary entry."""
        key, offset = self._entry.unpack(entry)
        return Record(key.rstrip(self.pad_byte), offset)

    def encode(self, records: Sequence[Record], path: str | Path) -> int:
        """Overwrite path with one entry per record, in order.

        Returns:
            Number of entries written

        A failure partway leaves the partial file in place.
        """
        path = Path(path)
        try:
            f = open(path, "wb")
        except OSError as e:
            raise WriteError(f"Unable to open file for output: {e}", path, "encode") from e

        count = 0
        with f:
            try:
                for record in records:
                    f.write(self.pack(record))
                    count += 1
            except OSError as e:
                raise WriteError(f"Write failed after {count} entries: {e}", path, "encode") from e

        logger.info(f"Wrote {count} index entries to {path} ({count * self.entry_size} bytes)")
        return count

    def decode(self, path: str | Path, expected_count: int | None = None) -> list[Record]:
        """Read every entry from path.

        Args:
            path: Index file written by encode
            expected_count: Number of entries the caller expects, if known

        Raises:
            ReadError: The file cannot be opened or read
            FormatError: The file size is not a whole number of entries,
                or does not match expected_count
        """
        path = Path(path)
        try:
            f = open(path, "rb")
        except OSError as e:
            raise ReadError(f"Unable to open index file: {e}", path, "decode") from e

        with f:
            try:
                size = os.fstat(f.fileno()).st_size
                if size % self.entry_size != 0:
                    raise FormatError(
                        f"Index file {path} is {size} bytes, "
                        f"not a multiple of entry size {self.entry_size}"
                    )
                count = size // self.entry_size
                if expected_count is not None and count != expected_count:
                    raise FormatError(
                        f"Index file {path} holds {count} entries, expected {expected_count}"
                    )
                data = f.read()
            except OSError as e:
                raise ReadError(f"Read failed: {e}", path, "decode") from e

        if len(data) != size:
            raise ReadError(f"Short read: got {len(data)} of {size} bytes", path, "decode")

        records = [self.unpack(data[i : i + self.entry_size]) for i in range(0, size, self.entry_size)]
        logger.info(f"Decoded {len(records)} index entries from {path}")
        return records
