"""Line scanner implementation.

Walks a newline-delimited file once and reports where every line starts.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

from ..core.errors import OpenError, ReadError
from ..core.types import ScannedLine

logger = logging.getLogger(__name__)

NEWLINE = b"\n"


class SimpleScanner:
    """Byte-oriented scanner yielding (offset, line) pairs.

    Invariants:
        - Offsets start at 0 and strictly increase in file order
        - Lines exclude the trailing newline; a carriage return is content
        - A final line without a newline is still reported
    """

    def count_lines(self, path: str | Path) -> int | None:
        """Count lines in path.

        Only used as a capacity hint, so failures are logged and
        reported as None instead of raised.
        """
        path = Path(path)
        try:
            with open(path, "rb") as f:
                count = sum(1 for _ in f)
        except OSError as e:
            logger.warning(f"Line counting pass failed for {path}: {e}")
            return None
        logger.debug(f"Counted {count} lines in {path}")
        return count

    def scan(self, path: str | Path) -> Iterator[ScannedLine]:
        """Yield (offset, line) for every line of path in file order."""
        path = Path(path)
        try:
            f = open(path, "rb")
        except OSError as e:
            raise OpenError(f"Unable to open file for read: {e}", path, "scan") from e

        with f:
            offset = 0
            try:
                for raw in f:
                    line = raw[:-1] if raw.endswith(NEWLINE) else raw
                    yield (offset, line)
                    offset += len(raw)
            except OSError as e:
                raise ReadError(f"Read failed at offset {offset}: {e}", path, "scan") from e

        logger.debug(f"Scanned {path} ({offset} bytes)")
