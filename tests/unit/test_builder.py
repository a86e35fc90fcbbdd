"""Unit tests for the index builder."""

import shutil
import tempfile
from pathlib import Path

import pytest

from line_index.components.builder import SimpleIndexBuilder
from line_index.core.errors import OpenError
from line_index.core.types import Record


@pytest.fixture
def temp_dir():
    """Create temporary directory for tests."""
    tmpdir = tempfile.mkdtemp()
    yield tmpdir
    shutil.rmtree(tmpdir, ignore_errors=True)


def test_build_sorts_by_key(temp_dir):
    """Test records come back sorted by key with their original offsets."""
    path = Path(temp_dir) / "fruit.txt"
    path.write_bytes(b"banana\napple\ncherry\n")

    records = SimpleIndexBuilder(1).build(path)

    assert records == [Record(b"a", 7), Record(b"b", 0), Record(b"c", 13)]


def test_short_line_uses_whole_line_as_key():
    """Test a line shorter than the key length is not padded."""
    builder = SimpleIndexBuilder(4)

    records = builder.from_lines([(0, b"ab"), (3, b"abcdef")])

    assert records == [Record(b"ab", 0), Record(b"abcd", 3)]


def test_equal_keys_keep_scan_order():
    """Test ties on key are broken by ascending offset."""
    builder = SimpleIndexBuilder(2)
    lines = [(0, b"zz9"), (4, b"aa3"), (8, b"zz1"), (12, b"aa2"), (16, b"aa1")]

    records = builder.from_lines(lines)

    assert records == [
        Record(b"aa", 4),
        Record(b"aa", 12),
        Record(b"aa", 16),
        Record(b"zz", 0),
        Record(b"zz", 8),
    ]


def test_bytewise_ordering():
    """Test keys compare as raw bytes, not as text."""
    builder = SimpleIndexBuilder(1)
    lines = [(0, b"b"), (2, b"B"), (4, b"\xff"), (6, b"1"), (8, b"")]

    keys = [r.key for r in builder.from_lines(lines)]

    assert keys == [b"", b"1", b"B", b"b", b"\xff"]


def test_one_record_per_line(temp_dir):
    """Test record count equals line count and keys respect key length."""
    path = Path(temp_dir) / "data.txt"
    lines = [f"{i * 7919 % 1000:04d}-line".encode() for i in range(250)]
    path.write_bytes(b"\n".join(lines) + b"\n")

    records = SimpleIndexBuilder(3).build(path)

    assert len(records) == 250
    assert all(len(r.key) == 3 for r in records)
    assert [r.key for r in records] == sorted(r.key for r in records)
    assert len({r.offset for r in records}) == 250


def test_build_missing_file(temp_dir):
    """Test build propagates OpenError."""
    with pytest.raises(OpenError):
        SimpleIndexBuilder(2).build(Path(temp_dir) / "nope.txt")
