"""Unit tests for the lookup engine."""

import shutil
import tempfile
from pathlib import Path

import pytest

from line_index.components.builder import SimpleIndexBuilder
from line_index.components.lookup import SimpleLookupEngine
from line_index.core.errors import OpenError, SeekError
from line_index.core.types import Record


@pytest.fixture
def temp_dir():
    """Create temporary directory for tests."""
    tmpdir = tempfile.mkdtemp()
    yield tmpdir
    shutil.rmtree(tmpdir, ignore_errors=True)


@pytest.fixture
def fruit_file(temp_dir):
    path = Path(temp_dir) / "fruit.txt"
    path.write_bytes(b"banana\napple\ncherry\n")
    return path


def test_lookup_splits_key_and_payload(fruit_file):
    """Test each record is rebuilt as (key, rest of line) in record order."""
    records = SimpleIndexBuilder(1).build(fruit_file)
    engine = SimpleLookupEngine(1)

    listing = list(engine.lookup(records, fruit_file))

    assert listing == [(b"a", b"pple"), (b"b", b"anana"), (b"c", b"herry")]
    assert engine.failures == []


def test_lookup_emits_stored_key(fruit_file):
    """Test the stored key is emitted even if the file bytes differ."""
    engine = SimpleLookupEngine(2)

    listing = list(engine.lookup([Record(b"XY", 7)], fruit_file))

    assert listing == [(b"XY", b"ple")]


def test_lookup_short_line_has_empty_payload(temp_dir):
    """Test a line shorter than the key length yields an empty payload."""
    path = Path(temp_dir) / "short.txt"
    path.write_bytes(b"ab\nabcdef\n")
    records = SimpleIndexBuilder(4).build(path)

    listing = list(SimpleLookupEngine(4).lookup(records, path))

    assert listing == [(b"ab", b""), (b"abcd", b"ef")]


def test_lookup_last_line_without_newline(temp_dir):
    """Test the final unterminated line is read in full."""
    path = Path(temp_dir) / "tail.txt"
    path.write_bytes(b"zeta\nalpha")
    records = SimpleIndexBuilder(1).build(path)

    listing = list(SimpleLookupEngine(1).lookup(records, path))

    assert listing == [(b"a", b"lpha"), (b"z", b"eta")]


def test_lookup_offsets_match_keys(temp_dir):
    """Test every stored offset leads back to a line starting with its key."""
    path = Path(temp_dir) / "data.txt"
    path.write_bytes(b"".join(f"{(i * 13) % 17}:{i}\n".encode() for i in range(40)))
    records = SimpleIndexBuilder(3).build(path)

    with open(path, "rb") as f:
        for record in records:
            f.seek(record.offset)
            line = f.readline().rstrip(b"\n")
            assert line[: min(3, len(line))] == record.key


def test_bad_offset_is_skipped_and_reported(fruit_file):
    """Test an out-of-range offset does not stop later records."""
    engine = SimpleLookupEngine(1)
    records = [Record(b"a", 7), Record(b"q", 10_000), Record(b"c", 13)]

    listing = list(engine.lookup(records, fruit_file))

    assert listing == [(b"a", b"pple"), (b"c", b"herry")]
    assert len(engine.failures) == 1
    assert engine.failures[0].record == Record(b"q", 10_000)
    assert isinstance(engine.failures[0].error, SeekError)


def test_failures_reset_between_lookups(fruit_file):
    """Test failures only describe the most recent lookup."""
    engine = SimpleLookupEngine(1)
    list(engine.lookup([Record(b"q", 999)], fruit_file))
    assert len(engine.failures) == 1

    list(engine.lookup([Record(b"b", 0)], fruit_file))
    assert engine.failures == []


def test_lookup_missing_input(temp_dir):
    """Test a missing input file fails the whole phase with OpenError."""
    engine = SimpleLookupEngine(1)

    with pytest.raises(OpenError):
        list(engine.lookup([Record(b"a", 0)], Path(temp_dir) / "gone.txt"))


def test_pad_stripped_key_is_restored_from_line(temp_dir):
    """Test a key ending in zero bytes is listed with its full content."""
    path = Path(temp_dir) / "zeros.txt"
    path.write_bytes(b"a\x00bc\n")
    engine = SimpleLookupEngine(2)

    # As decoded from the index, the trailing zero byte is gone
    listing = list(engine.lookup([Record(b"a", 0)], path))

    assert listing == [(b"a\x00", b"bc")]
