import io
import struct

import pytest

from esmdial.binio import TruncatedError
from esmdial.strings_table import MissingStringError, StringsTable


def _build(strings):
    """Build a STRINGS file from a mapping of id to bytes."""
    data = bytearray()
    directory = bytearray()
    for string_id, text in strings.items():
        directory += struct.pack("<II", string_id, len(data))
        data += text + b"\0"
    header = struct.pack("<II", len(strings), len(data))
    return header + bytes(directory) + bytes(data)


@pytest.fixture
def sample():
    strings = {7: b"Hello", 42: b"Dragonborn", 1000: b""}
    return strings, io.BytesIO(_build(strings))


def test_load_reads_header(sample):
    strings, stream = sample
    table = StringsTable()
    table.load(stream)
    assert table.count == len(strings)
    assert len(table) == len(strings)


def test_get_roundtrip(sample):
    strings, stream = sample
    table = StringsTable()
    table.load(stream)
    for string_id, text in strings.items():
        assert table.get(string_id, stream) == text


def test_offset_of(sample):
    _, stream = sample
    table = StringsTable()
    table.load(stream)
    assert table.offset_of(7) == 0
    assert table.offset_of(42) == len(b"Hello\0")


def test_missing_id_raises(sample):
    _, stream = sample
    table = StringsTable()
    table.load(stream)
    with pytest.raises(MissingStringError):
        table.get(3, stream)
    with pytest.raises(KeyError):
        table.offset_of(3)


def test_remove(sample):
    _, stream = sample
    table = StringsTable()
    table.load(stream)
    table.remove(42)
    assert 42 not in table
    with pytest.raises(MissingStringError):
        table.offset_of(42)
    table.remove(42)
    assert len(table) == 2


def test_later_load_replaces_offsets():
    table = StringsTable()
    table.load(io.BytesIO(_build({5: b"first"})))
    second = io.BytesIO(_build({9: b"x", 5: b"second"}))
    table.load(second)
    assert table.get(5, second) == b"second"
    assert len(table) == 2


def test_truncated_directory_raises():
    data = struct.pack("<II", 3, 0) + struct.pack("<II", 1, 0)
    with pytest.raises(TruncatedError):
        StringsTable().load(io.BytesIO(data))