"""DIAL records and the registry that collects them in discovery order."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import BinaryIO, Iterator

from .binio import read_exact, read_u16, read_u32

__all__ = ["DialEntry", "read_dial", "DialRegistry"]

_FULL = b"FULL"
_SUBRECORD_HEADER = 6
_ENGLISH_FORBIDDEN = frozenset(b'\\"|:*<>/?')


def _until_nul(value: bytes) -> bytes:
    return value.split(b"\0", 1)[0]


def _sanitize_english(value: bytes) -> bytes:
    return bytes(
        b if 0x21 <= b <= 0x7E and b not in _ENGLISH_FORBIDDEN else ord("_")
        for b in value
    )


@dataclass
class DialEntry:
    """A dialogue topic: its form id and its FULL name in two languages.

    ``full[0]`` holds the Chinese text and ``full[1]`` the English text.
    """

    id: int = 0
    full: list[bytes | None] = field(default_factory=lambda: [None, None])

    def merge(self, other: DialEntry) -> None:
        """Take the id of ``other`` and fill in any text this entry lacks."""
        self.id = other.id
        self.full = [
            mine if mine is not None else theirs
            for mine, theirs in zip(self.full, other.full)
        ]

    def sanitize(self) -> None:
        """Make the texts safe to print as JSON keys and values.

        Texts end at the first NUL. In the Chinese text double quotes become
        underscores; in the English text every byte that is not a visible
        ASCII character, or is one of backslash, double quote, ``|:*<>/?``,
        becomes an underscore.
        """
        chinese, english = self.full
        if chinese is not None:
            self.full[0] = _until_nul(chinese).replace(b'"', b"_")
        if english is not None:
            self.full[1] = _sanitize_english(_until_nul(english))


def read_dial(stream: BinaryIO, idx: int) -> DialEntry:
    """Read a DIAL record whose size field is next in ``stream``.

    The raw FULL payload is stored in ``full[idx]``; it stays None when the
    record has no FULL subrecord.
    """
    if idx not in (0, 1):
        raise ValueError(f"language index must be 0 or 1, not {idx}")
    data_size = read_u32(stream)
    stream.seek(4, 1)
    dial = DialEntry(id=read_u32(stream))
    stream.seek(8, 1)

    consumed = 0
    while True:
        if consumed >= data_size:
            return dial
        if read_exact(stream, 4) == _FULL:
            break
        size = read_u16(stream)
        stream.seek(size, 1)
        consumed += size + _SUBRECORD_HEADER

    size = read_u16(stream)
    dial.full[idx] = read_exact(stream, size)
    return dial


class DialRegistry:
    """DIAL entries keyed by id, iterated in the order they were first seen."""

    def __init__(self) -> None:
        self._entries: dict[int, DialEntry] = {}

    def install(self, dial: DialEntry) -> DialEntry:
        """Store a copy of ``dial``, or merge it into the entry with its id."""
        existing = self._entries.get(dial.id)
        if existing is None:
            existing = DialEntry(id=dial.id, full=list(dial.full))
            self._entries[dial.id] = existing
        else:
            existing.merge(dial)
        return existing

    def lookup(self, dial_id: int) -> DialEntry | None:
        """Return the entry with ``dial_id``, or None."""
        return self._entries.get(dial_id)

    def remove(self, dial_id: int) -> None:
        """Drop the entry with ``dial_id``; unknown ids are ignored."""
        self._entries.pop(dial_id, None)

    def __iter__(self) -> Iterator[DialEntry]:
        return iter(list(self._entries.values()))

    def __len__(self) -> int:
        return len(self._entries)