"""Lookup of localized strings in a STRINGS file."""

from __future__ import annotations

from typing import BinaryIO

from .binio import read_cstring, read_u32

__all__ = ["StringsTable", "MissingStringError"]

_HEADER_SIZE = 8
_ENTRY_SIZE = 8


class MissingStringError(KeyError):
    """Raised when a string id is not in the directory."""


class StringsTable:
    """Directory of a STRINGS file: string id to offset in the data block.

    Loading more than once adds to the directory; later entries replace
    earlier ones with the same id, and the header of the latest load is used
    to locate the data block.
    """

    def __init__(self) -> None:
        self.count = 0
        self.data_size = 0
        self._offsets: dict[int, int] = {}

    def __len__(self) -> int:
        return len(self._offsets)

    def __contains__(self, string_id: object) -> bool:
        return string_id in self._offsets

    def load(self, stream: BinaryIO) -> None:
        """Read the header and directory from the start of ``stream``."""
        self.count = read_u32(stream)
        self.data_size = read_u32(stream)
        for _ in range(self.count):
            string_id = read_u32(stream)
            self._offsets[string_id] = read_u32(stream)

    def offset_of(self, string_id: int) -> int:
        """Return the offset of ``string_id`` within the data block."""
        try:
            return self._offsets[string_id]
        except KeyError:
            raise MissingStringError(string_id) from None

    def get(self, string_id: int, stream: BinaryIO) -> bytes:
        """Read the NUL-terminated string for ``string_id`` from ``stream``."""
        offset = self.offset_of(string_id)
        stream.seek(_HEADER_SIZE + self.count * _ENTRY_SIZE + offset)
        return read_cstring(stream)

    def remove(self, string_id: int) -> None:
        """Drop ``string_id`` from the directory; unknown ids are ignored."""
        self._offsets.pop(string_id, None)