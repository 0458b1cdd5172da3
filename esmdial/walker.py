"""Walking the records of an ESM plugin to collect its DIAL topics."""

from __future__ import annotations

import enum
from types import TracebackType
from typing import BinaryIO

from .binio import TruncatedError, read_exact, read_u32
from .dial import DialRegistry, read_dial
from .strings_table import StringsTable

__all__ = ["RecordType", "EsmWalker", "walk_esm"]

_RECORD_HEADER = 24
_LOCALIZED_FLAG = 0x80
_U32_MASK = 0xFFFFFFFF


class RecordType(enum.Enum):
    """Top-level record kinds the walker distinguishes."""

    GRUP = b"GRUP"
    TES4 = b"TES4"
    DIAL = b"DIAL"
    OTHER = b""

    @classmethod
    def from_tag(cls, tag: bytes) -> RecordType:
        """Map a four-byte record tag to its type; unknown tags are OTHER."""
        if isinstance(tag, str):
            tag = tag.encode("latin-1")
        try:
            return cls(bytes(tag))
        except ValueError:
            return cls.OTHER


class EsmWalker:
    """Steps through an ESM file, installing DIAL records into a registry.

    ``idx`` selects which language slot of each entry receives the text:
    0 for Chinese, 1 for English. ``strings_path`` names the STRINGS file
    used when the plugin is localized; it is opened up front, and a failure
    to open it only matters once a localized plugin needs it.
    """

    def __init__(
        self, registry: DialRegistry, idx: int, strings_path: str | None
    ) -> None:
        if idx not in (0, 1):
            raise ValueError(f"language index must be 0 or 1, not {idx}")
        self.registry = registry
        self.idx = idx
        self.strings_path = strings_path
        self.strings = StringsTable()
        self.localized = False
        self.position = 0
        self._strings_stream: BinaryIO | None = None
        if strings_path is not None:
            try:
                self._strings_stream = open(strings_path, "rb")
            except OSError:
                self._strings_stream = None

    def __enter__(self) -> EsmWalker:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self._finish()

    def _finish(self) -> None:
        if self._strings_stream is not None:
            self._strings_stream.close()
            self._strings_stream = None
        self.position = 0
        self.localized = False

    def _require_strings(self) -> BinaryIO:
        if self._strings_stream is None:
            raise FileNotFoundError(
                f"strings file {self.strings_path!r} could not be opened"
            )
        return self._strings_stream

    def _advance(self, amount: int) -> None:
        self.position = (self.position + amount) & _U32_MASK

    def step(self, record_type: RecordType, stream: BinaryIO) -> None:
        """Handle one record whose tag has just been read from ``stream``."""
        size = read_u32(stream)
        self._advance(size)

        if record_type is RecordType.GRUP:
            label = read_exact(stream, 4)
            read_u32(stream)
            if label == RecordType.DIAL.value:
                # Descend into the group instead of skipping it.
                self._advance(_RECORD_HEADER - size)
            stream.seek(self.position)
        elif record_type is RecordType.TES4:
            flags = read_exact(stream, 1)[0]
            if flags & _LOCALIZED_FLAG:
                self.strings.load(self._require_strings())
                self.localized = True
            self._advance(_RECORD_HEADER)
            stream.seek(self.position)
        elif record_type is RecordType.DIAL:
            stream.seek(-4, 1)
            dial = read_dial(stream, self.idx)
            text = dial.full[self.idx]
            if self.localized and text is not None:
                strings_stream = self._require_strings()
                if len(text) < 4:
                    raise TruncatedError(
                        f"localized FULL of DIAL {dial.id:#010x} is too short"
                    )
                string_id = int.from_bytes(text[:4], "little")
                dial.full[self.idx] = self.strings.get(string_id, strings_stream)
            self.registry.install(dial)
            self._advance(_RECORD_HEADER)
            stream.seek(self.position)
        else:
            print("\t\tOTHER")

    def walk(self, stream: BinaryIO) -> None:
        """Process records until ``stream`` runs out, then release the strings file."""
        try:
            while True:
                tag = stream.read(4)
                if len(tag) != 4:
                    break
                self.step(RecordType.from_tag(tag), stream)
        finally:
            self._finish()


def walk_esm(
    path: str,
    strings_path: str | None,
    idx: int,
    registry: DialRegistry | None = None,
) -> DialRegistry:
    """Collect the DIAL topics of the ESM at ``path`` into ``registry``."""
    if registry is None:
        registry = DialRegistry()
    with open(path, "rb") as stream:
        EsmWalker(registry, idx, strings_path).walk(stream)
    return registry