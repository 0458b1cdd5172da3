"""Splitting of file names into base name and extension."""

from __future__ import annotations

__all__ = ["parse_filename"]


def parse_filename(filename: str) -> tuple[str, str | None]:
    """Split at the last dot; the extension is None when there is no dot."""
    if filename is None:
        raise TypeError("filename must not be None")
    name, dot, extension = filename.rpartition(".")
    if not dot:
        return filename, None
    return name, extension