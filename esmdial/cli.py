"""Command line: print DIAL topic names of one or two ESM files as JSON."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Iterable, Sequence

from .dial import DialEntry, DialRegistry
from .filenames import parse_filename
from .strings_table import MissingStringError
from .walker import walk_esm

__all__ = ["Options", "UsageError", "parse_args", "default_strings_path", "render_json", "main"]


class UsageError(Exception):
    """Raised when the command line cannot be used."""


@dataclass
class Options:
    """Input files: the Chinese and English ESM files and their STRINGS files."""

    chinese_esm: str | None = None
    english_esm: str | None = None
    chinese_strings: str | None = None
    english_strings: str | None = None


def default_strings_path(esm_path: str, language: str) -> str:
    """Return ``<name>_<language>.strings`` for the ESM at ``esm_path``."""
    name, _ = parse_filename(esm_path)
    return f"{name}_{language}.strings"


def parse_args(argv: Sequence[str]) -> Options:
    """Parse ``-C<esm>``, ``-E<esm>``, ``-SC<strings>`` and ``-SE<strings>``.

    Arguments not starting with a dash are ignored; a later option replaces
    an earlier one. ``-S`` followed by anything other than ``C`` names the
    English strings file.
    """
    args = list(argv)
    if not args:
        raise UsageError("no arguments given")

    options = Options()
    for arg in args:
        if not arg.startswith("-"):
            continue
        body = arg[1:]
        kind = body[:1]
        if kind in ("C", "E"):
            if len(body) == 1:
                raise UsageError(f"option {arg!r} needs a file name")
            if kind == "E":
                options.english_esm = body[1:]
            else:
                options.chinese_esm = body[1:]
        elif kind == "S":
            if len(body) < 3:
                raise UsageError(f"option {arg!r} needs a language and a file name")
            if body[1] == "C":
                options.chinese_strings = body[2:]
            else:
                options.english_strings = body[2:]

    if options.chinese_esm is None and options.english_esm is None:
        raise UsageError("no ESM file given; use -C<file> or -E<file>")

    if options.english_strings is None and options.english_esm is not None:
        options.english_strings = default_strings_path(options.english_esm, "english")
    if options.chinese_strings is None and options.chinese_esm is not None:
        options.chinese_strings = default_strings_path(options.chinese_esm, "chinese")
    return options


def render_json(entries: Iterable[DialEntry], chinese: bool, english: bool) -> bytes:
    """Render the entries as a JSON-like listing.

    With only one language the texts are listed as bare items; with both,
    each entry with both texts becomes a ``"chinese": "english"`` pair.
    Entries lacking the needed text are left out; printed entries are
    sanitized in place.
    """
    items: list[bytes] = []
    for entry in entries:
        if not chinese:
            if entry.full[1] is None:
                continue
            entry.sanitize()
            items.append(b"  " + entry.full[1])
        elif not english:
            if entry.full[0] is None:
                continue
            entry.sanitize()
            items.append(b"  " + entry.full[0])
        else:
            if entry.full[0] is None or entry.full[1] is None:
                continue
            entry.sanitize()
            items.append(b'  "' + entry.full[0] + b'": "' + entry.full[1] + b'"')
    return b"{\n" + b",\n".join(items) + b"\n}\n"


def _write_stdout(data: bytes) -> None:
    sys.stdout.flush()
    buffer = getattr(sys.stdout, "buffer", None)
    if buffer is None:
        sys.stdout.write(data.decode("utf-8", "replace"))
        sys.stdout.flush()
    else:
        buffer.write(data)
        buffer.flush()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command; returns the process exit status."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        options = parse_args(argv)
        registry = DialRegistry()
        if options.chinese_esm is not None:
            walk_esm(options.chinese_esm, options.chinese_strings, 0, registry)
        if options.english_esm is not None:
            walk_esm(options.english_esm, options.english_strings, 1, registry)
    except UsageError as exc:
        print(f"esmdial: {exc}", file=sys.stderr)
        return 1
    except MissingStringError as exc:
        print(f"esmdial: string id {exc.args[0]} missing from strings file", file=sys.stderr)
        return 1
    except (OSError, EOFError) as exc:
        print(f"esmdial: {exc}", file=sys.stderr)
        return 1

    _write_stdout(
        render_json(
            registry,
            chinese=options.chinese_esm is not None,
            english=options.english_esm is not None,
        )
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())