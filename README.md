# esmdial

`esmdial` reads the dialogue topic records (`DIAL`) from game plugin files
(`.esm`) and prints their names. Give it a Chinese plugin and an English plugin
and it pairs each topic's Chinese name with its English name, which gives you a
ready-made translation table.

Some plugins keep their text in a separate `.strings` file. The plugin header
flags this, and when it is set the topic names are looked up in the strings
file.

## Installation

```
pip install .
```

## Usage

```
esmdial -C<chinese.esm> -E<english.esm> [-SC<chinese.strings>] [-SE<english.strings>]
```

Write each option and its value together, with no space between them.

| Option | Meaning |
| --- | --- |
| `-C<path>` | plugin holding the Chinese topic names |
| `-E<path>` | plugin holding the English topic names |
| `-SC<path>` | strings file for the Chinese plugin |
| `-SE<path>` | strings file for the English plugin |

- You must give at least one of `-C` or `-E`.
- Arguments that do not start with `-` are ignored.
- If an option is given twice, the later one wins.
- `-S` followed by any letter other than `C` sets the English strings file.

If you leave out a strings file, its path is built from the plugin name by
dropping the extension. `Skyrim.esm` becomes `Skyrim_chinese.strings` for `-C`
and `Skyrim_english.strings` for `-E`. The strings file is only read when the
plugin header says the plugin is localized.

### Output

When you give both plugins, the output has one `"chinese": "english"` pair for
each topic that has a name in both plugins. Topics are matched by form id and
listed in the order they were first found:

```
{
  "你好": "Hello",
  "再见": "Goodbye"
}
```

When you give only one plugin, each name is printed on its own line between the
braces, indented and not quoted.

Names are written as raw bytes, exactly as the files store them. Each name ends
at its first NUL byte. Characters that would break the output are replaced by
`_`:

- In Chinese names: double quotes.
- In English names: anything that is not a printable, non-space ASCII character,
  and also `\ " | : * < > / ?`.

A top-level record that is not `GRUP`, `TES4` or `DIAL` makes the command print
a line reading `OTHER` (indented by two tabs) to standard output.

## Library use

You can also use the pieces behind the command directly:

```python
import sys

from esmdial.cli import render_json
from esmdial.dial import DialRegistry
from esmdial.walker import walk_esm

registry = DialRegistry()
walk_esm("Chinese.esm", "Chinese_chinese.strings", 0, registry)
walk_esm("English.esm", "English_english.strings", 1, registry)
sys.stdout.buffer.write(render_json(registry, chinese=True, english=True))
```

| Name | What it does |
| --- | --- |
| `esmdial.walker.walk_esm` | collects the DIAL topics of one plugin into a registry; slot 0 is Chinese, 1 is English |
| `esmdial.walker.EsmWalker` | steps through a plugin stream record by record |
| `esmdial.dial.DialEntry` | one topic: its id and its name in both slots (`full`) |
| `esmdial.dial.read_dial` | reads one DIAL record from a stream |
| `esmdial.dial.DialRegistry` | stores topics by id, in the order they were first seen; installing a known id fills in missing names |
| `esmdial.strings_table.StringsTable` | reads the directory of a `.strings` file and fetches strings by id |
| `esmdial.cli.parse_args`, `esmdial.cli.render_json` | command-line parsing and output rendering |
| `esmdial.filenames.parse_filename` | splits a file name at its last dot |
| `esmdial.binio` | little-endian reading helpers that raise `TruncatedError` on short reads |

## Errors

The command prints a message to standard error and exits with status 1 when:

- the arguments cannot be used;
- a plugin or strings file cannot be opened, or ends too early;
- a localized plugin refers to a string id that the strings file does not
  contain.

## Limitations

- Only the topic names (`FULL`) of `DIAL` records are read. Other record types
  and other subrecords are skipped.
- The output is shaped like JSON, but special characters are not escaped. When
  only one plugin is given, the names are not quoted, so the output is not valid
  JSON.
- Nothing is ever written back to plugin or strings files.